"""Pricer for single-name CDS: premium leg, contingent leg and the buy/sell sign."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cds_pricing.calendar import year_fraction
from cds_pricing.config import DEFAULT_CONFIG, PricingConfig
from cds_pricing.errors import ContractValidationError
from cds_pricing.interfaces import DiscountCurve, SurvivalCurve
from cds_pricing.pricers.contingent_leg import ContingentLegValuer, number_of_partitions
from cds_pricing.pricers.premium_leg import PremiumLegBreakdown, PremiumLegValuer
from cds_pricing.products.cds import BASIS_POINTS, CDSContract, ProtectionDirection
from cds_pricing.schedule import AccrualSchedule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CDSValuation:
    """Per-leg contributions and the signed net PV."""

    direction: ProtectionDirection
    premium: PremiumLegBreakdown
    contingent: float
    pv: float

    @property
    def premium_pv(self) -> float:
        return self.premium.total


class CDSPricer:
    """
    CDS PV from the protection buyer's view: contingent - premium.
    The result is negated for SELL_PROTECTION.

    The contingent leg integrates over (0, T] where T is the year fraction from
    valuation date to maturity date under `config.time_day_count`.
    """

    def __init__(
        self,
        config: PricingConfig = DEFAULT_CONFIG,
        premium_valuer: PremiumLegValuer | None = None,
        contingent_valuer: ContingentLegValuer | None = None,
    ) -> None:
        self.config = config
        self.premium_valuer = premium_valuer or PremiumLegValuer()
        self.contingent_valuer = contingent_valuer or ContingentLegValuer()

    def horizon(self, contract: CDSContract) -> tuple[float, float]:
        """Integration bounds (t_start, t_maturity) in years from the valuation date."""
        if contract.maturity_date <= contract.valuation_date:
            raise ContractValidationError(
                "maturity_date",
                contract.maturity_date,
                f"must be after valuation_date ({contract.valuation_date})",
            )
        return 0.0, year_fraction(
            contract.valuation_date, contract.maturity_date, self.config.time_day_count
        )

    def price(
        self,
        contract: CDSContract,
        schedule: AccrualSchedule,
        discount: DiscountCurve,
        survival: SurvivalCurve,
    ) -> float:
        return self.legs(contract, schedule, discount, survival).pv

    def legs(
        self,
        contract: CDSContract,
        schedule: AccrualSchedule,
        discount: DiscountCurve,
        survival: SurvivalCurve,
    ) -> CDSValuation:
        t_start, t_maturity = self._checked_horizon(contract, schedule)

        premium = self.premium_valuer.breakdown(
            schedule,
            contract.notional,
            contract.spread_rate,
            discount,
            survival,
            include_accrued=contract.include_accrued_premium,
        )
        contingent = self.contingent_valuer.value(
            contract.notional,
            contract.recovery_rate,
            discount,
            survival,
            t_start,
            t_maturity,
            contract.integration_steps_per_year,
        )

        pv = contingent - premium.total
        if contract.direction is ProtectionDirection.SELL_PROTECTION:
            pv = -pv
        logger.debug(
            "cds %s %s: premium=%.6f contingent=%.6f pv=%.6f",
            contract.reference_entity or "<unnamed>",
            contract.direction.value,
            premium.total,
            contingent,
            pv,
        )
        return CDSValuation(
            direction=contract.direction,
            premium=premium,
            contingent=contingent,
            pv=pv,
        )

    def par_spread_bps(
        self,
        contract: CDSContract,
        schedule: AccrualSchedule,
        discount: DiscountCurve,
        survival: SurvivalCurve,
    ) -> float:
        """Spread (bps) at which the buyer's PV is zero: contingent / risky annuity."""
        t_start, t_maturity = self._checked_horizon(contract, schedule)
        annuity = self.premium_valuer.risky_annuity(
            schedule, discount, survival, contract.include_accrued_premium
        ).total
        if annuity <= 0:
            return 0.0
        contingent = self.contingent_valuer.value(
            contract.notional,
            contract.recovery_rate,
            discount,
            survival,
            t_start,
            t_maturity,
            contract.integration_steps_per_year,
        )
        return contingent / (contract.notional * annuity) * BASIS_POINTS

    def _checked_horizon(
        self, contract: CDSContract, schedule: AccrualSchedule
    ) -> tuple[float, float]:
        # Everything that can be rejected is rejected before a curve is sampled.
        if not isinstance(contract, CDSContract):
            raise TypeError(f"expected CDSContract, got {type(contract).__name__}")
        if not isinstance(schedule, AccrualSchedule):
            raise TypeError(f"expected AccrualSchedule, got {type(schedule).__name__}")
        t_start, t_maturity = self.horizon(contract)
        partitions = number_of_partitions(
            contract.integration_steps_per_year, t_start, t_maturity
        )
        if partitions < 1:
            raise ContractValidationError(
                "number_of_partitions",
                partitions,
                f"must be >= 1 (K={contract.integration_steps_per_year}, "
                f"horizon={t_maturity - t_start:.6f}y)",
            )
        return t_start, t_maturity
