"""Premium (fee) leg valuation."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from cds_pricing.errors import ContractValidationError
from cds_pricing.interfaces import DiscountCurve, SurvivalCurve
from cds_pricing.pricers.sampling import sample_curve
from cds_pricing.schedule import AccrualSchedule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PremiumLegBreakdown:
    """Premium leg PV split into the coupon stream and accrued-on-default."""

    principal: float
    accrued: float

    @property
    def total(self) -> float:
        return self.principal + self.accrued


class PremiumLegValuer:
    """
    Values the premium leg over a pre-built AccrualSchedule.

    For each entry i >= 1 (entry 0 is the anchor and pays nothing):
        principal += dcf_i * DF(t_i) * S(t_i)
        accrued   += 0.5 * dcf_i * DF(t_i) * (S(t_{i-1}) - S(t_i))   # if requested
    PV = spread * notional * (principal + accrued)

    The accrued term is a midpoint approximation of the premium owed for the
    part of the period survived before a default inside (t_{i-1}, t_i].
    """

    def risky_annuity(
        self,
        schedule: AccrualSchedule,
        discount: DiscountCurve,
        survival: SurvivalCurve,
        include_accrued: bool,
    ) -> PremiumLegBreakdown:
        """Premium leg PV per unit notional and unit spread."""
        if len(schedule) < 2:
            return PremiumLegBreakdown(principal=0.0, accrued=0.0)

        principal = 0.0
        accrued = 0.0
        q_prev = sample_curve(survival, schedule[0].time) if include_accrued else 0.0
        for period in schedule.periods[1:]:
            t = period.time
            dcf = period.day_count_fraction
            df = sample_curve(discount, t)
            q = sample_curve(survival, t)
            principal += dcf * df * q
            if include_accrued:
                accrued += 0.5 * dcf * df * (q_prev - q)
                q_prev = q
        return PremiumLegBreakdown(principal=principal, accrued=accrued)

    def breakdown(
        self,
        schedule: AccrualSchedule,
        notional: float,
        spread_rate: float,
        discount: DiscountCurve,
        survival: SurvivalCurve,
        include_accrued: bool = True,
    ) -> PremiumLegBreakdown:
        self._validate(notional, spread_rate)
        annuity = self.risky_annuity(schedule, discount, survival, include_accrued)
        scale = spread_rate * notional
        result = PremiumLegBreakdown(
            principal=scale * annuity.principal,
            accrued=scale * annuity.accrued,
        )
        logger.debug(
            "premium leg: %d entries, principal=%.6f accrued=%.6f",
            len(schedule),
            result.principal,
            result.accrued,
        )
        return result

    def value(
        self,
        schedule: AccrualSchedule,
        notional: float,
        spread_rate: float,
        discount: DiscountCurve,
        survival: SurvivalCurve,
        include_accrued: bool = True,
    ) -> float:
        """Premium leg PV (non-negative for non-negative spread and standard curves)."""
        return self.breakdown(
            schedule, notional, spread_rate, discount, survival, include_accrued
        ).total

    @staticmethod
    def _validate(notional: float, spread_rate: float) -> None:
        if not math.isfinite(notional) or notional <= 0:
            raise ContractValidationError("notional", notional, "must be > 0")
        if not math.isfinite(spread_rate) or spread_rate < 0:
            raise ContractValidationError("spread_rate", spread_rate, "must be >= 0")
