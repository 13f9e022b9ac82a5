"""Single-name CDS contract terms (data only; pricing lives in cds_pricing.pricers)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from enum import Enum

from cds_pricing.errors import ContractValidationError

BASIS_POINTS = 10_000.0


class ProtectionDirection(Enum):
    BUY_PROTECTION = "BuyProtection"
    SELL_PROTECTION = "SellProtection"

    @classmethod
    def parse(cls, value: str | ProtectionDirection) -> ProtectionDirection:
        """Case-insensitive lookup of 'Buy'/'Sell' style direction strings."""
        if isinstance(value, ProtectionDirection):
            return value
        key = value.strip().lower().replace("_", "").replace(" ", "")
        if key in ("buy", "buyprotection"):
            return cls.BUY_PROTECTION
        if key in ("sell", "sellprotection"):
            return cls.SELL_PROTECTION
        raise ContractValidationError("direction", value, "must be Buy or Sell protection")


class Sector(Enum):
    """Industrial sector classification of the reference entity."""

    BASIC_MATERIALS = "BasicMaterials"
    CONSUMER_GOODS = "ConsumerGoods"
    CONSUMER_SERVICES = "ConsumerServices"
    ENERGY = "Energy"
    FINANCIALS = "Financials"
    GOVERNMENT = "Government"
    HEALTHCARE = "Healthcare"
    INDUSTRIALS = "Industrials"
    TECHNOLOGY = "Technology"
    TELECOMMUNICATION_SERVICES = "TelecommunicationServices"
    UTILITIES = "Utilities"
    NONE = "None"


@dataclass(frozen=True)
class CDSContract:
    """
    Single-name credit default swap terms.

    Premium leg: `par_spread_bps` paid on the notional while the reference entity
    survives. Protection leg: notional * (1 - recovery_rate) paid on default.
    PV = protection - premium for BUY_PROTECTION, the negative for SELL_PROTECTION.
    """

    notional: float
    par_spread_bps: float
    direction: ProtectionDirection
    start_date: date
    maturity_date: date
    valuation_date: date
    recovery_rate: float = 0.4
    include_accrued_premium: bool = True
    adjust_maturity_date: bool = False
    integration_steps_per_year: int = 12
    reference_entity: str | None = None
    sector: Sector = Sector.NONE

    def __post_init__(self) -> None:
        if isinstance(self.direction, str):
            object.__setattr__(self, "direction", ProtectionDirection.parse(self.direction))
        self._validate()

    def _validate(self) -> None:
        if not isinstance(self.direction, ProtectionDirection):
            raise ContractValidationError(
                "direction", self.direction, "must be a ProtectionDirection"
            )
        if not math.isfinite(self.notional) or self.notional <= 0:
            raise ContractValidationError("notional", self.notional, "must be > 0")
        if not math.isfinite(self.par_spread_bps) or self.par_spread_bps < 0:
            raise ContractValidationError("par_spread_bps", self.par_spread_bps, "must be >= 0")
        if not 0.0 <= self.recovery_rate < 1.0:
            raise ContractValidationError(
                "recovery_rate", self.recovery_rate, "must be in [0, 1)"
            )
        if (
            isinstance(self.integration_steps_per_year, bool)
            or not isinstance(self.integration_steps_per_year, int)
            or self.integration_steps_per_year <= 0
        ):
            raise ContractValidationError(
                "integration_steps_per_year",
                self.integration_steps_per_year,
                "must be a positive integer",
            )

    @property
    def spread_rate(self) -> float:
        """Par spread as a decimal rate (100bp -> 0.01)."""
        return self.par_spread_bps / BASIS_POINTS

    @property
    def is_protection_buyer(self) -> bool:
        return self.direction is ProtectionDirection.BUY_PROTECTION


@dataclass(frozen=True)
class CDSTrade:
    """A contract bound to named curves in a Market snapshot."""

    contract: CDSContract
    discount_curve: str
    survival_curve: str
    trade_id: str | None = None
