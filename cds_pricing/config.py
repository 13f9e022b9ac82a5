"""
Pricing configuration.

Settings are read from the environment with plain defaults, so the library works
without any configuration file:

- CDS_PRICING_TIME_DAY_COUNT: convention turning dates into curve times
  (default ACT/365.25; ACT conventions only).
- CDS_PRICING_ACCRUAL_DAY_COUNT: convention for premium accrual fractions
  (default ACT/360).
- CDS_PRICING_LOG_LEVEL: level used by the demo's logging setup (default WARNING).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from cds_pricing.calendar import DayCount
from cds_pricing.errors import ContractValidationError


@dataclass(frozen=True)
class PricingConfig:
    time_day_count: DayCount = DayCount.ACT_365_25
    accrual_day_count: DayCount = DayCount.ACT_360
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        # Curve times must be strictly increasing in the date; 30/360 maps
        # e.g. May 30 and May 31 to the same time.
        if self.time_day_count is DayCount.THIRTY_360:
            raise ContractValidationError(
                "time_day_count", self.time_day_count.value, "must be an ACT convention"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> PricingConfig:
        """Build a config from CDS_PRICING_* environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            time_day_count=DayCount.parse(
                env.get("CDS_PRICING_TIME_DAY_COUNT", DayCount.ACT_365_25.value)
            ),
            accrual_day_count=DayCount.parse(
                env.get("CDS_PRICING_ACCRUAL_DAY_COUNT", DayCount.ACT_360.value)
            ),
            log_level=env.get("CDS_PRICING_LOG_LEVEL", "WARNING").upper(),
        )


DEFAULT_CONFIG = PricingConfig()
