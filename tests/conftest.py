"""Shared fixtures: flat curves, the quarterly 5Y schedule and a contract factory."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from datetime import date, timedelta
from typing import Any

import pytest

from cds_pricing.calendar import DayCount
from cds_pricing.config import PricingConfig
from cds_pricing.curves import HazardRateCurve, ZeroRateCurve
from cds_pricing.products.cds import CDSContract, ProtectionDirection
from cds_pricing.schedule import AccrualSchedule

VALUATION_DATE = date(2020, 1, 1)
# 1800 days is exactly 5.0 years under ACT/360.
MATURITY_DATE = VALUATION_DATE + timedelta(days=1800)


@pytest.fixture
def act360_config() -> PricingConfig:
    return PricingConfig(time_day_count=DayCount.ACT_360)


@pytest.fixture
def flat_discount() -> ZeroRateCurve:
    """sample(t) = exp(-0.02 t)."""
    return ZeroRateCurve(name="USD_DISC", pillars=[5.0], zero_rates_cc=[0.02])


@pytest.fixture
def flat_survival() -> HazardRateCurve:
    """sample(t) = exp(-0.05 t)."""
    return HazardRateCurve(name="ACME_SURV", pillars=[5.0], hazard_rates=[0.05])


@pytest.fixture
def quarterly_schedule() -> AccrualSchedule:
    """21 quarterly points over 5 years, dcf 0.25 each."""
    return AccrualSchedule.from_pairs((0.25 * i, 0.0 if i == 0 else 0.25) for i in range(21))


@pytest.fixture
def make_contract() -> Callable[..., CDSContract]:
    base = CDSContract(
        notional=10_000_000,
        par_spread_bps=100,
        direction=ProtectionDirection.BUY_PROTECTION,
        start_date=VALUATION_DATE,
        maturity_date=MATURITY_DATE,
        valuation_date=VALUATION_DATE,
        recovery_rate=0.4,
        include_accrued_premium=True,
        adjust_maturity_date=False,
        integration_steps_per_year=12,
    )

    def _make(**overrides: Any) -> CDSContract:
        return replace(base, **overrides)

    return _make
