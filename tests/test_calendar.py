"""Tests for calendars, date rolling, day counts and configuration."""

from datetime import date

import pytest

from cds_pricing.calendar import (
    DayCount,
    HolidayCalendar,
    WeekendCalendar,
    roll_forward,
    year_fraction,
)
from cds_pricing.config import PricingConfig
from cds_pricing.errors import ContractValidationError


def test_weekend_calendar() -> None:
    cal = WeekendCalendar()
    assert cal.is_working_day(date(2024, 3, 15))  # Friday
    assert not cal.is_working_day(date(2024, 3, 16))  # Saturday
    assert not cal.is_working_day(date(2024, 3, 17))  # Sunday


def test_roll_forward_skips_weekend_and_holidays() -> None:
    """Saturday rolls to Monday; a holiday Monday rolls to Tuesday."""
    assert roll_forward(date(2024, 3, 16), WeekendCalendar()) == date(2024, 3, 18)
    assert roll_forward(date(2024, 3, 18), WeekendCalendar()) == date(2024, 3, 18)
    cal = HolidayCalendar([date(2024, 3, 18)])
    assert roll_forward(date(2024, 3, 16), cal) == date(2024, 3, 19)


def test_year_fraction_conventions() -> None:
    start, end = date(2024, 1, 1), date(2025, 1, 1)  # 366 days
    assert year_fraction(start, end, DayCount.ACT_360) == 366 / 360
    assert year_fraction(start, end, DayCount.ACT_365F) == 366 / 365
    assert year_fraction(start, end, DayCount.ACT_365_25) == 366 / 365.25
    assert year_fraction(start, end, DayCount.THIRTY_360) == 1.0
    assert year_fraction(start, start, DayCount.ACT_360) == 0.0


def test_thirty_360_end_of_month() -> None:
    """30/360: D2=31 becomes 30 when D1 >= 30."""
    assert year_fraction(date(2024, 1, 31), date(2024, 3, 31), DayCount.THIRTY_360) == 60 / 360


def test_year_fraction_rejects_reversed_dates() -> None:
    with pytest.raises(ValueError, match="must be <="):
        year_fraction(date(2025, 1, 1), date(2024, 1, 1), DayCount.ACT_360)


def test_day_count_parse() -> None:
    assert DayCount.parse("act/360") is DayCount.ACT_360
    assert DayCount.parse(" ACT/365.25 ") is DayCount.ACT_365_25
    assert DayCount.parse(DayCount.THIRTY_360) is DayCount.THIRTY_360
    with pytest.raises(ContractValidationError, match="day_count"):
        DayCount.parse("BUS/252")


def test_config_defaults_and_env() -> None:
    """from_env falls back to defaults and honours CDS_PRICING_* overrides."""
    assert PricingConfig.from_env({}) == PricingConfig()
    config = PricingConfig.from_env(
        {
            "CDS_PRICING_TIME_DAY_COUNT": "ACT/365F",
            "CDS_PRICING_ACCRUAL_DAY_COUNT": "30/360",
            "CDS_PRICING_LOG_LEVEL": "debug",
        }
    )
    assert config.time_day_count is DayCount.ACT_365F
    assert config.accrual_day_count is DayCount.THIRTY_360
    assert config.log_level == "DEBUG"


def test_config_rejects_unknown_day_count() -> None:
    with pytest.raises(ContractValidationError):
        PricingConfig.from_env({"CDS_PRICING_TIME_DAY_COUNT": "ACT/ACT"})


def test_config_rejects_thirty_360_time_basis() -> None:
    """30/360 maps May 30 and May 31 to the same time, so it cannot drive curve times."""
    assert year_fraction(date(2024, 5, 30), date(2024, 5, 31), DayCount.THIRTY_360) == 0.0
    with pytest.raises(ContractValidationError, match="time_day_count"):
        PricingConfig(time_day_count=DayCount.THIRTY_360)
    with pytest.raises(ContractValidationError, match="time_day_count"):
        PricingConfig.from_env({"CDS_PRICING_TIME_DAY_COUNT": "30/360"})
    assert PricingConfig(accrual_day_count=DayCount.THIRTY_360).accrual_day_count is DayCount.THIRTY_360
