"""Business day calendars, date rolling and day count fractions."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta
from enum import Enum
from typing import assert_never

from cds_pricing.errors import ContractValidationError
from cds_pricing.interfaces import Calendar

# ---------------------------------------------------------------------------
# Calendars
# ---------------------------------------------------------------------------


class WeekendCalendar:
    """Monday to Friday are working days."""

    def is_working_day(self, d: date) -> bool:
        return d.weekday() < 5


class HolidayCalendar:
    """Weekends plus an explicit set of holiday dates."""

    def __init__(self, holidays: Iterable[date] = ()) -> None:
        self.holidays: frozenset[date] = frozenset(holidays)

    def is_working_day(self, d: date) -> bool:
        return d.weekday() < 5 and d not in self.holidays


def roll_forward(d: date, calendar: Calendar) -> date:
    """Move d to the next working day (d itself if it already is one).

    A calendar that never yields a working day is the calendar's defect to report.
    """
    result = d
    while not calendar.is_working_day(result):
        result += timedelta(days=1)
    return result


# ---------------------------------------------------------------------------
# Day count fractions
# ---------------------------------------------------------------------------


class DayCount(Enum):
    ACT_360 = "ACT/360"
    ACT_365F = "ACT/365F"
    ACT_365_25 = "ACT/365.25"
    THIRTY_360 = "30/360"

    @classmethod
    def parse(cls, value: str | DayCount) -> DayCount:
        """Look up a convention by its market name (e.g. 'ACT/360')."""
        if isinstance(value, DayCount):
            return value
        normalized = value.strip().upper()
        for member in cls:
            if member.value == normalized:
                return member
        raise ContractValidationError(
            "day_count", value, f"must be one of {[m.value for m in cls]}"
        )


def year_fraction(start: date, end: date, day_count: DayCount) -> float:
    """Year fraction for the period [start, end) under `day_count`.

    start must be <= end.
    """
    if start > end:
        raise ValueError(f"year_fraction: start ({start}) must be <= end ({end})")
    days = (end - start).days
    match day_count:
        case DayCount.ACT_360:
            return days / 360.0
        case DayCount.ACT_365F:
            return days / 365.0
        case DayCount.ACT_365_25:
            return days / 365.25
        case DayCount.THIRTY_360:
            # ISDA 30/360 bond basis
            d1 = min(start.day, 30)
            d2 = 30 if (end.day == 31 and d1 >= 30) else end.day
            return (
                360 * (end.year - start.year) + 30 * (end.month - start.month) + (d2 - d1)
            ) / 360.0
        case _never:
            assert_never(_never)
