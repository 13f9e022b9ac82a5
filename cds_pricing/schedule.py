"""
Premium leg schedules.

Two artifacts live here:
- `ScheduleGenerator` turns contract dates into the calendar-adjusted boundary
  dates of the premium schedule: effective date first, quarterly coupon dates
  walked backward from maturity, maturity last.
- `AccrualSchedule` is what the valuers consume: `(time, day_count_fraction)`
  pairs with entry 0 as a zero-cashflow anchor. `build_accrual_schedule` is the
  only producer of it inside the library and derives it from the generator.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import date, timedelta
from itertools import pairwise

from dateutil.relativedelta import relativedelta

from cds_pricing.calendar import roll_forward, year_fraction
from cds_pricing.config import DEFAULT_CONFIG, PricingConfig
from cds_pricing.errors import ContractValidationError
from cds_pricing.interfaces import Calendar
from cds_pricing.products.cds import CDSContract

logger = logging.getLogger(__name__)

COUPON_PERIOD_MONTHS = 3


@dataclass(frozen=True)
class AccrualPeriod:
    time: float
    day_count_fraction: float


@dataclass(frozen=True)
class AccrualSchedule:
    """
    Ordered `(time, day_count_fraction)` entries, times in years from valuation.

    Entry 0 is the anchor (effective date); its fraction is ignored. Zero or one
    entries is a legal, cashflow-free schedule.
    """

    periods: tuple[AccrualPeriod, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "periods", tuple(self.periods))
        self._validate()

    def _validate(self) -> None:
        prev_time: float | None = None
        for i, period in enumerate(self.periods):
            if not math.isfinite(period.time) or period.time < 0:
                raise ContractValidationError(f"schedule[{i}].time", period.time, "must be >= 0")
            if not math.isfinite(period.day_count_fraction) or period.day_count_fraction < 0:
                raise ContractValidationError(
                    f"schedule[{i}].day_count_fraction",
                    period.day_count_fraction,
                    "must be >= 0",
                )
            if prev_time is not None and period.time <= prev_time:
                raise ContractValidationError(
                    f"schedule[{i}].time", period.time, "must be strictly increasing"
                )
            prev_time = period.time

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[float, float]]) -> AccrualSchedule:
        """Build from `(time, day_count_fraction)` tuples."""
        return cls(tuple(AccrualPeriod(float(t), float(dcf)) for t, dcf in pairs))

    def __len__(self) -> int:
        return len(self.periods)

    def __iter__(self) -> Iterator[AccrualPeriod]:
        return iter(self.periods)

    def __getitem__(self, index: int) -> AccrualPeriod:
        return self.periods[index]


@dataclass(frozen=True)
class PremiumDates:
    """Cashflow count plus a one-shot iterator over the schedule's boundary dates."""

    count: int
    dates: Iterator[date]

    def __iter__(self) -> Iterator[date]:
        return self.dates


class ScheduleGenerator:
    """Derives premium schedule boundary dates from contract terms and a calendar."""

    def __init__(self, calendar: Calendar, logger: logging.Logger | None = None) -> None:
        self.calendar = calendar
        self.logger = logger or logging.getLogger(__name__)

    def effective_date(self, contract: CDSContract) -> date:
        """T+1 from the start date, rolled to the next working day."""
        return roll_forward(contract.start_date + timedelta(days=1), self.calendar)

    def maturity_date(self, contract: CDSContract) -> date:
        if contract.adjust_maturity_date:
            return roll_forward(contract.maturity_date, self.calendar)
        return contract.maturity_date

    def cashflow_count(self, contract: CDSContract) -> int:
        """Number of schedule dates, effective date included.

        Steps back from maturity in 3-month decrements while the stepped date is
        still after the effective date; a maturity on or before the effective
        date collapses to a single cashflow.
        """
        effective = self.effective_date(contract)
        maturity = self.maturity_date(contract)
        return 1 + self._coupon_steps(effective, maturity)

    def generate(self, contract: CDSContract) -> PremiumDates:
        effective = self.effective_date(contract)
        maturity = self.maturity_date(contract)
        self.logger.debug(
            "schedule for %s: start=%s effective=%s maturity=%s (unadjusted %s)",
            contract.reference_entity or "<unnamed>",
            contract.start_date,
            effective,
            maturity,
            contract.maturity_date,
        )
        steps = self._coupon_steps(effective, maturity)
        return PremiumDates(
            count=1 + steps,
            dates=self._iter_dates(effective, maturity, steps),
        )

    def _coupon_steps(self, effective: date, maturity: date) -> int:
        steps = 0
        while maturity - relativedelta(months=COUPON_PERIOD_MONTHS * steps) > effective:
            steps += 1
        return steps

    def _iter_dates(self, effective: date, maturity: date, steps: int) -> Iterator[date]:
        yield effective
        for k in range(steps - 1, -1, -1):
            if k == 0:
                coupon = maturity
            else:
                coupon = roll_forward(
                    maturity - relativedelta(months=COUPON_PERIOD_MONTHS * k), self.calendar
                )
            self.logger.debug("cashflow on %s (%d of %d)", coupon, steps - k + 1, steps + 1)
            yield coupon


def build_accrual_schedule(
    contract: CDSContract,
    calendar: Calendar,
    config: PricingConfig = DEFAULT_CONFIG,
    generator: ScheduleGenerator | None = None,
) -> AccrualSchedule:
    """
    Accrual schedule for `contract` as seen from its valuation date.

    Coupon dates on or before the valuation date carry no cashflow; the last of
    them becomes the anchor, with its time floored at 0.
    """
    generator = generator or ScheduleGenerator(calendar)
    dates = list(generator.generate(contract))
    valuation = contract.valuation_date

    live_start = 0
    for i, d in enumerate(dates):
        if d <= valuation:
            live_start = i
    live = dates[live_start:]

    anchor = live[0]
    anchor_time = (
        year_fraction(valuation, anchor, config.time_day_count) if anchor > valuation else 0.0
    )
    periods = [AccrualPeriod(anchor_time, 0.0)]
    for prev, current in pairwise(live):
        periods.append(
            AccrualPeriod(
                time=year_fraction(valuation, current, config.time_day_count),
                day_count_fraction=year_fraction(prev, current, config.accrual_day_count),
            )
        )
    logger.debug("accrual schedule: %d entries (%d dropped)", len(periods), live_start)
    return AccrualSchedule(tuple(periods))
