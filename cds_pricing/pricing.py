"""
Pricing entrypoint.

Most users of the library should only need `price(trade, market)`: it builds
the accrual schedule from the contract dates, looks the curves up in the market
snapshot and delegates to a `CDSPricer`.

Callers that already hold an AccrualSchedule and curves can use
`CDSPricer.price` directly.
"""

from __future__ import annotations

from collections.abc import Iterable

from cds_pricing.calendar import WeekendCalendar
from cds_pricing.config import DEFAULT_CONFIG, PricingConfig
from cds_pricing.interfaces import Calendar
from cds_pricing.market import Market
from cds_pricing.pricers.cds_pricer import CDSPricer, CDSValuation
from cds_pricing.products.cds import CDSTrade
from cds_pricing.schedule import build_accrual_schedule

_default_calendar = WeekendCalendar()


def value(
    trade: CDSTrade,
    market: Market,
    calendar: Calendar | None = None,
    config: PricingConfig = DEFAULT_CONFIG,
) -> CDSValuation:
    """Return per-leg valuation of trade against the market snapshot."""
    contract = trade.contract
    discount = market.curve(trade.discount_curve)
    survival = market.curve(trade.survival_curve)
    schedule = build_accrual_schedule(contract, calendar or _default_calendar, config)
    return CDSPricer(config).legs(contract, schedule, discount, survival)


def price(
    trade: CDSTrade,
    market: Market,
    calendar: Calendar | None = None,
    config: PricingConfig = DEFAULT_CONFIG,
) -> float:
    """Return present value of trade, signed for its protection direction."""
    return value(trade, market, calendar, config).pv


def price_many(
    trades: Iterable[CDSTrade],
    market: Market,
    calendar: Calendar | None = None,
    config: PricingConfig = DEFAULT_CONFIG,
) -> dict[str, float]:
    """
    Value a batch of trades against one shared snapshot.

    Keys are trade ids, or the trade's position in the batch when it has none.
    A failing trade fails the whole batch.
    """
    results: dict[str, float] = {}
    for i, trade in enumerate(trades):
        key = trade.trade_id if trade.trade_id is not None else str(i)
        if key in results:
            raise ValueError(f"duplicate trade id {key!r} in batch")
        results[key] = price(trade, market, calendar, config)
    return results
