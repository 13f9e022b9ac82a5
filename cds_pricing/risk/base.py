"""Base class for bump-and-reprice risk measures on CDS trades."""

from __future__ import annotations

from abc import ABC, abstractmethod

from cds_pricing.calendar import WeekendCalendar
from cds_pricing.config import DEFAULT_CONFIG, PricingConfig
from cds_pricing.interfaces import Calendar
from cds_pricing.market import Market
from cds_pricing.pricing import price
from cds_pricing.products.cds import CDSTrade


class BaseRiskMeasure(ABC):
    """Parallel-bump sensitivity: PV(bumped curve) - PV(base)."""

    bump_bp: float

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name."""
        ...

    @abstractmethod
    def target_curve(self, trade: CDSTrade) -> str:
        """Name of the market curve to bump."""
        ...

    def compute(
        self,
        trade: CDSTrade,
        market: Market,
        calendar: Calendar | None = None,
        config: PricingConfig = DEFAULT_CONFIG,
    ) -> float:
        calendar = calendar or WeekendCalendar()
        curve_name = self.target_curve(trade)
        bumped_curve = market.curve(curve_name).bumped(self.bump_bp / 10000.0)
        bumped_market = market.with_curve(curve_name, bumped_curve)
        return price(trade, bumped_market, calendar, config) - price(
            trade, market, calendar, config
        )
