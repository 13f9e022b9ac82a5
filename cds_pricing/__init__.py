"""CDS valuation kernel: curves, schedules, leg valuers, pricer and risk."""

from cds_pricing.calendar import DayCount, HolidayCalendar, WeekendCalendar, year_fraction
from cds_pricing.config import PricingConfig
from cds_pricing.curves import HazardRateCurve, ZeroRateCurve
from cds_pricing.errors import CDSPricingError, ContractValidationError, CurveEvaluationError
from cds_pricing.interfaces import Calendar, Curve, DiscountCurve, SampledCurve, SurvivalCurve
from cds_pricing.market import Market
from cds_pricing.pricers import (
    CDSPricer,
    CDSValuation,
    ContingentLegValuer,
    PremiumLegBreakdown,
    PremiumLegValuer,
)
from cds_pricing.pricing import price, price_many, value
from cds_pricing.products.cds import CDSContract, CDSTrade, ProtectionDirection, Sector
from cds_pricing.risk import CS01Parallel, PV01Parallel, cs01_parallel, pv01_parallel
from cds_pricing.schedule import (
    AccrualPeriod,
    AccrualSchedule,
    PremiumDates,
    ScheduleGenerator,
    build_accrual_schedule,
)

__all__ = [
    "AccrualPeriod",
    "AccrualSchedule",
    "Calendar",
    "CDSContract",
    "CDSPricer",
    "CDSPricingError",
    "CDSTrade",
    "CDSValuation",
    "ContingentLegValuer",
    "ContractValidationError",
    "CS01Parallel",
    "Curve",
    "CurveEvaluationError",
    "DayCount",
    "DiscountCurve",
    "HazardRateCurve",
    "HolidayCalendar",
    "Market",
    "PremiumDates",
    "PremiumLegBreakdown",
    "PremiumLegValuer",
    "PricingConfig",
    "ProtectionDirection",
    "PV01Parallel",
    "SampledCurve",
    "ScheduleGenerator",
    "Sector",
    "SurvivalCurve",
    "WeekendCalendar",
    "ZeroRateCurve",
    "build_accrual_schedule",
    "cs01_parallel",
    "price",
    "price_many",
    "pv01_parallel",
    "value",
    "year_fraction",
]
