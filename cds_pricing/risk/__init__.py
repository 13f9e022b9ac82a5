"""
Risk measures implemented via "bump and reprice".

PV01Parallel and CS01Parallel are composable objects; pv01_parallel and
cs01_parallel are functional shortcuts.
"""

from __future__ import annotations

from cds_pricing.market import Market
from cds_pricing.products.cds import CDSTrade
from cds_pricing.risk.base import BaseRiskMeasure
from cds_pricing.risk.cs01 import CS01Parallel
from cds_pricing.risk.pv01 import PV01Parallel


def pv01_parallel(
    trade: CDSTrade,
    market: Market,
    curve_name: str | None = None,
    bump_bp: float = 1.0,
) -> float:
    """
    PV01: change in PV when the discount curve is bumped by bump_bp basis points.
    Returns PV(bumped) - PV(base).
    """
    return PV01Parallel(curve_name=curve_name, bump_bp=bump_bp).compute(trade, market)


def cs01_parallel(
    trade: CDSTrade,
    market: Market,
    hazard_curve_name: str | None = None,
    bump_bp: float = 1.0,
) -> float:
    """
    CS01: change in PV when the hazard curve is bumped by bump_bp basis points.
    Returns PV(bumped) - PV(base).
    """
    return CS01Parallel(hazard_curve_name=hazard_curve_name, bump_bp=bump_bp).compute(
        trade, market
    )


__all__ = [
    "BaseRiskMeasure",
    "PV01Parallel",
    "CS01Parallel",
    "pv01_parallel",
    "cs01_parallel",
]
