"""Parallel PV01 risk measure (bump discount curve, reprice)."""

from __future__ import annotations

from dataclasses import dataclass

from cds_pricing.products.cds import CDSTrade
from cds_pricing.risk.base import BaseRiskMeasure


@dataclass
class PV01Parallel(BaseRiskMeasure):
    """Parallel PV01: sensitivity to a parallel discount curve shift."""

    curve_name: str | None = None
    bump_bp: float = 1.0

    @property
    def name(self) -> str:
        return f"PV01_{self.curve_name or 'DISCOUNT'}"

    def target_curve(self, trade: CDSTrade) -> str:
        return self.curve_name or trade.discount_curve
