"""CS01 risk measure (bump hazard curve, reprice)."""

from __future__ import annotations

from dataclasses import dataclass

from cds_pricing.products.cds import CDSTrade
from cds_pricing.risk.base import BaseRiskMeasure


@dataclass
class CS01Parallel(BaseRiskMeasure):
    """CS01: sensitivity to a parallel hazard curve shift.

    Bumps the trade's survival curve unless `hazard_curve_name` is given.
    """

    hazard_curve_name: str | None = None
    bump_bp: float = 1.0

    @property
    def name(self) -> str:
        return f"CS01_{self.hazard_curve_name or 'SURVIVAL'}"

    def target_curve(self, trade: CDSTrade) -> str:
        return self.hazard_curve_name or trade.survival_curve
