"""Contingent (protection) leg valuation by partitioned numerical integration."""

from __future__ import annotations

import logging
import math

from cds_pricing.errors import ContractValidationError
from cds_pricing.interfaces import DiscountCurve, SurvivalCurve
from cds_pricing.pricers.sampling import sample_curve

logger = logging.getLogger(__name__)


def number_of_partitions(steps_per_year: int, t_start: float, t_maturity: float) -> int:
    """K * (t_maturity - t_start) rounded to the nearest integer, halves rounding up."""
    return math.floor(steps_per_year * (t_maturity - t_start) + 0.5)


class ContingentLegValuer:
    r"""
    Values the protection leg:

        PV = N * (1 - R) * \sum_{k=1}^{n} DF(t_k) * (S(t_{k-1}) - S(t_k))

    on the uniform grid t_k = t_start + k * (t_maturity - t_start) / n, with
    n = round(K * (t_maturity - t_start)). Each term is the probability of default
    inside (t_{k-1}, t_k] discounted from the right endpoint; the sum converges to
    the continuous integral as K grows.
    """

    def value(
        self,
        notional: float,
        recovery_rate: float,
        discount: DiscountCurve,
        survival: SurvivalCurve,
        t_start: float,
        t_maturity: float,
        steps_per_year: int,
    ) -> float:
        self._validate(notional, recovery_rate, t_start, t_maturity, steps_per_year)
        partitions = number_of_partitions(steps_per_year, t_start, t_maturity)
        if partitions < 1:
            raise ContractValidationError(
                "number_of_partitions",
                partitions,
                f"must be >= 1 (K={steps_per_year}, horizon={t_maturity - t_start:.6f}y)",
            )
        epsilon = (t_maturity - t_start) / partitions

        total = 0.0
        q_prev = sample_curve(survival, t_start)
        for k in range(1, partitions + 1):
            t = t_start + k * epsilon
            df = sample_curve(discount, t)
            q = sample_curve(survival, t)
            total += df * (q_prev - q)
            q_prev = q

        pv = notional * (1.0 - recovery_rate) * total
        logger.debug(
            "contingent leg: %d partitions over [%.6f, %.6f], pv=%.6f",
            partitions,
            t_start,
            t_maturity,
            pv,
        )
        return pv

    @staticmethod
    def _validate(
        notional: float,
        recovery_rate: float,
        t_start: float,
        t_maturity: float,
        steps_per_year: int,
    ) -> None:
        if not math.isfinite(notional) or notional <= 0:
            raise ContractValidationError("notional", notional, "must be > 0")
        if not 0.0 <= recovery_rate < 1.0:
            raise ContractValidationError("recovery_rate", recovery_rate, "must be in [0, 1)")
        if isinstance(steps_per_year, bool) or not isinstance(steps_per_year, int) or steps_per_year <= 0:
            raise ContractValidationError(
                "integration_steps_per_year", steps_per_year, "must be a positive integer"
            )
        if not (math.isfinite(t_start) and t_start >= 0):
            raise ContractValidationError("t_start", t_start, "must be >= 0")
        if not (math.isfinite(t_maturity) and t_maturity > t_start):
            raise ContractValidationError("t_maturity", t_maturity, f"must be > t_start ({t_start})")
