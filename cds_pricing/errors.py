"""
Exception types raised by the CDS valuation kernel.

Two failure families matter to callers:
- **ContractValidationError**: the inputs describe an impossible trade (negative
  notional, recovery outside [0, 1), no integration partitions, ...). Raised before
  any curve is sampled.
- **CurveEvaluationError**: a curve collaborator could not produce a factor for a
  requested time. The kernel never retries.
"""

from __future__ import annotations

from typing import Any


class CDSPricingError(Exception):
    """Base class for every error raised by cds_pricing."""


class ContractValidationError(CDSPricingError, ValueError):
    """Invalid contract terms, schedule or integration parameters."""

    def __init__(self, field: str, value: Any, constraint: str) -> None:
        self.field = field
        self.value = value
        self.constraint = constraint
        super().__init__(f"{field} {constraint}, got {value!r}")


class CurveEvaluationError(CDSPricingError):
    """A curve failed to return a usable factor at a given time."""

    def __init__(self, curve_name: str, time: float, reason: str) -> None:
        self.curve_name = curve_name
        self.time = time
        self.reason = reason
        super().__init__(f"curve {curve_name!r} failed at t={time:.6f}: {reason}")
