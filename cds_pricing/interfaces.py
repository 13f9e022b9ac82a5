"""
Protocol-based interfaces for the collaborators of the CDS kernel.

Using typing.Protocol enables structural subtyping: any object with a matching
`sample()` method can be handed to the valuers, whether it is one of the curves
shipped in `cds_pricing.curves` or a curve built by an external calibration
service.

Discount and survival curves share one functional shape but are kept as two
named capabilities so a survival probability is never read as a discount factor.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol, runtime_checkable


@runtime_checkable
class SampledCurve(Protocol):
    """A read-only function from time (years from valuation) to a factor in (0, 1]."""

    def sample(self, t: float) -> float:
        """Return the curve factor at time t (year-fraction, t >= 0)."""
        ...


@runtime_checkable
class Curve(SampledCurve, Protocol):
    """Named curve held in a Market snapshot and bumped by the risk measures."""

    name: str

    def bumped(self, bump: float) -> Curve:
        """Return new curve with a parallel additive shift."""
        ...


@runtime_checkable
class DiscountCurve(SampledCurve, Protocol):
    """Curve whose `sample(t)` is the discount factor to time t."""


@runtime_checkable
class SurvivalCurve(SampledCurve, Protocol):
    """Curve whose `sample(t)` is the survival probability Q(tau > t)."""


@runtime_checkable
class Calendar(Protocol):
    """Business-day calendar used by the schedule generator."""

    def is_working_day(self, d: date) -> bool:
        """Return True if d is a working day."""
        ...
