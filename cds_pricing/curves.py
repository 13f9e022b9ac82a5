"""
Discount and survival curve primitives.

Curve construction/calibration lives outside the kernel; these two curves exist so
the valuers have something concrete to sample and the risk measures something to
bump:
- Times are **year fractions** measured from the valuation date.
- ZeroRateCurve: **continuously compounded zero rates**, linear in rate between
  pillars; `sample(t)` is a discount factor.
- HazardRateCurve: **piecewise-constant hazard**; `sample(t)` is a survival
  probability S(t).
"""

import math
from dataclasses import dataclass


def _validate_pillars(pillars: list[float], values: list[float], values_name: str) -> None:
    if len(pillars) != len(values):
        raise ValueError(f"pillars and {values_name} must have the same length")
    for i in range(1, len(pillars)):
        if pillars[i] <= pillars[i - 1]:
            raise ValueError("pillars must be strictly increasing")


@dataclass(frozen=True)
class ZeroRateCurve:
    """
    Zero rate curve (continuously compounded) with linear interpolation.

    - **Pillars** are increasing times (year fractions) where the curve is defined.
    - `zero_rates_cc[i]` is the CC zero rate at `pillars[i]`.

    Implements DiscountCurve structurally (no explicit inheritance).
    """

    name: str
    pillars: tuple[float, ...]
    zero_rates_cc: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "pillars", tuple(self.pillars))
        object.__setattr__(self, "zero_rates_cc", tuple(self.zero_rates_cc))
        _validate_pillars(list(self.pillars), list(self.zero_rates_cc), "zero_rates_cc")

    def zero_rate_cc(self, t: float) -> float:
        """
        Continuously compounded zero rate at time t (year-fraction).
        Linear interpolation in zero rates, flat beyond the end pillars. t must be >= 0.
        """
        if t < 0:
            raise ValueError("t must be >= 0")
        if not self.pillars:
            raise ValueError("curve has no pillars")
        if t <= self.pillars[0]:
            return self.zero_rates_cc[0]
        if t >= self.pillars[-1]:
            return self.zero_rates_cc[-1]
        for i in range(len(self.pillars) - 1):
            if self.pillars[i] <= t <= self.pillars[i + 1]:
                t0, t1 = self.pillars[i], self.pillars[i + 1]
                r0, r1 = self.zero_rates_cc[i], self.zero_rates_cc[i + 1]
                return r0 + (r1 - r0) * (t - t0) / (t1 - t0)
        return self.zero_rates_cc[-1]

    def sample(self, t: float) -> float:
        r"""
        Discount factor to time t.

        With CC zero rate r(t), the discount factor is:
        DF(t) = exp(-r(t)*t).
        """
        r = self.zero_rate_cc(t)
        return math.exp(-r * t)

    def bumped(self, bump: float) -> "ZeroRateCurve":
        """
        Return a new curve with a *parallel* additive shift to all zero rates.

        `bump` is expressed in absolute rate terms (e.g. 1bp = 0.0001).
        """
        return ZeroRateCurve(
            name=self.name,
            pillars=self.pillars,
            zero_rates_cc=tuple(r + bump for r in self.zero_rates_cc),
        )


@dataclass(frozen=True)
class HazardRateCurve:
    """
    Hazard rate curve with piecewise-constant hazard between pillars.

    Implements SurvivalCurve structurally: `sample(t)` returns S(t).
    - pillars[i], hazard_rates[i]: hazard is hazard_rates[i] in segment [prev, pillars[i]]
      (prev=0 for first segment, then pillars[i-1]); flat beyond the last pillar.
    - bumped(bump) adds `bump` to all hazard rates (absolute; 1bp = 0.0001).
    """

    name: str
    pillars: tuple[float, ...]
    hazard_rates: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "pillars", tuple(self.pillars))
        object.__setattr__(self, "hazard_rates", tuple(self.hazard_rates))
        _validate_pillars(list(self.pillars), list(self.hazard_rates), "hazard_rates")

    def hazard_rate(self, t: float) -> float:
        """Piecewise-constant hazard at time t. Flat extrapolation beyond endpoints."""
        if t < 0:
            raise ValueError("t must be >= 0")
        if not self.pillars:
            raise ValueError("curve has no pillars")
        for pillar, rate in zip(self.pillars, self.hazard_rates):
            if t <= pillar:
                return rate
        return self.hazard_rates[-1]

    def sample(self, t: float) -> float:
        """Survival probability S(t) = exp(-integral_0^t h(u) du)."""
        if t < 0:
            raise ValueError("t must be >= 0")
        if t == 0:
            return 1.0
        if not self.pillars:
            raise ValueError("curve has no pillars")
        integral = 0.0
        prev = 0.0
        for pillar, rate in zip(self.pillars, self.hazard_rates):
            t_end = min(pillar, t)
            if t_end > prev:
                integral += rate * (t_end - prev)
            prev = pillar
            if prev >= t:
                break
        if t > self.pillars[-1]:
            integral += self.hazard_rates[-1] * (t - self.pillars[-1])
        return math.exp(-integral)

    def bumped(self, bump: float) -> "HazardRateCurve":
        """Return new curve with parallel additive shift to all hazard rates."""
        return HazardRateCurve(
            name=self.name,
            pillars=self.pillars,
            hazard_rates=tuple(h + bump for h in self.hazard_rates),
        )
