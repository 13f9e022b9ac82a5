"""Curve sampling with failures reported as CurveEvaluationError."""

from __future__ import annotations

import math

from cds_pricing.errors import CurveEvaluationError
from cds_pricing.interfaces import SampledCurve


def curve_name(curve: SampledCurve) -> str:
    return getattr(curve, "name", None) or type(curve).__name__


def sample_curve(curve: SampledCurve, t: float) -> float:
    """Return `curve.sample(t)`, raising CurveEvaluationError on failure or a non-finite factor."""
    try:
        factor = curve.sample(t)
    except CurveEvaluationError:
        raise
    except Exception as exc:
        raise CurveEvaluationError(curve_name(curve), t, str(exc) or type(exc).__name__) from exc
    if not isinstance(factor, (int, float)) or not math.isfinite(factor):
        raise CurveEvaluationError(curve_name(curve), t, f"non-finite factor {factor!r}")
    return float(factor)
