"""
Numeric utilities for the probability models.

This module centralizes the small pieces of floating point handling that
every model depends on, so that "unknown" inputs, NaN and infinities are
treated the same way everywhere.
"""

import math
from typing import Any, Optional

# Abramowitz & Stegun formula 7.1.26, |error| <= 1.5e-7
_ERF_P = 0.3275911
_ERF_A1 = 0.254829592
_ERF_A2 = -0.284496736
_ERF_A3 = 1.421413741
_ERF_A4 = -1.453152027
_ERF_A5 = 1.061405429


def is_finite_number(value: Any) -> bool:
    """
    Check whether a value is a usable real number.

    Booleans are rejected even though they subclass int.

    Args:
        value: Any value

    Returns:
        True if value is an int or float that is neither NaN nor infinite
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def clamp(value: float, lower: float, upper: float) -> float:
    """
    Clamp a value into [lower, upper].

    NaN clamps to the lower bound so it can never leak into a probability.
    """
    if math.isnan(value):
        return lower
    return max(lower, min(upper, value))


def ratio_or_none(numerator: Optional[float], denominator: Optional[float]) -> Optional[float]:
    """Return numerator / denominator, or None if either is unusable or the denominator is not positive."""
    if not is_finite_number(numerator) or not is_finite_number(denominator):
        return None
    if denominator <= 0:
        return None
    return numerator / denominator


def erf(x: float) -> float:
    """
    Error function via the Abramowitz-Stegun rational approximation.

    Args:
        x: Real argument

    Returns:
        erf(x) with absolute error below 1.5e-7
    """
    sign = 1.0 if x >= 0 else -1.0
    x = abs(x)

    t = 1.0 / (1.0 + _ERF_P * x)
    poly = ((((_ERF_A5 * t + _ERF_A4) * t + _ERF_A3) * t + _ERF_A2) * t + _ERF_A1) * t
    y = 1.0 - poly * math.exp(-x * x)

    return sign * y


def normal_cdf(x: float) -> float:
    """Standard normal cumulative distribution function."""
    return 0.5 * (1.0 + erf(x / math.sqrt(2.0)))


def logit(p: float) -> float:
    """Log-odds ln(p / (1 - p)). Caller keeps p strictly inside (0, 1)."""
    return math.log(p / (1.0 - p))


def logistic(x: float) -> float:
    """
    Logistic function 1 / (1 + e^-x).

    Evaluated on the side that cannot overflow for large |x|.
    """
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)
