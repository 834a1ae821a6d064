"""
Strike probability under a lognormal diffusion.

Closed-form probability that price finishes above the strike, the same
quantity a cash-or-nothing digital option prices under Black-Scholes.
"""

import math
from typing import Optional

from ..utils.numeric import clamp, is_finite_number, normal_cdf

# Below this total diffusion the outcome is treated as already decided
MIN_SIGMA_T = 1e-6

# Volatility-free fallback levels
DEGRADED_ABOVE = 0.75
DEGRADED_BELOW = 0.25


def _boundary_probability(current_price: float, price_to_beat: float,
                          above: float = 1.0, below: float = 0.0) -> float:
    if current_price > price_to_beat:
        return above
    if current_price < price_to_beat:
        return below
    return 0.5


def strike_probability(
    current_price: Optional[float],
    price_to_beat: Optional[float],
    remaining_minutes: Optional[float],
    sigma_per_minute: Optional[float],
    mu_per_minute: Optional[float] = 0.0,
) -> Optional[float]:
    """
    Probability that a lognormal diffusion finishes above the strike

    P = Phi((ln(S / K) + mu * t) / (sigma * sqrt(t)))

    Args:
        current_price: Current price S
        price_to_beat: Strike K
        remaining_minutes: Minutes until resolution; negative counts as 0
        sigma_per_minute: Per-minute log-return standard deviation
        mu_per_minute: Per-minute log-return drift (default 0)

    Returns:
        Probability in [0, 1], or None if the prices or remaining time are unusable
    """
    if not is_finite_number(current_price) or current_price <= 0:
        return None
    if not is_finite_number(price_to_beat) or price_to_beat <= 0:
        return None
    if not is_finite_number(remaining_minutes):
        return None

    t = max(0.0, float(remaining_minutes))
    if t == 0:
        return _boundary_probability(current_price, price_to_beat)

    if not is_finite_number(sigma_per_minute) or sigma_per_minute <= 0:
        return _boundary_probability(current_price, price_to_beat,
                                     above=DEGRADED_ABOVE, below=DEGRADED_BELOW)

    sigma_t = sigma_per_minute * math.sqrt(t)
    if sigma_t < MIN_SIGMA_T:
        return _boundary_probability(current_price, price_to_beat)

    mu = mu_per_minute if is_finite_number(mu_per_minute) else 0.0
    drift = mu * t
    d = (math.log(current_price) - math.log(price_to_beat) + drift) / sigma_t

    return clamp(normal_cdf(d), 0.0, 1.0)
