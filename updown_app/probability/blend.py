"""
Logit-space blend of the heuristic score and the strike model.

The strike probability is the baseline. The heuristic contributes a
bounded tilt in log-odds space, weighted by the fraction of the market
window that remains, so it vanishes at expiry.
"""

from typing import Optional

from ..models.probability import BlendResult
from ..utils.numeric import clamp, is_finite_number, logistic, logit, ratio_or_none

DEFAULT_ALPHA = 1.75
DEFAULT_LOGIT_EPSILON = 1e-6


def _probability_or_none(value: Optional[float]) -> Optional[float]:
    if not is_finite_number(value):
        return None
    return clamp(value, 0.0, 1.0)


def time_weight(remaining_minutes: Optional[float], window_minutes: Optional[float]) -> float:
    """
    Fraction of the market window still remaining, clamped to [0, 1]

    Unknown remaining time or a non-positive window gives 0.
    """
    fraction = ratio_or_none(remaining_minutes, window_minutes)
    if fraction is None:
        return 0.0
    return clamp(fraction, 0.0, 1.0)


def blend_probabilities(
    ta_up: Optional[float],
    strike_up: Optional[float],
    remaining_minutes: Optional[float],
    window_minutes: Optional[float],
    alpha: float = DEFAULT_ALPHA,
    epsilon: float = DEFAULT_LOGIT_EPSILON,
) -> BlendResult:
    """
    Blend the heuristic probability into the strike probability

    logit(p) = logit(strike_up) + alpha * (2 * ta_up - 1) * w_ta

    Args:
        ta_up: Heuristic up probability, None if unknown
        strike_up: Strike model probability, None if unknown
        remaining_minutes: Minutes until resolution
        window_minutes: Full market window in minutes
        alpha: Largest log-odds tilt the heuristic can apply
        epsilon: Distance kept from exact 0/1 before taking the logit

    Non-finite alpha or an epsilon outside (0, 0.5) falls back to the default.

    Returns:
        BlendResult; if one input is unknown the other passes through
    """
    ta_up = _probability_or_none(ta_up)
    strike_up = _probability_or_none(strike_up)

    if strike_up is None:
        return BlendResult(blended_up=ta_up, w_ta=1.0, w_strike=0.0)
    if ta_up is None:
        return BlendResult(blended_up=strike_up, w_ta=0.0, w_strike=1.0)

    if not is_finite_number(alpha):
        alpha = DEFAULT_ALPHA
    if not is_finite_number(epsilon) or not 0 < epsilon < 0.5:
        epsilon = DEFAULT_LOGIT_EPSILON

    w_ta = time_weight(remaining_minutes, window_minutes)
    w_strike = 1.0 - w_ta

    # At expiry the strike model is the answer, bit for bit
    if w_ta == 0:
        return BlendResult(blended_up=strike_up, w_ta=0.0, w_strike=1.0)

    baseline = logit(clamp(strike_up, epsilon, 1.0 - epsilon))
    tilt = (ta_up - 0.5) * 2.0
    blended = logistic(baseline + alpha * tilt * w_ta)

    return BlendResult(
        blended_up=clamp(blended, 0.0, 1.0),
        w_ta=w_ta,
        w_strike=w_strike,
    )
