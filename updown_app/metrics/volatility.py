"""Per-minute log-return volatility estimation"""

import math
from collections.abc import Sequence
from typing import Optional

from ..models.probability import VolatilityEstimate
from ..utils.numeric import clamp, is_finite_number

MIN_CLOSES = 3
DEFAULT_LOOKBACK_MINUTES = 60


def _is_valid_price(price: Optional[float]) -> bool:
    return is_finite_number(price) and price > 0


def log_returns(closes: Sequence[Optional[float]]) -> list[float]:
    """
    Calculate consecutive log returns ln(cur / prev)

    Pairs where either price is missing, non-finite or non-positive are
    skipped rather than failing the whole series.

    Args:
        closes: Close prices, oldest first

    Returns:
        Log returns of the valid pairs
    """
    returns = []
    for prev, cur in zip(closes, closes[1:]):
        if not _is_valid_price(prev) or not _is_valid_price(cur):
            continue
        returns.append(math.log(cur / prev))
    return returns


def estimate_volatility(closes: Optional[Sequence[Optional[float]]],
                        lookback_minutes: int = DEFAULT_LOOKBACK_MINUTES) -> VolatilityEstimate:
    """
    Estimate per-minute log-return mean and standard deviation

    Uses the most recent lookback+1 closes, with lookback clamped to
    [2, len(closes) - 1]. The standard deviation is the Bessel-corrected
    sample estimate.

    Args:
        closes: One-minute close prices, oldest first
        lookback_minutes: Number of returns to look back over (default 60)

    Returns:
        VolatilityEstimate; fully unknown with fewer than 3 closes
    """
    if closes is None or len(closes) < MIN_CLOSES:
        return VolatilityEstimate(sigma=None, mu=None, n=0)

    if not is_finite_number(lookback_minutes):
        lookback_minutes = DEFAULT_LOOKBACK_MINUTES

    lookback = int(clamp(lookback_minutes, 2, len(closes) - 1))
    window = list(closes[-(lookback + 1):])

    returns = log_returns(window)
    n = len(returns)

    if n == 0:
        return VolatilityEstimate(sigma=None, mu=None, n=0)

    mu = sum(returns) / n

    if n < 2:
        return VolatilityEstimate(sigma=None, mu=mu, n=n)

    variance = sum((r - mu) ** 2 for r in returns) / (n - 1)
    return VolatilityEstimate(sigma=math.sqrt(variance), mu=mu, n=n)
