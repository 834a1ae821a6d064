"""RSI, SMA and slope helpers for the indicator snapshot"""

from collections.abc import Sequence
from typing import Optional

from ..utils.numeric import clamp


def compute_rsi(closes: Sequence[float], period: int = 14) -> Optional[float]:
    """
    Calculate the Relative Strength Index with Wilder's smoothing

    The first average gain/loss is the simple mean over the first period
    differences; each later difference is folded in as
    avg = (avg * (period - 1) + value) / period.

    Args:
        closes: Close prices (must be in chronological order)
        period: RSI period (default 14)

    Returns:
        RSI in [0, 100] or None if insufficient data
    """
    if period <= 0 or len(closes) < period + 1:
        return None

    avg_gain = 0.0
    avg_loss = 0.0
    for i in range(1, period + 1):
        diff = closes[i] - closes[i - 1]
        if diff > 0:
            avg_gain += diff
        else:
            avg_loss -= diff

    avg_gain /= period
    avg_loss /= period

    for i in range(period + 1, len(closes)):
        diff = closes[i] - closes[i - 1]
        gain = diff if diff > 0 else 0.0
        loss = -diff if diff < 0 else 0.0
        avg_gain = (avg_gain * (period - 1) + gain) / period
        avg_loss = (avg_loss * (period - 1) + loss) / period

    if avg_loss == 0:
        return 100.0

    rs = avg_gain / avg_loss
    return clamp(100.0 - 100.0 / (1.0 + rs), 0.0, 100.0)


def sma(values: Sequence[float], period: int) -> Optional[float]:
    """Simple moving average of the last `period` values, None if insufficient data"""
    if period <= 0 or len(values) < period:
        return None

    recent = values[-period:]
    return sum(recent) / period


def slope_last(values: Sequence[float], points: int) -> Optional[float]:
    """
    Average per-step change across the last `points` values

    Args:
        values: Series in chronological order
        points: Number of trailing values to span (at least 2)

    Returns:
        (last - first) / (points - 1) or None if insufficient data
    """
    if points < 2 or len(values) < points:
        return None

    recent = values[-points:]
    return (recent[-1] - recent[0]) / (points - 1)
