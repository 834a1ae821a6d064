"""Metrics calculation for the probability models"""

from .momentum import compute_rsi, slope_last, sma
from .volatility import estimate_volatility, log_returns

__all__ = [
    "estimate_volatility",
    "log_returns",
    "compute_rsi",
    "sma",
    "slope_last",
]
