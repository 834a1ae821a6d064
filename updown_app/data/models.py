"""
Canonical data models for normalized market snapshots.

This module defines immutable data structures that represent the indicator
values supplied by the upstream indicator layer. Every numeric field is
optional: ``None`` means the value is unknown and must never be read as 0.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class MacdSnapshot:
    """MACD readings at the evaluation instant."""
    hist: Optional[float] = None        # MACD line minus signal line
    hist_delta: Optional[float] = None  # Change in histogram since previous bar
    macd: Optional[float] = None        # MACD line


@dataclass(frozen=True)
class MarketSnapshot:
    """Indicator snapshot for a single up/down market evaluation."""
    price: Optional[float] = None               # Last traded price
    price_to_beat: Optional[float] = None       # Strike the market resolves against
    current_price: Optional[float] = None       # Overrides price for distance calculations
    vwap: Optional[float] = None
    vwap_slope: Optional[float] = None
    rsi: Optional[float] = None                 # [0, 100]
    rsi_slope: Optional[float] = None
    macd: Optional[MacdSnapshot] = None
    heiken_color: Optional[str] = None          # 'green', 'red', or None
    heiken_count: Optional[int] = None          # Consecutive same-colour bars
    failed_vwap_reclaim: Optional[bool] = None

    @property
    def reference_price(self) -> Optional[float]:
        """Price used for distance to strike: current_price when known, else price."""
        return self.current_price if self.current_price is not None else self.price


@dataclass(frozen=True)
class NormalizationResult:
    """Result of normalizing a raw snapshot payload."""
    success: bool
    snapshot: Optional[MarketSnapshot] = None
    error_msg: Optional[str] = None
    skipped_fields: tuple[str, ...] = field(default_factory=tuple)
