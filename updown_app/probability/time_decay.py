"""Time-aware shrinkage of the heuristic probability toward 0.5"""

from typing import Optional

from ..models.probability import TimeAwareResult
from ..utils.numeric import clamp, is_finite_number
from .blend import time_weight


def apply_time_awareness(raw_up: float,
                         remaining_minutes: Optional[float],
                         window_minutes: Optional[float]) -> TimeAwareResult:
    """
    Shrink a heuristic up probability toward 0.5 as the market ages

    adjusted_up = 0.5 + (raw_up - 0.5) * remaining / window

    Only used when no strike estimate exists.

    Args:
        raw_up: Heuristic up probability; unusable values count as 0.5
        remaining_minutes: Minutes until resolution
        window_minutes: Full market window in minutes

    Returns:
        TimeAwareResult with adjusted_down = 1 - adjusted_up
    """
    time_decay = time_weight(remaining_minutes, window_minutes)
    if not is_finite_number(raw_up):
        raw_up = 0.5
    adjusted_up = clamp(0.5 + (raw_up - 0.5) * time_decay, 0.0, 1.0)
    return TimeAwareResult(
        time_decay=time_decay,
        adjusted_up=adjusted_up,
        adjusted_down=1.0 - adjusted_up,
    )
