"""
Technical indicator scoring.

Turns a MarketSnapshot into additive up/down scores. Each rule in
SCORING_RULES is evaluated independently; a rule whose inputs are unknown
adds nothing. Both sides start at 1 so the raw probability is always
defined.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional, Union

from ..data.models import MarketSnapshot
from ..models.probability import DirectionalScore, RuleContribution, Side
from ..utils.numeric import is_finite_number

BASE_SCORE = 1

# (relative distance threshold, points), checked in order; anything non-zero
# below the last threshold earns DISTANCE_FLOOR_POINTS
DISTANCE_TIERS: tuple[tuple[float, int], ...] = (
    (0.01, 20),
    (0.005, 15),
    (0.002, 12),
    (0.001, 10),
    (0.0005, 8),
    (0.0002, 6),
)
DISTANCE_FLOOR_POINTS = 4

RSI_UP_BAND = 55.0
RSI_DOWN_BAND = 45.0
HEIKEN_MIN_STREAK = 2


@dataclass(frozen=True)
class ScoringRule:
    """A single row of the scoring table."""
    name: str
    side: Side
    magnitude: Union[int, Callable[[MarketSnapshot], int]]
    predicate: Callable[[MarketSnapshot], bool]
    uses_distance: bool = False

    def points(self, snapshot: MarketSnapshot) -> int:
        """Points this rule adds to its side for the snapshot (0 if it does not fire)."""
        if not self.predicate(snapshot):
            return 0
        if callable(self.magnitude):
            return self.magnitude(snapshot)
        return self.magnitude


def relative_distance(snapshot: MarketSnapshot) -> Optional[float]:
    """
    Relative distance of the reference price from the strike.

    Returns:
        (reference_price - price_to_beat) / price_to_beat, or None when
        either price is unknown or the strike is not positive
    """
    reference = snapshot.reference_price
    strike = snapshot.price_to_beat
    if not is_finite_number(reference) or not is_finite_number(strike) or strike <= 0:
        return None
    return (reference - strike) / strike


def distance_points(distance: float) -> int:
    """Step-function weight for |distance|; exactly zero earns nothing."""
    magnitude = abs(distance)
    if magnitude == 0:
        return 0
    for threshold, points in DISTANCE_TIERS:
        if magnitude > threshold:
            return points
    return DISTANCE_FLOOR_POINTS


def _distance_magnitude(snapshot: MarketSnapshot) -> int:
    distance = relative_distance(snapshot)
    return distance_points(distance) if distance is not None else 0


def _above_strike(s: MarketSnapshot) -> bool:
    distance = relative_distance(s)
    return distance is not None and distance > 0


def _below_strike(s: MarketSnapshot) -> bool:
    distance = relative_distance(s)
    return distance is not None and distance < 0


def _known(*values: Optional[float]) -> bool:
    return all(is_finite_number(v) for v in values)


def _macd_hist(s: MarketSnapshot) -> tuple[Optional[float], Optional[float]]:
    if s.macd is None:
        return None, None
    return s.macd.hist, s.macd.hist_delta


def _expanding_green(s: MarketSnapshot) -> bool:
    hist, delta = _macd_hist(s)
    return _known(hist, delta) and hist > 0 and delta > 0


def _expanding_red(s: MarketSnapshot) -> bool:
    hist, delta = _macd_hist(s)
    return _known(hist, delta) and hist < 0 and delta < 0


def _macd_line(s: MarketSnapshot) -> Optional[float]:
    return s.macd.macd if s.macd is not None else None


def _heiken_streak(s: MarketSnapshot, color: str) -> bool:
    return (s.heiken_color == color
            and s.heiken_count is not None
            and s.heiken_count >= HEIKEN_MIN_STREAK)


SCORING_RULES: tuple[ScoringRule, ...] = (
    # Price-to-beat distance is the dominant signal
    ScoringRule("price_to_beat_distance_up", Side.UP, _distance_magnitude, _above_strike, uses_distance=True),
    ScoringRule("price_to_beat_distance_down", Side.DOWN, _distance_magnitude, _below_strike, uses_distance=True),

    ScoringRule("price_above_vwap", Side.UP, 2,
                lambda s: _known(s.price, s.vwap) and s.price > s.vwap),
    ScoringRule("price_below_vwap", Side.DOWN, 2,
                lambda s: _known(s.price, s.vwap) and s.price < s.vwap),

    ScoringRule("vwap_slope_up", Side.UP, 2,
                lambda s: _known(s.vwap_slope) and s.vwap_slope > 0),
    ScoringRule("vwap_slope_down", Side.DOWN, 2,
                lambda s: _known(s.vwap_slope) and s.vwap_slope < 0),

    # No overbought/oversold reversal rule; momentum confirmation only
    ScoringRule("rsi_momentum_up", Side.UP, 2,
                lambda s: _known(s.rsi, s.rsi_slope) and s.rsi > RSI_UP_BAND and s.rsi_slope > 0),
    ScoringRule("rsi_momentum_down", Side.DOWN, 2,
                lambda s: _known(s.rsi, s.rsi_slope) and s.rsi < RSI_DOWN_BAND and s.rsi_slope < 0),

    ScoringRule("macd_expanding_green", Side.UP, 2, _expanding_green),
    ScoringRule("macd_expanding_red", Side.DOWN, 2, _expanding_red),
    ScoringRule("macd_line_positive", Side.UP, 1,
                lambda s: _known(_macd_line(s)) and _macd_line(s) > 0),
    ScoringRule("macd_line_negative", Side.DOWN, 1,
                lambda s: _known(_macd_line(s)) and _macd_line(s) < 0),

    ScoringRule("heiken_green_streak", Side.UP, 1, lambda s: _heiken_streak(s, "green")),
    ScoringRule("heiken_red_streak", Side.DOWN, 1, lambda s: _heiken_streak(s, "red")),

    # Deliberately one-sided: there is no failed-breakdown bonus
    ScoringRule("failed_vwap_reclaim", Side.DOWN, 3, lambda s: s.failed_vwap_reclaim is True),
)


def score_direction(snapshot: MarketSnapshot,
                    use_price_to_beat_distance: bool = True) -> DirectionalScore:
    """
    Score a snapshot into up/down points and a raw up probability

    Args:
        snapshot: Indicator snapshot; unknown fields skip their rules
        use_price_to_beat_distance: Include the distance-to-strike rules.
            Disable when the strike model also runs, so distance is not
            counted twice.

    Returns:
        DirectionalScore with raw_up = up / (up + down)
    """
    up = BASE_SCORE
    down = BASE_SCORE
    contributions = []

    for rule in SCORING_RULES:
        if rule.uses_distance and not use_price_to_beat_distance:
            continue

        points = rule.points(snapshot)
        if points <= 0:
            continue

        if rule.side is Side.UP:
            up += points
        else:
            down += points
        contributions.append(RuleContribution(rule=rule.name, side=rule.side, points=points))

    return DirectionalScore(
        up_score=up,
        down_score=down,
        raw_up=up / (up + down),
        contributions=tuple(contributions),
    )
