"""Probability models: technical scoring, strike model, blending and time decay"""

from .blend import blend_probabilities
from .scoring import SCORING_RULES, ScoringRule, score_direction
from .strike import strike_probability
from .time_decay import apply_time_awareness

__all__ = [
    "SCORING_RULES",
    "ScoringRule",
    "score_direction",
    "strike_probability",
    "blend_probabilities",
    "apply_time_awareness",
]
