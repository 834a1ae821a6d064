"""Data models for probability estimation results"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class Side(Enum):
    """Direction a scoring rule votes for."""
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class RuleContribution:
    """Points a single scoring rule added to one side."""
    rule: str
    side: Side
    points: int


@dataclass(frozen=True)
class VolatilityEstimate:
    """Per-minute log-return statistics over the lookback window"""
    sigma: Optional[float] = None  # Sample standard deviation, None if < 2 returns
    mu: Optional[float] = None     # Sample mean, None if no returns
    n: int = 0                     # Number of returns used

    @property
    def is_known(self) -> bool:
        """True if sigma could be estimated"""
        return self.sigma is not None


@dataclass(frozen=True)
class DirectionalScore:
    """Additive up/down score from the technical indicators"""
    up_score: int
    down_score: int
    raw_up: float
    contributions: tuple[RuleContribution, ...] = field(default_factory=tuple)

    @property
    def raw_down(self) -> float:
        return 1.0 - self.raw_up


@dataclass(frozen=True)
class BlendResult:
    """Heuristic score blended into the strike model in log-odds space"""
    blended_up: Optional[float]
    w_ta: float
    w_strike: float


@dataclass(frozen=True)
class TimeAwareResult:
    """Heuristic probability shrunk toward 0.5 as the market ages"""
    time_decay: float
    adjusted_up: float
    adjusted_down: float


@dataclass(frozen=True)
class ProbabilityEstimate:
    """Complete probability estimate for one evaluation"""
    up_probability: Optional[float]
    method: str  # 'blend' or 'time_decay'
    score: DirectionalScore
    volatility: VolatilityEstimate
    strike_up: Optional[float] = None
    blend: Optional[BlendResult] = None
    time_aware: Optional[TimeAwareResult] = None

    @property
    def down_probability(self) -> Optional[float]:
        if self.up_probability is None:
            return None
        return 1.0 - self.up_probability

    def to_dict(self) -> dict[str, Any]:
        """Flatten the estimate for logging and downstream consumers"""
        return {
            'method': self.method,
            'up_probability': self.up_probability,
            'down_probability': self.down_probability,
            'up_score': self.score.up_score,
            'down_score': self.score.down_score,
            'raw_up': self.score.raw_up,
            'sigma': self.volatility.sigma,
            'mu': self.volatility.mu,
            'returns_used': self.volatility.n,
            'strike_up': self.strike_up,
            'w_ta': self.blend.w_ta if self.blend else None,
            'w_strike': self.blend.w_strike if self.blend else None,
            'time_decay': self.time_aware.time_decay if self.time_aware else None,
        }
