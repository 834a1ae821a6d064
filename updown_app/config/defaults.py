"""Default configuration parameters for the probability engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringParams:
    """Technical scorer parameters."""
    use_price_to_beat_distance: bool = True          # Score distance to strike
    drop_distance_with_strike_model: bool = True     # Avoid double-counting distance when blending


@dataclass(frozen=True)
class VolatilityParams:
    """Per-minute log-return estimation parameters."""
    lookback_minutes: int = 60                       # Clamped to available closes


@dataclass(frozen=True)
class StrikeModelParams:
    """Lognormal strike model parameters."""
    mu_per_minute: float = 0.0                       # Drift; zero = random walk


@dataclass(frozen=True)
class BlendParams:
    """Logit-space blend parameters."""
    alpha: float = 1.75                              # Max logit tilt from the heuristic score
    logit_epsilon: float = 1e-6                      # Keeps strike probability off exact 0/1


@dataclass(frozen=True)
class MarketParams:
    """Market window parameters."""
    window_minutes: float = 15.0                     # Full market life


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    scoring: ScoringParams
    volatility: VolatilityParams
    strike: StrikeModelParams
    blend: BlendParams
    market: MarketParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        scoring=ScoringParams(),
        volatility=VolatilityParams(),
        strike=StrikeModelParams(),
        blend=BlendParams(),
        market=MarketParams(),
    )
