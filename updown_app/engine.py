"""
Main probability engine coordinator.

Orchestrates one probability estimate: volatility from recent closes, the
strike model, the technical score, and finally either the logit blend (when
a strike estimate exists) or the time-decay fallback.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Any, Optional

import structlog

from .config.defaults import DefaultConfig, get_default_config
from .config.loader import ConfigLoader
from .data.models import MarketSnapshot
from .data.normalizer import SnapshotNormalizer
from .errors import DataQualityError
from .logging.config import get_probability_logger, log_probability_estimate
from .metrics.volatility import estimate_volatility
from .models.probability import ProbabilityEstimate
from .probability.blend import blend_probabilities
from .probability.scoring import score_direction
from .probability.strike import strike_probability
from .probability.time_decay import apply_time_awareness

logger = structlog.get_logger(__name__)
probability_logger = get_probability_logger(__name__)


class ProbabilityEngine:
    """
    Main coordinator for up/down market probability estimates.

    Pipeline:
    Closes → Volatility → Strike model ┐
    Snapshot → Technical score ────────┴→ Blend (or time decay) → Estimate

    The engine only holds immutable configuration, so one instance can be
    shared across threads.
    """

    def __init__(self, config: Optional[DefaultConfig] = None) -> None:
        """Initialize the probability engine."""
        self.config = config or get_default_config()
        self.normalizer = SnapshotNormalizer()
        self.logger = logger
        self.probability_logger = probability_logger

    @classmethod
    def for_market(
        cls,
        market_id: str,
        overrides: Optional[dict[str, Any]] = None,
        config_dir: Optional[Path] = None
    ) -> "ProbabilityEngine":
        """
        Create an engine configured for a market.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        loader = ConfigLoader.create(config_dir)
        return cls(loader.load(market_id, overrides))

    def estimate(
        self,
        snapshot: MarketSnapshot,
        closes: Optional[Sequence[Optional[float]]] = None,
        remaining_minutes: Optional[float] = None,
        window_minutes: Optional[float] = None,
        market_id: Optional[str] = None
    ) -> ProbabilityEstimate:
        """
        Produce a probability estimate for a market snapshot.

        Args:
            snapshot: Indicator snapshot at the evaluation instant
            closes: One-minute closes, oldest first, for the volatility estimate
            remaining_minutes: Minutes until the market resolves
            window_minutes: Full market window; defaults to the configured window
            market_id: Market identifier, used for logging only

        Returns:
            ProbabilityEstimate with all intermediate results
        """
        if window_minutes is None:
            window_minutes = self.config.market.window_minutes

        volatility = estimate_volatility(closes, self.config.volatility.lookback_minutes)

        strike_up = strike_probability(
            snapshot.reference_price,
            snapshot.price_to_beat,
            remaining_minutes,
            volatility.sigma,
            self.config.strike.mu_per_minute,
        )

        scoring = self.config.scoring
        use_distance = scoring.use_price_to_beat_distance
        if strike_up is not None and scoring.drop_distance_with_strike_model:
            use_distance = False

        score = score_direction(snapshot, use_price_to_beat_distance=use_distance)

        if strike_up is not None:
            blend = blend_probabilities(
                score.raw_up,
                strike_up,
                remaining_minutes,
                window_minutes,
                alpha=self.config.blend.alpha,
                epsilon=self.config.blend.logit_epsilon,
            )
            estimate = ProbabilityEstimate(
                up_probability=blend.blended_up,
                method="blend",
                score=score,
                volatility=volatility,
                strike_up=strike_up,
                blend=blend,
            )
        else:
            time_aware = apply_time_awareness(score.raw_up, remaining_minutes, window_minutes)
            estimate = ProbabilityEstimate(
                up_probability=time_aware.adjusted_up,
                method="time_decay",
                score=score,
                volatility=volatility,
                time_aware=time_aware,
            )

        log_probability_estimate(
            self.probability_logger,
            market_id,
            estimate,
            context={
                "remaining_minutes": remaining_minutes,
                "window_minutes": window_minutes,
                "distance_scored": use_distance,
                "returns_used": volatility.n,
            }
        )

        return estimate

    def estimate_from_payload(
        self,
        payload: Any,
        closes: Optional[Sequence[Optional[float]]] = None,
        remaining_minutes: Optional[float] = None,
        window_minutes: Optional[float] = None,
        market_id: Optional[str] = None
    ) -> Optional[ProbabilityEstimate]:
        """
        Normalize a raw indicator payload and estimate it.

        Returns:
            ProbabilityEstimate, or None if the payload could not be normalized
        """
        try:
            result = self.normalizer.normalize(payload)
        except DataQualityError as e:
            self.logger.warning(
                "Data quality issue normalizing snapshot payload",
                error=str(e),
                error_type=type(e).__name__,
                market_id=market_id,
                context=getattr(e, 'context', {})
            )
            return None

        if result.skipped_fields:
            self.logger.debug(
                "Snapshot normalized with skipped fields",
                market_id=market_id,
                skipped_fields=list(result.skipped_fields)
            )

        return self.estimate(
            result.snapshot,
            closes=closes,
            remaining_minutes=remaining_minutes,
            window_minutes=window_minutes,
            market_id=market_id,
        )
