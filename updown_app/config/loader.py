"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    BlendParams,
    DefaultConfig,
    MarketParams,
    ScoringParams,
    StrikeModelParams,
    VolatilityParams,
    get_default_config,
)
from .validation import ConfigValidator


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def list_markets(self) -> list[str]:
        """List market ids that have overrides configured."""
        return list(self._read_markets_file())

    def load_market_config(self, market_id: str) -> dict[str, Any]:
        """Load market-specific configuration overrides."""
        market_config = self._read_markets_file().get(market_id) or {}

        if not isinstance(market_config, dict):
            raise ConfigurationError(
                f"Configuration for market {market_id} must be a mapping",
                source=str(self.config_dir / "markets.yaml")
            )

        return market_config

    def _read_markets_file(self) -> dict[str, Any]:
        markets_file = self.config_dir / "markets.yaml"

        if not markets_file.exists():
            return {}

        try:
            with open(markets_file) as f:
                markets_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Could not parse market configuration: {e}",
                source=str(markets_file)
            ) from e

        if not isinstance(markets_config, dict):
            raise ConfigurationError(
                "Market configuration must be a mapping",
                source=str(markets_file)
            )

        markets = markets_config.get("markets") or {}
        if not isinstance(markets, dict):
            raise ConfigurationError(
                "The markets entry must be a mapping of market ids",
                source=str(markets_file)
            )

        return markets  # type: ignore[no-any-return]

    def merge_config(
        self,
        market_id: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Market-specific overrides
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        market_config = self.load_market_config(market_id)
        config = self._deep_merge(config, market_config)

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(
        self,
        market_id: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> DefaultConfig:
        """
        Build a validated configuration object for a market.

        Raises:
            ConfigurationError: If the merged configuration fails validation
        """
        config = self.merge_config(market_id, overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            raise ConfigurationError(
                f"Invalid configuration for {market_id}: {'; '.join(error_msgs)}",
                errors=errors,
                source=str(self.config_dir)
            )

        return DefaultConfig(
            scoring=ScoringParams(**config["scoring"]),
            volatility=VolatilityParams(**config["volatility"]),
            strike=StrikeModelParams(**config["strike"]),
            blend=BlendParams(**config["blend"]),
            market=MarketParams(**config["market"]),
        )

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
