"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from updown_app.config.defaults import DefaultConfig, get_default_config
from updown_app.config.loader import ConfigLoader
from updown_app.config.validation import ConfigValidator
from updown_app.errors import ConfigurationError


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Temporary config directory with one market override."""
    (tmp_path / "markets.yaml").write_text(
        "markets:\n"
        "  SOL-UPDOWN-5M:\n"
        "    market:\n"
        "      window_minutes: 5\n"
        "    blend:\n"
        "      alpha: 1.25\n"
    )
    return tmp_path


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration matches the documented defaults."""
        config = get_default_config()
        assert config.volatility.lookback_minutes == 60
        assert config.scoring.use_price_to_beat_distance is True
        assert config.scoring.drop_distance_with_strike_model is True
        assert config.strike.mu_per_minute == 0.0
        assert config.blend.alpha == 1.75
        assert config.blend.logit_epsilon == 1e-6
        assert config.market.window_minutes == 15.0


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_merge_config_defaults_only(self, config_dir: Path) -> None:
        """Test config merging with defaults only."""
        loader = ConfigLoader.create(config_dir)
        config = loader.merge_config("UNKNOWN-MARKET")

        assert config["blend"]["alpha"] == 1.75
        assert config["volatility"]["lookback_minutes"] == 60

    def test_merge_market_config(self, config_dir: Path) -> None:
        """Test market-level overrides apply over defaults."""
        loader = ConfigLoader.create(config_dir)
        config = loader.merge_config("SOL-UPDOWN-5M")

        assert config["market"]["window_minutes"] == 5
        assert config["blend"]["alpha"] == 1.25
        # Other defaults should remain
        assert config["blend"]["logit_epsilon"] == 1e-6

    def test_call_overrides_win(self, config_dir: Path) -> None:
        """Test per-call overrides beat market overrides."""
        loader = ConfigLoader.create(config_dir)
        config = loader.merge_config("SOL-UPDOWN-5M", {"blend": {"alpha": 0.5}})

        assert config["blend"]["alpha"] == 0.5
        assert config["market"]["window_minutes"] == 5

    def test_missing_markets_file(self, tmp_path: Path) -> None:
        """Test a directory without markets.yaml falls back to defaults."""
        loader = ConfigLoader.create(tmp_path)
        assert loader.load_market_config("ANY") == {}
        assert loader.list_markets() == []

    def test_list_markets(self, config_dir: Path) -> None:
        """Test configured market ids are listed."""
        assert ConfigLoader.create(config_dir).list_markets() == ["SOL-UPDOWN-5M"]

    def test_load_builds_dataclasses(self, config_dir: Path) -> None:
        """Test load returns a typed configuration."""
        config = ConfigLoader.create(config_dir).load("SOL-UPDOWN-5M")

        assert isinstance(config, DefaultConfig)
        assert config.market.window_minutes == 5
        assert config.blend.alpha == 1.25
        assert config.volatility.lookback_minutes == 60

    def test_load_invalid_overrides(self, config_dir: Path) -> None:
        """Test invalid parameters raise ConfigurationError."""
        loader = ConfigLoader.create(config_dir)

        with pytest.raises(ConfigurationError) as exc_info:
            loader.load("SOL-UPDOWN-5M", {"blend": {"alpha": -1.0}})

        assert exc_info.value.errors[0].field == "blend.alpha"
        assert exc_info.value.recoverable is False

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        """Test unparseable YAML raises ConfigurationError."""
        (tmp_path / "markets.yaml").write_text("markets: [unclosed\n")
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError):
            loader.load("ANY")

    @pytest.mark.parametrize("body", [
        "markets:\n  - BTC\n  - ETH\n",
        "markets: 5\n",
    ])
    def test_markets_not_a_mapping(self, tmp_path: Path, body: str) -> None:
        """Test a markets entry that is not a mapping raises ConfigurationError."""
        (tmp_path / "markets.yaml").write_text(body)
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError):
            loader.load("BTC")

        with pytest.raises(ConfigurationError):
            loader.list_markets()

    def test_market_entry_not_a_mapping(self, tmp_path: Path) -> None:
        """Test a scalar market entry raises ConfigurationError."""
        (tmp_path / "markets.yaml").write_text("markets:\n  BTC: 5\n  ETH:\n    blend:\n      alpha: 1.0\n")
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError) as exc_info:
            loader.load("BTC")

        assert "BTC" in str(exc_info.value)
        assert loader.load("ETH").blend.alpha == 1.0

    def test_repository_markets(self) -> None:
        """Test the shipped market file loads and validates."""
        config = ConfigLoader.create().load("BTC-UPDOWN-60M")
        assert config.market.window_minutes == 60
        assert config.volatility.lookback_minutes == 120


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_defaults(self) -> None:
        """Test the defaults validate cleanly."""
        loader = ConfigLoader.create()
        config = loader._dataclass_to_dict(get_default_config())
        assert ConfigValidator.validate_config(config) == []

    @pytest.mark.parametrize("value", [0, -5, 2.5, True, "60"])
    def test_invalid_lookback(self, value) -> None:
        """Test lookback must be a positive integer."""
        errors = ConfigValidator.validate_volatility_params({"lookback_minutes": value})
        assert len(errors) == 1
        assert errors[0].field == "volatility.lookback_minutes"

    def test_invalid_scoring_flag(self) -> None:
        """Test scoring toggles must be booleans."""
        errors = ConfigValidator.validate_scoring_params({"use_price_to_beat_distance": "yes"})
        assert len(errors) == 1
        assert errors[0].field == "scoring.use_price_to_beat_distance"

    @pytest.mark.parametrize("value", [0.0, 0.5, -1e-6, float("nan")])
    def test_invalid_epsilon(self, value) -> None:
        """Test epsilon must lie strictly inside (0, 0.5)."""
        errors = ConfigValidator.validate_blend_params({"logit_epsilon": value})
        assert len(errors) == 1

    def test_invalid_mu(self) -> None:
        """Test drift must be finite."""
        errors = ConfigValidator.validate_strike_params({"mu_per_minute": float("inf")})
        assert len(errors) == 1

    def test_invalid_window(self) -> None:
        """Test window must be positive."""
        errors = ConfigValidator.validate_market_params({"window_minutes": 0})
        assert len(errors) == 1

    def test_value_errors_name_their_section(self) -> None:
        """Test value errors are reported with their section."""
        errors = ConfigValidator.validate_config({
            "blend": {"alpha": -1.0, "logit_epsilon": 0.0},
            "market": {"window_minutes": -5},
            "strike": {"mu_per_minute": "drift"},
        })
        assert {err.field for err in errors} == {
            "blend.alpha", "blend.logit_epsilon",
            "market.window_minutes", "strike.mu_per_minute",
        }

    def test_unknown_parameter(self) -> None:
        """Test unknown parameters are reported with their section."""
        errors = ConfigValidator.validate_blend_params({"beta": 1.0})
        assert errors[0].field == "blend.beta"

    def test_unknown_section(self) -> None:
        """Test unknown sections are reported."""
        errors = ConfigValidator.validate_config({"signals": {}})
        assert errors[0].field == "signals"

    def test_section_must_be_mapping(self) -> None:
        """Test a scalar section is reported."""
        errors = ConfigValidator.validate_config({"blend": 3})
        assert errors[0].message == "Must be a mapping of parameters"
