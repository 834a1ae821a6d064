"""Configuration validation utilities."""

import math
from dataclasses import dataclass, fields
from typing import Any

from .defaults import (
    BlendParams,
    MarketParams,
    ScoringParams,
    StrikeModelParams,
    VolatilityParams,
)


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return (isinstance(value, (int, float)) and not isinstance(value, bool)
            and math.isfinite(value))


def _unknown_fields(params: dict[str, Any], params_cls: type, section: str) -> list[ValidationError]:
    known = {f.name for f in fields(params_cls)}
    return [
        ValidationError(
            field=f"{section}.{name}",
            message="Unknown parameter",
            value=value
        )
        for name, value in params.items() if name not in known
    ]


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_scoring_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate technical scorer parameters."""
        errors = _unknown_fields(params, ScoringParams, "scoring")

        for name in ("use_price_to_beat_distance", "drop_distance_with_strike_model"):
            if name in params and not isinstance(params[name], bool):
                errors.append(ValidationError(
                    field=f"scoring.{name}",
                    message="Must be a boolean",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_volatility_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate volatility estimation parameters."""
        errors = _unknown_fields(params, VolatilityParams, "volatility")

        # Validate lookback_minutes
        if "lookback_minutes" in params:
            value = params["lookback_minutes"]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                errors.append(ValidationError(
                    field="volatility.lookback_minutes",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_strike_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate strike model parameters."""
        errors = _unknown_fields(params, StrikeModelParams, "strike")

        # Validate mu_per_minute
        if "mu_per_minute" in params:
            value = params["mu_per_minute"]
            if not _is_number(value):
                errors.append(ValidationError(
                    field="strike.mu_per_minute",
                    message="Must be a finite number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_blend_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate blend parameters."""
        errors = _unknown_fields(params, BlendParams, "blend")

        # Validate alpha
        if "alpha" in params:
            value = params["alpha"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="blend.alpha",
                    message="Must be a non-negative number",
                    value=value
                ))

        # Validate logit_epsilon
        if "logit_epsilon" in params:
            value = params["logit_epsilon"]
            if not _is_number(value) or value <= 0 or value >= 0.5:
                errors.append(ValidationError(
                    field="blend.logit_epsilon",
                    message="Must be a number strictly between 0 and 0.5",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_market_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate market window parameters."""
        errors = _unknown_fields(params, MarketParams, "market")

        # Validate window_minutes
        if "window_minutes" in params:
            value = params["window_minutes"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="market.window_minutes",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        section_validators = {
            "scoring": ConfigValidator.validate_scoring_params,
            "volatility": ConfigValidator.validate_volatility_params,
            "strike": ConfigValidator.validate_strike_params,
            "blend": ConfigValidator.validate_blend_params,
            "market": ConfigValidator.validate_market_params,
        }

        errors = []

        for section, params in config.items():
            validator = section_validators.get(section)
            if validator is None:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=params
                ))
            elif not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping of parameters",
                    value=params
                ))
            else:
                errors.extend(validator(params))

        return errors
