"""
Normalization of raw indicator payloads into MarketSnapshot objects.

Upstream indicator code emits dicts with camelCase keys (``priceToBeat``,
``histDelta``); snake_case keys are accepted as well. Individual fields that
are missing or unusable become ``None`` and are reported in
``skipped_fields``. Only a payload that is not a mapping at all is an error.
"""

import math
from collections.abc import Mapping
from typing import Any, Optional

from ..errors import MalformedDataError
from ..logging.config import get_logger
from .models import MacdSnapshot, MarketSnapshot, NormalizationResult

logger = get_logger(__name__)

# snapshot field -> payload keys, first present wins
_NUMERIC_FIELDS: dict[str, tuple[str, ...]] = {
    "price": ("price",),
    "price_to_beat": ("priceToBeat", "price_to_beat"),
    "current_price": ("currentPrice", "current_price"),
    "vwap": ("vwap",),
    "vwap_slope": ("vwapSlope", "vwap_slope"),
    "rsi": ("rsi",),
    "rsi_slope": ("rsiSlope", "rsi_slope"),
}

_MACD_FIELDS: dict[str, tuple[str, ...]] = {
    "hist": ("hist",),
    "hist_delta": ("histDelta", "hist_delta"),
    "macd": ("macd",),
}

HEIKEN_COLORS = frozenset({"green", "red"})


def _lookup(payload: Mapping[str, Any], keys: tuple[str, ...]) -> tuple[bool, Any]:
    for key in keys:
        if key in payload:
            return True, payload[key]
    return False, None


def parse_number(value: Any) -> Optional[float]:
    """
    Coerce a payload value to a finite float.

    Accepts ints, floats and numeric strings. Booleans, None, unparseable
    strings, NaN and infinities all give None.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None

    return number if math.isfinite(number) else None


def parse_streak(value: Any) -> Optional[int]:
    """Coerce a Heiken-Ashi streak count to a non-negative int, or None."""
    number = parse_number(value)
    if number is None or number < 0 or not number.is_integer():
        return None
    return int(number)


class SnapshotNormalizer:
    """Converts raw indicator payloads into canonical MarketSnapshot objects."""

    def normalize(self, payload: Any) -> NormalizationResult:
        """
        Normalize a raw indicator payload.

        Args:
            payload: Mapping of indicator values

        Returns:
            NormalizationResult with the snapshot and any skipped fields

        Raises:
            MalformedDataError: If the payload is not a mapping
        """
        if not isinstance(payload, Mapping):
            raise MalformedDataError(
                f"Snapshot payload must be a mapping, got {type(payload).__name__}",
                raw_data=str(payload)[:100],
                expected_format="mapping"
            )

        skipped: list[str] = []
        values: dict[str, Any] = {}

        for field_name, keys in _NUMERIC_FIELDS.items():
            values[field_name] = self._number_field(payload, field_name, keys, skipped)

        values["macd"] = self._macd(payload, skipped)
        values["heiken_color"] = self._heiken_color(payload, skipped)

        present, raw = _lookup(payload, ("heikenCount", "heiken_count"))
        values["heiken_count"] = parse_streak(raw) if present else None
        if present and raw is not None and values["heiken_count"] is None:
            skipped.append("heiken_count")

        present, raw = _lookup(payload, ("failedVwapReclaim", "failed_vwap_reclaim"))
        values["failed_vwap_reclaim"] = raw if isinstance(raw, bool) else None
        if present and raw is not None and not isinstance(raw, bool):
            skipped.append("failed_vwap_reclaim")

        if skipped:
            logger.debug(
                "Skipped unusable snapshot fields",
                skipped_fields=skipped
            )

        return NormalizationResult(
            success=True,
            snapshot=MarketSnapshot(**values),
            skipped_fields=tuple(skipped),
        )

    def _number_field(self, payload: Mapping[str, Any], field_name: str,
                      keys: tuple[str, ...], skipped: list[str]) -> Optional[float]:
        present, raw = _lookup(payload, keys)
        if not present or raw is None:
            return None

        number = parse_number(raw)
        if number is None:
            skipped.append(field_name)
        return number

    def _macd(self, payload: Mapping[str, Any], skipped: list[str]) -> Optional[MacdSnapshot]:
        raw = payload.get("macd")
        if raw is None:
            return None
        if not isinstance(raw, Mapping):
            skipped.append("macd")
            return None

        values = {
            field_name: self._number_field(raw, f"macd.{field_name}", keys, skipped)
            for field_name, keys in _MACD_FIELDS.items()
        }
        return MacdSnapshot(**values)

    def _heiken_color(self, payload: Mapping[str, Any], skipped: list[str]) -> Optional[str]:
        present, raw = _lookup(payload, ("heikenColor", "heiken_color"))
        if not present or raw is None:
            return None

        color = raw.strip().lower() if isinstance(raw, str) else None
        if color not in HEIKEN_COLORS:
            skipped.append("heiken_color")
            return None
        return color
