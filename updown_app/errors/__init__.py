"""
Error classification for the outer edges of the probability engine.

The probability models themselves never raise: unknown or degenerate inputs
produce ``None`` results. Exceptions are reserved for malformed payloads
handed to the normalizer and for invalid configuration.
"""

from .data_quality import (
    DataQualityError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "ConfigurationError",
]
