"""
Centralized logging configuration for the probability engine.

This module provides standardized logging configuration using structlog
for all components. The probability models are pure functions and never
log; the engine and the normalizer log through the loggers created here.
"""
import logging
import sys
from typing import TYPE_CHECKING, Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

if TYPE_CHECKING:
    from ..models.probability import ProbabilityEstimate


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_probability_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for probability estimates.

    Every record carries the probability subsystem tag so estimates can be
    audited after the fact.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for probability estimates
    """
    return get_logger(name).bind(
        subsystem="probability",
        audit_trail=True
    )


def log_probability_estimate(
    logger: FilteringBoundLogger,
    market_id: Optional[str],
    estimate: "ProbabilityEstimate",
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a finished probability estimate with standardized format.

    The summary goes out at info level; the individual scoring rules that
    fired go out at debug level.

    Args:
        logger: Structlog logger instance
        market_id: Market the estimate belongs to, if known
        estimate: The estimate to record
        context: Additional context data
    """
    bound_logger = logger.bind(
        market_id=market_id,
        method=estimate.method,
        up_probability=estimate.up_probability,
        strike_up=estimate.strike_up,
        raw_up=estimate.score.raw_up,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Probability estimate")

    bound_logger.debug(
        "Scoring rules fired",
        up_score=estimate.score.up_score,
        down_score=estimate.score.down_score,
        rules=[
            {"rule": c.rule, "side": c.side.value, "points": c.points}
            for c in estimate.score.contributions
        ],
    )
