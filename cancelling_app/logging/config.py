"""
Centralized logging configuration for the cancelling checker.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the package should use this
configuration to ensure consistent formatting and structured logging.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
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

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

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


def get_detection_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for cancellation detection decisions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for detection decisions
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="detection",
        audit_trail=True
    )


def log_flag_decision(
    logger: FilteringBoundLogger,
    company: str,
    anchor_timestamp: int,
    samples: int,
    ordered_quantity: int,
    cancelled_quantity: int,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the window that caused a company to be flagged.

    Args:
        logger: Structlog logger instance
        company: Company that was flagged
        anchor_timestamp: Start of the offending window (ms since epoch)
        samples: Number of company records inside the window
        ordered_quantity: Total order volume inside the window
        cancelled_quantity: Total cancel volume inside the window
        context: Additional context data
    """
    bound_logger = logger.bind(
        company=company,
        anchor_timestamp=anchor_timestamp,
        samples=samples,
        ordered_quantity=ordered_quantity,
        cancelled_quantity=cancelled_quantity,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.warning("Excessive cancelling detected")
