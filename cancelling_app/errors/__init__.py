"""
Error classification for trade data loading and cancellation checks.

This module provides a structured exception hierarchy for the different
kinds of errors met while reading, parsing and checking trade datasets.
"""

from .data_quality import (
    DataQualityError,
    MalformedDataError,
)
from .recovery import (
    ConfigurationError,
    DataSourceReadError,
    DataSourceUnavailableError,
    GracefulDegradationError,
    UnrecoverableError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MalformedDataError",
    # Recovery Categories
    "GracefulDegradationError",
    "DataSourceUnavailableError",
    "DataSourceReadError",
    "UnrecoverableError",
    "ConfigurationError",
]
