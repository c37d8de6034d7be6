"""
Recovery strategy classifications for error handling.

These classes categorize errors by how the checker reacts to them:
degrade to an empty or partial dataset, or refuse to start.
"""

from typing import Optional


class GracefulDegradationError(Exception):
    """Errors that allow continued operation with reduced functionality."""

    def __init__(self, message: str, degraded_functionality: Optional[str] = None,
                 fallback_strategy: Optional[str] = None, **kwargs):
        super().__init__(message)
        self.degraded_functionality = degraded_functionality
        self.fallback_strategy = fallback_strategy
        self.allows_degradation = True


class DataSourceUnavailableError(GracefulDegradationError):
    """The trade dataset cannot be opened at all."""

    def __init__(self, message: str, source: Optional[str] = None, **kwargs):
        kwargs.setdefault("degraded_functionality", "dataset")
        kwargs.setdefault("fallback_strategy", "empty_dataset")
        super().__init__(message, **kwargs)
        self.source = source


class DataSourceReadError(GracefulDegradationError):
    """Reading failed part way through the dataset."""

    def __init__(self, message: str, source: Optional[str] = None,
                 lines_read: int = 0, **kwargs):
        kwargs.setdefault("degraded_functionality", "dataset")
        kwargs.setdefault("fallback_strategy", "partial_dataset")
        super().__init__(message, **kwargs)
        self.source = source
        self.lines_read = lines_read


class UnrecoverableError(Exception):
    """Errors that require human intervention."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message)
        self.recoverable = False


class ConfigurationError(UnrecoverableError):
    """Configuration values are invalid and the checker cannot be built."""

    def __init__(self, message: str, errors: Optional[list[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
