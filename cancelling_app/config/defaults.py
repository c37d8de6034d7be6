"""Default configuration parameters for the cancelling checker."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DetectionParams:
    """Excessive cancelling detection parameters."""
    check_window_ms: int = 60_000                    # Look-ahead window length
    cancel_ratio: int = 3                            # Flag when ratio * cancelled > ordered
    min_samples_exclusive: int = 1                   # Samples must exceed this to flag


@dataclass(frozen=True)
class TimeParams:
    """Timestamp interpretation parameters."""
    timezone: str = "UTC"
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class DataSourceParams:
    """Trade dataset location."""
    path: str = "Trades.data"
    encoding: str = "utf-8"


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    detection: DetectionParams
    time: TimeParams
    data_source: DataSourceParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        detection=DetectionParams(),
        time=TimeParams(),
        data_source=DataSourceParams(),
    )
