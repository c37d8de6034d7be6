"""
Excessive trade cancelling checker.

Owns a data source, loads and scans the dataset on the first query and
answers every later query from the cached result. Callers construct one
checker and pass it to wherever the queries are made.
"""

import threading
from pathlib import Path
from typing import Any, Optional

import structlog

from .config.defaults import DefaultConfig, get_default_config
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.loader import DatasetLoader, LoadResult
from .data.models import TradeRecord
from .data.sources import BaseDataSource, FileDataSource
from .detection.detector import CancellationDetector
from .detection.models import CheckResult
from .errors import ConfigurationError
from .utils.time import resolve_timezone

logger = structlog.get_logger(__name__)


class ExcessiveCancellingChecker:
    """
    Reports companies involved in excessive cancelling.

    The dataset is loaded and checked at most once per checker, on the
    first query; concurrent first queries are serialized by a lock.
    """

    def __init__(
        self,
        source: BaseDataSource,
        detector: Optional[CancellationDetector] = None,
        loader: Optional[DatasetLoader] = None
    ) -> None:
        self.source = source
        self.detector = detector or CancellationDetector()
        self.loader = loader or DatasetLoader()
        self.logger = logger

        self._lock = threading.Lock()
        self._checked: Optional[tuple[LoadResult, CheckResult]] = None

    @classmethod
    def from_config(
        cls,
        config_dir: Optional[Path] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> "ExcessiveCancellingChecker":
        """
        Build a checker from the settings file and explicit overrides.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        config_loader = ConfigLoader.create(config_dir)
        merged = config_loader.merge_config(overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            logger.error("Checker configuration validation failed", errors=error_msgs)
            raise ConfigurationError("Invalid checker configuration", errors=error_msgs)

        return cls.from_default_config(config_loader.build_config(merged))

    @classmethod
    def from_default_config(cls, config: Optional[DefaultConfig] = None) -> "ExcessiveCancellingChecker":
        """Build a checker from already validated configuration dataclasses."""
        config = config or get_default_config()
        return cls(
            source=FileDataSource(config.data_source.path, config.data_source.encoding),
            detector=CancellationDetector(config.detection),
            loader=DatasetLoader(
                tz=resolve_timezone(config.time.timezone),
                timestamp_format=config.time.timestamp_format,
            ),
        )

    def _ensure_checked(self) -> tuple[LoadResult, CheckResult]:
        checked = self._checked
        if checked is not None:
            return checked

        with self._lock:
            if self._checked is None:
                load_result = self.loader.load(self.source)
                self._checked = (load_result, self.detector.detect(load_result.records))
            return self._checked

    def get_result(self) -> CheckResult:
        """Return the cached check result, computing it on first use."""
        return self._ensure_checked()[1]

    def get_dataset(self) -> tuple[TradeRecord, ...]:
        """Return the parsed dataset, loading it on first use."""
        return self._ensure_checked()[0].records

    @property
    def load_stats(self) -> dict[str, Any]:
        """Parsing statistics of the dataset load, empty before the first query."""
        checked = self._checked
        if checked is None:
            return {}
        return dict(checked[0].stats)

    def list_flagged_companies(self) -> list[str]:
        """Companies involved in excessive cancelling, each listed once."""
        return sorted(self.get_result().flagged_companies)

    def count_well_behaved_companies(self) -> int:
        """Number of distinct companies never flagged for excessive cancelling."""
        return self.get_result().well_behaved_count

    def reset(self) -> None:
        """Drop cached data; the next query reloads the dataset."""
        with self._lock:
            self._checked = None
        self.logger.info("Checker cache cleared", source=self.source.describe())
