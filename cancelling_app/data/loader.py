"""
Dataset loader.

Reads every line from a data source, parses it and materializes the ordered,
immutable dataset the detector scans. Malformed lines are skipped and
reported; an unavailable source degrades to an empty dataset and a read
failure keeps whatever was read before it.
"""

import time
from dataclasses import dataclass, field
from datetime import timezone, tzinfo
from typing import Any

import structlog

from ..errors import DataSourceReadError, DataSourceUnavailableError
from ..utils.time import DEFAULT_TIMESTAMP_FORMAT
from .models import TradeRecord
from .parsers import ParsingMetrics, parse_trade_line
from .sources import BaseDataSource

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading one dataset."""
    records: tuple[TradeRecord, ...] = ()
    stats: dict[str, Any] = field(default_factory=dict)
    source_available: bool = True
    complete: bool = True

    def __len__(self) -> int:
        return len(self.records)


class DatasetLoader:
    """Turns a data source into an ordered tuple of trade records."""

    def __init__(
        self,
        tz: tzinfo = timezone.utc,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    ) -> None:
        self.tz = tz
        self.timestamp_format = timestamp_format
        self.logger = logger

    def load(self, source: BaseDataSource) -> LoadResult:
        """
        Load and parse the whole dataset.

        Args:
            source: Source supplying the raw dataset lines

        Returns:
            LoadResult with the parsed records in input order
        """
        metrics = ParsingMetrics()
        records: list[TradeRecord] = []
        start = time.perf_counter()

        try:
            for line in source.iter_lines():
                parse_start = metrics.record_parse_start()
                result = parse_trade_line(line, self.tz, self.timestamp_format)
                metrics.record_result(parse_start, result)

                if result.record is not None:
                    records.append(result.record)
                elif not result.success:
                    self.logger.error(
                        "Cannot parse trade entry",
                        line=line,
                        line_number=metrics.total_lines,
                        error=result.error_msg,
                        error_type=type(result.error).__name__,
                    )

        except DataSourceUnavailableError as e:
            self.logger.error(
                "Trading data set not found",
                source=source.describe(),
                error=str(e),
                fallback=e.fallback_strategy,
            )
            return LoadResult(stats=metrics.get_stats(), source_available=False, complete=False)

        except DataSourceReadError as e:
            self.logger.error(
                "Error reading the trading data set",
                source=source.describe(),
                error=str(e),
                lines_read=e.lines_read,
                records_kept=len(records),
                fallback=e.fallback_strategy,
            )
            return LoadResult(records=tuple(records), stats=metrics.get_stats(), complete=False)

        stats = metrics.get_stats()
        self.logger.info(
            "Dataset parsed",
            source=source.describe(),
            records=len(records),
            failed_lines=stats["failed_parses"],
            elapsed_ms=round((time.perf_counter() - start) * 1000, 3),
        )
        return LoadResult(records=tuple(records), stats=stats)
