"""
Trade dataset line parser.

Converts one raw ``timestamp,company,type,quantity`` line into a TradeRecord.
Parsing is atomic: it either produces a fully populated record or fails
with a typed ParseError, never a partial record.
"""

import re
import time
from datetime import timezone, tzinfo
from typing import Any, Optional

from ..errors import MalformedDataError
from ..utils.time import DEFAULT_TIMESTAMP_FORMAT, parse_timestamp_ms
from .models import ParseResult, TradeRecord, TradeType

FIELD_SEPARATOR = re.compile(r"\s*,\s*")
QUANTITY_PATTERN = re.compile(r"[0-9]+")
EXPECTED_FORMAT = "timestamp,companyName,typeCode,quantity"
FIELD_COUNT = 4


class ParseError(MalformedDataError):
    """Raised when a dataset line cannot be turned into a trade record."""

    def __init__(self, message: str, raw_data: Optional[str] = None, **kwargs):
        kwargs.setdefault("expected_format", EXPECTED_FORMAT)
        super().__init__(message, raw_data=raw_data, **kwargs)


class MissingFieldError(ParseError):
    """Raised when a line has fewer fields than a trade needs."""

    def __init__(self, message: str, field_count: int = 0, **kwargs):
        super().__init__(message, **kwargs)
        self.field_count = field_count


class InvalidTimestampError(ParseError):
    """Raised when timestamp data is invalid."""
    pass


class InvalidQuantityError(ParseError):
    """Raised when quantity data is invalid."""
    pass


class ParsingMetrics:
    """Simple metrics collection for a dataset load."""

    def __init__(self):
        self.total_lines = 0
        self.successful_parses = 0
        self.failed_parses = 0
        self.skipped_lines = 0
        self.total_parse_time = 0.0

    def record_parse_start(self) -> float:
        """Record the start of a line parse."""
        self.total_lines += 1
        return time.perf_counter()

    def record_result(self, start_time: float, result: ParseResult) -> None:
        """Record the outcome of a line parse."""
        self.total_parse_time += time.perf_counter() - start_time
        if not result.success:
            self.failed_parses += 1
        elif result.record is None:
            self.skipped_lines += 1
        else:
            self.successful_parses += 1

    def get_stats(self) -> dict[str, Any]:
        """Get current metrics."""
        return {
            "total_lines": self.total_lines,
            "successful_parses": self.successful_parses,
            "failed_parses": self.failed_parses,
            "skipped_lines": self.skipped_lines,
            "success_rate": self.successful_parses / max(self.total_lines, 1),
            "total_parse_time_ms": self.total_parse_time * 1000,
        }


def parse_trade_record(
    line: str,
    tz: tzinfo = timezone.utc,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
) -> TradeRecord:
    """
    Parse one dataset line into a TradeRecord.

    Expected format (whitespace around commas is tolerated):
        2015-02-28 07:58:14,Bank of Mars,D,140000

    Args:
        line: Raw dataset line
        tz: Zone the timestamps are expressed in
        timestamp_format: strptime pattern of the timestamp field

    Returns:
        Fully populated TradeRecord

    Raises:
        MissingFieldError: If the line has fewer than four fields or no company
        InvalidTimestampError: If the timestamp is not a real date in the pattern
        InvalidQuantityError: If the quantity is not a non-negative integer
    """
    tokens = FIELD_SEPARATOR.split(line.strip())
    if len(tokens) < FIELD_COUNT:
        raise MissingFieldError(
            f"Expected {FIELD_COUNT} fields, found {len(tokens)}",
            field_count=len(tokens),
            raw_data=line,
        )

    raw_timestamp, company_name, type_code, raw_quantity = tokens[:FIELD_COUNT]

    try:
        timestamp = parse_timestamp_ms(raw_timestamp, tz, timestamp_format)
    except ValueError as e:
        raise InvalidTimestampError(
            f"Invalid timestamp {raw_timestamp!r}: {e}", raw_data=line
        ) from e

    if not company_name:
        raise MissingFieldError("Company name is empty", field_count=len(tokens), raw_data=line)

    if not QUANTITY_PATTERN.fullmatch(raw_quantity):
        raise InvalidQuantityError(
            f"Invalid quantity {raw_quantity!r}: must be a non-negative integer",
            raw_data=line,
        )

    return TradeRecord(
        timestamp=timestamp,
        company_name=company_name,
        trade_type=TradeType.of(type_code),
        quantity=int(raw_quantity),
    )


def parse_trade_line(
    line: str,
    tz: tzinfo = timezone.utc,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
) -> ParseResult:
    """
    Parse one dataset line without raising.

    Blank lines are reported as skipped, malformed lines as failures.

    Args:
        line: Raw dataset line
        tz: Zone the timestamps are expressed in
        timestamp_format: strptime pattern of the timestamp field

    Returns:
        ParseResult holding either the record, the parse error or a skip reason
    """
    if not line.strip():
        return ParseResult.skipped("blank line", raw_line=line)

    try:
        record = parse_trade_record(line, tz, timestamp_format)
    except ParseError as e:
        return ParseResult.failure(e, raw_line=line)

    return ParseResult.success_with_record(record, raw_line=line)
