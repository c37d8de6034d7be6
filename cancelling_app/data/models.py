"""
Canonical data models for parsed trade events.

This module defines immutable data structures that represent clean, validated
trade events after parsing raw dataset lines.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..utils.time import format_timestamp_ms


class TradeType(Enum):
    """Semantic trade action decoded from the dataset's type code."""
    ORDER = "D"
    CANCEL = "F"
    UNKNOWN = "?"

    @classmethod
    def of(cls, code: Optional[str]) -> "TradeType":
        """Map a raw type code to a trade type; unrecognised codes are UNKNOWN."""
        if code is None:
            return cls.UNKNOWN
        normalized = code.upper()
        if normalized == cls.ORDER.value:
            return cls.ORDER
        if normalized == cls.CANCEL.value:
            return cls.CANCEL
        return cls.UNKNOWN


@dataclass(frozen=True)
class TradeRecord:
    """Single trade event with an epoch-millisecond timestamp."""
    timestamp: int                   # ms since epoch
    company_name: Optional[str]      # None only for the empty sentinel
    trade_type: TradeType
    quantity: int

    @classmethod
    def empty(cls) -> "TradeRecord":
        """Baseline record; never produced by parsing."""
        return cls(timestamp=0, company_name=None, trade_type=TradeType.UNKNOWN, quantity=0)

    @property
    def is_order(self) -> bool:
        return self.trade_type is TradeType.ORDER

    @property
    def is_cancel(self) -> bool:
        return self.trade_type is TradeType.CANCEL

    def __str__(self) -> str:
        return (f"{self.company_name} {format_timestamp_ms(self.timestamp)} "
                f"({self.trade_type.name}) {self.quantity}")


@dataclass(frozen=True)
class ParseResult:
    """Result of parsing one dataset line."""

    record: Optional[TradeRecord] = None

    success: bool = True
    error_msg: Optional[str] = None
    error: Optional[Exception] = None
    skipped_reason: Optional[str] = None
    raw_line: Optional[str] = None

    @classmethod
    def success_with_record(cls, record: TradeRecord, raw_line: Optional[str] = None):
        """Create successful result with a record."""
        return cls(record=record, success=True, raw_line=raw_line)

    @classmethod
    def failure(cls, error: Exception, raw_line: Optional[str] = None):
        """Create failed result carrying the parse error."""
        return cls(success=False, error_msg=str(error), error=error, raw_line=raw_line)

    @classmethod
    def skipped(cls, reason: str, raw_line: Optional[str] = None):
        """Create skipped result."""
        return cls(success=True, skipped_reason=reason, raw_line=raw_line)
