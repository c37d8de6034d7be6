"""Pytest configuration and shared fixtures."""

from typing import Callable, List

import pytest

from cancelling_app.data.models import TradeRecord, TradeType
from cancelling_app.utils.time import parse_timestamp_ms

BASE_TIMESTAMP = "2015-02-28 08:00:00"


@pytest.fixture
def base_ts() -> int:
    """Epoch milliseconds of 2015-02-28 08:00:00 UTC."""
    return parse_timestamp_ms(BASE_TIMESTAMP)


@pytest.fixture
def make_trade(base_ts) -> Callable[..., TradeRecord]:
    """Factory for trade records offset in milliseconds from the base timestamp."""

    def _make(company: str, code: str, quantity: int, offset_ms: int = 0) -> TradeRecord:
        return TradeRecord(
            timestamp=base_ts + offset_ms,
            company_name=company,
            trade_type=TradeType.of(code),
            quantity=quantity,
        )

    return _make


@pytest.fixture
def sample_lines() -> List[str]:
    """Small dataset where Ape accountants and Cauldron cooking cancel excessively."""
    return [
        "2015-02-28 08:00:00,Ape accountants,D,1000",
        "2015-02-28 08:00:02,Bank of Mars,D,1000",
        "2015-02-28 08:00:05,Greedy bankers ltd.,D,77",
        "2015-02-28 08:00:10,Ape accountants,D,500",
        "2015-02-28 08:00:12,Bank of Mars,D,900",
        "2015-02-28 08:00:20,Ape accountants,F,800",
        "2015-02-28 08:00:22,Bank of Mars,F,200",
        "2015-02-28 08:00:40,Dragon finance,D,400",
        "2015-02-28 08:01:00,Cauldron cooking,D,300",
        "2015-02-28 08:01:05,Cauldron cooking,F,200",
        "2015-02-28 08:01:10,Dragon finance,D,400",
        "2015-02-28 08:01:30,Cauldron cooking,F,100",
        "2015-02-28 08:02:00,Elf exports,D,250",
        "2015-02-28 08:02:00,Elf exports,D,250",
        "2015-02-28 08:02:30,Elf exports,F,100",
    ]


@pytest.fixture
def sample_dataset_file(tmp_path, sample_lines):
    """The sample dataset written to a temporary file."""
    path = tmp_path / "Trades.data"
    path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    return path
