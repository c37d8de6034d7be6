"""
Timestamp utilities for trade datasets.

Dataset timestamps are naive wall-clock values. They are pinned to a single
explicit zone (UTC unless configured otherwise) so window boundaries do not
depend on the host's local time zone.
"""

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def resolve_timezone(name: Optional[str]) -> tzinfo:
    """
    Resolve a time zone name to a tzinfo instance.

    Args:
        name: IANA zone name, "UTC" or None (UTC)

    Returns:
        tzinfo for the zone

    Raises:
        ZoneInfoNotFoundError: If the zone is unknown (a KeyError subclass)
        ValueError: If the name is malformed
    """
    if name is None or name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def parse_timestamp_ms(
    text: str,
    tz: tzinfo = timezone.utc,
    fmt: str = DEFAULT_TIMESTAMP_FORMAT
) -> int:
    """
    Parse a dataset timestamp into milliseconds since the epoch.

    Impossible calendar values (e.g. day 72) raise instead of rolling over
    into another date.

    Args:
        text: Timestamp text, e.g. "2015-02-28 07:58:14"
        tz: Zone the naive timestamp is expressed in
        fmt: strptime pattern

    Returns:
        Milliseconds since the Unix epoch

    Raises:
        ValueError: If the text does not match the pattern or is not a real date
    """
    naive = datetime.strptime(text, fmt)
    return to_epoch_ms(naive.replace(tzinfo=tz))


def to_epoch_ms(moment: datetime) -> int:
    """Convert an aware datetime to integer milliseconds since the epoch."""
    return (moment - _EPOCH) // timedelta(milliseconds=1)


def from_epoch_ms(timestamp_ms: int, tz: tzinfo = timezone.utc) -> datetime:
    """Convert milliseconds since the epoch to an aware datetime in ``tz``."""
    return (_EPOCH + timedelta(milliseconds=timestamp_ms)).astimezone(tz)


def format_timestamp_ms(
    timestamp_ms: int,
    tz: tzinfo = timezone.utc,
    fmt: str = DEFAULT_TIMESTAMP_FORMAT
) -> str:
    """
    Format milliseconds since the epoch the way the dataset writes timestamps.

    Args:
        timestamp_ms: Milliseconds since the Unix epoch
        tz: Zone to render the timestamp in
        fmt: strftime pattern

    Returns:
        Formatted timestamp
    """
    return from_epoch_ms(timestamp_ms, tz).strftime(fmt)


def window_end(anchor_timestamp: int, window_ms: int) -> int:
    """Exclusive upper bound of the window opened at ``anchor_timestamp``."""
    return anchor_timestamp + window_ms
