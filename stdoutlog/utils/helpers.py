"""Formatting helpers for identifiers and timestamps."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_NANOS_PER_SECOND = 1_000_000_000


def format_trace_id(trace_id: int) -> str:
    """
    Format OTel trace_id (int) to hex string.

    Args:
        trace_id: OTel trace_id as a 128-bit integer

    Returns:
        32-character lowercase hex string
    """
    return format(trace_id, '032x')


def format_span_id(span_id: int) -> str:
    """
    Format OTel span_id (int) to hex string.

    Args:
        span_id: OTel span_id as a 64-bit integer

    Returns:
        16-character lowercase hex string
    """
    return format(span_id, '016x')


def format_trace_flags(trace_flags: int) -> str:
    """Format trace flags as a two-digit hex byte."""
    return format(int(trace_flags) & 0xFF, '02x')


def parse_trace_id(hex_string: str) -> int:
    """
    Parse hex string trace_id to OTel int.

    Args:
        hex_string: 32-character hex string

    Returns:
        OTel trace_id as int (0 for an empty string)
    """
    if not hex_string:
        return 0
    return int(hex_string, 16)


def parse_span_id(hex_string: str) -> int:
    """
    Parse hex string span_id to OTel int.

    Args:
        hex_string: 16-character hex string

    Returns:
        OTel span_id as int (0 for an empty string)
    """
    if not hex_string:
        return 0
    return int(hex_string, 16)


def format_timestamp_ns(timestamp_ns: int) -> str:
    """
    Format nanoseconds since the Unix epoch as an RFC 3339 UTC string.

    Fractional seconds keep nanosecond precision with trailing zeros
    trimmed, so ``0`` renders as ``1970-01-01T00:00:00Z``. The zero
    instant is the Unix epoch, not the year-one ``0001-01-01T00:00:00Z`` that
    some time libraries use for an unset time.
    """
    seconds, nanos = divmod(int(timestamp_ns), _NANOS_PER_SECOND)
    moment = _EPOCH + timedelta(seconds=seconds)
    text = moment.strftime("%Y-%m-%dT%H:%M:%S")
    if nanos:
        text += "." + f"{nanos:09d}".rstrip("0")
    return text + "Z"
