"""Utility functions for stdoutlog."""

from stdoutlog.utils.helpers import (
    format_trace_id,
    format_span_id,
    format_trace_flags,
    format_timestamp_ns,
    parse_trace_id,
    parse_span_id,
)

__all__ = [
    "format_trace_id",
    "format_span_id",
    "format_trace_flags",
    "format_timestamp_ns",
    "parse_trace_id",
    "parse_span_id",
]
