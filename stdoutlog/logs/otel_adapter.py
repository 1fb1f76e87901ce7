"""Adapter layer converting OpenTelemetry SDK log data into stdoutlog records."""

from __future__ import annotations

from typing import Any, Optional

from opentelemetry._logs import SeverityNumber
from opentelemetry.trace import TraceFlags

from stdoutlog.logs.record import InstrumentationScope, LogRecord, to_key_values


def _lookup(first: Any, second: Any, name: str) -> Any:
    # Newer SDKs keep scope, resource and limits on the wrapper, older ones on the record.
    value = getattr(first, name, None)
    if value is None:
        value = getattr(second, name, None)
    return value


def _scope_from_otel(otel_scope: Any) -> Optional[InstrumentationScope]:
    if otel_scope is None:
        return None
    return InstrumentationScope(
        name=getattr(otel_scope, "name", "") or "",
        version=getattr(otel_scope, "version", None),
        schema_url=getattr(otel_scope, "schema_url", None),
    )


def from_otel(item: Any) -> LogRecord:
    """
    Convert an OpenTelemetry SDK log item to a LogRecord.

    Accepts either ``LogData`` (record plus instrumentation scope) or a
    readable log record that carries its own scope. Missing fields map to
    their zero values.

    Args:
        item: OpenTelemetry ``LogData`` or readable log record

    Returns:
        LogRecord
    """
    otel_record = getattr(item, "log_record", item)

    otel_scope = _lookup(item, otel_record, "instrumentation_scope")

    severity = getattr(otel_record, "severity_number", None)
    if severity is None:
        severity = SeverityNumber.UNSPECIFIED

    trace_flags = getattr(otel_record, "trace_flags", None)
    trace_flags = TraceFlags(int(trace_flags)) if trace_flags is not None else TraceFlags(TraceFlags.DEFAULT)

    limits = _lookup(otel_record, item, "limits")
    max_length = getattr(limits, "max_attribute_length", None) if limits is not None else None
    max_count = getattr(limits, "max_attributes", None) if limits is not None else None

    attributes = getattr(otel_record, "attributes", None)

    return LogRecord(
        timestamp=getattr(otel_record, "timestamp", None) or 0,
        observed_timestamp=getattr(otel_record, "observed_timestamp", None) or 0,
        severity_number=severity,
        severity_text=getattr(otel_record, "severity_text", None) or "",
        body=getattr(otel_record, "body", None),
        attributes=to_key_values(dict(attributes) if attributes else None),
        trace_id=getattr(otel_record, "trace_id", None) or 0,
        span_id=getattr(otel_record, "span_id", None) or 0,
        trace_flags=trace_flags,
        resource=_lookup(otel_record, item, "resource"),
        instrumentation_scope=_scope_from_otel(otel_scope),
        attribute_value_length_limit=max_length or 0,
        attribute_count_limit=max_count or 0,
    )
