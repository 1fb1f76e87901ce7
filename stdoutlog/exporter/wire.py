"""Flattened, JSON-ready projection of a log record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from stdoutlog.logs.record import LogRecord
from stdoutlog.utils.helpers import (
    format_span_id,
    format_timestamp_ns,
    format_trace_flags,
    format_trace_id,
)

ZERO_TIMESTAMP = format_timestamp_ns(0)


def _opaque(value: Any) -> Dict[str, Any]:
    # Record content is not interpreted; every typed value renders as an empty object.
    return {}


def _severity(severity: Any) -> int:
    # SeverityNumber is a plain Enum, not an IntEnum.
    return int(getattr(severity, "value", severity))


@dataclass(frozen=True)
class WireScope:
    name: str
    version: str
    schema_url: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Name": self.name,
            "Version": self.version,
            "SchemaURL": self.schema_url,
        }


@dataclass(frozen=True)
class WireRecord:
    timestamp: str
    observed_timestamp: str
    severity: int
    severity_text: str
    body: Dict[str, Any]
    attributes: Tuple[Tuple[str, Dict[str, Any]], ...]
    trace_id: str
    span_id: str
    trace_flags: str
    resource: Dict[str, Any]
    scope: WireScope
    attribute_value_length_limit: int
    attribute_count_limit: int

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON object, keys in output order."""
        attributes: List[Dict[str, Any]] = [
            {"Key": key, "Value": value} for key, value in self.attributes
        ]
        return {
            "Timestamp": self.timestamp,
            "ObservedTimestamp": self.observed_timestamp,
            "Severity": self.severity,
            "SeverityText": self.severity_text,
            "Body": self.body,
            "Attributes": attributes,
            "TraceID": self.trace_id,
            "SpanID": self.span_id,
            "TraceFlags": self.trace_flags,
            "Resource": self.resource,
            "Scope": self.scope.to_dict(),
            "AttributeValueLengthLimit": self.attribute_value_length_limit,
            "AttributeCountLimit": self.attribute_count_limit,
        }


def project(record: LogRecord, suppress_timestamps: bool = False) -> WireRecord:
    """
    Project a LogRecord onto its wire form.

    Total and side-effect free: any record, including ``LogRecord()``,
    yields a well-formed WireRecord.
    """
    if suppress_timestamps:
        timestamp = observed = ZERO_TIMESTAMP
    else:
        timestamp = format_timestamp_ns(record.timestamp)
        observed = format_timestamp_ns(record.observed_timestamp)

    scope = record.instrumentation_scope
    return WireRecord(
        timestamp=timestamp,
        observed_timestamp=observed,
        severity=_severity(record.severity_number),
        severity_text=record.severity_text or "",
        body=_opaque(record.body),
        attributes=tuple((kv.key, _opaque(kv.value)) for kv in record.attributes),
        trace_id=format_trace_id(record.trace_id),
        span_id=format_span_id(record.span_id),
        trace_flags=format_trace_flags(record.trace_flags),
        resource=_opaque(record.resource),
        scope=WireScope(
            name=(scope.name if scope else "") or "",
            version=(scope.version if scope else "") or "",
            schema_url=(scope.schema_url if scope else "") or "",
        ),
        attribute_value_length_limit=record.attribute_value_length_limit,
        attribute_count_limit=record.attribute_count_limit,
    )
