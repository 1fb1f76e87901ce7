"""Immutable log record model consumed by the exporters."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from opentelemetry._logs import SeverityNumber
from opentelemetry.sdk.resources import Resource
from opentelemetry.trace import TraceFlags


@dataclass(frozen=True)
class KeyValue:
    """A single attribute; keys are not required to be unique within a record."""

    key: str
    value: Any = None


@dataclass(frozen=True)
class InstrumentationScope:
    name: str = ""
    version: Optional[str] = None
    schema_url: Optional[str] = None


AttributesInput = Union[Mapping[str, Any], Iterable[Union[KeyValue, Tuple[str, Any]]]]


def to_key_values(attributes: Optional[AttributesInput]) -> Tuple[KeyValue, ...]:
    """Normalize a mapping or an iterable of pairs into ordered KeyValues."""
    if not attributes:
        return ()
    if isinstance(attributes, Mapping):
        return tuple(KeyValue(k, v) for k, v in attributes.items())
    items = []
    for item in attributes:
        if isinstance(item, KeyValue):
            items.append(item)
        else:
            key, value = item
            items.append(KeyValue(key, value))
    return tuple(items)


@dataclass(frozen=True)
class LogRecord:
    """
    A completed log record.

    Timestamps are nanoseconds since the Unix epoch, 0 meaning unset.
    Trace and span ids are integers as in the OpenTelemetry API, 0 meaning
    absent. The two limits describe truncation applied while the record was
    built; the exporter only reports them.
    """

    timestamp: int = 0
    observed_timestamp: int = 0
    severity_number: SeverityNumber = SeverityNumber.UNSPECIFIED
    severity_text: str = ""
    body: Any = None
    attributes: Tuple[KeyValue, ...] = field(default_factory=tuple)
    trace_id: int = 0
    span_id: int = 0
    trace_flags: TraceFlags = TraceFlags(TraceFlags.DEFAULT)
    resource: Optional[Resource] = None
    instrumentation_scope: Optional[InstrumentationScope] = None
    attribute_value_length_limit: int = 0
    attribute_count_limit: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.attributes, tuple) or not all(
            isinstance(kv, KeyValue) for kv in self.attributes
        ):
            object.__setattr__(self, "attributes", to_key_values(self.attributes))

    def with_attributes(self, attributes: AttributesInput) -> "LogRecord":
        """Return a copy whose attributes are replaced, order preserved."""
        return replace(self, attributes=to_key_values(attributes))
