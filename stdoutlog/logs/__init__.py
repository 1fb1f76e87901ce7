"""Log record model and OpenTelemetry conversion."""

from stdoutlog.logs.otel_adapter import from_otel
from stdoutlog.logs.record import InstrumentationScope, KeyValue, LogRecord, to_key_values

__all__ = [
    "LogRecord",
    "KeyValue",
    "InstrumentationScope",
    "to_key_values",
    "from_otel",
]
