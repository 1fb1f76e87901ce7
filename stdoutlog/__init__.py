"""stdoutlog: newline-delimited JSON exporter for OpenTelemetry log records."""

from stdoutlog.context import context_error, with_cancel, with_deadline, with_timeout
from stdoutlog.errors import (
    ConfigError,
    DeadlineExceededError,
    EncodingError,
    ExportCancelledError,
    ExportError,
    SinkWriteError,
    StdoutLogError,
)
from stdoutlog.exporter import (
    OTelLogExporter,
    StdoutLogExporter,
    new_exporter,
    with_pretty_print,
    with_writer,
    without_timestamps,
)
from stdoutlog.logs import InstrumentationScope, KeyValue, LogRecord, from_otel

__version__ = "0.1.0"

__all__ = [
    "StdoutLogExporter",
    "OTelLogExporter",
    "new_exporter",
    "with_writer",
    "with_pretty_print",
    "without_timestamps",
    "LogRecord",
    "KeyValue",
    "InstrumentationScope",
    "from_otel",
    "with_cancel",
    "with_deadline",
    "with_timeout",
    "context_error",
    "StdoutLogError",
    "ConfigError",
    "ExportError",
    "ExportCancelledError",
    "DeadlineExceededError",
    "EncodingError",
    "SinkWriteError",
    "__version__",
]
