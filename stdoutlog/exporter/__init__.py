"""Exporters writing log records as newline-delimited JSON."""

from stdoutlog.exporter.encoder import encode
from stdoutlog.exporter.options import (
    ExporterConfig,
    Option,
    build_config,
    with_pretty_print,
    with_writer,
    without_timestamps,
)
from stdoutlog.exporter.otel_exporter import OTelLogExporter
from stdoutlog.exporter.stdout_exporter import StdoutLogExporter, new_exporter
from stdoutlog.exporter.wire import WireRecord, WireScope, project

__all__ = [
    "StdoutLogExporter",
    "OTelLogExporter",
    "new_exporter",
    "ExporterConfig",
    "Option",
    "build_config",
    "with_writer",
    "with_pretty_print",
    "without_timestamps",
    "WireRecord",
    "WireScope",
    "project",
    "encode",
]
