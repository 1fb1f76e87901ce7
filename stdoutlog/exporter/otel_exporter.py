"""OpenTelemetry SDK log exporter backed by StdoutLogExporter."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from opentelemetry.sdk._logs.export import LogExportResult

try:
    from opentelemetry.sdk._logs.export import LogRecordExporter
except ImportError:  # opentelemetry-sdk releases before LogExporter was renamed
    from opentelemetry.sdk._logs.export import LogExporter as LogRecordExporter

from stdoutlog.errors import ExportError
from stdoutlog.exporter.options import Option
from stdoutlog.exporter.stdout_exporter import StdoutLogExporter, new_exporter
from stdoutlog.logs.otel_adapter import from_otel

logger = logging.getLogger(__name__)


class OTelLogExporter(LogRecordExporter):
    """
    OpenTelemetry ``LogRecordExporter`` wrapper around :class:`StdoutLogExporter`.

    This lets ``SimpleLogRecordProcessor`` and ``BatchLogRecordProcessor``
    drive the JSON exporter. Errors become ``LogExportResult.FAILURE``.
    """

    def __init__(self, exporter: Optional[StdoutLogExporter] = None, *options: Option) -> None:
        """
        Initialize the wrapper.

        Args:
            exporter: Exporter to delegate to; built from ``options`` when omitted
            *options: Options for the exporter built when ``exporter`` is None
        """
        self._exporter = exporter if exporter is not None else new_exporter(*options)

    @property
    def exporter(self) -> StdoutLogExporter:
        return self._exporter

    def export(self, batch: Sequence[Any]) -> LogExportResult:
        """
        Export a batch of SDK log data.

        Args:
            batch: ``LogData`` items or readable log records

        Returns:
            SUCCESS if every record was written, FAILURE otherwise
        """
        records = [from_otel(item) for item in batch]
        try:
            self._exporter.export(records)
        except ExportError as e:
            logger.warning("failed to export %d log records: %s", len(records), e)
            return LogExportResult.FAILURE
        return LogExportResult.SUCCESS

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        self._exporter.force_flush()
        return True

    def shutdown(self) -> None:
        """Shutdown the wrapped exporter."""
        self._exporter.shutdown()
