"""Exporter writing log records as newline-delimited JSON."""

from __future__ import annotations

import logging
import threading
from typing import Any, Iterable, Optional

from opentelemetry.context import Context

from stdoutlog.context import context_error
from stdoutlog.exporter.encoder import encode
from stdoutlog.exporter.options import ExporterConfig, Option, build_config
from stdoutlog.exporter.sink import Sink
from stdoutlog.exporter.wire import project
from stdoutlog.logs.record import LogRecord

logger = logging.getLogger(__name__)


class StdoutLogExporter:
    """
    Writes each log record as one JSON document on the configured writer.

    An exporter created without a config is unconfigured: every call is a
    silent no-op. Use :func:`new_exporter` to build an active one. After
    :meth:`shutdown`, export becomes a no-op as well.
    """

    def __init__(self, config: Optional[ExporterConfig] = None) -> None:
        self._config = config
        self._sink = Sink(config.writer) if config is not None else None
        self._lock = threading.Lock()
        self._closed = threading.Event()

    @property
    def config(self) -> Optional[ExporterConfig]:
        return self._config

    @property
    def configured(self) -> bool:
        return self._config is not None

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def export(self, records: Optional[Iterable[LogRecord]], ctx: Optional[Context] = None) -> None:
        """
        Write a batch of records, in order, as one contiguous block.

        Args:
            records: Records to write; None or empty writes nothing
            ctx: Context checked for cancellation before the batch starts
                (defaults to the current context)

        Raises:
            ExportCancelledError: If ``ctx`` was cancelled
            DeadlineExceededError: If ``ctx`` has expired
            EncodingError: If a record cannot be encoded; the rest of the batch is skipped
            SinkWriteError: If the writer fails; the rest of the batch is skipped
        """
        config = self._config
        if config is None or self._closed.is_set():
            return

        err = context_error(ctx)
        if err is not None:
            raise err

        batch = list(records) if records else []
        if not batch:
            return

        suppress = not config.timestamps
        with self._lock:
            for record in batch:
                payload = encode(project(record, suppress), config.pretty_print)
                self._sink.write(payload)
            self._sink.flush()

    def force_flush(self, ctx: Optional[Context] = None) -> None:
        """Writes are synchronous, so there is never anything to flush."""
        return None

    def shutdown(self, ctx: Optional[Context] = None) -> None:
        """Stop accepting exports. The writer is left open for its owner."""
        if self._closed.is_set():
            return
        self._closed.set()
        logger.debug("stdout log exporter shut down")

    def __repr__(self) -> str:
        if self._config is None:
            return "StdoutLogExporter(unconfigured)"
        state = "closed" if self.closed else "open"
        return (
            f"StdoutLogExporter(writer={type(self._config.writer).__name__}, "
            f"pretty_print={self._config.pretty_print}, "
            f"timestamps={self._config.timestamps}, {state})"
        )


def new_exporter(*options: Option, default_writer: Any = None) -> StdoutLogExporter:
    """
    Create an active exporter from the given options.

    Args:
        *options: Option callables applied in order
        default_writer: Sink used when no option sets one (defaults to ``sys.stdout``)

    Raises:
        ConfigError: If an option is malformed
    """
    config = build_config(options, default_writer=default_writer)
    logger.debug(
        "created stdout log exporter (pretty_print=%s, timestamps=%s)",
        config.pretty_print,
        config.timestamps,
    )
    return StdoutLogExporter(config)
