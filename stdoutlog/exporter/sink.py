"""Writer abstraction over text and binary streams."""

from __future__ import annotations

import io
from typing import Any

from stdoutlog.errors import SinkWriteError


def _is_binary(writer: Any) -> bool:
    if isinstance(writer, io.TextIOBase):
        return False
    if isinstance(writer, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(writer, "mode", "")
    return isinstance(mode, str) and "b" in mode


class Sink:
    """
    Wraps a caller-owned writer.

    Text writers receive decoded strings, binary writers receive bytes. Short
    writes are retried until the whole payload is written. Any exception from
    the writer surfaces as SinkWriteError. The sink never closes the writer.
    """

    def __init__(self, writer: Any) -> None:
        self.writer = writer
        self.binary = _is_binary(writer)
        self.raw = isinstance(writer, io.RawIOBase)

    def write(self, payload: bytes) -> None:
        try:
            if self.binary:
                self._write_all(payload)
            else:
                self.writer.write(payload.decode("utf-8"))
        except SinkWriteError:
            raise
        except Exception as exc:
            raise SinkWriteError("failed to write log record", {"cause": exc}) from exc

    def _write_all(self, payload: bytes) -> None:
        offset = 0
        while offset < len(payload):
            written = self.writer.write(payload[offset:])
            if written is None and not self.raw:
                # Duck-typed binary writers that return None write everything.
                return
            if not isinstance(written, int) or written <= 0:
                raise SinkWriteError(
                    "writer accepted no bytes",
                    {"written": offset, "expected": len(payload)},
                )
            offset += written

    def flush(self) -> None:
        flush = getattr(self.writer, "flush", None)
        if flush is None:
            return
        try:
            flush()
        except Exception as exc:
            raise SinkWriteError("failed to flush writer", {"cause": exc}) from exc
