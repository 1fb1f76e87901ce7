"""stdoutlog error hierarchy and exceptions."""

from __future__ import annotations


class StdoutLogError(Exception):
    """Base exception for all stdoutlog errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class ConfigError(StdoutLogError):
    """Raised when exporter options produce an unusable configuration."""
    pass


class ExportError(StdoutLogError):
    """Raised when a batch of log records cannot be exported."""
    pass


class ExportCancelledError(ExportError):
    """Raised when the export context was cancelled before the batch started."""
    pass


class DeadlineExceededError(ExportError):
    """Raised when the export context deadline passed before the batch started."""
    pass


class EncodingError(ExportError):
    """Raised when a record cannot be rendered as JSON."""
    pass


class SinkWriteError(ExportError):
    """Raised when the output sink rejects a write."""
    pass
