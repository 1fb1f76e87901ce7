"""Context utilities for export cancellation."""

from stdoutlog.context.context import (
    context_error,
    get_deadline,
    is_done,
    with_cancel,
    with_deadline,
    with_timeout,
)

__all__ = [
    "with_cancel",
    "with_deadline",
    "with_timeout",
    "get_deadline",
    "context_error",
    "is_done",
]
