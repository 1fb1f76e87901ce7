"""Cancellation and deadlines carried on OpenTelemetry's context."""

from __future__ import annotations

import threading
import time
from typing import Callable, Optional, Tuple

from opentelemetry import context as context_api
from opentelemetry.context import Context

from stdoutlog.errors import DeadlineExceededError, ExportCancelledError, ExportError

_CANCEL_EVENTS_KEY = context_api.create_key("stdoutlog-cancel-events")
_DEADLINE_KEY = context_api.create_key("stdoutlog-deadline")

CancelFunc = Callable[[], None]


def _resolve(ctx: Optional[Context]) -> Context:
    return ctx if ctx is not None else context_api.get_current()


def with_cancel(parent: Optional[Context] = None) -> Tuple[Context, CancelFunc]:
    """
    Derive a cancellable context from ``parent`` (default: the current context).

    Cancelling a parent also cancels every context derived from it.

    Returns:
        The derived context and the function that cancels it
    """
    parent = _resolve(parent)
    event = threading.Event()
    events = context_api.get_value(_CANCEL_EVENTS_KEY, parent) or ()
    ctx = context_api.set_value(_CANCEL_EVENTS_KEY, events + (event,), parent)
    return ctx, event.set


def with_deadline(deadline: float, parent: Optional[Context] = None) -> Tuple[Context, CancelFunc]:
    """
    Derive a context that expires at ``deadline`` on the ``time.monotonic`` clock.

    An earlier deadline already on ``parent`` wins.
    """
    ctx, cancel = with_cancel(parent)
    current = context_api.get_value(_DEADLINE_KEY, ctx)
    if current is None or deadline < current:
        ctx = context_api.set_value(_DEADLINE_KEY, deadline, ctx)
    return ctx, cancel


def with_timeout(seconds: float, parent: Optional[Context] = None) -> Tuple[Context, CancelFunc]:
    """Derive a context that expires ``seconds`` from now."""
    return with_deadline(time.monotonic() + seconds, parent)


def get_deadline(ctx: Optional[Context] = None) -> Optional[float]:
    return context_api.get_value(_DEADLINE_KEY, _resolve(ctx))


def context_error(ctx: Optional[Context] = None) -> Optional[ExportError]:
    """
    Return why ``ctx`` is done, or None while it is still live.

    Cancellation takes precedence over an expired deadline.
    """
    ctx = _resolve(ctx)
    events = context_api.get_value(_CANCEL_EVENTS_KEY, ctx) or ()
    if any(event.is_set() for event in events):
        return ExportCancelledError("context canceled")
    deadline = context_api.get_value(_DEADLINE_KEY, ctx)
    if deadline is not None and time.monotonic() >= deadline:
        return DeadlineExceededError("context deadline exceeded", {"deadline": deadline})
    return None


def is_done(ctx: Optional[Context] = None) -> bool:
    return context_error(ctx) is not None
