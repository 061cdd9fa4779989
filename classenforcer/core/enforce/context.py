"""
Active enforcement request.

enforce() publishes its request here for the duration of the call so code it
calls back into (a singleton accessor, a property getter) can see which
check is running. Nested calls restore the outer request on exit.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from .contracts import EnforcementRequest


CURRENT_REQUEST: ContextVar[Optional[EnforcementRequest]] = ContextVar(
    "CURRENT_REQUEST",
    default=None,
)


def current_request() -> Optional[EnforcementRequest]:
    """Innermost enforcement request active in this context, or None."""
    return CURRENT_REQUEST.get()


@contextmanager
def activate(request: EnforcementRequest) -> Iterator[EnforcementRequest]:
    token = CURRENT_REQUEST.set(request)
    try:
        yield request
    finally:
        CURRENT_REQUEST.reset(token)


__all__ = ["CURRENT_REQUEST", "current_request", "activate"]
