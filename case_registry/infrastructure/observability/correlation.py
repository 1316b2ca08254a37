"""Correlation IDs for registration requests and CLI runs.

One correlation ID ties together every log line produced while serving a
single HTTP request or a single register-case invocation. The ID lives in
a ContextVar for the duration of a correlation_scope(), so tasks spawned
inside the scope (the access check started by mount()) keep logging under
it after the request that opened the session has returned.

Usage:
    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as cid:
        ...
        response.headers[CORRELATION_HEADER] = cid
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import uuid4

CORRELATION_HEADER = "X-Correlation-ID"

# Inbound IDs are echoed into headers and logs, so only short tokens are kept
_ACCEPTABLE_ID = re.compile(r"[A-Za-z0-9._:-]{1,128}")

_current_id: ContextVar[str | None] = ContextVar(
    "case_registry_correlation_id", default=None
)


def new_correlation_id() -> str:
    return str(uuid4())


def accept_correlation_id(candidate: str | None) -> str:
    """Return the inbound ID when it is a plain token, otherwise a fresh one."""
    if candidate and _ACCEPTABLE_ID.fullmatch(candidate):
        return candidate
    return new_correlation_id()


def current_correlation_id() -> str | None:
    """The ID of the enclosing correlation_scope(), if any."""
    return _current_id.get()


@contextmanager
def correlation_scope(candidate: str | None = None) -> Iterator[str]:
    """Run a block under one correlation ID.

    The previous ID (usually none) is restored when the block exits, even
    on error. Tasks created inside the block copy the ID with the rest of
    their context.

    Args:
        candidate: ID supplied by the caller, e.g. an inbound header.
            Rejected and replaced when empty or not a plain token.

    Yields:
        The correlation ID in effect inside the block.
    """
    correlation_id = accept_correlation_id(candidate)
    token = _current_id.set(correlation_id)
    try:
        yield correlation_id
    finally:
        _current_id.reset(token)


def add_correlation_id(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """structlog processor stamping the scope's ID on each event.

    An explicitly bound correlation_id wins.
    """
    correlation_id = _current_id.get()
    if correlation_id is not None and "correlation_id" not in event_dict:
        event_dict["correlation_id"] = correlation_id
    return event_dict
