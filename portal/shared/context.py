"""Request context management using contextvars.

Holds the id of the request being served so log records emitted anywhere
below the middleware (use cases, store, exception handlers) can carry it
without threading it through every call.

Usage:
    token = set_request_id("abc-123")
    ...
    get_request_id()  # "abc-123"
    reset_request_id(token)
"""

from contextvars import ContextVar, Token

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(request_id: str) -> Token:
    """Bind request_id to the current task; returns a token for reset_request_id."""
    return _request_id.set(request_id)


def get_request_id() -> str | None:
    """Return the id of the request being served, or None outside a request."""
    return _request_id.get()


def reset_request_id(token: Token) -> None:
    _request_id.reset(token)
