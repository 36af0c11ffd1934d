"""Request ID middleware.

Forwards a client X-Request-ID (when it is safe to log) or generates one,
binds it to the request context for log records, exposes it as
request.state.request_id and echoes it on the response. Raw ASGI.
"""

import re
import uuid
from typing import Callable

from portal.shared.context import reset_request_id, set_request_id

REQUEST_ID_MAX_LENGTH = 64
_SAFE_REQUEST_ID = re.compile(r"[A-Za-z0-9_-]+")


def _header_value(scope: dict, name: str) -> str | None:
    """First value of header name; ASGI header names are lowercase bytes."""
    wanted = name.lower().encode("latin-1")
    for key, value in scope.get("headers", []):
        if key == wanted:
            return value.decode("latin-1")
    return None


def sanitize_request_id(raw: str | None) -> str:
    """Return raw stripped if it is a short token of [A-Za-z0-9_-]; else a new UUID4."""
    candidate = (raw or "").strip()
    if len(candidate) <= REQUEST_ID_MAX_LENGTH and _SAFE_REQUEST_ID.fullmatch(candidate):
        return candidate
    return str(uuid.uuid4())


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Wrap app so every HTTP request carries a request id end to end."""
    response_header = header_name.encode("latin-1")

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        request_id = sanitize_request_id(_header_value(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_with_request_id(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (response_header, request_id.encode("latin-1")),
                ]
            await send(message)

        token = set_request_id(request_id)
        try:
            await app(scope, receive, send_with_request_id)
        finally:
            reset_request_id(token)

    return asgi_app
