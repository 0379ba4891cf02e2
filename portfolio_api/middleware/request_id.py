"""Correlation id per request.

A client-supplied id is kept when it is a short token of letters, digits,
"-" and "_" (safe to log); anything else is replaced with a UUID4. The id is
exposed as request.state.request_id and returned in the same header.
"""

import re
import uuid

from portfolio_api.middleware._asgi import get_header, with_response_headers

_SAFE_ID = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def sanitize_request_id(raw: str | None) -> str:
    candidate = (raw or "").strip()
    return candidate if _SAFE_ID.match(candidate) else str(uuid.uuid4())


def RequestIDMiddleware(app, header_name: str = "X-Request-ID"):
    """Raw ASGI middleware factory (use with app.add_middleware)."""
    header_bytes = header_name.lower().encode("latin-1")

    async def middleware(scope, receive, send):
        if scope["type"] != "http":
            return await app(scope, receive, send)
        request_id = sanitize_request_id(get_header(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id
        await app(
            scope, receive, with_response_headers(send, [(header_bytes, request_id.encode())])
        )

    return middleware
