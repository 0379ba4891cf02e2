"""Small raw-ASGI helpers shared by the middleware in this package."""

import json
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

Send = Callable[[dict], Awaitable[None]]
Receive = Callable[[], Awaitable[dict]]


def get_header(scope: dict, name: str) -> str | None:
    """First value of a request header (case-insensitive), decoded leniently."""
    wanted = name.lower().encode("latin-1")
    for key, value in scope.get("headers", ()):
        if key.lower() == wanted:
            return value.decode("utf-8", errors="replace")
    return None


def with_response_headers(
    send: Send, extra: Iterable[tuple[bytes, bytes]], *, replace: bool = True
) -> Send:
    """Wrap ``send`` so the response start message carries ``extra`` headers.

    With replace=False a header the app already set is kept as is.
    """
    extra = list(extra)

    async def wrapped(message: dict) -> None:
        if message["type"] == "http.response.start":
            headers = list(message.get("headers", ()))
            present = {k.lower() for k, _ in headers}
            for key, value in extra:
                if replace or key.lower() not in present:
                    headers.append((key, value))
            message["headers"] = headers
        await send(message)

    return wrapped


async def send_json(send: Send, status: int, payload: Any) -> None:
    """Send a complete JSON response without involving the app."""
    body = json.dumps(payload).encode()
    await send(
        {
            "type": "http.response.start",
            "status": status,
            "headers": [
                (b"content-type", b"application/json"),
                (b"content-length", str(len(body)).encode()),
            ],
        }
    )
    await send({"type": "http.response.body", "body": body})
