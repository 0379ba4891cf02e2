"""Reject request bodies larger than max_bytes with 413.

A Content-Length above the limit is refused before anything is read. A body
sent without Content-Length (chunked) is buffered while counting and handed
to the app only if it stays within the limit. Paths in exempt_paths enforce
their own limit.
"""

from portfolio_api.middleware._asgi import get_header, send_json

_BODYLESS_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "DELETE"})


class _BodyTooLarge(Exception):
    pass


def _declared_length(scope) -> int | None:
    raw = get_header(scope, "content-length")
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


async def _read_within(receive, max_bytes: int) -> list[bytes] | None:
    """Read the whole body; None if the client disconnected.

    Raises:
        _BodyTooLarge: More than max_bytes arrived.
    """
    chunks: list[bytes] = []
    total = 0
    more = True
    while more:
        message = await receive()
        if message["type"] == "http.disconnect":
            return None
        chunk = message.get("body", b"")
        total += len(chunk)
        if total > max_bytes:
            raise _BodyTooLarge()
        chunks.append(chunk)
        more = message.get("more_body", False)
    return chunks


def _replay(chunks: list[bytes]):
    queue = list(chunks)

    async def receive():
        if queue:
            return {"type": "http.request", "body": queue.pop(0), "more_body": bool(queue)}
        return {"type": "http.request", "body": b"", "more_body": False}

    return receive


def RequestSizeLimitMiddleware(app, max_bytes: int, exempt_paths: tuple[str, ...] = ()):
    """Raw ASGI middleware factory (use with app.add_middleware)."""
    too_large = {"success": False, "error": "Request body too large"}
    exempt = frozenset(p.rstrip("/") for p in exempt_paths)

    async def middleware(scope, receive, send):
        if scope["type"] != "http" or scope["path"].rstrip("/") in exempt:
            return await app(scope, receive, send)
        declared = _declared_length(scope)
        if declared is not None:
            if declared > max_bytes:
                return await send_json(send, 413, too_large)
            return await app(scope, receive, send)
        if scope.get("method") in _BODYLESS_METHODS:
            return await app(scope, receive, send)
        try:
            chunks = await _read_within(receive, max_bytes)
        except _BodyTooLarge:
            return await send_json(send, 413, too_large)
        if chunks is None:
            return
        await app(scope, _replay(chunks), send)

    return middleware
