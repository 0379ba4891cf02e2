"""Browser hardening headers on every response (the helmet defaults).

Uploads under /uploads are embedded by the portfolio frontend from another
origin, so Cross-Origin-Resource-Policy is cross-origin. The CSP admits the
jsdelivr assets of the Swagger UI at /docs. A header a route set itself wins.
"""

from portfolio_api.middleware._asgi import with_response_headers

CONTENT_SECURITY_POLICY = "; ".join(
    [
        "default-src 'self'",
        "base-uri 'self'",
        "object-src 'none'",
        "frame-ancestors 'self'",
        "img-src 'self' data: https:",
        "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net",
        "script-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net",
    ]
)

DEFAULT_HEADERS: dict[str, str] = {
    "Content-Security-Policy": CONTENT_SECURITY_POLICY,
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "cross-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}


def SecurityHeadersMiddleware(app, headers: dict[str, str] | None = None):
    """Raw ASGI middleware factory (use with app.add_middleware)."""
    pairs = [
        (name.lower().encode(), value.encode())
        for name, value in (headers or DEFAULT_HEADERS).items()
    ]

    async def middleware(scope, receive, send):
        if scope["type"] != "http":
            return await app(scope, receive, send)
        await app(scope, receive, with_response_headers(send, pairs, replace=False))

    return middleware
