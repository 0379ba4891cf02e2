"""Raw ASGI middleware. main.py adds them so the size limit is outermost."""

from portfolio_api.middleware.request_id import RequestIDMiddleware
from portfolio_api.middleware.request_size_limit import RequestSizeLimitMiddleware
from portfolio_api.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "RequestIDMiddleware",
    "RequestSizeLimitMiddleware",
    "SecurityHeadersMiddleware",
]
