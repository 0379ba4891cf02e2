"""HTTP API: routers, endpoint modules and dependencies."""

from portfolio_api.api.router import api_router

__all__ = ["api_router"]
