"""Core: config, constants, exception handlers, lifespan and rate limits."""

from portfolio_api.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
