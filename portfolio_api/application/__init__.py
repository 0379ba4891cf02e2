"""Application layer: DTOs, ports (interfaces) and services.

No imports from portfolio_api.infrastructure or portfolio_api.api.
"""
