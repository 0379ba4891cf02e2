"""Application services: admin predicate and currency display."""

from portfolio_api.application.services.admin_policy import AdminPolicy
from portfolio_api.application.services.currency_service import CurrencyService

__all__ = ["AdminPolicy", "CurrencyService"]
