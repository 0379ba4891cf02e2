"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation.
"""

from portfolio_api.domain.enums import PricingPeriod, ProjectCategory
from portfolio_api.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    PersistenceException,
    PortfolioException,
    ResourceNotFoundException,
    ServiceUnavailableException,
    ValidationException,
)

__all__ = [
    "PricingPeriod",
    "ProjectCategory",
    "AuthenticationException",
    "AuthorizationException",
    "PersistenceException",
    "PortfolioException",
    "ResourceNotFoundException",
    "ServiceUnavailableException",
    "ValidationException",
]
