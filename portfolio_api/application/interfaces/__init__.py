"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
"""

from portfolio_api.application.interfaces.repositories import (
    IDocumentRepository,
    IServiceRepository,
    ISingletonRepository,
    IVersionStore,
)
from portfolio_api.application.interfaces.services import (
    IExchangeRateProvider,
    IGeolocator,
    ITokenVerifier,
)

__all__ = [
    "IDocumentRepository",
    "IExchangeRateProvider",
    "IGeolocator",
    "IServiceRepository",
    "ISingletonRepository",
    "ITokenVerifier",
    "IVersionStore",
]
