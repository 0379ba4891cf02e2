"""Application DTOs."""

from portfolio_api.application.dtos.identity import VerifiedIdentity
from portfolio_api.application.dtos.upload import StoredObject

__all__ = ["StoredObject", "VerifiedIdentity"]
