"""Service interfaces (ports) for the application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from portfolio_api.application.dtos.identity import VerifiedIdentity


class ITokenVerifier(Protocol):
    """Verifies an identity token with the identity provider."""

    async def verify(self, token: str) -> VerifiedIdentity:
        """Return the verified identity; raise AuthenticationException if invalid or expired."""


class IExchangeRateProvider(Protocol):
    """Source of live USD-based exchange rates."""

    async def fetch_rates(self) -> dict[str, float]:
        """Return {CODE: rate}; raise httpx.HTTPError or ValueError on failure."""


class IGeolocator(Protocol):
    """Maps a client IP address to a local currency code."""

    async def lookup_currency(self, ip: str) -> str | None:
        """Return the currency code or None; raise httpx.HTTPError or ValueError on failure."""
