"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
Documents are plain dicts: {"id": ..., **fields}.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol


class IDocumentRepository(Protocol):
    """Protocol for a CRUD collection (projects, pricing, resume sections...)."""

    resource_name: str

    async def list_all(self) -> list[dict[str, Any]]:
        """Return all documents in the collection's list order."""

    async def get_by_id(self, doc_id: str) -> dict[str, Any] | None:
        """Return one document or None."""

    async def create(
        self, data: dict[str, Any], created_at: datetime | None = None
    ) -> dict[str, Any]:
        """Create with a generated ID and timestamps; return the stored document."""

    async def update(
        self, doc_id: str, updates: dict[str, Any]
    ) -> dict[str, Any] | None:
        """Merge fields into an existing document; None if it does not exist."""

    async def delete(self, doc_id: str) -> bool:
        """Delete; False if it does not exist."""


class IServiceRepository(IDocumentRepository, Protocol):
    """Services collection; seeds defaults when empty."""

    async def list_or_seed(
        self, defaults: list[dict[str, Any]]
    ) -> list[dict[str, Any]]:
        """Return all services, persisting ``defaults`` first if there are none."""


class ISingletonRepository(Protocol):
    """Protocol for a single fixed document (contact details)."""

    async def get_or_init(self, defaults: dict[str, Any]) -> dict[str, Any]:
        """Return the document, writing ``defaults`` if it is missing."""

    async def merge(self, updates: dict[str, Any]) -> dict[str, Any]:
        """Merge fields (nested maps field by field) and return the full document."""


class IVersionStore(Protocol):
    """Protocol for the site version record (Firestore or local file)."""

    async def get_version(self, default_version: str) -> dict[str, Any]:
        """Return {"version", "lastUpdated"}, initializing with the default."""

    async def set_version(self, version: str) -> dict[str, Any]:
        """Overwrite the version; return the new record."""
