"""Storage service protocol (DIP). Implementations: FirebaseStorageService, LocalStorageService."""

from typing import Protocol

from portfolio_api.application.dtos.upload import StoredObject


class StorageProtocol(Protocol):
    """Protocol for public object storage backends (Firebase Storage, local filesystem)."""

    async def upload(
        self, data: bytes, object_name: str, content_type: str
    ) -> StoredObject:
        """Store bytes under object_name, readable by anyone; return name and public URL."""
        ...

    async def delete(self, object_name: str) -> bool:
        """Delete object. Returns True if deleted, False if not found."""
        ...

    def public_url(self, object_name: str) -> str:
        """Return the world-readable URL of an object."""
        ...
