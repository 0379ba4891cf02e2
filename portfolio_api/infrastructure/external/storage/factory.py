"""Pick the upload backend named by STORAGE_BACKEND."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from portfolio_api.infrastructure.external.storage.protocol import StorageProtocol

if TYPE_CHECKING:
    from portfolio_api.core.config import Settings


class StorageFactory:
    """Builds the configured StorageProtocol implementation."""

    @staticmethod
    def create_storage_service(
        settings: Settings, http_client: httpx.AsyncClient | None = None
    ) -> StorageProtocol:
        """Return FirebaseStorageService ("firebase") or LocalStorageService ("local").

        http_client is shared with the Firebase backend; the local backend
        ignores it.

        Raises:
            ValueError: The backend is unknown or lacks its bucket, root
                directory or service account.
        """
        backend = settings.storage_backend.lower()
        if backend == "local":
            from portfolio_api.infrastructure.external.storage.local_storage import (
                LocalStorageService,
            )

            if not settings.storage_root:
                raise ValueError("STORAGE_ROOT is not set")
            return LocalStorageService(settings.storage_root, settings.storage_base_url)

        if backend != "firebase":
            raise ValueError(f"Unknown storage backend {backend!r}; use 'firebase' or 'local'")

        from portfolio_api.infrastructure.external.storage.firebase_storage import (
            FirebaseStorageService,
        )
        from portfolio_api.infrastructure.firebase.client import load_service_account_info

        if not settings.firebase_storage_bucket:
            raise ValueError("FIREBASE_STORAGE_BUCKET is not set")
        info = load_service_account_info(settings)
        if not info:
            raise ValueError("Firebase Storage needs a service account (see FIREBASE_* settings)")
        return FirebaseStorageService(
            settings.firebase_storage_bucket, info, http_client=http_client
        )
