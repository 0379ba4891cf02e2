"""Firestore repositories for single-document records (contact details, site version)."""

from __future__ import annotations

import logging
from typing import Any

from portfolio_api.domain.exceptions import PersistenceException
from portfolio_api.infrastructure.exceptions import FirestoreError
from portfolio_api.infrastructure.firebase._rest_client import FirestoreRESTClient
from portfolio_api.infrastructure.firebase.collections import (
    COLLECTION_CONTACT_DETAILS,
    COLLECTION_VERSION,
    DOCUMENT_CONTACT_DETAILS,
    DOCUMENT_VERSION,
)
from portfolio_api.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class FirestoreSingletonRepository:
    """One fixed document; created with defaults on first read."""

    collection_name: str = ""
    document_id: str = ""
    label: str = "document"

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._doc = client.collection(self.collection_name).document(self.document_id)

    def _failure(self, verb: str, exc: FirestoreError) -> PersistenceException:
        logger.exception(
            "Firestore %s failed on %s/%s", verb, self.collection_name, self.document_id
        )
        return PersistenceException(f"Failed to {verb} {self.label}", reason=str(exc))

    async def get_or_init(self, defaults: dict[str, Any]) -> dict[str, Any]:
        """Return the stored document; write and return ``defaults`` if missing."""
        try:
            snapshot = await self._doc.get()
            if snapshot:
                return snapshot.to_dict()
            await self._doc.set(defaults)
        except FirestoreError as e:
            raise self._failure("fetch", e) from e
        logger.info("Initialized %s/%s with defaults", self.collection_name, self.document_id)
        return dict(defaults)

    async def merge(self, updates: dict[str, Any]) -> dict[str, Any]:
        """Merge ``updates`` into the document, nested maps field by field; return the full document."""
        changes = {**updates, "updatedAt": utc_now()}
        try:
            await self._doc.set(changes, merge=True)
            snapshot = await self._doc.get()
        except FirestoreError as e:
            raise self._failure("update", e) from e
        return snapshot.to_dict() if snapshot else changes

    async def replace(self, data: dict[str, Any]) -> dict[str, Any]:
        """Overwrite the whole document."""
        try:
            await self._doc.set(data)
        except FirestoreError as e:
            raise self._failure("update", e) from e
        return dict(data)


class FirestoreContactDetailsRepository(FirestoreSingletonRepository):
    collection_name = COLLECTION_CONTACT_DETAILS
    document_id = DOCUMENT_CONTACT_DETAILS
    label = "contact details"


class FirestoreVersionRepository(FirestoreSingletonRepository):
    """Site version record (implements IVersionStore)."""

    collection_name = COLLECTION_VERSION
    document_id = DOCUMENT_VERSION
    label = "version"

    async def get_version(self, default_version: str) -> dict[str, Any]:
        """Return {version, lastUpdated}, initializing the record if missing."""
        return await self.get_or_init(
            {"version": default_version, "lastUpdated": utc_now()}
        )

    async def set_version(self, version: str) -> dict[str, Any]:
        """Overwrite the record with a new version and the current time."""
        return await self.replace({"version": version, "lastUpdated": utc_now()})
