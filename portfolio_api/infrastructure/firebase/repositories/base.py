"""Firestore-backed document repository shared by every portfolio collection.

Each subclass names its collection, its display labels (used in 404 and 500
messages) and the field the list endpoint orders by. Documents are returned
as plain dicts: {"id": <document id>, **fields}.
"""

from __future__ import annotations

import logging
from typing import Any

from portfolio_api.domain.exceptions import PersistenceException
from portfolio_api.infrastructure.exceptions import FirestoreError
from portfolio_api.infrastructure.firebase._rest_client import (
    DocumentSnapshot,
    FirestoreRESTClient,
)
from portfolio_api.shared.utils.datetime import utc_now
from portfolio_api.shared.utils.generators import generate_cuid

logger = logging.getLogger(__name__)


def snapshot_to_entity(snapshot: DocumentSnapshot) -> dict[str, Any]:
    """Flatten a snapshot into {"id": ..., **data}; the document key wins over a stored id field."""
    return {**snapshot.to_dict(), "id": snapshot.id}


class FirestoreDocumentRepository:
    """CRUD over one Firestore collection (implements IDocumentRepository).

    Subclasses set:
        collection_name: Firestore collection.
        resource_name: Display name for "<resource_name> not found".
        singular / plural: lower-case nouns for "Failed to <verb> <noun>".
        order_field / descending: list ordering (server-side runQuery).
    """

    collection_name: str = ""
    resource_name: str = "Document"
    singular: str = "document"
    plural: str = "documents"
    order_field: str | None = None
    descending: bool = False

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(self.collection_name)

    def _failure(self, verb: str, noun: str, exc: FirestoreError) -> PersistenceException:
        logger.exception("Firestore %s failed on %s", verb, self.collection_name)
        return PersistenceException(f"Failed to {verb} {noun}", reason=str(exc))

    async def list_all(self) -> list[dict[str, Any]]:
        """Return every document in list order."""
        if self.order_field:
            direction = "DESCENDING" if self.descending else "ASCENDING"
            stream = self._coll.order_by(self.order_field, direction).stream()
        else:
            stream = self._coll.stream()
        try:
            return [snapshot_to_entity(s) async for s in stream]
        except FirestoreError as e:
            raise self._failure("fetch", self.plural, e) from e

    async def get_by_id(self, doc_id: str) -> dict[str, Any] | None:
        """Return one document or None if it does not exist."""
        try:
            snapshot = await self._coll.document(doc_id).get()
        except FirestoreError as e:
            raise self._failure("fetch", self.singular, e) from e
        return snapshot_to_entity(snapshot) if snapshot else None

    async def create(
        self, data: dict[str, Any], created_at=None
    ) -> dict[str, Any]:
        """Create a document with a new CUID and server timestamps; return it.

        Args:
            data: Field values (already validated and defaulted).
            created_at: Timestamp override (seeding keeps a stable order).
        """
        doc_id = generate_cuid()
        now = created_at or utc_now()
        payload = {**data, "createdAt": now, "updatedAt": now}
        try:
            await self._coll.create(doc_id, payload)
        except FirestoreError as e:
            raise self._failure("create", self.singular, e) from e
        return {**payload, "id": doc_id}

    async def update(
        self, doc_id: str, updates: dict[str, Any]
    ) -> dict[str, Any] | None:
        """Merge the given fields into an existing document.

        Returns:
            The updated document, or None if it does not exist.
        """
        doc_ref = self._coll.document(doc_id)
        try:
            snapshot = await doc_ref.get()
            if not snapshot:
                return None
            changes = {**updates, "updatedAt": utc_now()}
            if not await doc_ref.update(changes):
                return None
        except FirestoreError as e:
            raise self._failure("update", self.singular, e) from e
        return {**snapshot.to_dict(), **changes, "id": doc_id}

    async def delete(self, doc_id: str) -> bool:
        """Delete a document. Returns False if it does not exist."""
        doc_ref = self._coll.document(doc_id)
        try:
            if not await doc_ref.get():
                return False
            await doc_ref.delete()
        except FirestoreError as e:
            raise self._failure("delete", self.singular, e) from e
        return True
