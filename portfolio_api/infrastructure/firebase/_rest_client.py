"""Async Firestore client over the REST v1 API (httpx + google-auth, no firebase-admin).

Only the calls the portfolio repositories make are implemented: get, set
(optionally merged), update of an existing document, delete, create with a
chosen id, full collection listing and single-field ordered queries.
A missing document is reported as None / False; every other failure is a
FirestoreError.
"""

from __future__ import annotations

import re
from collections.abc import AsyncIterator
from typing import Any

import httpx
from google.auth.exceptions import GoogleAuthError

from portfolio_api.infrastructure.exceptions import DocumentExistsError, FirestoreError
from portfolio_api.infrastructure.firebase._rest_encoding import (
    decode_document,
    encode_document,
)
from portfolio_api.infrastructure.firebase.credentials import get_access_token

FIRESTORE_API = "https://firestore.googleapis.com/v1"
_PAGE_SIZE = 300
_PLAIN_FIELD = re.compile(r"^[A-Za-z_][A-Za-z_0-9]*$")


def field_path(name: str) -> str:
    """Backtick-quote one field name segment unless it is a plain identifier."""
    if _PLAIN_FIELD.match(name):
        return name
    return "`" + name.replace("\\", "\\\\").replace("`", "\\`") + "`"


def _mask(data: dict[str, Any]) -> list[tuple[str, str]]:
    return [("updateMask.fieldPaths", field_path(k)) for k in data]


def _merge_paths(data: dict[str, Any], prefix: str = "") -> list[str]:
    """Leaf field paths of ``data``; non-empty maps are descended into."""
    paths: list[str] = []
    for key, value in data.items():
        path = prefix + field_path(key)
        if isinstance(value, dict) and value:
            paths.extend(_merge_paths(value, path + "."))
        else:
            paths.append(path)
    return paths


def _merge_mask(data: dict[str, Any]) -> list[tuple[str, str]]:
    return [("updateMask.fieldPaths", path) for path in _merge_paths(data)]


class DocumentSnapshot:
    """Document id plus decoded fields."""

    __slots__ = ("id", "_data")

    def __init__(self, doc_id: str, data: dict[str, Any]) -> None:
        self.id = doc_id
        self._data = data

    @classmethod
    def from_rest(cls, document: dict[str, Any]) -> DocumentSnapshot:
        """Build from a REST Document; the id is the last segment of its name."""
        return cls(document.get("name", "").rsplit("/", 1)[-1], decode_document(document))

    def to_dict(self) -> dict[str, Any]:
        return self._data


class DocumentReference:
    def __init__(self, client: FirestoreRESTClient, path: str) -> None:
        self._client = client
        self.path = path

    @property
    def id(self) -> str:
        return self.path.rsplit("/", 1)[-1]

    async def get(self) -> DocumentSnapshot | None:
        found = await self._client.call("GET", self.path)
        return DocumentSnapshot(self.id, decode_document(found)) if found else None

    async def set(self, data: dict[str, Any], merge: bool = False) -> None:
        """Write the document. merge=True writes only the given fields, nested maps included."""
        await self._client.call(
            "PATCH",
            self.path,
            body=encode_document(data),
            params=_merge_mask(data) if merge else None,
        )

    async def update(self, data: dict[str, Any]) -> bool:
        """Write the given fields of an existing document; False if it does not exist."""
        params = _mask(data) + [("currentDocument.exists", "true")]
        result = await self._client.call(
            "PATCH", self.path, body=encode_document(data), params=params
        )
        return result is not None

    async def delete(self) -> None:
        """Delete; a document that is already gone is not an error."""
        await self._client.call("DELETE", self.path)


class OrderedQuery:
    """runQuery over one collection ordered by one field.

    Firestore leaves out documents that do not have the field.
    """

    def __init__(
        self,
        client: FirestoreRESTClient,
        collection: CollectionReference,
        field: str,
        direction: str,
    ) -> None:
        self._client = client
        self._collection = collection
        self._field = field
        self._direction = direction

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        body = {
            "structuredQuery": {
                "from": [{"collectionId": self._collection.id}],
                "orderBy": [
                    {"field": {"fieldPath": field_path(self._field)}, "direction": self._direction}
                ],
            }
        }
        rows = await self._client.call(
            "POST", f"{self._collection.parent}:runQuery", body=body
        )
        # runQuery answers with a list; rows without "document" only carry readTime.
        for row in rows or []:
            if "document" in row:
                yield DocumentSnapshot.from_rest(row["document"])


class CollectionReference:
    def __init__(self, client: FirestoreRESTClient, path: str) -> None:
        self._client = client
        self.path = path.rstrip("/")

    @property
    def id(self) -> str:
        return self.path.rsplit("/", 1)[-1]

    @property
    def parent(self) -> str:
        return self.path.rsplit("/", 1)[0]

    def document(self, doc_id: str) -> DocumentReference:
        return DocumentReference(self._client, f"{self.path}/{doc_id}")

    async def create(self, doc_id: str, data: dict[str, Any]) -> None:
        """Create with a chosen id; DocumentExistsError if the id is taken."""
        await self._client.call(
            "POST", self.path, body=encode_document(data), params=[("documentId", doc_id)]
        )

    def order_by(self, field: str, direction: str = "ASCENDING") -> OrderedQuery:
        """direction is "ASCENDING" or "DESCENDING"."""
        return OrderedQuery(self._client, self, field, direction)

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """Every document in the collection, page by page."""
        token: str | None = None
        while True:
            params = [("pageSize", str(_PAGE_SIZE))]
            if token:
                params.append(("pageToken", token))
            page = await self._client.call("GET", self.path, params=params)
            if not page:
                return
            for document in page.get("documents", []):
                yield DocumentSnapshot.from_rest(document)
            token = page.get("nextPageToken")
            if not token:
                return


class FirestoreRESTClient:
    """Entry point: ``client.collection(name).document(id)`` as in the Admin SDK."""

    def __init__(
        self,
        project_id: str,
        credentials,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.project_id = project_id
        self._credentials = credentials
        self._root = f"projects/{project_id}/databases/(default)/documents"
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=30.0)
        self._owns_http = http_client is None

    async def aclose(self) -> None:
        """Close the connection pool if this client created it."""
        if self._owns_http:
            await self._http.aclose()

    async def get_token(self) -> str:
        try:
            return await get_access_token(self._credentials)
        except GoogleAuthError as e:
            raise FirestoreError(f"Could not obtain Firestore access token: {e!s}") from e

    def collection(self, collection_id: str) -> CollectionReference:
        return CollectionReference(self, f"{self._root}/{collection_id}")

    async def call(
        self,
        method: str,
        path: str,
        *,
        body: dict[str, Any] | None = None,
        params: list[tuple[str, str]] | None = None,
    ) -> Any:
        """Send one REST request for ``path`` (relative to the API root).

        Returns the decoded JSON body ({} when empty), or None on 404.

        Raises:
            DocumentExistsError: 409 on create.
            FirestoreError: Transport failure, token failure or any other status.
        """
        url = f"{FIRESTORE_API}/{path}"
        headers = {"Authorization": f"Bearer {await self.get_token()}"}
        try:
            resp = await self._http.request(method, url, headers=headers, json=body, params=params)
        except httpx.HTTPError as e:
            raise FirestoreError(f"Firestore request failed: {e!s}") from e
        if resp.status_code == 404:
            return None
        if resp.status_code == 409:
            raise DocumentExistsError()
        if not resp.is_success:
            raise FirestoreError(
                f"Firestore returned {resp.status_code} for {method} {path}",
                resp.status_code,
            )
        return resp.json() if resp.content else {}
