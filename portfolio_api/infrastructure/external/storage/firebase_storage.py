"""Firebase Storage backend over the Cloud Storage JSON API (httpx + google-auth).

Objects are uploaded in a single media request with the publicRead
predefined ACL, so the returned URL works without signing.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx
from google.auth.exceptions import GoogleAuthError

from portfolio_api.application.dtos.upload import StoredObject
from portfolio_api.infrastructure.exceptions import StorageDeleteError, StorageUploadError
from portfolio_api.infrastructure.external.storage.naming import validate_object_name
from portfolio_api.infrastructure.firebase.credentials import (
    STORAGE_SCOPE,
    build_credentials,
    get_access_token,
)

logger = logging.getLogger(__name__)

_API = "https://storage.googleapis.com/storage/v1"
_UPLOAD_API = "https://storage.googleapis.com/upload/storage/v1"
_PUBLIC_BASE = "https://storage.googleapis.com"


class FirebaseStorageService:
    """Uploads to and deletes from one Firebase Storage bucket."""

    def __init__(
        self,
        bucket: str,
        service_account_info: dict,
        *,
        http_client: httpx.AsyncClient | None = None,
        credentials=None,
    ) -> None:
        """Initialize the backend.

        Args:
            bucket: Bucket name (e.g. my-project.appspot.com).
            service_account_info: Service account key dict.
            http_client: Shared client; created (and owned) when None.
            credentials: Pre-built google-auth credentials (tests).
        """
        self.bucket = bucket
        self._credentials = credentials or build_credentials(
            service_account_info, scopes=(STORAGE_SCOPE,)
        )
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=60.0)
        self._owns_http = http_client is None

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def _auth_headers(self) -> dict[str, str]:
        token = await get_access_token(self._credentials)
        return {"Authorization": f"Bearer {token}"}

    def public_url(self, object_name: str) -> str:
        return f"{_PUBLIC_BASE}/{self.bucket}/{quote(object_name)}"

    async def upload(
        self, data: bytes, object_name: str, content_type: str
    ) -> StoredObject:
        """Upload bytes as a publicly readable object.

        Raises:
            StorageUploadError: Token refresh, transport or API failure.
        """
        name = validate_object_name(object_name)
        url = f"{_UPLOAD_API}/b/{quote(self.bucket, safe='')}/o"
        params = {"uploadType": "media", "name": name, "predefinedAcl": "publicRead"}
        try:
            headers = await self._auth_headers()
            headers["Content-Type"] = content_type
            resp = await self._http.post(url, params=params, headers=headers, content=data)
        except (httpx.HTTPError, GoogleAuthError) as e:
            logger.exception("Upload of %s to bucket %s failed", name, self.bucket)
            raise StorageUploadError(name, str(e)) from e
        if resp.status_code != 200:
            logger.error(
                "Upload of %s to bucket %s returned %s: %s",
                name,
                self.bucket,
                resp.status_code,
                resp.text[:500],
            )
            raise StorageUploadError(name, f"HTTP {resp.status_code}")
        logger.info("Uploaded %s (%d bytes) to bucket %s", name, len(data), self.bucket)
        return StoredObject(
            file_name=name,
            url=self.public_url(name),
            size=len(data),
            content_type=content_type,
        )

    async def delete(self, object_name: str) -> bool:
        """Delete an object. Returns False if it does not exist."""
        name = validate_object_name(object_name)
        url = f"{_API}/b/{quote(self.bucket, safe='')}/o/{quote(name, safe='')}"
        try:
            resp = await self._http.delete(url, headers=await self._auth_headers())
        except (httpx.HTTPError, GoogleAuthError) as e:
            logger.exception("Delete of %s from bucket %s failed", name, self.bucket)
            raise StorageDeleteError(name, str(e)) from e
        if resp.status_code == 404:
            return False
        if resp.status_code not in (200, 204):
            logger.error(
                "Delete of %s from bucket %s returned %s", name, self.bucket, resp.status_code
            )
            raise StorageDeleteError(name, f"HTTP {resp.status_code}")
        logger.info("Deleted %s from bucket %s", name, self.bucket)
        return True
