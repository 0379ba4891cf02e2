"""Service account credentials and OAuth access tokens (google-auth).

Firestore and Cloud Storage share one service account; each client asks
for its own scope. Token refresh is a blocking HTTP call, so async callers
go through ``get_access_token``.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from google.auth.transport.requests import Request
from google.oauth2 import service_account

FIRESTORE_SCOPE = "https://www.googleapis.com/auth/datastore"
STORAGE_SCOPE = "https://www.googleapis.com/auth/devstorage.read_write"


def build_credentials(
    service_account_info: dict, scopes: Sequence[str]
) -> service_account.Credentials:
    return service_account.Credentials.from_service_account_info(
        service_account_info, scopes=list(scopes)
    )


def _refresh_if_needed(credentials) -> str:
    if not credentials.valid:
        credentials.refresh(Request())
    return credentials.token


async def get_access_token(credentials) -> str:
    """Return a bearer token, refreshing it in a worker thread when expired.

    Raises:
        google.auth.exceptions.GoogleAuthError: Refresh failed.
    """
    return await asyncio.to_thread(_refresh_if_needed, credentials)
