"""Identity token verification with google-auth (no firebase-admin).

Firebase ID tokens are checked against Google's securetoken certificates
with the Firebase project ID as audience; Google Sign-In ID tokens against
the OAuth client ID. google-auth verification is blocking (certificate
fetch + signature check), so it runs in a worker thread.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from google.auth.exceptions import GoogleAuthError
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token

from portfolio_api.application.dtos.identity import VerifiedIdentity
from portfolio_api.domain.exceptions import AuthenticationException

logger = logging.getLogger(__name__)

INVALID_TOKEN_MESSAGE = "Invalid or expired token"


class _GoogleAuthVerifier:
    """Shared wrapper: run the blocking check in a thread, map failures to 401."""

    def __init__(self) -> None:
        self._request = google_requests.Request()

    def _verify_sync(self, token: str) -> dict[str, Any]:
        raise NotImplementedError

    async def verify(self, token: str) -> VerifiedIdentity:
        """Verify the token and return its identity.

        Raises:
            AuthenticationException: Token is malformed, expired, has the wrong
                audience/issuer, or the certificates could not be fetched.
        """
        if not token:
            raise AuthenticationException("No token provided")
        try:
            claims = await asyncio.to_thread(self._verify_sync, token)
        except (ValueError, GoogleAuthError) as e:
            logger.info("Token verification failed: %s", e)
            raise AuthenticationException(INVALID_TOKEN_MESSAGE) from e
        if not claims:
            raise AuthenticationException(INVALID_TOKEN_MESSAGE)
        return VerifiedIdentity.from_claims(claims)


class FirebaseTokenVerifier(_GoogleAuthVerifier):
    """Verifies Firebase Authentication ID tokens for one project (implements ITokenVerifier)."""

    def __init__(self, project_id: str) -> None:
        super().__init__()
        self.project_id = project_id

    def _verify_sync(self, token: str) -> dict[str, Any]:
        return id_token.verify_firebase_token(
            token, self._request, audience=self.project_id
        )


class GoogleTokenVerifier(_GoogleAuthVerifier):
    """Verifies Google Sign-In ID tokens issued to one OAuth client (implements ITokenVerifier)."""

    def __init__(self, client_id: str) -> None:
        super().__init__()
        self.client_id = client_id

    def _verify_sync(self, token: str) -> dict[str, Any]:
        return id_token.verify_oauth2_token(token, self._request, audience=self.client_id)
