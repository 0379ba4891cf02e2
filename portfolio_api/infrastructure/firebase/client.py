"""Process-wide Firestore client built from the Firebase service account.

The service account can be given three ways, first match wins:

1. FIREBASE_SERVICE_ACCOUNT_KEY: the key file's JSON as one string.
2. FIREBASE_SERVICE_ACCOUNT_PATH: path to the key file.
3. FIREBASE_PROJECT_ID + FIREBASE_CLIENT_EMAIL + FIREBASE_PRIVATE_KEY.

The Firebase Storage backend reuses the same account info.
"""

import json
import logging
from pathlib import Path

from google.auth.exceptions import GoogleAuthError

from portfolio_api.core.config import Settings, get_settings
from portfolio_api.infrastructure.firebase._rest_client import FirestoreRESTClient
from portfolio_api.infrastructure.firebase.credentials import (
    FIRESTORE_SCOPE,
    build_credentials,
)

logger = logging.getLogger(__name__)

GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"

_firestore_client: FirestoreRESTClient | None = None


def normalize_private_key(raw: str) -> str:
    """Undo .env quoting of a PEM key: drop wrapping quotes, turn literal \\n into newlines."""
    key = raw.strip()
    if len(key) >= 2 and key[0] == key[-1] and key[0] in ("'", '"'):
        key = key[1:-1]
    return key.replace("\\n", "\n")


def _from_json_key(s: Settings) -> dict | None:
    if not s.firebase_service_account_key:
        return None
    raw = s.firebase_service_account_key.get_secret_value()
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError("FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON") from e


def _from_key_file(s: Settings) -> dict | None:
    path = Path(s.firebase_service_account_path).expanduser().resolve()
    if not path.is_file():
        logger.warning("FIREBASE_SERVICE_ACCOUNT_PATH does not point to a file: %s", path)
        return None
    return json.loads(path.read_text(encoding="utf-8"))


def _from_split_vars(s: Settings) -> dict | None:
    key = s.firebase_private_key.get_secret_value() if s.firebase_private_key else ""
    if not (s.firebase_project_id and s.firebase_client_email and key):
        return None
    return {
        "type": "service_account",
        "project_id": s.firebase_project_id,
        "client_email": s.firebase_client_email,
        "private_key": normalize_private_key(key),
        "token_uri": GOOGLE_TOKEN_URI,
    }


def load_service_account_info(settings: Settings | None = None) -> dict | None:
    """Return the service account dict, or None when none is configured.

    A configured key path that does not exist counts as not configured
    (logged at WARNING); the split variables are then not consulted.

    Raises:
        ValueError: FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON.
    """
    s = settings or get_settings()
    info = _from_json_key(s)
    if info is not None:
        return info
    if s.firebase_service_account_path:
        return _from_key_file(s)
    return _from_split_vars(s)


def init_firebase() -> bool:
    """Create the shared Firestore client if a service account is configured.

    Repeated calls keep the first client. Bad credentials are logged and the
    app starts without Firestore (data endpoints then answer 503).

    Returns:
        True when a client is available.
    """
    global _firestore_client
    if _firestore_client is not None:
        return True
    try:
        info = load_service_account_info()
        if not info:
            logger.warning("Firestore not configured; data endpoints will return 503")
            return False
        project_id = info.get("project_id")
        if not project_id:
            logger.error("Firebase service account has no project_id")
            return False
        credentials = build_credentials(info, (FIRESTORE_SCOPE,))
    except (ValueError, OSError, GoogleAuthError):
        logger.exception("Firebase initialization failed")
        return False
    _firestore_client = FirestoreRESTClient(project_id, credentials)
    logger.info("Firestore initialized for project %s", project_id)
    return True


def get_firestore_client() -> FirestoreRESTClient | None:
    """The shared client, or None before init_firebase() or without credentials."""
    return _firestore_client


async def close_firebase() -> None:
    """Release the client's connection pool (app shutdown)."""
    global _firestore_client
    if _firestore_client is None:
        return
    await _firestore_client.aclose()
    _firestore_client = None
    logger.info("Firestore HTTP client closed")
