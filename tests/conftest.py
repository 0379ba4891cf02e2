"""Pytest configuration and fixtures for the portfolio API.

HTTP tests run against portfolio_api.main:app through httpx ASGITransport.
Firestore, the identity provider, object storage and the currency providers
are replaced with in-memory doubles via app.dependency_overrides, so no
test needs network access or Google credentials.
"""

import copy
import os
import tempfile
from collections.abc import AsyncIterator
from typing import Any

# Settings are read on first get_settings(); set env before importing the app.
_TMP = tempfile.mkdtemp(prefix="portfolio-api-tests-")
os.environ.update(
    {
        "ADMIN_EMAILS": "admin@example.com",
        "AUTH_PROVIDER": "firebase",
        "FIREBASE_PROJECT_ID": "portfolio-test",
        "STORAGE_BACKEND": "local",
        "STORAGE_ROOT": os.path.join(_TMP, "uploads"),
        "VERSION_FILE_PATH": os.path.join(_TMP, "version.json"),
        "RATE_LIMIT_ENABLED": "false",
        "MAX_UPLOAD_SIZE": str(5 * 1024 * 1024),
    }
)
for _key in (
    "FIREBASE_SERVICE_ACCOUNT_KEY",
    "FIREBASE_SERVICE_ACCOUNT_PATH",
    "FIREBASE_CLIENT_EMAIL",
    "FIREBASE_PRIVATE_KEY",
):
    os.environ.pop(_key, None)

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from portfolio_api.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from portfolio_api.api.dependencies import (  # noqa: E402
    get_currency_service,
    get_optional_db,
    get_storage,
    get_token_verifier,
)
from portfolio_api.application.dtos.identity import VerifiedIdentity  # noqa: E402
from portfolio_api.application.dtos.upload import StoredObject  # noqa: E402
from portfolio_api.application.services.currency_service import (  # noqa: E402
    CurrencyService,
)
from portfolio_api.domain.exceptions import AuthenticationException  # noqa: E402
from portfolio_api.infrastructure.exceptions import (  # noqa: E402
    DocumentExistsError,
    FirestoreError,
)
from portfolio_api.main import app  # noqa: E402

ADMIN_EMAIL = "admin@example.com"
ADMIN_TOKEN = "admin-token"
USER_TOKEN = "user-token"
UNVERIFIED_ADMIN_TOKEN = "unverified-admin-token"


# ---- In-memory Firestore (same async API as FirestoreRESTClient) ----


def _deep_merge(target: dict[str, Any], updates: dict[str, Any]) -> None:
    for key, value in updates.items():
        if isinstance(value, dict) and value and isinstance(target.get(key), dict):
            _deep_merge(target[key], value)
        else:
            target[key] = value


class FakeSnapshot:
    def __init__(self, doc_id: str, data: dict[str, Any]) -> None:
        self.id = doc_id
        self._data = data

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)


class FakeDocumentRef:
    def __init__(self, db: "FakeFirestore", collection: str, doc_id: str) -> None:
        self._db = db
        self._collection = collection
        self.id = doc_id

    @property
    def _docs(self) -> dict[str, dict[str, Any]]:
        return self._db.data.setdefault(self._collection, {})

    async def get(self) -> FakeSnapshot | None:
        self._db.check()
        data = self._docs.get(self.id)
        return FakeSnapshot(self.id, data) if data is not None else None

    async def set(self, data: dict[str, Any], merge: bool = False) -> None:
        self._db.check()
        if merge and self.id in self._docs:
            _deep_merge(self._docs[self.id], data)
        else:
            self._docs[self.id] = copy.deepcopy(data)

    async def update(self, data: dict[str, Any]) -> bool:
        self._db.check()
        if self.id not in self._docs:
            return False
        self._docs[self.id].update(data)
        return True

    async def delete(self) -> None:
        self._db.check()
        self._docs.pop(self.id, None)


class FakeQuery:
    def __init__(self, collection: "FakeCollection", field: str, direction: str) -> None:
        self._collection = collection
        self._field = field
        self._descending = direction == "DESCENDING"

    async def stream(self) -> AsyncIterator[FakeSnapshot]:
        self._collection._db.check()
        docs = [
            (doc_id, data)
            for doc_id, data in self._collection._docs.items()
            if self._field in data
        ]
        docs.sort(key=lambda item: item[1][self._field], reverse=self._descending)
        for doc_id, data in docs:
            yield FakeSnapshot(doc_id, data)


class FakeCollection:
    def __init__(self, db: "FakeFirestore", name: str) -> None:
        self._db = db
        self.id = name

    @property
    def _docs(self) -> dict[str, dict[str, Any]]:
        return self._db.data.setdefault(self.id, {})

    def document(self, doc_id: str) -> FakeDocumentRef:
        return FakeDocumentRef(self._db, self.id, doc_id)

    async def create(self, doc_id: str, data: dict[str, Any]) -> None:
        self._db.check()
        if doc_id in self._docs:
            raise DocumentExistsError()
        self._docs[doc_id] = dict(data)

    def order_by(self, field: str, direction: str = "ASCENDING") -> FakeQuery:
        return FakeQuery(self, field, direction)

    async def stream(self) -> AsyncIterator[FakeSnapshot]:
        self._db.check()
        for doc_id, data in list(self._docs.items()):
            yield FakeSnapshot(doc_id, data)


class FakeFirestore:
    """Dict-backed stand-in for FirestoreRESTClient. Set ``fail`` to simulate outages."""

    def __init__(self) -> None:
        self.data: dict[str, dict[str, dict[str, Any]]] = {}
        self.fail = False

    def check(self) -> None:
        if self.fail:
            raise FirestoreError("Firestore returned 500", 500)

    def collection(self, name: str) -> FakeCollection:
        return FakeCollection(self, name)


# ---- Identity, storage and currency doubles ----


class FakeTokenVerifier:
    """Maps fixed test tokens to identities; anything else is rejected."""

    identities = {
        ADMIN_TOKEN: VerifiedIdentity(
            uid="admin-uid",
            email=ADMIN_EMAIL,
            email_verified=True,
            name="Site Admin",
            picture="https://example.com/admin.png",
        ),
        USER_TOKEN: VerifiedIdentity(
            uid="user-uid", email="visitor@example.com", email_verified=True, name="Visitor"
        ),
        UNVERIFIED_ADMIN_TOKEN: VerifiedIdentity(
            uid="spoof-uid", email=ADMIN_EMAIL.upper(), email_verified=False
        ),
    }

    async def verify(self, token: str) -> VerifiedIdentity:
        identity = self.identities.get(token)
        if identity is None:
            raise AuthenticationException("Invalid or expired token")
        return identity


class InMemoryStorage:
    """StorageProtocol double keeping objects in a dict."""

    bucket = "portfolio-test.appspot.com"

    def __init__(self) -> None:
        self.objects: dict[str, tuple[bytes, str]] = {}

    def public_url(self, object_name: str) -> str:
        return f"https://storage.googleapis.com/{self.bucket}/{object_name}"

    async def upload(self, data: bytes, object_name: str, content_type: str) -> StoredObject:
        self.objects[object_name] = (data, content_type)
        return StoredObject(
            file_name=object_name,
            url=self.public_url(object_name),
            size=len(data),
            content_type=content_type,
        )

    async def delete(self, object_name: str) -> bool:
        return self.objects.pop(object_name, None) is not None


class FakeRateProvider:
    def __init__(self, rates: dict[str, float] | None = None, error: Exception | None = None):
        self.rates = rates or {}
        self.error = error
        self.calls = 0

    async def fetch_rates(self) -> dict[str, float]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return dict(self.rates)


class FakeGeolocator:
    def __init__(self, by_ip: dict[str, str | None] | None = None, error: Exception | None = None):
        self.by_ip = by_ip or {}
        self.error = error
        self.seen: list[str] = []

    async def lookup_currency(self, ip: str) -> str | None:
        self.seen.append(ip)
        if self.error is not None:
            raise self.error
        return self.by_ip.get(ip)


# ---- Fixtures ----


@pytest.fixture
def fake_db() -> FakeFirestore:
    return FakeFirestore()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def geolocator() -> FakeGeolocator:
    return FakeGeolocator({"203.0.113.7": "INR", "198.51.100.4": "NZD", "192.0.2.9": "BRL"})


@pytest.fixture
def currency_service(geolocator: FakeGeolocator) -> CurrencyService:
    return CurrencyService(FakeRateProvider({"EUR": 0.9, "INR": 83.0}), geolocator)


@pytest.fixture
async def client(
    fake_db: FakeFirestore,
    storage: InMemoryStorage,
    currency_service: CurrencyService,
) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI) with in-memory backends."""
    app.dependency_overrides[get_optional_db] = lambda: fake_db
    app.dependency_overrides[get_token_verifier] = lambda: FakeTokenVerifier()
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_currency_service] = lambda: currency_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def user_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {USER_TOKEN}"}
