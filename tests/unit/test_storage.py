"""Storage backends: object naming, local filesystem and Firebase Storage over HTTP."""

import httpx
import pytest

from portfolio_api.core.config import Settings
from portfolio_api.infrastructure.exceptions import (
    StorageDeleteError,
    StoragePermissionError,
    StorageUploadError,
)
from portfolio_api.infrastructure.external.storage import StorageFactory
from portfolio_api.infrastructure.external.storage.firebase_storage import (
    FirebaseStorageService,
)
from portfolio_api.infrastructure.external.storage.local_storage import LocalStorageService
from portfolio_api.shared.utils.generators import generate_object_name, sanitize_filename

BUCKET = "demo.appspot.com"


class StaticCredentials:
    valid = True
    token = "storage-token"


def _firebase(handler) -> FirebaseStorageService:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return FirebaseStorageService(BUCKET, {}, http_client=http, credentials=StaticCredentials())


class TestObjectNames:
    def test_sanitize_filename(self):
        assert sanitize_filename("my photo (1).png") == "my_photo_1_.png"
        assert sanitize_filename("../../etc/passwd") == "passwd"
        assert sanitize_filename("C:\\Users\\me\\cv.pdf") == "cv.pdf"
        assert sanitize_filename("...") == "file"
        assert sanitize_filename(None) == "file"

    def test_object_name_is_timestamp_prefixed(self):
        assert generate_object_name("logo.png", now_ms=1700000000000) == "1700000000000-logo.png"


class TestLocalStorage:
    async def test_upload_and_delete(self, tmp_path):
        storage = LocalStorageService(str(tmp_path), base_url="https://api.example.com/")
        stored = await storage.upload(b"data", "1-a.png", "image/png")
        assert stored.url == "https://api.example.com/uploads/1-a.png"
        assert stored.size == 4
        assert (tmp_path / "1-a.png").read_bytes() == b"data"

        assert await storage.delete("1-a.png") is True
        assert await storage.delete("1-a.png") is False

    async def test_relative_url_without_base(self, tmp_path):
        stored = await LocalStorageService(str(tmp_path)).upload(b"x", "1-b.pdf", "application/pdf")
        assert stored.url == "/uploads/1-b.pdf"

    @pytest.mark.parametrize("name", ["../escape.png", "a/b.png", "..", ""])
    async def test_traversal_rejected(self, tmp_path, name):
        storage = LocalStorageService(str(tmp_path))
        with pytest.raises(StoragePermissionError):
            await storage.upload(b"x", name, "image/png")


class TestFirebaseStorage:
    async def test_upload_is_single_public_media_request(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"name": "1-a.png", "bucket": BUCKET})

        stored = await _firebase(handler).upload(b"png", "1-a.png", "image/png")
        assert len(seen) == 1
        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == f"/upload/storage/v1/b/{BUCKET}/o"
        assert request.url.params["uploadType"] == "media"
        assert request.url.params["name"] == "1-a.png"
        assert request.url.params["predefinedAcl"] == "publicRead"
        assert request.headers["Authorization"] == "Bearer storage-token"
        assert request.headers["Content-Type"] == "image/png"
        assert request.content == b"png"
        assert stored.url == f"https://storage.googleapis.com/{BUCKET}/1-a.png"

    async def test_upload_failure_raises(self):
        with pytest.raises(StorageUploadError):
            await _firebase(lambda r: httpx.Response(403)).upload(b"x", "1-a.png", "image/png")

    async def test_delete(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append((request.method, request.url.path))
            return httpx.Response(204)

        assert await _firebase(handler).delete("1-a.png") is True
        assert seen == [("DELETE", f"/storage/v1/b/{BUCKET}/o/1-a.png")]

    async def test_delete_missing_returns_false(self):
        assert await _firebase(lambda r: httpx.Response(404)).delete("1-a.png") is False

    async def test_delete_server_error_raises(self):
        with pytest.raises(StorageDeleteError):
            await _firebase(lambda r: httpx.Response(500)).delete("1-a.png")

    async def test_delete_rejects_path_names(self):
        with pytest.raises(StoragePermissionError):
            await _firebase(lambda r: httpx.Response(204)).delete("folder/1-a.png")


class TestStorageFactory:
    def test_local_backend(self, tmp_path):
        settings = Settings(_env_file=None, storage_backend="local", storage_root=str(tmp_path))
        assert isinstance(StorageFactory.create_storage_service(settings), LocalStorageService)

    def test_firebase_backend_without_service_account(self):
        settings = Settings(
            _env_file=None,
            storage_backend="firebase",
            firebase_storage_bucket=BUCKET,
            firebase_project_id=None,
            firebase_service_account_key=None,
            firebase_service_account_path=None,
        )
        with pytest.raises(ValueError, match="service account"):
            StorageFactory.create_storage_service(settings)
