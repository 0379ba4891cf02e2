"""Upload API: type and size checks, storage writes and deletion."""

from httpx import AsyncClient

from portfolio_api.api.dependencies import get_storage
from portfolio_api.main import app

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


async def test_upload_stores_file_and_returns_url(
    client: AsyncClient, admin_headers: dict[str, str], storage
) -> None:
    response = await client.post(
        "/api/upload",
        files={"file": ("my photo.png", PNG, "image/png")},
        headers=admin_headers,
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["fileName"].endswith("-my_photo.png")
    assert data["url"] == f"https://storage.googleapis.com/{storage.bucket}/{data['fileName']}"
    assert storage.objects[data["fileName"]] == (PNG, "image/png")


async def test_pdf_is_accepted(
    client: AsyncClient, admin_headers: dict[str, str], storage
) -> None:
    response = await client.post(
        "/api/upload",
        files={"file": ("cert.pdf", b"%PDF-1.7 test", "application/pdf")},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert len(storage.objects) == 1


async def test_disallowed_type_stores_nothing(
    client: AsyncClient, admin_headers: dict[str, str], storage
) -> None:
    response = await client.post(
        "/api/upload",
        files={"file": ("notes.txt", b"hello", "text/plain")},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "error": "Invalid file type. Only JPEG, PNG, WebP and PDF files are allowed",
    }
    assert storage.objects == {}


async def test_oversized_file_is_rejected(
    client: AsyncClient, admin_headers: dict[str, str], storage
) -> None:
    response = await client.post(
        "/api/upload",
        files={"file": ("big.jpg", b"\xff" * (5 * 1024 * 1024 + 1), "image/jpeg")},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert response.json()["error"] == "File too large. Maximum size is 5MB"
    assert storage.objects == {}


async def test_file_above_request_limit_gets_upload_message(
    client: AsyncClient, admin_headers: dict[str, str], storage
) -> None:
    response = await client.post(
        "/api/upload",
        files={"file": ("huge.jpg", b"\xff" * (11 * 1024 * 1024), "image/jpeg")},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "error": "File too large. Maximum size is 5MB",
    }
    assert storage.objects == {}


async def test_huge_upload_without_token_returns_401(client: AsyncClient, storage) -> None:
    response = await client.post(
        "/api/upload",
        files={"file": ("huge.jpg", b"\xff" * (11 * 1024 * 1024), "image/jpeg")},
    )
    assert response.status_code == 401
    assert response.json()["error"] == "No token provided"
    assert storage.objects == {}


async def test_empty_file_is_rejected(
    client: AsyncClient, admin_headers: dict[str, str]
) -> None:
    response = await client.post(
        "/api/upload",
        files={"file": ("empty.png", b"", "image/png")},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Uploaded file is empty"


async def test_missing_file_is_rejected(
    client: AsyncClient, admin_headers: dict[str, str]
) -> None:
    response = await client.post(
        "/api/upload",
        files={"attachment": ("photo.png", PNG, "image/png")},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert response.json()["error"] == "No file uploaded"


async def test_upload_requires_token(client: AsyncClient, storage) -> None:
    response = await client.post(
        "/api/upload", files={"file": ("photo.png", PNG, "image/png")}
    )
    assert response.status_code == 401
    assert storage.objects == {}


async def test_upload_requires_admin(client: AsyncClient, user_headers: dict[str, str]) -> None:
    response = await client.post(
        "/api/upload",
        files={"file": ("photo.png", PNG, "image/png")},
        headers=user_headers,
    )
    assert response.status_code == 403


async def test_delete_existing_file(
    client: AsyncClient, admin_headers: dict[str, str], storage
) -> None:
    storage.objects["1700000000000-photo.png"] = (PNG, "image/png")
    response = await client.delete("/api/upload/1700000000000-photo.png", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "File deleted successfully"}
    assert storage.objects == {}


async def test_delete_missing_file_returns_404(
    client: AsyncClient, admin_headers: dict[str, str]
) -> None:
    response = await client.delete("/api/upload/nothing.png", headers=admin_headers)
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "File not found"}


async def test_unconfigured_storage_returns_503(
    client: AsyncClient, admin_headers: dict[str, str]
) -> None:
    app.dependency_overrides.pop(get_storage)
    response = await client.post(
        "/api/upload",
        files={"file": ("photo.png", PNG, "image/png")},
        headers=admin_headers,
    )
    assert response.status_code == 503
    assert response.json()["error"] == "File storage not configured"
