"""Upload API: single-file upload to public storage, and deletion (admin only).

The multipart body is read by the handler, after the admin check, and only up
to MAX_UPLOAD_SIZE plus room for the multipart framing.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from starlette.datastructures import FormData, UploadFile

from portfolio_api.api.dependencies import AdminDep, get_storage
from portfolio_api.core.config import Settings, get_settings
from portfolio_api.core.limiter import limit_upload
from portfolio_api.domain.exceptions import ValidationException
from portfolio_api.infrastructure.exceptions import StorageNotFoundError
from portfolio_api.infrastructure.external.storage.protocol import StorageProtocol
from portfolio_api.schemas.common import ApiResponse, MessageResponse
from portfolio_api.schemas.upload import UploadResponse
from portfolio_api.shared.utils.generators import generate_object_name

logger = logging.getLogger(__name__)

router = APIRouter()

StorageDep = Annotated[StorageProtocol, Depends(get_storage)]
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Boundaries and part headers around the file.
MULTIPART_OVERHEAD = 64 * 1024

_UPLOAD_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "multipart/form-data": {
                "schema": {
                    "type": "object",
                    "properties": {"file": {"type": "string", "format": "binary"}},
                    "required": ["file"],
                }
            }
        },
    }
}


def _size_label(max_bytes: int) -> str:
    mb = max_bytes / (1024 * 1024)
    return f"{mb:g}MB" if mb >= 1 else f"{max_bytes // 1024}KB"


def _too_large(max_bytes: int) -> ValidationException:
    return ValidationException(
        f"File too large. Maximum size is {_size_label(max_bytes)}", field="file"
    )


async def _read_form(request: Request, max_upload_size: int) -> FormData:
    """Parse the multipart body, refusing bodies that cannot hold an allowed file."""
    limit = max_upload_size + MULTIPART_OVERHEAD
    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > limit:
        raise _too_large(max_upload_size)
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise _too_large(max_upload_size)

    async def receive():
        return {"type": "http.request", "body": bytes(body), "more_body": False}

    return await Request(request.scope, receive).form(max_files=1)


@router.post("", response_model=ApiResponse[UploadResponse], openapi_extra=_UPLOAD_BODY)
@limit_upload
async def upload_file(
    request: Request,
    _admin: AdminDep,
    settings: SettingsDep,
    storage: StorageDep,
):
    """Store one image or PDF (form field ``file``) and return its public URL.

    Rejected with 400 (nothing stored): missing file, type outside
    ALLOWED_UPLOAD_MIME_TYPES, empty file, or larger than MAX_UPLOAD_SIZE.
    """
    form = await _read_form(request, settings.max_upload_size)
    try:
        file = form.get("file")
        if not isinstance(file, UploadFile):
            raise ValidationException("No file uploaded", field="file")
        content_type = (file.content_type or "").split(";")[0].strip().lower()
        if content_type not in settings.allowed_upload_mime_type_list:
            raise ValidationException(
                "Invalid file type. Only JPEG, PNG, WebP and PDF files are allowed",
                field="file",
            )
        data = await file.read(settings.max_upload_size + 1)
        filename = file.filename
    finally:
        await form.close()
    if len(data) > settings.max_upload_size:
        raise _too_large(settings.max_upload_size)
    if not data:
        raise ValidationException("Uploaded file is empty", field="file")

    stored = await storage.upload(data, generate_object_name(filename), content_type)
    return ApiResponse(data=UploadResponse(fileName=stored.file_name, url=stored.url))


@router.delete("/{filename}", response_model=MessageResponse)
async def delete_file(filename: str, _admin: AdminDep, storage: StorageDep):
    """Delete an uploaded object by name (404 if it does not exist)."""
    if not await storage.delete(filename):
        raise StorageNotFoundError(filename)
    logger.info("Deleted upload %s", filename)
    return MessageResponse(message="File deleted successfully")
