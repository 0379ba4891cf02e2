"""Uploads kept in a local directory (development, or hosts without a bucket).

main.py serves the directory at PUBLIC_PATH, so an object's public URL is
STORAGE_BASE_URL + /uploads/<name> (or just the path without a base URL).
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from urllib.parse import quote

import aiofiles
import aiofiles.os

from portfolio_api.application.dtos.upload import StoredObject
from portfolio_api.infrastructure.exceptions import (
    StorageDeleteError,
    StoragePermissionError,
    StorageUploadError,
)
from portfolio_api.infrastructure.external.storage.naming import validate_object_name

logger = logging.getLogger(__name__)

PUBLIC_PATH = "/uploads"


class LocalStorageService:
    """Flat directory of public files (implements StorageProtocol)."""

    def __init__(self, storage_root: str, base_url: str | None = None) -> None:
        self.root = Path(storage_root).resolve()
        self.root.mkdir(parents=True, exist_ok=True, mode=0o750)
        self.base_url = (base_url or "").rstrip("/")

    def _path_for(self, object_name: str) -> Path:
        name = validate_object_name(object_name)
        path = (self.root / name).resolve()
        if path.parent != self.root:
            raise StoragePermissionError(object_name)
        return path

    def public_url(self, object_name: str) -> str:
        return f"{self.base_url}{PUBLIC_PATH}/{quote(object_name)}"

    async def upload(self, data: bytes, object_name: str, content_type: str) -> StoredObject:
        """Write to a temp file in the same directory, then rename over the target."""
        target = self._path_for(object_name)
        fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=".tmp_", suffix=target.suffix)
        os.close(fd)
        try:
            async with aiofiles.open(tmp_name, "wb") as f:
                await f.write(data)
            os.chmod(tmp_name, 0o644)
            await aiofiles.os.replace(tmp_name, target)
        except OSError as e:
            logger.exception("Local upload of %s failed", target.name)
            raise StorageUploadError(object_name, str(e)) from e
        finally:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
        logger.info("Stored %s (%d bytes)", target.name, len(data))
        return StoredObject(
            file_name=target.name,
            url=self.public_url(target.name),
            size=len(data),
            content_type=content_type,
        )

    async def delete(self, object_name: str) -> bool:
        """Remove the file; False if there was none."""
        path = self._path_for(object_name)
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.exception("Local delete of %s failed", path.name)
            raise StorageDeleteError(object_name, str(e)) from e
        return True
