"""JSON-file version record (implements IVersionStore without Firestore)."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any

import aiofiles
import aiofiles.os

from portfolio_api.domain.exceptions import PersistenceException
from portfolio_api.shared.utils.datetime import ensure_utc, utc_now

logger = logging.getLogger(__name__)


class VersionFileStore:
    """Keeps {"version", "lastUpdated"} in a small JSON file; writes are atomic (temp + rename)."""

    def __init__(self, path: str) -> None:
        self.path = Path(path).expanduser().resolve()

    async def _read(self) -> dict[str, Any] | None:
        if not self.path.exists():
            return None
        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                raw = json.loads(await f.read())
        except (OSError, json.JSONDecodeError) as e:
            logger.exception("Could not read version file %s", self.path)
            raise PersistenceException("Failed to fetch version", reason=str(e)) from e
        if not isinstance(raw, dict) or not raw.get("version"):
            return None
        last = raw.get("lastUpdated")
        return {
            "version": str(raw["version"]),
            "lastUpdated": ensure_utc(datetime.fromisoformat(last)) if last else None,
        }

    async def _write(self, record: dict[str, Any]) -> None:
        payload = {
            "version": record["version"],
            "lastUpdated": record["lastUpdated"].isoformat(),
        }
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".tmp_", suffix=".json")
            os.close(fd)
            async with aiofiles.open(temp_path, "w", encoding="utf-8") as f:
                await f.write(json.dumps(payload, indent=2))
            await aiofiles.os.replace(temp_path, self.path)
        except OSError as e:
            logger.exception("Could not write version file %s", self.path)
            raise PersistenceException("Failed to update version", reason=str(e)) from e

    async def get_version(self, default_version: str) -> dict[str, Any]:
        """Return the stored record, creating the file with ``default_version`` if missing."""
        record = await self._read()
        if record is None:
            record = {"version": default_version, "lastUpdated": utc_now()}
            await self._write(record)
        return record

    async def set_version(self, version: str) -> dict[str, Any]:
        record = {"version": version, "lastUpdated": utc_now()}
        await self._write(record)
        return record
