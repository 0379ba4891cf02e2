"""ID and name generators (CUID document IDs, storage object names)."""

import re
import time

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()

# Characters kept in uploaded filenames; everything else becomes "_".
_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    Used as the Firestore document ID for every created entity.

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def sanitize_filename(filename: str | None) -> str:
    """Return a storage-safe version of a client filename ("file" if nothing is left)."""
    base = (filename or "").replace("\\", "/").rsplit("/", 1)[-1]
    cleaned = _UNSAFE_FILENAME_CHARS.sub("_", base).strip("._")
    return cleaned or "file"


def generate_object_name(filename: str | None, now_ms: int | None = None) -> str:
    """Build an upload object name: "<epoch-millis>-<sanitized filename>".

    Args:
        filename: Original client filename.
        now_ms: Millisecond timestamp override (tests).

    Returns:
        Object name for the storage backend.
    """
    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"{stamp}-{sanitize_filename(filename)}"
