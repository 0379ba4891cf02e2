"""Object-name validation shared by storage backends."""

from portfolio_api.infrastructure.exceptions import StoragePermissionError


def validate_object_name(object_name: str) -> str:
    """Reject empty names, path separators and dot segments (uploads are flat)."""
    name = (object_name or "").strip()
    if not name or "/" in name or "\\" in name or name in (".", "..") or "\x00" in name:
        raise StoragePermissionError(object_name)
    return name
