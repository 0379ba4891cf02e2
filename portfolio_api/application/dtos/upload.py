"""DTO for an object written by a storage backend."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StoredObject:
    """Name and public URL of an uploaded object."""

    file_name: str
    url: str
    size: int
    content_type: str
