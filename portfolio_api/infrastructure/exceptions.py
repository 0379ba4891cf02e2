"""Infrastructure exceptions for storage and document-store operations.

Storage errors extend PortfolioException so presentation can map them
to HTTP responses consistently. FirestoreError is internal: repositories
convert it into PersistenceException with a resource-specific message.
"""

from portfolio_api.domain.exceptions import PortfolioException


class FirestoreError(Exception):
    """Firestore REST call failed (HTTP error status or transport error)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class DocumentExistsError(FirestoreError):
    """Raised when createDocument returns 409 (document ID already exists)."""

    def __init__(self, message: str = "Document already exists") -> None:
        super().__init__(message, 409)


class StorageException(PortfolioException):
    """Base exception for storage operations."""


class StorageNotFoundError(StorageException):
    """Object not found in storage."""

    def __init__(self, object_name: str) -> None:
        super().__init__(
            "File not found",
            "STORAGE_NOT_FOUND",
            {"object_name": object_name},
        )


class StorageUploadError(StorageException):
    """Object upload (or making it public) failed."""

    def __init__(self, object_name: str, reason: str) -> None:
        super().__init__(
            "Failed to upload file",
            "STORAGE_UPLOAD_ERROR",
            {"object_name": object_name, "reason": reason},
        )


class StorageDeleteError(StorageException):
    """Object deletion failed."""

    def __init__(self, object_name: str, reason: str) -> None:
        super().__init__(
            "Failed to delete file",
            "STORAGE_DELETE_ERROR",
            {"object_name": object_name, "reason": reason},
        )


class StoragePermissionError(StorageException):
    """Object name escapes the storage root (path traversal)."""

    def __init__(self, object_name: str) -> None:
        super().__init__(
            "Invalid file name",
            "STORAGE_PERMISSION_ERROR",
            {"object_name": object_name},
        )
