"""Local persistence used when Firestore is not configured."""

from portfolio_api.infrastructure.persistence.version_file import VersionFileStore

__all__ = ["VersionFileStore"]
