"""Object storage backends for uploaded images and documents."""

from portfolio_api.infrastructure.external.storage.factory import StorageFactory
from portfolio_api.infrastructure.external.storage.protocol import StorageProtocol

__all__ = ["StorageFactory", "StorageProtocol"]
