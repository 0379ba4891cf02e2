"""Firestore repositories for projects, pricing plans and services."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any

from portfolio_api.infrastructure.firebase.collections import (
    COLLECTION_PRICING,
    COLLECTION_PROJECTS,
    COLLECTION_SERVICES,
)
from portfolio_api.infrastructure.firebase.repositories.base import (
    FirestoreDocumentRepository,
)
from portfolio_api.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class FirestoreProjectRepository(FirestoreDocumentRepository):
    """Projects, newest first."""

    collection_name = COLLECTION_PROJECTS
    resource_name = "Project"
    singular = "project"
    plural = "projects"
    order_field = "createdAt"
    descending = True


class FirestorePricingRepository(FirestoreDocumentRepository):
    """Pricing plans, cheapest first."""

    collection_name = COLLECTION_PRICING
    resource_name = "Pricing plan"
    singular = "pricing plan"
    plural = "pricing plans"
    order_field = "price"


class FirestoreServiceRepository(FirestoreDocumentRepository):
    """Services in creation order; an empty collection is seeded with defaults."""

    collection_name = COLLECTION_SERVICES
    resource_name = "Service"
    singular = "service"
    plural = "services"
    order_field = "createdAt"

    async def list_or_seed(
        self, defaults: list[dict[str, Any]]
    ) -> list[dict[str, Any]]:
        """Return all services; when there are none, persist and return defaults.

        Seeded documents get createdAt one millisecond apart so the list keeps
        the order of ``defaults``.
        """
        services = await self.list_all()
        if services:
            return services
        logger.info("Seeding %d default services", len(defaults))
        base = utc_now()
        return [
            await self.create(dict(item), created_at=base + timedelta(milliseconds=i))
            for i, item in enumerate(defaults)
        ]
