"""Startup and shutdown of the Firestore client, outbound HTTP clients,
currency service and upload storage."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from portfolio_api.application.services.currency_service import CurrencyService
from portfolio_api.core.config import get_settings
from portfolio_api.infrastructure.external.currency import (
    ExchangeRateClient,
    GeolocationClient,
)
from portfolio_api.infrastructure.external.storage import StorageFactory
from portfolio_api.infrastructure.firebase import close_firebase, init_firebase
from portfolio_api.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Start logging, Firestore (optional), HTTP clients, currency and storage; close them on exit."""
    settings = get_settings()

    setup_logging()
    init_firebase()

    # Shared HTTP clients (connection reuse): one for storage, one for currency lookups.
    app.state.storage_http_client = httpx.AsyncClient(timeout=60.0)
    app.state.currency_http_client = httpx.AsyncClient(
        timeout=settings.external_http_timeout_seconds
    )

    app.state.currency_service = CurrencyService(
        ExchangeRateClient(app.state.currency_http_client, settings.exchange_rate_api_url),
        GeolocationClient(app.state.currency_http_client, settings.geolocation_api_url),
        cache_seconds=settings.exchange_rate_cache_seconds,
    )

    try:
        app.state.storage = StorageFactory.create_storage_service(
            settings, http_client=app.state.storage_http_client
        )
        logger.info("Storage backend: %s", settings.storage_backend)
    except ValueError as e:
        app.state.storage = None
        logger.warning("Storage not available, uploads will return 503: %s", e)

    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    for attr in ("storage_http_client", "currency_http_client"):
        http_client = getattr(app.state, attr, None)
        if http_client is not None:
            await http_client.aclose()
            setattr(app.state, attr, None)
    logger.info("Outbound HTTP clients closed")

    await close_firebase()
