"""Currency service: cached live rates, viewer currency detection, price conversion."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

import httpx

from portfolio_api.application.interfaces.services import (
    IExchangeRateProvider,
    IGeolocator,
)
from portfolio_api.domain.currency import (
    BASE_RATES,
    DEFAULT_CURRENCY,
    SUPPORTED_CURRENCIES,
    convert_price,
    format_price,
    resolve_currency,
)

logger = logging.getLogger(__name__)


class CurrencyService:
    """Process-wide rate cache in front of the exchange-rate provider.

    A successful fetch is cached for ``cache_seconds``; a failed fetch returns
    BASE_RATES and is retried on the next call. Concurrent refreshes may both
    hit the provider; the last one to finish wins the cache.
    """

    def __init__(
        self,
        rate_provider: IExchangeRateProvider,
        geolocator: IGeolocator,
        cache_seconds: int = 3600,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._rate_provider = rate_provider
        self._geolocator = geolocator
        self._cache_seconds = cache_seconds
        self._clock = clock
        self._cached_rates: dict[str, float] | None = None
        self._fetched_at: float | None = None

    async def get_rates(self) -> dict[str, float]:
        """Return rates for every supported currency (live when possible)."""
        now = self._clock()
        if (
            self._cached_rates is not None
            and self._fetched_at is not None
            and now - self._fetched_at < self._cache_seconds
        ):
            return dict(self._cached_rates)
        try:
            live = await self._rate_provider.fetch_rates()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Failed to fetch live exchange rates, using base rates: %s", e)
            return dict(BASE_RATES)
        rates = dict(BASE_RATES)
        for code in SUPPORTED_CURRENCIES:
            rate = live.get(code)
            if rate and rate > 0:
                rates[code] = rate
        self._cached_rates = rates
        self._fetched_at = now
        return dict(rates)

    async def detect_currency(self, ip: str | None) -> str:
        """Return the display currency for a client IP (USD on any failure)."""
        if not ip:
            return DEFAULT_CURRENCY
        try:
            code = await self._geolocator.lookup_currency(ip)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Failed to detect currency for %s: %s", ip, e)
            return DEFAULT_CURRENCY
        return resolve_currency(code)

    async def convert(self, amount_usd: float, currency: str) -> dict[str, Any]:
        """Convert and format a USD amount; unsupported currencies stay in USD."""
        code = (currency or DEFAULT_CURRENCY).upper()
        if code not in SUPPORTED_CURRENCIES:
            code = DEFAULT_CURRENCY
        rates = await self.get_rates()
        converted = convert_price(amount_usd, code, rates)
        return {
            "amountUSD": amount_usd,
            "currency": code,
            "rate": rates[code],
            "amount": converted,
            "formatted": format_price(converted, code),
        }
