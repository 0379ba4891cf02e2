"""Live USD exchange rates (exchangerate-api.com v4 format)."""

from __future__ import annotations

import httpx


class ExchangeRateClient:
    """Fetches {"rates": {CODE: rate}} relative to USD."""

    def __init__(self, http_client: httpx.AsyncClient, url: str) -> None:
        self._http = http_client
        self._url = url

    async def fetch_rates(self) -> dict[str, float]:
        """Return the provider's rate table.

        Raises:
            httpx.HTTPError: Transport failure or non-2xx status.
            ValueError: Body is not JSON or has no "rates" object.
        """
        resp = await self._http.get(self._url)
        resp.raise_for_status()
        data = resp.json()
        rates = data.get("rates") if isinstance(data, dict) else None
        if not isinstance(rates, dict):
            raise ValueError("Exchange rate response has no 'rates' object")
        return {
            str(code).upper(): float(rate)
            for code, rate in rates.items()
            if isinstance(rate, (int, float)) and not isinstance(rate, bool)
        }
