"""IP geolocation lookup (ipapi.co JSON format) for the viewer's local currency."""

from __future__ import annotations

import httpx


class GeolocationClient:
    """Resolves a client IP to the ISO currency code of its country."""

    def __init__(self, http_client: httpx.AsyncClient, url_template: str) -> None:
        self._http = http_client
        self._url_template = url_template

    async def lookup_currency(self, ip: str) -> str | None:
        """Return the currency code for ``ip``, or None when the provider has none.

        Reserved/private addresses come back as {"error": true, ...} and yield None.

        Raises:
            httpx.HTTPError: Transport failure or non-2xx status.
            ValueError: Body is not JSON.
        """
        resp = await self._http.get(self._url_template.format(ip=ip))
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict) or data.get("error"):
            return None
        currency = data.get("currency")
        return currency.upper() if isinstance(currency, str) and currency else None
