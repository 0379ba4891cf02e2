"""Exchange-rate and geolocation HTTP clients against httpx.MockTransport."""

import httpx
import pytest

from portfolio_api.infrastructure.external.currency import (
    ExchangeRateClient,
    GeolocationClient,
)

RATES_URL = "https://rates.test/latest/USD"
GEO_URL = "https://geo.test/{ip}/json/"


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


async def test_fetch_rates_parses_table():
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == RATES_URL
        return httpx.Response(200, json={"base": "USD", "rates": {"eur": 0.91, "INR": 83}})

    async with _client(handler) as http:
        rates = await ExchangeRateClient(http, RATES_URL).fetch_rates()
    assert rates == {"EUR": 0.91, "INR": 83.0}


async def test_fetch_rates_without_rates_object_raises():
    async with _client(lambda r: httpx.Response(200, json={"result": "error"})) as http:
        with pytest.raises(ValueError):
            await ExchangeRateClient(http, RATES_URL).fetch_rates()


async def test_fetch_rates_http_error_raises():
    async with _client(lambda r: httpx.Response(503)) as http:
        with pytest.raises(httpx.HTTPStatusError):
            await ExchangeRateClient(http, RATES_URL).fetch_rates()


async def test_lookup_currency_formats_url():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json={"country": "IN", "currency": "inr"})

    async with _client(handler) as http:
        assert await GeolocationClient(http, GEO_URL).lookup_currency("203.0.113.7") == "INR"
    assert seen == ["https://geo.test/203.0.113.7/json/"]


async def test_lookup_reserved_address_returns_none():
    body = {"ip": "127.0.0.1", "error": True, "reason": "Reserved IP Address"}
    async with _client(lambda r: httpx.Response(200, json=body)) as http:
        assert await GeolocationClient(http, GEO_URL).lookup_currency("127.0.0.1") is None


async def test_lookup_non_json_raises_value_error():
    async with _client(lambda r: httpx.Response(200, text="<html>")) as http:
        with pytest.raises(ValueError):
            await GeolocationClient(http, GEO_URL).lookup_currency("1.1.1.1")
