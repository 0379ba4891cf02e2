"""Currency math and the cached rate service."""

import httpx
import pytest

from portfolio_api.application.services.currency_service import CurrencyService
from portfolio_api.domain.currency import (
    BASE_RATES,
    SUPPORTED_CURRENCIES,
    convert_price,
    currency_table,
    format_price,
    is_supported,
    resolve_currency,
    round_half_up,
)
from tests.conftest import FakeGeolocator, FakeRateProvider


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestCurrencyMath:
    def test_convert_multiplies_by_rate(self):
        assert convert_price(499, "INR", {"INR": 83.0}) == pytest.approx(41417.0)

    def test_convert_unknown_currency_returns_usd_amount(self):
        assert convert_price(120, "XYZ") == 120

    def test_convert_is_case_insensitive(self):
        assert convert_price(10, "eur") == pytest.approx(10 * BASE_RATES["EUR"])

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(2.49) == 2

    def test_format_price_uses_symbol_and_separators(self):
        assert format_price(41416.88, "INR") == "₹41,417"
        assert format_price(1500, "USD") == "$1,500"
        assert format_price(1234567, "AUD") == "A$1,234,567"

    def test_format_unknown_currency_falls_back_to_dollar(self):
        assert format_price(10, "XYZ") == "$10"

    @pytest.mark.parametrize("code", list(SUPPORTED_CURRENCIES))
    def test_larger_price_never_displays_smaller(self, code):
        prices = [0, 1, 49, 50, 99, 199, 200, 499, 999, 1500, 2500]
        shown = [round_half_up(convert_price(p, code)) for p in prices]
        assert shown == sorted(shown)

    def test_resolve_currency(self):
        assert resolve_currency("inr") == "INR"
        assert resolve_currency("NZD") == "AUD"
        assert resolve_currency("HKD") == "CNY"
        assert resolve_currency("BRL") == "USD"
        assert resolve_currency(None) == "USD"

    def test_is_supported(self):
        assert is_supported("gbp")
        assert not is_supported("BRL")
        assert not is_supported("")

    def test_currency_table_covers_every_currency(self):
        table = currency_table({"EUR": 0.5})
        by_code = {row["code"]: row for row in table}
        assert set(by_code) == set(SUPPORTED_CURRENCIES)
        assert by_code["EUR"]["rate"] == 0.5
        assert by_code["JPY"]["rate"] == BASE_RATES["JPY"]
        assert by_code["JPY"]["name"] == "Japanese Yen"


class TestCurrencyService:
    async def test_live_rates_override_base_rates(self):
        service = CurrencyService(FakeRateProvider({"EUR": 0.95, "XXX": 2.0}), FakeGeolocator())
        rates = await service.get_rates()
        assert rates["EUR"] == 0.95
        assert rates["GBP"] == BASE_RATES["GBP"]
        assert "XXX" not in rates

    async def test_non_positive_live_rate_is_ignored(self):
        service = CurrencyService(FakeRateProvider({"EUR": 0, "GBP": -1}), FakeGeolocator())
        rates = await service.get_rates()
        assert rates["EUR"] == BASE_RATES["EUR"]
        assert rates["GBP"] == BASE_RATES["GBP"]

    async def test_rates_are_cached_until_expiry(self):
        provider = FakeRateProvider({"EUR": 0.9})
        clock = FakeClock()
        service = CurrencyService(provider, FakeGeolocator(), cache_seconds=60, clock=clock)

        await service.get_rates()
        clock.now += 59
        await service.get_rates()
        assert provider.calls == 1

        clock.now += 2
        await service.get_rates()
        assert provider.calls == 2

    async def test_failed_fetch_returns_base_rates_and_is_retried(self):
        provider = FakeRateProvider(error=httpx.ConnectError("down"))
        service = CurrencyService(provider, FakeGeolocator(), clock=FakeClock())

        assert await service.get_rates() == BASE_RATES
        provider.error = None
        provider.rates = {"EUR": 0.8}
        assert (await service.get_rates())["EUR"] == 0.8
        assert provider.calls == 2

    async def test_malformed_response_falls_back(self):
        provider = FakeRateProvider(error=ValueError("no rates"))
        service = CurrencyService(provider, FakeGeolocator())
        assert await service.get_rates() == BASE_RATES

    async def test_returned_rates_are_copies(self):
        service = CurrencyService(FakeRateProvider({"EUR": 0.9}), FakeGeolocator())
        rates = await service.get_rates()
        rates["EUR"] = 100
        assert (await service.get_rates())["EUR"] == 0.9

    async def test_detect_without_ip_skips_lookup(self):
        geolocator = FakeGeolocator({"1.2.3.4": "EUR"})
        service = CurrencyService(FakeRateProvider(), geolocator)
        assert await service.detect_currency(None) == "USD"
        assert geolocator.seen == []

    async def test_detect_lookup_failure_defaults_to_usd(self):
        service = CurrencyService(
            FakeRateProvider(), FakeGeolocator(error=httpx.ReadTimeout("slow"))
        )
        assert await service.detect_currency("1.2.3.4") == "USD"

    async def test_convert_result_shape(self):
        service = CurrencyService(FakeRateProvider({"GBP": 0.8}), FakeGeolocator())
        result = await service.convert(1500, "gbp")
        assert result == {
            "amountUSD": 1500,
            "currency": "GBP",
            "rate": 0.8,
            "amount": pytest.approx(1200.0),
            "formatted": "£1,200",
        }
