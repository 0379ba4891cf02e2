"""HTTP clients for exchange rates and IP geolocation."""

from portfolio_api.infrastructure.external.currency.exchange_rates import (
    ExchangeRateClient,
)
from portfolio_api.infrastructure.external.currency.geolocation import (
    GeolocationClient,
)

__all__ = ["ExchangeRateClient", "GeolocationClient"]
