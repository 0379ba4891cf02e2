"""Currency tables and pure display math for prices stored in USD.

Prices are kept in USD; the Pricing page shows them in the viewer's
currency. Conversion is a plain multiplication by a USD-based rate, and
display rounds half up to a whole unit, so for a fixed rate table a larger
USD price never displays as a smaller amount.
"""

import math
from typing import Any

DEFAULT_CURRENCY = "USD"

SUPPORTED_CURRENCIES: dict[str, dict[str, str]] = {
    "USD": {"symbol": "$", "name": "US Dollar", "flag": "🇺🇸"},
    "EUR": {"symbol": "€", "name": "Euro", "flag": "🇪🇺"},
    "GBP": {"symbol": "£", "name": "British Pound", "flag": "🇬🇧"},
    "INR": {"symbol": "₹", "name": "Indian Rupee", "flag": "🇮🇳"},
    "JPY": {"symbol": "¥", "name": "Japanese Yen", "flag": "🇯🇵"},
    "AUD": {"symbol": "A$", "name": "Australian Dollar", "flag": "🇦🇺"},
    "CAD": {"symbol": "C$", "name": "Canadian Dollar", "flag": "🇨🇦"},
    "CHF": {"symbol": "CHF", "name": "Swiss Franc", "flag": "🇨🇭"},
    "CNY": {"symbol": "¥", "name": "Chinese Yuan", "flag": "🇨🇳"},
    "AED": {"symbol": "د.إ", "name": "UAE Dirham", "flag": "🇦🇪"},
}

# Approximate rates relative to USD; used until (or whenever) live rates are unavailable.
BASE_RATES: dict[str, float] = {
    "USD": 1.0,
    "EUR": 0.92,
    "GBP": 0.79,
    "INR": 83.12,
    "JPY": 149.50,
    "AUD": 1.52,
    "CAD": 1.36,
    "CHF": 0.88,
    "CNY": 7.24,
    "AED": 3.67,
}

# Unsupported local currencies shown in a nearby supported one.
CURRENCY_FALLBACKS: dict[str, str] = {
    "NZD": "AUD",
    "SGD": "USD",
    "HKD": "CNY",
    "SAR": "AED",
}


def is_supported(code: str | None) -> bool:
    return bool(code) and code.upper() in SUPPORTED_CURRENCIES


def resolve_currency(code: str | None) -> str:
    """Map a detected currency code to one we display (USD when unknown)."""
    if not code:
        return DEFAULT_CURRENCY
    code = code.upper()
    if code in SUPPORTED_CURRENCIES:
        return code
    return CURRENCY_FALLBACKS.get(code, DEFAULT_CURRENCY)


def convert_price(
    price_usd: float, currency: str, rates: dict[str, float] | None = None
) -> float:
    """Convert a USD price; an unsupported currency returns the USD amount unchanged."""
    table = rates if rates is not None else BASE_RATES
    rate = table.get(currency.upper()) if currency else None
    if not rate:
        return price_usd
    return price_usd * rate


def round_half_up(amount: float) -> int:
    return math.floor(amount + 0.5)


def format_price(amount: float, currency: str = DEFAULT_CURRENCY) -> str:
    """Whole-unit display with symbol and thousands separators, e.g. "₹41,477"."""
    info = SUPPORTED_CURRENCIES.get((currency or "").upper())
    symbol = info["symbol"] if info else "$"
    return f"{symbol}{round_half_up(amount):,}"


def currency_table(rates: dict[str, float]) -> list[dict[str, Any]]:
    """Supported currencies with their display info and current rate."""
    return [
        {"code": code, **info, "rate": rates.get(code, BASE_RATES[code])}
        for code, info in SUPPORTED_CURRENCIES.items()
    ]
