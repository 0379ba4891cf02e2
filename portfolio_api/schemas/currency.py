"""Currency API schemas."""

from pydantic import BaseModel


class CurrencyInfo(BaseModel):
    code: str
    symbol: str
    name: str
    flag: str
    rate: float


class CurrencyRatesResponse(BaseModel):
    base: str = "USD"
    currencies: list[CurrencyInfo]


class CurrencyConversion(BaseModel):
    amountUSD: float
    currency: str
    rate: float
    amount: float
    formatted: str


class CurrencyDetection(BaseModel):
    currency: str
    symbol: str
