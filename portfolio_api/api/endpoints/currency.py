"""Currency API: supported currencies with live rates, conversion, viewer currency detection."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from portfolio_api.api.dependencies import get_currency_service
from portfolio_api.application.services.currency_service import CurrencyService
from portfolio_api.domain.currency import SUPPORTED_CURRENCIES, currency_table
from portfolio_api.schemas.common import ApiResponse
from portfolio_api.schemas.currency import (
    CurrencyConversion,
    CurrencyDetection,
    CurrencyInfo,
    CurrencyRatesResponse,
)

router = APIRouter()

ServiceDep = Annotated[CurrencyService, Depends(get_currency_service)]

# Keeps converted amounts finite for every supported rate.
MAX_AMOUNT_USD = 1e12


def client_ip(request: Request) -> str | None:
    """First X-Forwarded-For entry, else the socket peer."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    return request.client.host if request.client else None


@router.get("/rates", response_model=ApiResponse[CurrencyRatesResponse])
async def get_rates(service: ServiceDep):
    rates = await service.get_rates()
    currencies = [CurrencyInfo(**row) for row in currency_table(rates)]
    return ApiResponse(data=CurrencyRatesResponse(currencies=currencies))


@router.get("/convert", response_model=ApiResponse[CurrencyConversion])
async def convert(
    service: ServiceDep,
    amount: Annotated[
        float,
        Query(ge=0, le=MAX_AMOUNT_USD, allow_inf_nan=False, description="Price in USD"),
    ],
    currency: Annotated[str, Query(min_length=3, max_length=3)] = "USD",
):
    """Convert a USD amount; unsupported currencies are shown in USD."""
    result = await service.convert(amount, currency)
    return ApiResponse(data=CurrencyConversion(**result))


@router.get("/detect", response_model=ApiResponse[CurrencyDetection])
async def detect(request: Request, service: ServiceDep):
    """Guess the viewer's display currency from their IP (USD when unknown)."""
    code = await service.detect_currency(client_ip(request))
    return ApiResponse(
        data=CurrencyDetection(currency=code, symbol=SUPPORTED_CURRENCIES[code]["symbol"])
    )
