"""Service (à la carte offering) API schemas."""

from typing import Self

from pydantic import AliasChoices, Field, model_validator
from pydantic_core import PydanticCustomError

from portfolio_api.schemas.common import CamelModel, DocumentResponse, is_blank

SERVICE_REQUIRED_MESSAGE = "Service name, price, and turnaround are required"


class ServiceFields(CamelModel):
    name: str | None = Field(
        default=None,
        max_length=200,
        validation_alias=AliasChoices("name", "service"),
    )
    price_usd: float | None = Field(
        default=None,
        alias="priceUSD",
        validation_alias=AliasChoices("priceUSD", "price_usd", "price"),
    )
    turnaround: str | None = None
    is_starting_price: bool | None = None
    is_monthly: bool | None = None


class ServiceCreate(ServiceFields):
    """Request body for POST /services. Name, a positive price and turnaround are required."""

    is_starting_price: bool = False
    is_monthly: bool = False

    @model_validator(mode="after")
    def check_required(self) -> Self:
        if (
            is_blank(self.name)
            or is_blank(self.turnaround)
            or self.price_usd is None
            or self.price_usd <= 0
        ):
            raise PydanticCustomError("missing_fields", SERVICE_REQUIRED_MESSAGE)
        return self


class ServiceUpdate(ServiceFields):
    """Request body for PUT /services/{id}; null or omitted fields are kept."""

    price_usd: float | None = Field(
        default=None,
        gt=0,
        alias="priceUSD",
        validation_alias=AliasChoices("priceUSD", "price_usd", "price"),
    )


class ServiceResponse(DocumentResponse):
    name: str | None = None
    price_usd: float = Field(default=0, alias="priceUSD")
    turnaround: str | None = None
    is_starting_price: bool = False
    is_monthly: bool = False
