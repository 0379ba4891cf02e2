"""Pricing plan API schemas."""

from pydantic import Field

from portfolio_api.domain.enums import PricingPeriod
from portfolio_api.schemas.common import CamelModel, DocumentResponse


class PricingFields(CamelModel):
    name: str | None = Field(default=None, max_length=200)
    price: float | None = Field(default=None, ge=0, description="Price in USD")
    period: PricingPeriod | None = None
    description: str | None = None
    features: list[str] | None = None
    popular: bool | None = None


class PricingCreate(PricingFields):
    """Request body for POST /pricing. Price defaults to 0, features to []."""

    price: float = Field(default=0, ge=0, description="Price in USD")
    features: list[str] = Field(default_factory=list)
    popular: bool = False


class PricingUpdate(PricingFields):
    """Request body for PUT /pricing/{id}; null or omitted fields are kept."""


class PricingResponse(DocumentResponse):
    name: str | None = None
    price: float = 0
    period: str | None = None
    description: str | None = None
    features: list[str] = Field(default_factory=list)
    popular: bool = False
