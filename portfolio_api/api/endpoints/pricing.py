"""Pricing plans API: public list/get, admin create/update/delete. Listed by price ascending."""

from portfolio_api.api.crud import build_crud_router
from portfolio_api.api.dependencies import get_pricing_repo
from portfolio_api.schemas.pricing import PricingCreate, PricingResponse, PricingUpdate

router = build_crud_router(
    get_repo=get_pricing_repo,
    create_schema=PricingCreate,
    update_schema=PricingUpdate,
    response_schema=PricingResponse,
)
