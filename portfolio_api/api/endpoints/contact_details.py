"""Contact details API: one document, created with placeholders on first read."""

from typing import Annotated

from fastapi import APIRouter, Depends

from portfolio_api.api.dependencies import AdminDep, get_contact_details_repo
from portfolio_api.application.interfaces.repositories import ISingletonRepository
from portfolio_api.core.config import Settings, get_settings
from portfolio_api.core.constants import default_contact_details
from portfolio_api.schemas.common import ApiResponse
from portfolio_api.schemas.contact import ContactDetailsResponse, ContactDetailsUpdate

router = APIRouter()

RepoDep = Annotated[ISingletonRepository, Depends(get_contact_details_repo)]


@router.get("", response_model=ApiResponse[ContactDetailsResponse])
async def get_contact_details(
    repo: RepoDep,
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Return contact details shown on the Contact page."""
    details = await repo.get_or_init(default_contact_details(settings.admin_email_list[0]))
    return ApiResponse(data=ContactDetailsResponse.model_validate(details))


@router.put("", response_model=ApiResponse[ContactDetailsResponse])
async def update_contact_details(
    body: ContactDetailsUpdate,
    _admin: AdminDep,
    repo: RepoDep,
):
    """Merge the given fields into the contact details (admin only)."""
    details = await repo.merge(body.to_document())
    return ApiResponse(data=ContactDetailsResponse.model_validate(details))
