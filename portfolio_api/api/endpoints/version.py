"""Site version API. Falls back to a local JSON file when Firestore is not configured."""

from typing import Annotated

from fastapi import APIRouter, Depends

from portfolio_api.api.dependencies import AdminDep, get_version_store
from portfolio_api.application.interfaces.repositories import IVersionStore
from portfolio_api.core.constants import DEFAULT_VERSION
from portfolio_api.schemas.common import ApiResponse
from portfolio_api.schemas.version import VersionResponse, VersionUpdate

router = APIRouter()

StoreDep = Annotated[IVersionStore, Depends(get_version_store)]


@router.get("", response_model=ApiResponse[VersionResponse])
async def get_version(store: StoreDep):
    record = await store.get_version(DEFAULT_VERSION)
    return ApiResponse(data=VersionResponse.model_validate(record))


@router.api_route("", methods=["POST", "PUT"], response_model=ApiResponse[VersionResponse])
async def update_version(body: VersionUpdate, _admin: AdminDep, store: StoreDep):
    """Set the site version (admin only). PUT is accepted as an alias of POST."""
    record = await store.set_version(body.version)
    return ApiResponse(data=VersionResponse.model_validate(record))
