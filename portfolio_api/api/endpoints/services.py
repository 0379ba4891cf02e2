"""Services API. The first list call on an empty collection stores the default offerings."""

from portfolio_api.api.crud import build_crud_router
from portfolio_api.api.dependencies import get_service_repo
from portfolio_api.application.interfaces.repositories import IServiceRepository
from portfolio_api.core.constants import DEFAULT_SERVICES
from portfolio_api.schemas.service import ServiceCreate, ServiceResponse, ServiceUpdate


async def _list_or_seed(repo: IServiceRepository) -> list[dict]:
    return await repo.list_or_seed(DEFAULT_SERVICES)


router = build_crud_router(
    get_repo=get_service_repo,
    create_schema=ServiceCreate,
    update_schema=ServiceUpdate,
    response_schema=ServiceResponse,
    list_items=_list_or_seed,
)
