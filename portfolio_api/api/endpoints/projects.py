"""Projects API: public list/get, admin create/update/delete. Listed newest first."""

from portfolio_api.api.crud import build_crud_router
from portfolio_api.api.dependencies import get_project_repo
from portfolio_api.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate

router = build_crud_router(
    get_repo=get_project_repo,
    create_schema=ProjectCreate,
    update_schema=ProjectUpdate,
    response_schema=ProjectResponse,
)
