"""Router builder for the document collections.

Projects, pricing, services and the resume sections expose the same five
operations: list and get are public, create/update/delete need an admin.
Each operation is one repository call (update and delete read first so an
unknown id is a 404).
"""

from collections.abc import Awaitable, Callable
from typing import Annotated, Any

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from portfolio_api.api.dependencies import require_admin
from portfolio_api.application.interfaces.repositories import IDocumentRepository
from portfolio_api.domain.exceptions import ResourceNotFoundException
from portfolio_api.schemas.common import ApiResponse, CamelModel, MessageResponse

ListItems = Callable[[Any], Awaitable[list[dict[str, Any]]]]


async def _list_all(repo: IDocumentRepository) -> list[dict[str, Any]]:
    return await repo.list_all()


def build_crud_router(
    *,
    get_repo: Callable[..., Any],
    create_schema: type[CamelModel],
    update_schema: type[CamelModel],
    response_schema: type[BaseModel],
    list_items: ListItems = _list_all,
) -> APIRouter:
    """Return a router with GET "", GET "/{item_id}", POST "", PUT "/{item_id}", DELETE "/{item_id}".

    Args:
        get_repo: Dependency returning the collection's repository.
        create_schema: POST body (defaults and required fields).
        update_schema: PUT body (all optional; null means unchanged).
        response_schema: Shape of one document in responses.
        list_items: Coroutine producing the list (e.g. with seeding).
    """
    router = APIRouter()
    RepoDep = Annotated[IDocumentRepository, Depends(get_repo)]

    @router.get("", response_model=ApiResponse[list[response_schema]])
    async def list_documents(repo: RepoDep):
        items = await list_items(repo)
        return ApiResponse(data=[response_schema.model_validate(i) for i in items])

    @router.get("/{item_id}", response_model=ApiResponse[response_schema])
    async def get_document(item_id: str, repo: RepoDep):
        item = await repo.get_by_id(item_id)
        if item is None:
            raise ResourceNotFoundException(repo.resource_name, item_id)
        return ApiResponse(data=response_schema.model_validate(item))

    @router.post(
        "",
        response_model=ApiResponse[response_schema],
        status_code=status.HTTP_201_CREATED,
        dependencies=[Depends(require_admin)],
    )
    async def create_document(body: create_schema, repo: RepoDep):
        item = await repo.create(body.to_document())
        return ApiResponse(data=response_schema.model_validate(item))

    @router.put(
        "/{item_id}",
        response_model=ApiResponse[response_schema],
        dependencies=[Depends(require_admin)],
    )
    async def update_document(item_id: str, body: update_schema, repo: RepoDep):
        item = await repo.update(item_id, body.to_document())
        if item is None:
            raise ResourceNotFoundException(repo.resource_name, item_id)
        return ApiResponse(data=response_schema.model_validate(item))

    @router.delete(
        "/{item_id}",
        response_model=MessageResponse,
        dependencies=[Depends(require_admin)],
    )
    async def delete_document(item_id: str, repo: RepoDep):
        if not await repo.delete(item_id):
            raise ResourceNotFoundException(repo.resource_name, item_id)
        return MessageResponse(message=f"{repo.resource_name} deleted successfully")

    return router
