"""/api/menus CRUD (gated). List and get include the restaurant's name."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.middleware.auth import require_principal
from app.routes.dependencies import lenient_page, path_id
from app.schemas.common import (
    ERROR_RESPONSES,
    CreatedResponse,
    ItemEnvelope,
    ListEnvelope,
    MessageResponse,
)
from app.schemas.menu import MenuCreate, MenuUpdate, MenuOut
from app.services.resource_service import PageRequest, build_update_set
from app.services.menu_service import menu_service

router = APIRouter(
    prefix="/api/menus",
    tags=["Menus"],
    dependencies=[Depends(require_principal)],
)


@router.get(
    "",
    response_model=ListEnvelope[MenuOut],
    response_model_exclude_unset=True,
    responses=ERROR_RESPONSES,
    summary="List menus",
)
async def list_menus(
    page: PageRequest = Depends(lenient_page),
    db: AsyncSession = Depends(get_db_session),
):
    return await menu_service.list(db, page)


@router.get(
    "/{item_id}",
    response_model=ItemEnvelope[MenuOut],
    responses=ERROR_RESPONSES,
    summary="Get one menu",
)
async def get_menu(
    menu_id: int = Depends(path_id),
    db: AsyncSession = Depends(get_db_session),
):
    return ItemEnvelope[MenuOut](data=await menu_service.get(db, menu_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedResponse,
    responses=ERROR_RESPONSES,
    summary="Create a menu",
)
async def create_menu(
    body: MenuCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    return CreatedResponse(id=await menu_service.create(db, body))


@router.put(
    "/{item_id}",
    response_model=MessageResponse,
    responses=ERROR_RESPONSES,
    summary="Partially update a menu",
)
async def update_menu(
    body: MenuUpdate,
    menu_id: int = Depends(path_id),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    changes = build_update_set(body, menu_service.mutable_columns)
    await menu_service.update(db, menu_id, changes)
    return MessageResponse(message="Menu updated successfully")


@router.delete(
    "/{item_id}",
    response_model=MessageResponse,
    responses=ERROR_RESPONSES,
    summary="Delete a menu",
)
async def delete_menu(
    menu_id: int = Depends(path_id),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await menu_service.delete(db, menu_id)
    return MessageResponse(message="Menu deleted successfully")
