"""/api/restaurants CRUD (gated). A malformed ?limit= is a 400 here, not ignored."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.middleware.auth import require_principal
from app.routes.dependencies import strict_page, path_id
from app.schemas.common import (
    ERROR_RESPONSES,
    CreatedResponse,
    ItemEnvelope,
    ListEnvelope,
    MessageResponse,
)
from app.schemas.restaurant import RestaurantCreate, RestaurantUpdate, RestaurantOut
from app.services.resource_service import PageRequest, build_update_set
from app.services.restaurant_service import restaurant_service

router = APIRouter(
    prefix="/api/restaurants",
    tags=["Restaurants"],
    dependencies=[Depends(require_principal)],
)


@router.get(
    "",
    response_model=ListEnvelope[RestaurantOut],
    response_model_exclude_unset=True,
    responses=ERROR_RESPONSES,
    summary="List restaurants",
)
async def list_restaurants(
    page: PageRequest = Depends(strict_page),
    db: AsyncSession = Depends(get_db_session),
):
    return await restaurant_service.list(db, page)


@router.get(
    "/{item_id}",
    response_model=ItemEnvelope[RestaurantOut],
    responses=ERROR_RESPONSES,
    summary="Get one restaurant",
)
async def get_restaurant(
    restaurant_id: int = Depends(path_id),
    db: AsyncSession = Depends(get_db_session),
):
    return ItemEnvelope[RestaurantOut](data=await restaurant_service.get(db, restaurant_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedResponse,
    responses=ERROR_RESPONSES,
    summary="Create a restaurant",
)
async def create_restaurant(
    body: RestaurantCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    return CreatedResponse(id=await restaurant_service.create(db, body))


@router.put(
    "/{item_id}",
    response_model=MessageResponse,
    responses=ERROR_RESPONSES,
    summary="Partially update a restaurant",
)
async def update_restaurant(
    body: RestaurantUpdate,
    restaurant_id: int = Depends(path_id),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    changes = build_update_set(body, restaurant_service.mutable_columns)
    await restaurant_service.update(db, restaurant_id, changes)
    return MessageResponse(message="Restaurant updated successfully")


@router.delete(
    "/{item_id}",
    response_model=MessageResponse,
    responses=ERROR_RESPONSES,
    summary="Delete a restaurant",
)
async def delete_restaurant(
    restaurant_id: int = Depends(path_id),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await restaurant_service.delete(db, restaurant_id)
    return MessageResponse(message="Restaurant deleted successfully")
