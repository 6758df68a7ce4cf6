"""/api/shippings CRUD (gated)."""

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
from app.schemas.shipping import ShippingCreate, ShippingUpdate, ShippingOut
from app.services.resource_service import PageRequest, build_update_set
from app.services.shipping_service import shipping_service

router = APIRouter(
    prefix="/api/shippings",
    tags=["Shippings"],
    dependencies=[Depends(require_principal)],
)


@router.get(
    "",
    response_model=ListEnvelope[ShippingOut],
    response_model_exclude_unset=True,
    responses=ERROR_RESPONSES,
    summary="List shippings",
)
async def list_shippings(
    page: PageRequest = Depends(lenient_page),
    db: AsyncSession = Depends(get_db_session),
):
    return await shipping_service.list(db, page)


@router.get(
    "/{item_id}",
    response_model=ItemEnvelope[ShippingOut],
    responses=ERROR_RESPONSES,
    summary="Get one shipping",
)
async def get_shipping(
    shipping_id: int = Depends(path_id),
    db: AsyncSession = Depends(get_db_session),
):
    return ItemEnvelope[ShippingOut](data=await shipping_service.get(db, shipping_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedResponse,
    responses=ERROR_RESPONSES,
    summary="Create a shipping",
)
async def create_shipping(
    body: ShippingCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    return CreatedResponse(id=await shipping_service.create(db, body))


@router.put(
    "/{item_id}",
    response_model=MessageResponse,
    responses=ERROR_RESPONSES,
    summary="Partially update a shipping",
)
async def update_shipping(
    body: ShippingUpdate,
    shipping_id: int = Depends(path_id),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    changes = build_update_set(body, shipping_service.mutable_columns)
    await shipping_service.update(db, shipping_id, changes)
    return MessageResponse(message="Shipping updated successfully")


@router.delete(
    "/{item_id}",
    response_model=MessageResponse,
    responses=ERROR_RESPONSES,
    summary="Delete a shipping",
)
async def delete_shipping(
    shipping_id: int = Depends(path_id),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await shipping_service.delete(db, shipping_id)
    return MessageResponse(message="Shipping deleted successfully")
