"""/api/payments CRUD (gated). Method/status enums and paid_at live in PaymentService."""

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
from app.schemas.payment import PaymentCreate, PaymentUpdate, PaymentOut
from app.services.resource_service import PageRequest, build_update_set
from app.services.payment_service import payment_service

router = APIRouter(
    prefix="/api/payments",
    tags=["Payments"],
    dependencies=[Depends(require_principal)],
)


@router.get(
    "",
    response_model=ListEnvelope[PaymentOut],
    response_model_exclude_unset=True,
    responses=ERROR_RESPONSES,
    summary="List payments",
)
async def list_payments(
    page: PageRequest = Depends(strict_page),
    db: AsyncSession = Depends(get_db_session),
):
    return await payment_service.list(db, page)


@router.get(
    "/{item_id}",
    response_model=ItemEnvelope[PaymentOut],
    responses=ERROR_RESPONSES,
    summary="Get one payment",
)
async def get_payment(
    payment_id: int = Depends(path_id),
    db: AsyncSession = Depends(get_db_session),
):
    return ItemEnvelope[PaymentOut](data=await payment_service.get(db, payment_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedResponse,
    responses=ERROR_RESPONSES,
    summary="Create a payment",
)
async def create_payment(
    body: PaymentCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    return CreatedResponse(id=await payment_service.create(db, body))


@router.put(
    "/{item_id}",
    response_model=MessageResponse,
    responses=ERROR_RESPONSES,
    summary="Partially update a payment",
)
async def update_payment(
    body: PaymentUpdate,
    payment_id: int = Depends(path_id),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    changes = build_update_set(body, payment_service.mutable_columns)
    await payment_service.update(db, payment_id, changes)
    return MessageResponse(message="Payment updated successfully")


@router.delete(
    "/{item_id}",
    response_model=MessageResponse,
    responses=ERROR_RESPONSES,
    summary="Delete a payment",
)
async def delete_payment(
    payment_id: int = Depends(path_id),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await payment_service.delete(db, payment_id)
    return MessageResponse(message="Payment deleted successfully")
