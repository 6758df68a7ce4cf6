"""
Restaurant Ordering API: Order Routes
========================================

What:  /api/orders CRUD plus GET /api/orders/summary, all behind the gate.
Note:  /summary is registered before /{item_id}; otherwise "summary" would be
       parsed as an id and rejected with 400.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.middleware.auth import require_principal
from app.routes.dependencies import lenient_page, path_id
from app.schemas.common import ERROR_RESPONSES, ItemEnvelope, ListEnvelope, MessageResponse, Principal
from app.schemas.order import OrderCreate, OrderCreatedResponse, OrderOut, OrderSummary, OrderUpdate
from app.services.order_service import order_service
from app.services.resource_service import PageRequest, build_update_set

router = APIRouter(
    prefix="/api/orders",
    tags=["Orders"],
    dependencies=[Depends(require_principal)],
)


@router.get(
    "",
    response_model=ListEnvelope[OrderOut],
    response_model_exclude_unset=True,
    responses=ERROR_RESPONSES,
    summary="List orders",
)
async def list_orders(
    page: PageRequest = Depends(lenient_page),
    db: AsyncSession = Depends(get_db_session),
):
    return await order_service.list(db, page)


@router.get(
    "/summary",
    response_model=ItemEnvelope[OrderSummary],
    responses=ERROR_RESPONSES,
    summary="Order count and spend of the calling customer",
)
async def order_summary(
    principal: Principal = Depends(require_principal),
    db: AsyncSession = Depends(get_db_session),
):
    return ItemEnvelope[OrderSummary](data=await order_service.summary(db, principal.id))


@router.get(
    "/{item_id}",
    response_model=ItemEnvelope[OrderOut],
    responses=ERROR_RESPONSES,
    summary="Get one order",
)
async def get_order(
    order_id: int = Depends(path_id),
    db: AsyncSession = Depends(get_db_session),
):
    return ItemEnvelope[OrderOut](data=await order_service.get(db, order_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=OrderCreatedResponse,
    responses=ERROR_RESPONSES,
    summary="Place an order (price comes from the menu)",
)
async def create_order(
    body: OrderCreate,
    db: AsyncSession = Depends(get_db_session),
) -> OrderCreatedResponse:
    return await order_service.place(db, body)


@router.put(
    "/{item_id}",
    response_model=MessageResponse,
    responses=ERROR_RESPONSES,
    summary="Change an order's status",
)
async def update_order(
    body: OrderUpdate,
    order_id: int = Depends(path_id),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    changes = build_update_set(body, order_service.mutable_columns)
    await order_service.update(db, order_id, changes)
    return MessageResponse(message="Order updated successfully")


@router.delete(
    "/{item_id}",
    response_model=MessageResponse,
    responses=ERROR_RESPONSES,
    summary="Delete an order",
)
async def delete_order(
    order_id: int = Depends(path_id),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await order_service.delete(db, order_id)
    return MessageResponse(message="Order deleted successfully")
