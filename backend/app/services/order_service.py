"""
Restaurant Ordering API: Order Service
=========================================

What:  /api/orders on the generic contract, plus server-side pricing and the
       per-customer summary.

Pricing Flow (POST /api/orders):
    1. customer_id, restaurant_id, menu_id, quantity must be truthy
    2. SELECT price, restaurant_id FROM tbl_menus WHERE id = :menu_id
         no row                      → 404 "Menu not found"
         menu of another restaurant  → 400
    3. total_price = round(quantity * price, 2)
    4. INSERT with the menu price; a caller-supplied price is ignored

    Steps 2 and 4 are two separate round trips; the menu price can change
    between them and the order keeps the price that was read.

After creation only `status` can change.
"""

import logging
from typing import Any, Dict

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotFoundError, ValidationError
from app.models.menu import Menu
from app.models.order import Order
from app.schemas.order import OrderCreate, OrderCreatedResponse, OrderOut, OrderSummary
from app.services.resource_service import ResourceService, database_errors, require_fields

logger = logging.getLogger(__name__)


class OrderService(ResourceService):
    model = Order
    schema = OrderOut
    label = "Order"
    columns = (
        Order.id,
        Order.customer_id,
        Order.restaurant_id,
        Order.menu_id,
        Order.quantity,
        Order.price,
        Order.total_price,
        Order.status,
        Order.created_at,
        Order.updated_at,
    )
    required_fields = ("customer_id", "restaurant_id", "menu_id", "quantity")
    mutable_columns = ("status",)

    async def place(self, db: AsyncSession, body: OrderCreate) -> OrderCreatedResponse:
        values = body.model_dump()
        require_fields(values, self.required_fields)
        if values["quantity"] < 0:
            raise ValidationError("quantity must be a positive number", field="quantity")

        async with database_errors("Menu", "price lookup", id=values["menu_id"]):
            result = await db.execute(
                select(Menu.price, Menu.restaurant_id).where(Menu.id == values["menu_id"])
            )
            menu = result.first()

        if menu is None:
            raise NotFoundError(resource="Menu", resource_id=values["menu_id"])
        if menu.restaurant_id != values["restaurant_id"]:
            raise ValidationError(
                "menu does not belong to restaurant",
                field="menu_id",
                context={"menu_restaurant_id": menu.restaurant_id},
            )

        price = float(menu.price)
        total_price = round(values["quantity"] * price, 2)
        order_id = await self.insert(
            db,
            {
                "customer_id": values["customer_id"],
                "restaurant_id": values["restaurant_id"],
                "menu_id": values["menu_id"],
                "quantity": values["quantity"],
                "price": price,
                "total_price": total_price,
            },
        )
        return OrderCreatedResponse(id=order_id, price=price, total_price=total_price)

    def validate_changes(self, changes: Dict[str, Any]) -> None:
        if not changes.get("status"):
            raise ValidationError("status must not be empty", field="status")

    async def summary(self, db: AsyncSession, customer_id: int) -> OrderSummary:
        """Order count and total spend for one customer (zeros when they have none)."""
        statement = select(
            func.count(Order.id),
            func.coalesce(func.sum(Order.total_price), 0),
        ).where(Order.customer_id == customer_id)

        async with database_errors(self.label, "summary", customer_id=customer_id):
            result = await db.execute(statement)
            order_count, total_amount = result.one()

        return OrderSummary(
            customer_id=customer_id,
            order_count=order_count,
            total_amount=round(float(total_amount), 2),
        )


order_service = OrderService()
