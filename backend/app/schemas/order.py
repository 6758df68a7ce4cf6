"""
Restaurant Ordering API: Order Schemas
=========================================

Trust boundary:
    OrderCreate still accepts a `price` field so older clients keep
    working, but the service ignores it. The unit price always comes from
    the menu row and total_price is computed server-side.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class OrderCreate(BaseModel):
    customer_id: Optional[int] = Field(default=None, examples=[1])
    restaurant_id: Optional[int] = Field(default=None, examples=[1])
    menu_id: Optional[int] = Field(default=None, examples=[1])
    quantity: Optional[int] = Field(default=None, examples=[2])
    price: Optional[float] = Field(
        default=None, description="Ignored; the menu price is used", examples=[60.0]
    )


class OrderUpdate(BaseModel):
    """Only the order status can change after creation."""
    status: Optional[str] = Field(default=None, examples=["completed"])


class OrderOut(BaseModel):
    id: int
    customer_id: int
    restaurant_id: int
    menu_id: int
    quantity: int
    price: float
    total_price: float
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class OrderCreatedResponse(BaseModel):
    status: str = "ok"
    id: int
    price: float = Field(description="Unit price read from the menu")
    total_price: float


class OrderSummary(BaseModel):
    customer_id: int
    order_count: int
    total_amount: float
