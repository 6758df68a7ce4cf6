"""Request bodies and row projection for /api/payments."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class PaymentCreate(BaseModel):
    order_id: Optional[int] = Field(default=None, examples=[1])
    payment_method: Optional[str] = Field(default=None, examples=["cash"])
    payment_status: Optional[str] = Field(default=None, examples=["unpaid"])
    amount: Optional[float] = Field(default=None, examples=[120.0])


class PaymentUpdate(BaseModel):
    payment_method: Optional[str] = None
    payment_status: Optional[str] = None
    amount: Optional[float] = None


class PaymentOut(BaseModel):
    id: int
    order_id: int
    payment_method: str
    payment_status: str
    amount: float
    paid_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
