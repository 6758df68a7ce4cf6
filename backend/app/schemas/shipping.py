"""Request bodies and row projection for /api/shippings."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ShippingCreate(BaseModel):
    order_id: Optional[int] = Field(default=None, examples=[1])
    receiver_name: Optional[str] = Field(default=None, examples=["Somchai"])
    shipping_address: Optional[str] = Field(default=None, examples=["99 Nimman Rd, Chiang Mai"])
    phone: Optional[str] = Field(default=None, examples=["0812345678"])


class ShippingUpdate(BaseModel):
    receiver_name: Optional[str] = None
    shipping_address: Optional[str] = None
    phone: Optional[str] = None
    shipping_status: Optional[str] = None


class ShippingOut(BaseModel):
    id: int
    order_id: int
    receiver_name: str
    shipping_address: str
    phone: str
    shipping_status: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
