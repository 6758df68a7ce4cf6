"""Request bodies and row projection for /api/restaurants."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class RestaurantCreate(BaseModel):
    restaurant_name: Optional[str] = Field(default=None, examples=["Baan Somtum"])
    address: Optional[str] = None
    phone: Optional[str] = None
    menu_description: Optional[str] = None


class RestaurantUpdate(RestaurantCreate):
    pass


class RestaurantOut(BaseModel):
    id: int
    restaurant_name: str
    address: Optional[str] = None
    phone: Optional[str] = None
    menu_description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
