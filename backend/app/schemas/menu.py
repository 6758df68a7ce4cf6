"""
Request bodies and row projection for /api/menus.

MenuOut carries `restaurant_name` from the joined restaurant row; it is
null when the menu points at a restaurant that no longer exists.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class MenuCreate(BaseModel):
    restaurant_id: Optional[int] = Field(default=None, examples=[1])
    menu_name: Optional[str] = Field(default=None, examples=["Pad Thai"])
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, examples=[60.0])
    category: Optional[str] = Field(default=None, examples=["noodles"])


class MenuUpdate(MenuCreate):
    pass


class MenuOut(BaseModel):
    id: int
    restaurant_id: int
    restaurant_name: Optional[str] = None
    menu_name: str
    description: Optional[str] = None
    price: float
    category: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
