"""
Restaurant Ordering API: User Schemas
========================================

What:  Request bodies and row projection for /api/users.

Create vs update:
    Every field is Optional on both models. Required-ness on create is a
    truthiness check in the service (empty string counts as missing, and the
    response is 400 "Missing required fields" rather than pydantic's 422).
    Update bodies are dumped with exclude_unset=True, which yields exactly
    the fields the caller sent.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    username: Optional[str] = Field(default=None, examples=["johndoe"])
    password: Optional[str] = Field(default=None, examples=["123456"])
    firstname: Optional[str] = None
    fullname: Optional[str] = None
    lastname: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None


class UserUpdate(UserCreate):
    """Partial update: only the fields present in the JSON body are written."""


class UserOut(BaseModel):
    """Read projection. Deliberately has no password field."""
    id: int
    username: str
    firstname: Optional[str] = None
    fullname: Optional[str] = None
    lastname: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class UserCreatedResponse(BaseModel):
    status: str = "ok"
    id: int
    username: str
