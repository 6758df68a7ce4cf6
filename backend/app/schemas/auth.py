"""Request/response schemas for /login, /logout and /profile."""

from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.common import Principal


class LoginRequest(BaseModel):
    # Optional so a missing field yields the same 401 as a wrong password
    username: Optional[str] = Field(default=None, examples=["johndoe"])
    password: Optional[str] = Field(default=None, examples=["123456"])


class TokenResponse(BaseModel):
    status: str = "ok"
    token: str = Field(description="Bearer token, valid for JWT_EXPIRE_MINUTES")


class ProfileResponse(BaseModel):
    status: str = "ok"
    data: Principal
