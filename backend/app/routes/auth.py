"""
Restaurant Ordering API: Authentication Routes
=================================================

What:  POST /login, POST /logout, GET /profile.
How:   /login exchanges username + password for a bearer token. /logout and
       /profile sit behind the auth gate.

Logout is stateless: tokens are not tracked server-side, so logging out
means the client discards its token. The token itself stays valid until
its `exp`.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.middleware.auth import require_principal
from app.routes.dependencies import get_auth_service
from app.schemas.auth import LoginRequest, ProfileResponse, TokenResponse
from app.schemas.common import ERROR_RESPONSES, ErrorResponse, MessageResponse, Principal
from app.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={401: {"description": "Invalid username or password", "model": ErrorResponse}},
    summary="Exchange credentials for a bearer token",
)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
    auth: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    token = await auth.login(db, body.username, body.password)
    return TokenResponse(token=token)


@router.post(
    "/logout",
    response_model=MessageResponse,
    responses={401: ERROR_RESPONSES[401]},
    summary="Log out (client discards its token)",
)
async def logout(principal: Principal = Depends(require_principal)) -> MessageResponse:
    logger.info("Customer %s logged out", principal.id)
    return MessageResponse(message="Logout successful")


@router.get(
    "/profile",
    response_model=ProfileResponse,
    responses={401: ERROR_RESPONSES[401]},
    summary="Identity carried by the bearer token",
)
async def profile(principal: Principal = Depends(require_principal)) -> ProfileResponse:
    return ProfileResponse(data=principal)
