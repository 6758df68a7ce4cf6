"""
Restaurant Ordering API: User Routes
=======================================

What:  /api/users CRUD.
Access:
    POST /api/users       public (account registration)
    everything else       behind the auth gate
Passwords are hashed before they reach the database and never returned.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.middleware.auth import require_principal
from app.routes.dependencies import get_auth_service, lenient_page, path_id
from app.schemas.common import (
    ERROR_RESPONSES,
    ErrorResponse,
    ItemEnvelope,
    ListEnvelope,
    MessageResponse,
)
from app.schemas.user import UserCreate, UserCreatedResponse, UserOut, UserUpdate
from app.services.auth_service import AuthService
from app.services.resource_service import PageRequest, build_update_set
from app.services.user_service import user_service

router = APIRouter(prefix="/api/users", tags=["Users"])

gated = [Depends(require_principal)]


@router.get(
    "",
    response_model=ListEnvelope[UserOut],
    response_model_exclude_unset=True,
    responses=ERROR_RESPONSES,
    dependencies=gated,
    summary="List users",
)
async def list_users(
    page: PageRequest = Depends(lenient_page),
    db: AsyncSession = Depends(get_db_session),
):
    return await user_service.list(db, page)


@router.get(
    "/{item_id}",
    response_model=ItemEnvelope[UserOut],
    responses=ERROR_RESPONSES,
    dependencies=gated,
    summary="Get one user",
)
async def get_user(
    user_id: int = Depends(path_id),
    db: AsyncSession = Depends(get_db_session),
):
    return ItemEnvelope[UserOut](data=await user_service.get(db, user_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=UserCreatedResponse,
    responses={
        400: ERROR_RESPONSES[400],
        409: {"description": "Username or email already exists", "model": ErrorResponse},
        500: ERROR_RESPONSES[500],
    },
    summary="Register a user",
)
async def create_user(
    body: UserCreate,
    db: AsyncSession = Depends(get_db_session),
    auth: AuthService = Depends(get_auth_service),
) -> UserCreatedResponse:
    new_id = await user_service.register(db, body, auth)
    return UserCreatedResponse(id=new_id, username=body.username)


@router.put(
    "/{item_id}",
    response_model=MessageResponse,
    responses=ERROR_RESPONSES,
    dependencies=gated,
    summary="Partially update a user",
)
async def update_user(
    body: UserUpdate,
    user_id: int = Depends(path_id),
    db: AsyncSession = Depends(get_db_session),
    auth: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    changes = build_update_set(body, user_service.mutable_columns)
    await user_service.update(db, user_id, user_service.hash_changes(changes, auth))
    return MessageResponse(message="User updated successfully")


@router.delete(
    "/{item_id}",
    response_model=MessageResponse,
    responses=ERROR_RESPONSES,
    dependencies=gated,
    summary="Delete a user",
)
async def delete_user(
    user_id: int = Depends(path_id),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await user_service.delete(db, user_id)
    return MessageResponse(message="User deleted successfully")
