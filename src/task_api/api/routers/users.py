"""User registration and administration endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...deps import UserServiceDependency
from ...schemas import UserCreate, UserRead, UserSummary
from ..authorization import AdminUserDependency

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user account",
)
async def register_user(payload: UserCreate, service: UserServiceDependency) -> UserRead:
    user = await service.register_user(username=payload.username, password=payload.password)
    return UserRead.from_document(user)


@router.get(
    "",
    response_model=list[UserSummary],
    summary="List all users (admin only)",
)
async def list_users(_: AdminUserDependency, service: UserServiceDependency) -> list[UserSummary]:
    users = await service.list_users()
    return [UserSummary.from_document(user) for user in users]
