"""Reusable FastAPI dependencies."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from .models import User
from .runtime import AppContext
from .services import AuthService, TaskService, UserService


def get_app_context(request: Request) -> AppContext:
    """Return the context object built by ``create_app``."""

    return request.app.state.context


AppContextDependency = Annotated[AppContext, Depends(get_app_context)]


def get_user_service(context: AppContextDependency) -> UserService:
    return UserService(context)


def get_task_service() -> TaskService:
    return TaskService()


UserServiceDependency = Annotated[UserService, Depends(get_user_service)]
TaskServiceDependency = Annotated[TaskService, Depends(get_task_service)]


async def get_current_user(request: Request, context: AppContextDependency) -> User:
    """Authentication gate: resolve the acting identity from Basic credentials."""

    service = AuthService(context)
    user = await service.authenticate(request.headers.get("Authorization"))
    request.state.user_id = str(user.id)
    return user


CurrentUserDependency = Annotated[User, Depends(get_current_user)]


__all__ = [
    "AppContextDependency",
    "CurrentUserDependency",
    "TaskServiceDependency",
    "UserServiceDependency",
    "get_app_context",
    "get_current_user",
    "get_task_service",
    "get_user_service",
]
