"""Pydantic schemas for public interfaces."""

from __future__ import annotations

from .common import ApiModel, PaginationMeta
from .system import ErrorResponse, HealthCheckResponse
from .task import (
    AssigneeDetail,
    AssigneeSummary,
    TaskCreate,
    TaskCreated,
    TaskListResponse,
    TaskRead,
    TaskUpdate,
)
from .user import UserCreate, UserRead, UserSummary

__all__ = [
    "ApiModel",
    "AssigneeDetail",
    "AssigneeSummary",
    "ErrorResponse",
    "HealthCheckResponse",
    "PaginationMeta",
    "TaskCreate",
    "TaskCreated",
    "TaskListResponse",
    "TaskRead",
    "TaskUpdate",
    "UserCreate",
    "UserRead",
    "UserSummary",
]
