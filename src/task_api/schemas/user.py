"""User-facing Pydantic schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict, Field

from ..models import User, UserRole
from .common import ApiModel


class UserCreate(ApiModel):
    """Public registration payload; any submitted ``role`` is ignored."""

    model_config = ConfigDict(json_schema_extra={"example": {"username": "alice", "password": "s3cret"}})

    username: str | None = Field(default=None)
    password: str | None = Field(default=None)


class UserSummary(ApiModel):
    """Projection used by the admin user listing."""

    id: str
    username: str
    role: UserRole
    created_at: datetime

    @classmethod
    def from_document(cls, user: User) -> "UserSummary":
        return cls(
            id=str(user.id),
            username=user.username,
            role=user.role,
            created_at=user.created_at,
        )


class UserRead(UserSummary):
    """Public representation of a user account (never includes the password hash)."""

    updated_at: datetime

    @classmethod
    def from_document(cls, user: User) -> "UserRead":
        return cls(
            id=str(user.id),
            username=user.username,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


__all__ = ["UserCreate", "UserRead", "UserSummary"]
