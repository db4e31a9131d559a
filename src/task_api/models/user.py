"""User documents stored in MongoDB through beanie."""

from enum import Enum

import pymongo
from beanie import Document, Indexed
from pydantic import ConfigDict, Field

from .common import TimestampMixin


class UserRole(str, Enum):
    """Roles supported by the authorization rules."""

    USER = "user"
    ADMIN = "admin"


class User(Document, TimestampMixin):
    """Persistent user account."""

    model_config = ConfigDict(str_strip_whitespace=True)

    username: Indexed(str, unique=True)  # type: ignore[valid-type]
    password_hash: str = Field(min_length=1)
    role: UserRole = Field(default=UserRole.USER)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    class Settings:
        name = "users"
        indexes = [[("created_at", pymongo.DESCENDING)]]


__all__ = ["User", "UserRole"]
