"""Service layer orchestrating user-related repository operations."""

from __future__ import annotations

import logging

from ..core.security import hash_password
from ..errors import BadRequestError, ConflictError
from ..models import User, UserRole
from ..repositories import UserRepository
from ..runtime import AppContext

logger = logging.getLogger(__name__)


class UserService:
    """High-level business operations for ``User`` documents."""

    def __init__(self, context: AppContext) -> None:
        self._context = context
        self._repository = UserRepository()

    async def create_user(
        self,
        *,
        username: str,
        password: str,
        role: UserRole = UserRole.USER,
    ) -> User:
        """Hash ``password`` and persist a new user record."""
        password_hash = await hash_password(password, self._context.passwords)
        user = User(username=username, password_hash=password_hash, role=role)
        await self._repository.add(user)
        logger.info("User created", extra={"user_id": str(user.id), "role": user.role.value})
        return user

    async def register_user(self, *, username: str | None, password: str | None) -> User:
        """Public registration: always stores the ``user`` role."""
        username = (username or "").strip()
        if not username or not password:
            raise BadRequestError("username and password are required")
        if await self._repository.get_by_username(username) is not None:
            raise ConflictError("Username already exists")
        return await self.create_user(username=username, password=password, role=UserRole.USER)

    async def get_user_by_username(self, username: str) -> User | None:
        """Fetch a user by their unique username."""
        return await self._repository.get_by_username(username)

    async def list_users(self) -> list[User]:
        """Return all users, newest first."""
        return await self._repository.list_newest_first()


__all__ = ["UserService"]
