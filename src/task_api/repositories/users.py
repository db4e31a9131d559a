"""Repository for interacting with user documents."""

from __future__ import annotations

import pymongo

from ..models import User
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Concrete repository for ``User`` documents."""

    def __init__(self) -> None:
        super().__init__(User)

    async def get_by_username(self, username: str) -> User | None:
        """Return the user with exactly ``username`` if it exists."""
        return await User.find_one(User.username == username)

    async def list_newest_first(self) -> list[User]:
        """Return all users ordered from most to least recently created."""
        return await User.find_all().sort(
            [("created_at", pymongo.DESCENDING), ("_id", pymongo.DESCENDING)]
        ).to_list()
