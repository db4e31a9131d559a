"""Repository for interacting with task documents."""

from __future__ import annotations

from typing import Any

import pymongo
from beanie import PydanticObjectId, UpdateResponse

from ..models import Task
from .base import BaseRepository


class TaskRepository(BaseRepository[Task]):
    """Concrete repository encapsulating ``Task`` persistence operations."""

    def __init__(self) -> None:
        super().__init__(Task)

    async def list_paginated(self, *, skip: int = 0, limit: int = 10) -> tuple[list[Task], int]:
        """Return one page of tasks (newest first) along with the total count."""
        tasks = (
            await Task.find_all()
            .sort([("created_at", pymongo.DESCENDING), ("_id", pymongo.DESCENDING)])
            .skip(skip)
            .limit(limit)
            .to_list()
        )
        total = await self.count()
        return tasks, total

    async def set_fields(self, task_id: PydanticObjectId, fields: dict[str, Any]) -> Task | None:
        """Atomically ``$set`` the given fields and return the updated task.

        Returns ``None`` when no task with ``task_id`` exists; nothing is inserted.
        """
        return await Task.find_one(Task.id == task_id).update(
            {"$set": fields},
            response_type=UpdateResponse.NEW_DOCUMENT,
        )
