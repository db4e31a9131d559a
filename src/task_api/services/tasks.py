"""Service layer encapsulating task-related operations."""

from __future__ import annotations

import logging
from typing import Any

from beanie import PydanticObjectId
from pydantic import TypeAdapter, ValidationError

from ..core.pagination import PageParams
from ..errors import VALIDATION_ERROR_MESSAGE, BadRequestError, NotFoundError
from ..models import Task, TaskStatus, User
from ..models.common import utcnow
from ..repositories import TaskRepository, UserRepository
from .common import parse_object_id

logger = logging.getLogger(__name__)

_STATUS_ADAPTER = TypeAdapter(TaskStatus)


class TaskService:
    """High-level business orchestration for ``Task`` documents."""

    def __init__(self) -> None:
        self._repository = TaskRepository()
        self._user_repository = UserRepository()

    async def _require_assignee(self, assignee_id: PydanticObjectId) -> User:
        assignee = await self._user_repository.get(assignee_id)
        if assignee is None:
            raise BadRequestError("Assigned user does not exist")
        return assignee

    async def create_task(
        self,
        *,
        title: str | None,
        assigned_to: object,
        description: str | None = None,
        status: TaskStatus = TaskStatus.OPEN,
    ) -> tuple[Task, User]:
        """Create a task for an existing assignee and return it with the assignee."""
        title = (title or "").strip()
        if not title:
            raise BadRequestError("title is required")
        if assigned_to is None:
            raise BadRequestError(VALIDATION_ERROR_MESSAGE)
        assignee = await self._require_assignee(parse_object_id(assigned_to))
        task = Task(
            title=title,
            description=description or "",
            assigned_to=assignee.id,
            status=status,
        )
        await self._repository.add(task)
        logger.info("Task created", extra={"task_id": str(task.id), "assigned_to": str(assignee.id)})
        return task, assignee

    async def get_task(self, task_id: PydanticObjectId) -> Task | None:
        """Retrieve a task by identifier."""
        return await self._repository.get(task_id)

    async def get_assignee(self, task: Task) -> User | None:
        """Resolve the user a task is assigned to."""
        return await self._user_repository.get(task.assigned_to)

    async def list_tasks(self, params: PageParams) -> tuple[list[tuple[Task, User | None]], int]:
        """Return one page of tasks with their resolved assignees and the total count."""
        tasks, total = await self._repository.list_paginated(skip=params.skip, limit=params.limit)
        assignees: dict[PydanticObjectId, User | None] = {}
        for assignee_id in {task.assigned_to for task in tasks}:
            assignees[assignee_id] = await self._user_repository.get(assignee_id)
        return [(task, assignees.get(task.assigned_to)) for task in tasks], total

    async def update_task(self, task: Task, updates: dict[str, Any]) -> tuple[Task, User | None]:
        """Write only the provided fields of ``task`` and return the stored result.

        Raises ``NotFoundError`` if the task was deleted after it was loaded.
        """
        changes: dict[str, Any] = {}
        if "title" in updates:
            title = (updates["title"] or "").strip()
            if not title:
                raise BadRequestError(VALIDATION_ERROR_MESSAGE)
            changes["title"] = title
        if "description" in updates:
            changes["description"] = updates["description"] or ""
        if "status" in updates:
            try:
                changes["status"] = _STATUS_ADAPTER.validate_python(updates["status"]).value
            except ValidationError as exc:
                raise BadRequestError(VALIDATION_ERROR_MESSAGE) from exc
        if "assigned_to" in updates:
            if updates["assigned_to"] is None:
                raise BadRequestError(VALIDATION_ERROR_MESSAGE)
            assignee = await self._require_assignee(parse_object_id(updates["assigned_to"]))
            changes["assigned_to"] = assignee.id
        changes["updated_at"] = utcnow()

        updated = await self._repository.set_fields(task.id, changes)  # type: ignore[arg-type]
        if updated is None:
            raise NotFoundError("Task not found")
        logger.info("Task updated", extra={"task_id": str(updated.id), "fields": sorted(changes)})
        return updated, await self.get_assignee(updated)

    async def delete_task(self, task: Task) -> None:
        """Delete ``task``."""
        await self._repository.delete(task)
        logger.info("Task deleted", extra={"task_id": str(task.id)})


__all__ = ["TaskService"]
