"""Role and ownership rules composed per route as FastAPI dependencies.

Each rule takes the acting identity produced by the authentication gate and
either rejects the request, hands a resource to the handler, or rewrites the
submitted payload. Routes declare the rules they need in order.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import Depends

from ..deps import CurrentUserDependency, TaskServiceDependency
from ..errors import ForbiddenError, NotFoundError
from ..models import Task, User
from ..schemas import TaskCreate, TaskUpdate
from ..services.common import parse_object_id


async def require_admin(current_user: CurrentUserDependency) -> User:
    if not current_user.is_admin:
        raise ForbiddenError("Admin only")
    return current_user


async def require_task_access(
    task_id: str,
    current_user: CurrentUserDependency,
    service: TaskServiceDependency,
) -> Task:
    """Load the task named in the path; only admins and its assignee get through."""
    task = await service.get_task(parse_object_id(task_id))
    if task is None:
        raise NotFoundError("Task not found")
    if not current_user.is_admin and task.assigned_to != current_user.id:
        raise ForbiddenError("Forbidden")
    return task


async def enforce_assignment_rules(
    payload: TaskCreate,
    current_user: CurrentUserDependency,
) -> TaskCreate:
    """Admins may assign to anyone; everyone else is assigned to themselves."""
    if current_user.is_admin:
        return payload
    return payload.model_copy(update={"assigned_to": str(current_user.id)})


async def block_reassignment_for_users(
    payload: TaskUpdate,
    current_user: CurrentUserDependency,
) -> dict[str, Any]:
    """Return the submitted fields, silently dropping ``assignedTo`` for non-admins."""
    updates = payload.model_dump(exclude_unset=True)
    if not current_user.is_admin:
        updates.pop("assigned_to", None)
    return updates


AdminUserDependency = Annotated[User, Depends(require_admin)]
TaskAccessDependency = Annotated[Task, Depends(require_task_access)]
AssignedTaskCreate = Annotated[TaskCreate, Depends(enforce_assignment_rules)]
ScrubbedTaskUpdate = Annotated[dict[str, Any], Depends(block_reassignment_for_users)]


__all__ = [
    "AdminUserDependency",
    "AssignedTaskCreate",
    "ScrubbedTaskUpdate",
    "TaskAccessDependency",
    "block_reassignment_for_users",
    "enforce_assignment_rules",
    "require_admin",
    "require_task_access",
]
