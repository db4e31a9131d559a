"""Task-related Pydantic schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict, Field

from ..models import Task, TaskStatus, User, UserRole
from .common import ApiModel, PaginationMeta

TASK_READ_EXAMPLE = {
    "id": "665f1c2e9b1e8a3d4c5b6a79",
    "title": "Draft product documentation",
    "description": "Outline sections for the public API guide.",
    "status": TaskStatus.OPEN.value,
    "assignedTo": {"id": "665f1c2e9b1e8a3d4c5b6a70", "username": "alice"},
    "createdAt": "2024-06-01T12:00:00Z",
    "updatedAt": "2024-06-02T08:30:00Z",
}


class TaskCreate(ApiModel):
    """Payload for creating a new task."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Draft product documentation",
                "description": "Outline sections for the public API guide.",
                "assignedTo": "665f1c2e9b1e8a3d4c5b6a70",
                "status": TaskStatus.OPEN.value,
            }
        }
    )

    title: str | None = Field(default=None)
    description: str | None = Field(default=None)
    assigned_to: str | None = Field(default=None)
    status: TaskStatus = Field(default=TaskStatus.OPEN)


class TaskUpdate(ApiModel):
    """Payload for partially updating an existing task; only sent fields change."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Update API documentation",
                "status": TaskStatus.IN_PROGRESS.value,
            }
        }
    )

    title: str | None = Field(default=None)
    description: str | None = Field(default=None)
    assigned_to: str | None = Field(default=None)
    status: TaskStatus | None = Field(default=None)


class AssigneeSummary(ApiModel):
    """Assignee reference embedded in task responses."""

    id: str
    username: str


class AssigneeDetail(AssigneeSummary):
    role: UserRole


class TaskRead(ApiModel):
    """Normalized task representation."""

    model_config = ConfigDict(json_schema_extra={"example": TASK_READ_EXAMPLE})

    id: str
    title: str
    description: str
    status: TaskStatus
    assigned_to: AssigneeSummary | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_document(cls, task: Task, assignee: User | None) -> "TaskRead":
        summary = None
        if assignee is not None:
            summary = AssigneeSummary(id=str(assignee.id), username=assignee.username)
        return cls(
            id=str(task.id),
            title=task.title,
            description=task.description,
            status=task.status,
            assigned_to=summary,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class TaskCreated(TaskRead):
    """Task returned from creation, with the assignee's role resolved as well."""

    assigned_to: AssigneeDetail | None

    @classmethod
    def from_document(cls, task: Task, assignee: User | None) -> "TaskCreated":
        detail = None
        if assignee is not None:
            detail = AssigneeDetail(
                id=str(assignee.id),
                username=assignee.username,
                role=assignee.role,
            )
        return cls(
            id=str(task.id),
            title=task.title,
            description=task.description,
            status=task.status,
            assigned_to=detail,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class TaskListResponse(ApiModel):
    """Paginated collection of tasks."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "data": [TASK_READ_EXAMPLE],
                "pagination": {"totalCount": 1, "page": 1, "limit": 10, "totalPages": 1},
            }
        }
    )

    data: list[TaskRead]
    pagination: PaginationMeta


__all__ = [
    "AssigneeDetail",
    "AssigneeSummary",
    "TaskCreate",
    "TaskCreated",
    "TaskListResponse",
    "TaskRead",
    "TaskUpdate",
]
