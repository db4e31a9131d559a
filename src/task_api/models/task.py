"""Task documents stored in MongoDB through beanie."""

from __future__ import annotations

from enum import Enum

import pymongo
from beanie import Document, PydanticObjectId
from pydantic import Field

from .common import TimestampMixin


class TaskStatus(str, Enum):
    """Enumeration of possible task states."""

    OPEN = "open"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class Task(Document, TimestampMixin):
    """Persistent task assigned to exactly one user."""

    title: str = Field(min_length=1)
    description: str = Field(default="")
    assigned_to: PydanticObjectId
    status: TaskStatus = Field(default=TaskStatus.OPEN)

    class Settings:
        name = "tasks"
        indexes = [
            [("created_at", pymongo.DESCENDING)],
            [("assigned_to", pymongo.ASCENDING)],
        ]


__all__ = ["Task", "TaskStatus"]
