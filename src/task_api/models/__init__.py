"""Document models exposed by the task API."""

from __future__ import annotations

from .common import TimestampMixin, utcnow
from .task import Task, TaskStatus
from .user import User, UserRole

DOCUMENT_MODELS = [User, Task]

__all__ = [
    "DOCUMENT_MODELS",
    "Task",
    "TaskStatus",
    "TimestampMixin",
    "User",
    "UserRole",
    "utcnow",
]
