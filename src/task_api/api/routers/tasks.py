"""Routes handling task CRUD operations."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query, Response, status

from ...core.pagination import build_pagination_meta, normalize_pagination
from ...deps import CurrentUserDependency, TaskServiceDependency
from ...errors import NotFoundError
from ...schemas import TaskCreated, TaskListResponse, TaskRead
from ...services.common import parse_object_id
from ..authorization import AssignedTaskCreate, ScrubbedTaskUpdate, TaskAccessDependency

router = APIRouter(prefix="/tasks", tags=["tasks"])

PageQuery = Annotated[
    str | None,
    Query(description="1-based page number; invalid values fall back to 1."),
]
LimitQuery = Annotated[
    str | None,
    Query(description="Page size between 1 and 100; invalid values fall back to 10."),
]


@router.post(
    "",
    response_model=TaskCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
)
async def create_task(
    payload: AssignedTaskCreate,
    service: TaskServiceDependency,
) -> TaskCreated:
    task, assignee = await service.create_task(
        title=payload.title,
        description=payload.description,
        assigned_to=payload.assigned_to,
        status=payload.status,
    )
    return TaskCreated.from_document(task, assignee)


@router.get(
    "",
    response_model=TaskListResponse,
    summary="List tasks, newest first, with pagination",
)
async def list_tasks(
    _: CurrentUserDependency,
    service: TaskServiceDependency,
    page: PageQuery = None,
    limit: LimitQuery = None,
) -> TaskListResponse:
    params = normalize_pagination(page, limit)
    rows, total = await service.list_tasks(params)
    return TaskListResponse(
        data=[TaskRead.from_document(task, assignee) for task, assignee in rows],
        pagination=build_pagination_meta(total, params.page, params.limit),
    )


@router.get(
    "/{task_id}",
    response_model=TaskRead,
    summary="Retrieve a task by id",
)
async def get_task(
    task_id: str,
    _: CurrentUserDependency,
    service: TaskServiceDependency,
) -> TaskRead:
    task = await service.get_task(parse_object_id(task_id))
    if task is None:
        raise NotFoundError("Task not found")
    return TaskRead.from_document(task, await service.get_assignee(task))


@router.put(
    "/{task_id}",
    response_model=TaskRead,
    summary="Partially update a task (admin or assignee)",
)
async def update_task(
    task: TaskAccessDependency,
    updates: ScrubbedTaskUpdate,
    service: TaskServiceDependency,
) -> TaskRead:
    updated, assignee = await service.update_task(task, updates)
    return TaskRead.from_document(updated, assignee)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a task (admin or assignee)",
)
async def delete_task(task: TaskAccessDependency, service: TaskServiceDependency) -> Response:
    await service.delete_task(task)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
