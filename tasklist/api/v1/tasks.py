"""Task endpoints: list, create, toggle and delete tasks in the in-memory store."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from tasklist.api.v1.auth import get_current_identity, get_task_store
from tasklist.api.v1.errors import http_error
from tasklist.core.errors import Failure
from tasklist.models.task import Task
from tasklist.models.user import Identity
from tasklist.schemas.task import TaskCreateRequest, TaskToggleRequest
from tasklist.services.tasks import TaskStore

router = APIRouter()


@router.get("", response_model=list[Task])
def list_tasks(
    store: Annotated[TaskStore, Depends(get_task_store)],
) -> list[Task]:
    """All tasks, most recently created first. No authentication required."""
    return store.list()


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
def create_task(
    body: TaskCreateRequest,
    store: Annotated[TaskStore, Depends(get_task_store)],
    identity: Annotated[Identity | None, Depends(get_current_identity)],
) -> Task:
    """Create a task owned by the caller. Requires a valid Bearer token."""
    result = store.create(body.text, identity)
    if isinstance(result, Failure):
        raise http_error(result)
    return result


@router.patch("/{task_id}", response_model=Task)
def toggle_task(
    task_id: str,
    body: TaskToggleRequest,
    store: Annotated[TaskStore, Depends(get_task_store)],
    identity: Annotated[Identity | None, Depends(get_current_identity)],
) -> Task:
    """Set a task's done flag. Any authenticated caller may toggle any task."""
    result = store.toggle(task_id, body.done, identity)
    if isinstance(result, Failure):
        raise http_error(result)
    return result


@router.delete("/{task_id}", response_model=bool)
def delete_task(
    task_id: str,
    store: Annotated[TaskStore, Depends(get_task_store)],
    identity: Annotated[Identity | None, Depends(get_current_identity)],
) -> bool:
    """Remove a task. Admin only."""
    result = store.delete(task_id, identity)
    if isinstance(result, Failure):
        raise http_error(result)
    return result
