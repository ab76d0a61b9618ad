"""Health check endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from tasklist.api.v1.auth import get_app_settings, get_task_store
from tasklist.core.config import Settings
from tasklist.schemas.health import HealthResponse
from tasklist.services.tasks import TaskStore

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(
    settings: Annotated[Settings, Depends(get_app_settings)],
    store: Annotated[TaskStore, Depends(get_task_store)],
) -> HealthResponse:
    """
    Return service health status and the size of the in-memory task store.
    Used by load balancers and monitoring.
    """
    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        task_count=len(store),
    )
