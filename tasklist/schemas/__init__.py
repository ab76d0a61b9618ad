"""Pydantic request/response schemas."""

from tasklist.schemas.auth import LoginRequest, LoginResponse, UserOut
from tasklist.schemas.health import HealthResponse
from tasklist.schemas.task import TaskCreateRequest, TaskToggleRequest

__all__ = [
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "TaskCreateRequest",
    "TaskToggleRequest",
    "UserOut",
]
