"""Request schemas for task endpoints."""

from pydantic import BaseModel, Field, StrictBool


class TaskCreateRequest(BaseModel):
    """Body for creating a task."""

    text: str = Field(..., description="Task text")


class TaskToggleRequest(BaseModel):
    """Body for setting a task's done flag."""

    done: StrictBool = Field(..., description="New value of the done flag")
