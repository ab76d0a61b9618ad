"""Task record held by the in-memory task store."""

from datetime import datetime

from pydantic import BaseModel, Field


class Task(BaseModel):
    """
    A single task. Only ``done`` changes after creation; the store owns
    every instance and hands out copies.
    """

    id: str = Field(..., description="Unique id generated at creation")
    text: str = Field(..., description="Task text")
    done: bool = Field(default=False, description="Completion flag")
    created_at: datetime = Field(..., description="Creation time (UTC)")
    created_by: str = Field(..., description="Username of the creator")
