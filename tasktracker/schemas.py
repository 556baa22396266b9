"""
Request schemas for the task endpoints.

Bodies are decoded strictly: unknown fields and wrongly typed values are
rejected rather than ignored or coerced. ``None`` on a field means the
client did not supply it (JSON ``null`` is treated the same way).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TaskCreate(BaseModel):
    """Body of ``POST /tasks``."""

    model_config = ConfigDict(extra="forbid", strict=True)

    title: Optional[str] = Field(None, description="Task title, required and non-blank")
    description: Optional[str] = Field(None, description="Task description")
    completed: Optional[bool] = Field(None, description="Initial completion state (default false)")


class TaskUpdate(BaseModel):
    """Body of ``PUT /tasks/{id}``; every field is optional."""

    model_config = ConfigDict(extra="forbid", strict=True)

    title: Optional[str] = Field(None, description="Replacement title, must not be blank")
    description: Optional[str] = Field(None, description="Replacement description")
    completed: Optional[bool] = Field(None, description="Replacement completion state")
