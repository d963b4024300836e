"""
Task API - Task Schemas

Pydantic models for task API requests and responses.
"""

from datetime import datetime, timezone
from typing import Optional, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskCreateRequest(BaseModel):
    """Request model for creating a task.

    `completed` is not accepted; new tasks always start incomplete.
    """

    title: Optional[str] = Field(default=None, description="Task title (required)")
    description: Optional[str] = Field(default=None, description="Task description")
    priority: Optional[str] = Field(default=None, description="Task priority, defaults to medium")


class TaskUpdateRequest(BaseModel):
    """Request model for updating a task. Every field is optional."""

    title: Optional[str] = Field(default=None, description="Task title")
    description: Optional[str] = Field(default=None, description="Task description")
    completed: Optional[bool] = Field(default=None, description="Completion flag")
    priority: Optional[str] = Field(default=None, description="Task priority")


class TaskResponse(BaseModel):
    """Response model for a single task."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Task ID")
    title: str = Field(description="Task title")
    description: Optional[str] = Field(default=None, description="Task description")
    completed: bool = Field(description="Completion flag")
    priority: str = Field(description="Task priority")
    user_id: int = Field(description="Owner user ID")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    @field_validator("created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        """Timestamps are stored as naive UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class TaskListResponse(BaseModel):
    """Response model for a list of tasks."""

    message: str = Field(description="Status message")
    tasks: List[TaskResponse] = Field(description="List of tasks")
    total: int = Field(description="Total number of tasks in the list")


class TaskMutationResponse(BaseModel):
    """Response model for task creation and update."""

    message: str = Field(description="Success message")
    task: TaskResponse


class TaskDeleteResponse(BaseModel):
    """Response model for task deletion."""

    message: str = Field(description="Success message")
