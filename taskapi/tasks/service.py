"""
Task API - Task Service

Business logic for task operations. Every method takes the caller's user id;
a task owned by someone else is reported exactly like a missing one.
"""

import logging
from typing import List

from taskapi.errors import NotFoundError, ValidationError
from taskapi.tasks.models import DEFAULT_PRIORITY, Task
from taskapi.tasks.repository import TaskRepository
from taskapi.tasks.schemas import TaskCreateRequest, TaskUpdateRequest, TaskResponse

logger = logging.getLogger(__name__)

TASK_NOT_FOUND = "Task not found"

# Largest id a SQLite INTEGER column can hold
MAX_TASK_ID = 2**63 - 1


class TaskService:
    """Service layer for task business logic."""

    def __init__(self, repository: TaskRepository):
        self.repository = repository

    async def _get_owned(self, task_id: int, owner_id: int) -> Task:
        if not 0 < task_id <= MAX_TASK_ID:
            raise NotFoundError(TASK_NOT_FOUND)
        task = await self.repository.get_by_id(task_id, owner_id)
        if task is None:
            raise NotFoundError(TASK_NOT_FOUND)
        return task

    async def create_task(self, owner_id: int, request: TaskCreateRequest) -> TaskResponse:
        """Create a new task for the owner."""
        if not request.title:
            raise ValidationError("Title is required")

        task = Task(
            user_id=owner_id,
            title=request.title,
            description=request.description,
            priority=request.priority if request.priority is not None else DEFAULT_PRIORITY,
            completed=False,
        )
        task = await self.repository.create(task)
        logger.info(f"Created task id={task.id} for user id={owner_id}")
        return TaskResponse.model_validate(task)

    async def get_task(self, task_id: int, owner_id: int) -> TaskResponse:
        """Get a task by ID, scoped to owner."""
        return TaskResponse.model_validate(await self._get_owned(task_id, owner_id))

    async def list_tasks(self, owner_id: int) -> List[TaskResponse]:
        """List all tasks for owner, newest first."""
        tasks = await self.repository.list_by_owner(owner_id)
        return [TaskResponse.model_validate(task) for task in tasks]

    async def update_task(
        self,
        task_id: int,
        owner_id: int,
        request: TaskUpdateRequest,
    ) -> TaskResponse:
        """Update a task, scoped to owner.

        title and priority are only replaced by a truthy value. description
        is replaced whenever the key is sent, even as null or "". completed
        is replaced whenever it is sent as a boolean.
        """
        task = await self._get_owned(task_id, owner_id)
        provided = request.model_fields_set

        updates = {}
        if request.title:
            updates["title"] = request.title
        if "description" in provided:
            updates["description"] = request.description
        if "completed" in provided and request.completed is not None:
            updates["completed"] = request.completed
        if request.priority:
            updates["priority"] = request.priority

        if not updates:
            return TaskResponse.model_validate(task)

        task = await self.repository.update(task, updates)
        return TaskResponse.model_validate(task)

    async def delete_task(self, task_id: int, owner_id: int) -> None:
        """Delete a task, scoped to owner."""
        task = await self._get_owned(task_id, owner_id)
        await self.repository.delete(task)
        logger.info(f"Deleted task id={task_id} for user id={owner_id}")
