"""
Task API - Task Router

CRUD endpoints for task management.
All endpoints are JWT-protected and user-scoped.
"""

from typing import Annotated

from fastapi import APIRouter, status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from taskapi.database import get_session
from taskapi.auth.dependencies import CurrentUser
from taskapi.tasks.service import TaskService
from taskapi.tasks.repository import TaskRepository
from taskapi.tasks.schemas import (
    TaskCreateRequest,
    TaskUpdateRequest,
    TaskResponse,
    TaskListResponse,
    TaskMutationResponse,
    TaskDeleteResponse,
)


router = APIRouter(prefix="/api/tasks", tags=["Tasks"])


async def get_task_service(
    session: Annotated[AsyncSession, Depends(get_session)]
) -> TaskService:
    """Dependency to get task service instance."""
    return TaskService(TaskRepository(session))


@router.get(
    "",
    response_model=TaskListResponse,
    summary="List tasks",
)
async def list_tasks(
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskListResponse:
    """List every task of the authenticated user, newest first."""
    tasks = await service.list_tasks(owner_id=current_user.id)
    return TaskListResponse(
        message="Tasks retrieved successfully",
        tasks=tasks,
        total=len(tasks),
    )


@router.get(
    "/{task_id:int}",
    response_model=TaskResponse,
    summary="Get a task by ID",
)
async def get_task(
    task_id: int,
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """
    Get a specific task by ID.

    Returns 404 if the task doesn't exist or belongs to another user.
    """
    return await service.get_task(task_id, current_user.id)


@router.post(
    "",
    response_model=TaskMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
)
async def create_task(
    request: TaskCreateRequest,
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskMutationResponse:
    """
    Create a new task for the authenticated user.

    The task is automatically associated with the current user.
    """
    task = await service.create_task(owner_id=current_user.id, request=request)
    return TaskMutationResponse(message="Task created successfully", task=task)


@router.put(
    "/{task_id:int}",
    response_model=TaskMutationResponse,
    summary="Update a task",
)
async def update_task(
    task_id: int,
    request: TaskUpdateRequest,
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskMutationResponse:
    """
    Update a task by ID.

    Only provided fields will be updated.
    Returns 404 if the task doesn't exist or belongs to another user.
    """
    task = await service.update_task(task_id, current_user.id, request)
    return TaskMutationResponse(message="Task updated successfully", task=task)


@router.delete(
    "/{task_id:int}",
    response_model=TaskDeleteResponse,
    summary="Delete a task",
)
async def delete_task(
    task_id: int,
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskDeleteResponse:
    """
    Delete a task by ID.

    Returns 404 if the task doesn't exist or belongs to another user.
    """
    await service.delete_task(task_id, current_user.id)
    return TaskDeleteResponse(message="Task deleted successfully")
