"""
Task API - Task Repository

Data access for tasks. Every lookup is built from _owned(), which filters by
owner; update and delete only ever act on rows returned from it.
"""

import logging
from typing import List, Optional

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from taskapi.errors import InternalError
from taskapi.tasks.models import Task

logger = logging.getLogger(__name__)


class TaskRepository:
    """SQLite implementation of the task store, scoped by owner."""

    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _owned(owner_id: int) -> Select[tuple[Task]]:
        return select(Task).where(Task.user_id == owner_id)

    async def _commit(self, action: str) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"[TaskRepository] Error on {action}: {e}", exc_info=True)
            raise InternalError(f"Failed to {action}") from e

    async def create(self, task: Task) -> Task:
        self.session.add(task)
        await self._commit("create task")
        await self.session.refresh(task)
        return task

    async def get_by_id(self, task_id: int, owner_id: int) -> Optional[Task]:
        result = await self.session.execute(self._owned(owner_id).where(Task.id == task_id))
        return result.scalar_one_or_none()

    async def list_by_owner(self, owner_id: int) -> List[Task]:
        """All tasks for owner, newest first."""
        stmt = self._owned(owner_id).order_by(Task.created_at.desc(), Task.id.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, task: Task, updates: dict) -> Task:
        """Apply updates to a task previously loaded with get_by_id."""
        for key, value in updates.items():
            setattr(task, key, value)
        await self._commit("update task")
        await self.session.refresh(task)
        return task

    async def delete(self, task: Task) -> None:
        """Delete a task previously loaded with get_by_id."""
        await self.session.delete(task)
        await self._commit("delete task")
