"""Task service — business logic for per-user tasks.

Learn: Every task belongs to one user. The service does not decide
ownership itself; it asks the OwnershipGuard:
- on create, attach_owner resolves the user (404 if missing) and binds it
- on update, reassert_owner pins user_id to the original owner

Only title, description and completed ever change after creation.
"""

from typing import Optional

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from zenith.auth.ownership import OwnershipGuard
from zenith.db.models import Task
from zenith.errors import NotFoundError
from zenith.schemas.task import TaskUpdate

logger = structlog.get_logger()


class TaskService:
    """Business logic for task CRUD."""

    def __init__(self, db: AsyncSession, guard: OwnershipGuard):
        self.db = db
        self.guard = guard

    # ─── Create ──────────────────────────────────────────

    async def create_task(
        self,
        title: str,
        owner_id: int,
        description: Optional[str] = None,
        completed: bool = False,
    ) -> Task:
        """Create a task for an existing user.

        The owner is resolved before anything is added to the session,
        so a missing user leaves nothing behind.
        """
        task = Task(title=title, description=description, completed=completed)
        await self.guard.attach_owner(task, owner_id)

        self.db.add(task)
        await self.db.commit()
        await self.db.refresh(task)

        logger.info("task.created", task_id=task.id, user_id=task.user_id)
        return task

    # ─── Read ────────────────────────────────────────────

    async def get_task(self, task_id: int) -> Optional[Task]:
        return await self.db.get(Task, task_id)

    async def find_task(self, task_id: int) -> Task:
        task = await self.get_task(task_id)
        if not task:
            raise NotFoundError(f"Task not found with id: {task_id}")
        return task

    async def list_tasks_for_owner(self, owner_id: int) -> list[Task]:
        result = await self.db.execute(
            select(Task).where(Task.user_id == owner_id).order_by(Task.id)
        )
        return list(result.scalars().all())

    # ─── Update ──────────────────────────────────────────

    async def update_task(self, task_id: int, details: TaskUpdate) -> Task:
        """Replace a task's editable fields, keeping its owner."""
        task = await self.find_task(task_id)
        details = self.guard.reassert_owner(task, details)

        task.title = details.title
        task.description = details.description
        task.completed = details.completed
        task.user_id = details.user_id

        await self.db.commit()
        await self.db.refresh(task)
        return task

    # ─── Delete ──────────────────────────────────────────

    async def delete_task(self, task_id: int) -> None:
        task = await self.find_task(task_id)
        await self.db.delete(task)
        await self.db.commit()
        logger.info("task.deleted", task_id=task_id)
