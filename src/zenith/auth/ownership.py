"""Ownership guard — binds a task to its creator for life.

Learn: A task's user_id has exactly one state, "bound". It is set when
the task is created and no operation rebinds it. An update request may
carry a user_id (clients often echo the whole task back), but the guard
overwrites it with the original owner instead of rejecting the request.
The discard is logged so attempted reassignments leave a trace.
"""

from typing import Optional

import structlog

from zenith.db.models import Task
from zenith.schemas.task import TaskUpdate
from zenith.services.account_service import AccountService

logger = structlog.get_logger()


class OwnershipGuard:
    def __init__(self, accounts: AccountService):
        self.accounts = accounts

    async def attach_owner(self, task: Task, owner_id: int) -> Task:
        """Resolve owner_id and bind it to a new task.

        Raises NotFoundError when no such account exists.
        """
        owner = await self.accounts.find_by_id(owner_id)
        task.user_id = owner.id
        return task

    def reassert_owner(self, existing: Task, incoming: TaskUpdate) -> TaskUpdate:
        """Return incoming details with the existing task's owner."""
        requested: Optional[int] = incoming.user_id
        if requested is not None and requested != existing.user_id:
            logger.warning(
                "task.owner_change_ignored",
                task_id=existing.id,
                owner_id=existing.user_id,
                requested_owner_id=requested,
            )
        return incoming.model_copy(update={"user_id": existing.user_id})
