"""Ownership guard + TaskService tests.

Learn: The invariant under test: a task's owner is fixed at creation.
Updates that name a different owner still succeed, but the owner
silently stays the same.
"""

import pytest
from sqlalchemy import func, select

from zenith.auth.ownership import OwnershipGuard
from zenith.db.models import Task
from zenith.errors import NotFoundError
from zenith.schemas.task import TaskUpdate


@pytest.fixture
async def two_users(accounts):
    a = await accounts.register("a@x.com", "pw_a_123")
    b = await accounts.register("b@x.com", "pw_b_123")
    return a.user, b.user


# ═══════════════════════════════════════════════════════════
# attach_owner
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_attach_owner_sets_user(accounts, two_users):
    owner, _ = two_users
    guard = OwnershipGuard(accounts)
    task = await guard.attach_owner(Task(title="T"), owner.id)
    assert task.user_id == owner.id


@pytest.mark.asyncio
async def test_attach_owner_unknown_user(accounts):
    guard = OwnershipGuard(accounts)
    with pytest.raises(NotFoundError):
        await guard.attach_owner(Task(title="T"), 9999)


# ═══════════════════════════════════════════════════════════
# reassert_owner
# ═══════════════════════════════════════════════════════════


def test_reassert_owner_discards_caller_owner():
    existing = Task(id=5, title="T", user_id=1)
    incoming = TaskUpdate(title="T2", user_id=2)

    result = OwnershipGuard(accounts=None).reassert_owner(existing, incoming)
    assert result.user_id == 1
    assert result.title == "T2"
    # Caller's object is left untouched
    assert incoming.user_id == 2


def test_reassert_owner_fills_missing_owner():
    existing = Task(id=5, title="T", user_id=1)
    result = OwnershipGuard(accounts=None).reassert_owner(existing, TaskUpdate(title="T"))
    assert result.user_id == 1


# ═══════════════════════════════════════════════════════════
# TaskService end to end
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_update_keeps_original_owner(task_service, two_users):
    owner, other = two_users
    task = await task_service.create_task(title="T", owner_id=owner.id)

    updated = await task_service.update_task(
        task.id, TaskUpdate(title="T2", completed=True, user_id=other.id)
    )
    assert updated.user_id == owner.id
    assert updated.title == "T2"
    assert updated.completed is True

    reloaded = await task_service.find_task(task.id)
    assert reloaded.user_id == owner.id


@pytest.mark.asyncio
async def test_create_for_missing_owner_persists_nothing(task_service, db_session):
    with pytest.raises(NotFoundError):
        await task_service.create_task(title="Orphan", owner_id=9999)

    count = await db_session.scalar(select(func.count()).select_from(Task))
    assert count == 0


@pytest.mark.asyncio
async def test_create_defaults(task_service, two_users):
    owner, _ = two_users
    task = await task_service.create_task(title="Defaults", owner_id=owner.id)
    assert task.completed is False
    assert task.description is None


@pytest.mark.asyncio
async def test_list_only_own_tasks(task_service, two_users):
    owner, other = two_users
    await task_service.create_task(title="mine 1", owner_id=owner.id)
    await task_service.create_task(title="theirs", owner_id=other.id)
    await task_service.create_task(title="mine 2", owner_id=owner.id)

    titles = [t.title for t in await task_service.list_tasks_for_owner(owner.id)]
    assert titles == ["mine 1", "mine 2"]


@pytest.mark.asyncio
async def test_update_missing_task(task_service):
    with pytest.raises(NotFoundError):
        await task_service.update_task(404, TaskUpdate(title="x"))


@pytest.mark.asyncio
async def test_delete_task(task_service, two_users):
    owner, _ = two_users
    task = await task_service.create_task(title="Gone soon", owner_id=owner.id)
    await task_service.delete_task(task.id)
    assert await task_service.get_task(task.id) is None
    with pytest.raises(NotFoundError):
        await task_service.delete_task(task.id)
