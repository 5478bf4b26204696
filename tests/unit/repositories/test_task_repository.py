"""
Unit tests for TaskRepository.

Store semantics run against in-memory SQLite; failure wrapping runs
against a mocked session.
"""

import pytest
from unittest.mock import AsyncMock, Mock

from taskbot.database.exceptions import (
    DatabaseConnectionError,
    DatabaseOperationError,
    EntityNotFoundError,
    ValidationError,
)
from taskbot.database.repositories.tasks import TaskRepository

ALICE = "alice@example.com"
BOB = "bob@example.com"


@pytest.fixture
def mock_database():
    """Mock database with session context manager."""
    db = Mock()
    session = AsyncMock()

    session.__aenter__ = AsyncMock(return_value=session)
    session.__aexit__ = AsyncMock(return_value=None)

    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.add = Mock()

    db.session = Mock(return_value=session)

    return db, session


# ============================================================
# CREATE / LIST
# ============================================================

@pytest.mark.asyncio
async def test_create_assigns_increasing_ids(task_repo):
    first = await task_repo.create("Buy milk", ALICE)
    second = await task_repo.create("Walk dog", ALICE)

    assert first.id > 0
    assert second.id > first.id
    assert first.done is False


@pytest.mark.asyncio
async def test_create_strips_content(task_repo):
    task = await task_repo.create("  Buy milk  ", ALICE)

    assert task.content == "Buy milk"


@pytest.mark.asyncio
@pytest.mark.parametrize("content", ["", "   ", None])
async def test_create_rejects_empty_content(mock_database, content):
    db, session = mock_database
    repo = TaskRepository(db)

    with pytest.raises(ValidationError):
        await repo.create(content, ALICE)

    db.session.assert_not_called()


@pytest.mark.asyncio
async def test_list_is_owner_scoped_and_ordered(task_repo):
    await task_repo.create("Alice 1", ALICE)
    await task_repo.create("Bob 1", BOB)
    await task_repo.create("Alice 2", ALICE)

    tasks = await task_repo.list_for_owner(ALICE)

    assert [t.content for t in tasks] == ["Alice 1", "Alice 2"]
    assert tasks[0].id < tasks[1].id


@pytest.mark.asyncio
async def test_list_empty_is_not_an_error(task_repo):
    assert await task_repo.list_for_owner("nobody") == []


# ============================================================
# MUTATIONS
# ============================================================

@pytest.mark.asyncio
async def test_set_done(task_repo):
    task = await task_repo.create("Buy milk", ALICE)

    await task_repo.set_done(task.id, ALICE)

    [stored] = await task_repo.list_for_owner(ALICE)
    assert stored.done is True


@pytest.mark.asyncio
async def test_set_done_foreign_owner_not_found(task_repo):
    task = await task_repo.create("Buy milk", ALICE)

    with pytest.raises(EntityNotFoundError) as exc_info:
        await task_repo.set_done(task.id, BOB)

    assert exc_info.value.entity_id == task.id
    [stored] = await task_repo.list_for_owner(ALICE)
    assert stored.done is False


@pytest.mark.asyncio
async def test_set_done_twice_is_still_found(task_repo):
    task = await task_repo.create("Buy milk", ALICE)

    await task_repo.set_done(task.id, ALICE)
    await task_repo.set_done(task.id, ALICE)


@pytest.mark.asyncio
async def test_edit_replaces_content(task_repo):
    task = await task_repo.create("Buy milk", ALICE)

    await task_repo.edit(task.id, ALICE, "Buy oat milk")

    assert await task_repo.get_content(task.id, ALICE) == "Buy oat milk"


@pytest.mark.asyncio
async def test_edit_empty_content_leaves_task_unchanged(task_repo):
    task = await task_repo.create("Buy milk", ALICE)

    with pytest.raises(ValidationError):
        await task_repo.edit(task.id, ALICE, "  ")

    assert await task_repo.get_content(task.id, ALICE) == "Buy milk"


@pytest.mark.asyncio
async def test_edit_empty_content_skips_database(mock_database):
    db, session = mock_database
    repo = TaskRepository(db)

    with pytest.raises(ValidationError):
        await repo.edit(1, ALICE, "")

    db.session.assert_not_called()


@pytest.mark.asyncio
async def test_edit_foreign_owner_not_found(task_repo):
    task = await task_repo.create("Buy milk", ALICE)

    with pytest.raises(EntityNotFoundError):
        await task_repo.edit(task.id, BOB, "Stolen")

    assert await task_repo.get_content(task.id, ALICE) == "Buy milk"


@pytest.mark.asyncio
async def test_delete_removes_task(task_repo):
    keep = await task_repo.create("Keep", ALICE)
    drop = await task_repo.create("Drop", ALICE)

    await task_repo.delete(drop.id, ALICE)

    assert [t.id for t in await task_repo.list_for_owner(ALICE)] == [keep.id]


@pytest.mark.asyncio
async def test_delete_missing_not_found(task_repo):
    with pytest.raises(EntityNotFoundError):
        await task_repo.delete(999, ALICE)


@pytest.mark.asyncio
async def test_ids_not_reused_after_delete(task_repo):
    first = await task_repo.create("One", ALICE)
    second = await task_repo.create("Two", ALICE)
    await task_repo.delete(second.id, ALICE)

    third = await task_repo.create("Three", ALICE)

    assert third.id > second.id > first.id


@pytest.mark.asyncio
async def test_get_content_not_found(task_repo):
    task = await task_repo.create("Buy milk", ALICE)

    with pytest.raises(EntityNotFoundError):
        await task_repo.get_content(task.id, BOB)


@pytest.mark.asyncio
@pytest.mark.parametrize("task_id", [0, -1, 2**31, 99999999999999999999])
async def test_out_of_range_id_not_found_without_database(mock_database, task_id):
    db, session = mock_database
    repo = TaskRepository(db)

    operations = [
        lambda: repo.set_done(task_id, ALICE),
        lambda: repo.delete(task_id, ALICE),
        lambda: repo.get_content(task_id, ALICE),
        lambda: repo.edit(task_id, ALICE, "New"),
    ]
    for operation in operations:
        with pytest.raises(EntityNotFoundError) as exc_info:
            await operation()
        assert exc_info.value.entity_id == task_id

    db.session.assert_not_called()


# ============================================================
# STORAGE FAILURES
# ============================================================

@pytest.mark.asyncio
async def test_query_failure_is_wrapped(mock_database):
    db, session = mock_database
    session.execute.side_effect = Exception("connection reset")
    repo = TaskRepository(db)

    with pytest.raises(DatabaseOperationError):
        await repo.list_for_owner(ALICE)

    with pytest.raises(DatabaseOperationError):
        await repo.set_done(1, ALICE)


@pytest.mark.asyncio
async def test_flush_failure_is_wrapped(mock_database):
    db, session = mock_database
    session.flush.side_effect = Exception("disk full")
    repo = TaskRepository(db)

    with pytest.raises(DatabaseOperationError):
        await repo.create("Buy milk", ALICE)


@pytest.mark.asyncio
async def test_unconfigured_database_propagates():
    db = Mock()
    db.session = Mock(side_effect=DatabaseConnectionError("Database not initialized"))
    repo = TaskRepository(db)

    with pytest.raises(DatabaseConnectionError):
        await repo.list_for_owner(ALICE)
