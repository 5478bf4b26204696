"""
Task repository.

Handles:
- Task creation per owner
- Listing an owner's tasks in id order
- Marking done, editing and deleting, always scoped to the owner

Every query filters on user_id; that filter is the only access control.
"""

import logging
from typing import Optional, List

from sqlalchemy import select, update, delete

from ..connection import Database, get_database
from ..models import TaskDB
from ..exceptions import (
    DatabaseError,
    DatabaseOperationError,
    EntityNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# tasks.id is a 32-bit INTEGER column
MAX_TASK_ID = 2**31 - 1


def _clean_content(content: Optional[str]) -> str:
    cleaned = (content or "").strip()
    if not cleaned:
        raise ValidationError("Task content cannot be empty")
    return cleaned


def _check_task_id(task_id: int, owner: str) -> None:
    """Ids the column cannot hold can never match a task."""
    if not 1 <= task_id <= MAX_TASK_ID:
        raise EntityNotFoundError(f"Task {task_id} not found for {owner}", task_id)


class TaskRepository:
    """Repository for task operations."""

    def __init__(self, db: Optional[Database] = None):
        self.db = db or get_database()

    async def create(self, content: str, owner: str) -> TaskDB:
        """Create a new task and return it with its assigned id."""
        content = _clean_content(content)

        try:
            async with self.db.session() as session:
                task = TaskDB(content=content, user_id=owner, done=False)
                session.add(task)
                await session.flush()

            logger.debug(f"Created task {task.id} for {owner}")
            return task

        except DatabaseError:
            raise

        except Exception as e:
            logger.error(f"CRITICAL: Task creation failed: {e}", exc_info=True)
            raise DatabaseOperationError(f"Failed to create task: {e}") from e

    async def list_for_owner(self, owner: str) -> List[TaskDB]:
        """All tasks belonging to owner, ascending by id."""
        try:
            async with self.db.session() as session:
                result = await session.execute(
                    select(TaskDB)
                    .where(TaskDB.user_id == owner)
                    .order_by(TaskDB.id)
                )
                return list(result.scalars().all())

        except DatabaseError:
            raise

        except Exception as e:
            logger.error(f"Listing tasks failed: {e}", exc_info=True)
            raise DatabaseOperationError(f"Failed to list tasks: {e}") from e

    async def get_content(self, task_id: int, owner: str) -> str:
        """Current content of a task, used to prefill the edit form."""
        _check_task_id(task_id, owner)

        try:
            async with self.db.session() as session:
                result = await session.execute(
                    select(TaskDB.content)
                    .where(TaskDB.id == task_id, TaskDB.user_id == owner)
                )
                content = result.scalar_one_or_none()

        except DatabaseError:
            raise

        except Exception as e:
            logger.error(f"Reading task {task_id} failed: {e}", exc_info=True)
            raise DatabaseOperationError(f"Failed to read task {task_id}: {e}") from e

        if content is None:
            raise EntityNotFoundError(f"Task {task_id} not found for {owner}", task_id)
        return content

    async def set_done(self, task_id: int, owner: str) -> None:
        """Mark a task as done."""
        await self._execute_scoped(
            task_id,
            owner,
            update(TaskDB)
            .where(TaskDB.id == task_id, TaskDB.user_id == owner)
            .values(done=True),
            "mark done",
        )

    async def edit(self, task_id: int, owner: str, content: str) -> None:
        """Replace a task's content. Empty content never reaches the database."""
        content = _clean_content(content)
        await self._execute_scoped(
            task_id,
            owner,
            update(TaskDB)
            .where(TaskDB.id == task_id, TaskDB.user_id == owner)
            .values(content=content),
            "edit",
        )

    async def delete(self, task_id: int, owner: str) -> None:
        """Delete a task."""
        await self._execute_scoped(
            task_id,
            owner,
            delete(TaskDB).where(TaskDB.id == task_id, TaskDB.user_id == owner),
            "delete",
        )

    async def _execute_scoped(self, task_id: int, owner: str, statement, operation: str) -> None:
        """Run a single owner-scoped write; zero affected rows means not found."""
        _check_task_id(task_id, owner)

        try:
            async with self.db.session() as session:
                result = await session.execute(statement)
                rows_affected = result.rowcount

        except DatabaseError:
            raise

        except Exception as e:
            logger.error(f"CRITICAL: Task {operation} failed for {task_id}: {e}", exc_info=True)
            raise DatabaseOperationError(f"Failed to {operation} task {task_id}: {e}") from e

        if rows_affected == 0:
            raise EntityNotFoundError(f"Task {task_id} not found for {owner}", task_id)

        logger.debug(f"Task {task_id} {operation} by {owner}")


# Singleton
_task_repository: Optional[TaskRepository] = None


def get_task_repository() -> TaskRepository:
    """Get the task repository singleton."""
    global _task_repository
    if _task_repository is None:
        _task_repository = TaskRepository()
    return _task_repository
