"""
SQLAlchemy models for the task store.

Schema is a single table:
- tasks(id, content, done, user_id)
"""

from sqlalchemy import Integer, String, Text, Boolean, Index, false
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class TaskDB(Base):
    """A single task owned by one chat user."""
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    done: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        Index("idx_tasks_user_id", "user_id"),
        # Ids are never reused after a delete on SQLite either
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<TaskDB id={self.id} user_id={self.user_id!r} done={self.done}>"
