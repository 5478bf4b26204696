"""
Relational task store.

Handles:
- Engine and session lifecycle (PostgreSQL via asyncpg, SQLite via aiosqlite)
- The tasks table
- Store exceptions that separate not-found and validation from failures
"""

from .connection import (
    get_database,
    Database,
    init_database,
    close_database,
    normalize_database_url,
)
from .models import Base, TaskDB
from .exceptions import (
    DatabaseError,
    DatabaseConnectionError,
    DatabaseOperationError,
    EntityNotFoundError,
    ValidationError,
)

__all__ = [
    "get_database",
    "Database",
    "init_database",
    "close_database",
    "normalize_database_url",
    "Base",
    "TaskDB",
    "DatabaseError",
    "DatabaseConnectionError",
    "DatabaseOperationError",
    "EntityNotFoundError",
    "ValidationError",
]
