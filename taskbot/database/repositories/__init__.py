"""
Repository classes for database operations.
"""

from .tasks import TaskRepository, get_task_repository

__all__ = [
    "TaskRepository",
    "get_task_repository",
]
