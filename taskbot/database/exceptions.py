"""Custom exceptions for task store operations."""


class DatabaseError(Exception):
    """Base exception for database errors."""
    pass


class DatabaseConnectionError(DatabaseError):
    """Database connection failed."""
    pass


class DatabaseOperationError(DatabaseError):
    """General database operation failed."""
    pass


class EntityNotFoundError(DatabaseError):
    """Requested entity not found for this owner."""

    def __init__(self, message: str, entity_id: int = None):
        super().__init__(message)
        self.entity_id = entity_id


class ValidationError(DatabaseError):
    """Data validation failed before database operation."""
    pass
