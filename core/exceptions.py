"""
Custom exception hierarchy for the reminiscence service.
Provides structured error handling with proper context.
"""

from typing import Optional, Dict, Any


class ReminiscenceException(Exception):
    """Base exception for all reminiscence service errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize exception with message and optional context.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
        }


# ==================== Database Exceptions ====================


class DatabaseException(ReminiscenceException):
    """Base exception for database-related errors."""

    pass


class DatabaseConnectionError(DatabaseException):
    """Raised when database connection fails."""

    def __init__(self, details: Optional[str] = None):
        super().__init__(
            message="Failed to connect to database",
            error_code="DATABASE_CONNECTION_ERROR",
            context={"details": details} if details else {},
        )


# ==================== Memory Exceptions ====================


class MemoryException(ReminiscenceException):
    """Base exception for life story memory errors."""

    pass


class ResidentNotFoundError(MemoryException):
    """Raised when a resident cannot be resolved."""

    def __init__(self, resident_id: str):
        super().__init__(
            message=f"Resident {resident_id} not found",
            error_code="RESIDENT_NOT_FOUND",
            context={"resident_id": resident_id},
        )


# ==================== Validation Exceptions ====================


class ValidationException(ReminiscenceException):
    """Base exception for validation errors."""

    pass


class InvalidInputError(ValidationException):
    """Raised when input validation fails."""

    def __init__(self, field: str, reason: str):
        super().__init__(
            message=f"Invalid input: {field} - {reason}",
            error_code="INVALID_INPUT",
            context={"field": field, "reason": reason},
        )

