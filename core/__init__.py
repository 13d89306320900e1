"""
Core utilities and infrastructure for the reminiscence service.
"""

from core.exceptions import (
    ReminiscenceException,
    DatabaseException,
    DatabaseConnectionError,
    MemoryException,
    ResidentNotFoundError,
    ValidationException,
    InvalidInputError,
)
from core.logging_config import configure_logging, get_logger

__all__ = [
    "ReminiscenceException",
    "DatabaseException",
    "DatabaseConnectionError",
    "MemoryException",
    "ResidentNotFoundError",
    "ValidationException",
    "InvalidInputError",
    "configure_logging",
    "get_logger",
]
