"""Custom exceptions for Tasklist CLI."""

from tasklist_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
)


class AppError(Exception):
    """Application error carrying the exit code a command should end with."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


class TaskValidationError(AppError):
    """Raised when a task is added or edited without a title or priority."""

    def __init__(self, message: str = "Enter task title and priority!"):
        super().__init__(message, exit_code=ERROR_INVALID_ARGS)


class TaskNotFoundError(AppError):
    """Raised when an ID or suffix matches no task."""

    def __init__(self, message: str):
        super().__init__(message, exit_code=ERROR_NOT_FOUND)


class AmbiguousTaskIdError(AppError):
    """Raised when a suffix matches more than one task."""

    def __init__(self, message: str):
        super().__init__(message, exit_code=ERROR_INVALID_ARGS)


class StorageQuotaExceededError(OSError):
    """Raised by the key-value store when a value exceeds the storage quota."""
