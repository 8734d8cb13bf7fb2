"""Exceptions raised by the store and the task repository."""

from __future__ import annotations


class TaskAppError(Exception):
    """Base exception for the task manager."""


class StorageError(TaskAppError):
    """Raised when the store cannot run a statement (connection, constraint)."""


class NotFoundError(TaskAppError):
    """Raised when no task matches the requested id."""

    def __init__(self, task_id: int | str) -> None:
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class ValidationError(TaskAppError):
    """Raised when submitted values violate the store constraints."""

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__("; ".join(f"{field}: {msg}" for field, msg in errors.items()))
        self.errors = dict(errors)
