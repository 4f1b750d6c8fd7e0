"""Error types raised by todo.

Every error carries the process exit code the CLI should use when it
reaches the command boundary.
"""

from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base class for all todo errors."""

    exit_code = 1


class InvalidArgumentError(TodoError):
    """Bad input from the command line."""

    exit_code = 2


class NotFoundError(TodoError):
    """An operation referenced a task id that does not exist."""

    exit_code = 1

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Todo with id {task_id} not found")
        self.task_id = task_id


class StoreError(TodoError):
    """The task file (or config file) could not be read or written."""

    exit_code = 3

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path
