"""Task store - the JSON-backed collection of todo items.

The store owns every Task. A command loads it, runs one operation, and
saves it back if anything changed. The file holds a JSON array of task
records; a missing file is an empty store.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from todo.errors import InvalidArgumentError, NotFoundError, StoreError
from todo.models import Priority, Task

logger = logging.getLogger(__name__)

_TASK_LIST = TypeAdapter(list[Task])


class TaskStore:
    """In-memory task collection bound to a JSON file."""

    def __init__(self, path: Path, tasks: list[Task] | None = None) -> None:
        self.path = path
        self.tasks: list[Task] = tasks if tasks is not None else []

    @classmethod
    def load(cls, path: Path) -> TaskStore:
        """Load tasks from file or return an empty store."""
        if not path.exists():
            logger.debug("No task file at %s, starting empty", path)
            return cls(path)

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise StoreError(f"Could not read {path}: {e}", path=path) from e
        except UnicodeDecodeError as e:
            raise StoreError(f"Task file {path} is not valid UTF-8: {e}", path=path) from e
        except json.JSONDecodeError as e:
            raise StoreError(f"Task file {path} is not valid JSON: {e}", path=path) from e

        try:
            tasks = _TASK_LIST.validate_python(data)
        except ValidationError as e:
            raise StoreError(f"Task file {path} has invalid records: {e}", path=path) from e

        ids = [t.id for t in tasks]
        if len(ids) != len(set(ids)):
            raise StoreError(f"Task file {path} contains duplicate ids", path=path)

        logger.debug("Loaded %d tasks from %s", len(tasks), path)
        return cls(path, tasks)

    def save(self) -> None:
        """Write the full collection back, overwriting the file."""
        payload = _TASK_LIST.dump_python(self.tasks, mode="json")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
        except OSError as e:
            raise StoreError(f"Could not write {self.path}: {e}", path=self.path) from e

        logger.debug("Saved %d tasks to %s", len(self.tasks), self.path)

    def next_id(self) -> int:
        """Return the id the next added task will get."""
        return max((t.id for t in self.tasks), default=0) + 1

    def add(
        self,
        title: str,
        priority: Priority | None = None,
        due_date: datetime | None = None,
        categories: Iterable[str] = (),
    ) -> Task:
        """Create a task with a fresh id."""
        if not title.strip():
            raise InvalidArgumentError("Task description cannot be empty")

        task = Task(
            id=self.next_id(),
            title=title,
            priority=priority,
            due_date=due_date,
            categories=[c.strip() for c in categories if c.strip()],
        )
        self.tasks.append(task)
        logger.debug("Added task %d", task.id)
        return task

    def list(
        self,
        completed: bool = False,
        priority: Priority | None = None,
        tag: str | None = None,
        include_all: bool = False,
    ) -> list[Task]:
        """Return matching tasks in id order.

        Args:
            completed: Show completed tasks instead of pending ones
            priority: Keep only tasks with exactly this priority
            tag: Keep only tasks carrying this category
            include_all: Ignore the completion state entirely
        """
        matches = []
        for task in self._ordered():
            if not include_all and task.completed != completed:
                continue
            if priority is not None and task.priority != priority:
                continue
            if tag is not None and tag not in task.categories:
                continue
            matches.append(task)
        return matches

    def search(self, query: str) -> list[Task]:
        """Return tasks whose title contains query, ignoring case."""
        needle = query.lower()
        return [t for t in self._ordered() if needle in t.title.lower()]

    def get(self, task_id: int) -> Task:
        """Get a task by id."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise NotFoundError(task_id)

    def complete(self, task_id: int) -> tuple[Task, bool]:
        """Mark a task completed.

        Returns the task and whether it changed (False if it was already
        completed).
        """
        task = self.get(task_id)
        changed = task.mark_complete()
        if changed:
            logger.debug("Completed task %d", task_id)
        return task, changed

    def delete(self, task_id: int) -> Task:
        """Remove a task and return it."""
        task = self.get(task_id)
        self.tasks.remove(task)
        logger.debug("Deleted task %d", task_id)
        return task

    def _ordered(self) -> list[Task]:
        return sorted(self.tasks, key=lambda t: t.id)
