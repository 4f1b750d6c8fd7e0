"""Task model and the parsers that build it from command-line input."""

from __future__ import annotations

from datetime import datetime, time
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from todo.errors import InvalidArgumentError


class Priority(str, Enum):
    """Task priority levels."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


PRIORITY_CHOICES = [p.value for p in Priority]


class Task(BaseModel):
    """A single todo item."""

    id: int
    title: str
    completed: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    completed_at: datetime | None = None
    priority: Priority | None = None
    due_date: datetime | None = None
    categories: list[str] = Field(default_factory=list)

    @field_validator("categories")
    @classmethod
    def _dedupe_categories(cls, value: list[str]) -> list[str]:
        # Keep first occurrence order
        return list(dict.fromkeys(value))

    def mark_complete(self, when: datetime | None = None) -> bool:
        """Mark the task completed.

        Returns False if it was already completed, in which case nothing
        changes.
        """
        if self.completed:
            return False
        self.completed = True
        self.completed_at = when or datetime.now()
        return True

    def is_overdue(self, now: datetime | None = None) -> bool:
        """Check whether a pending task is past its due date."""
        if self.completed or self.due_date is None:
            return False
        return self.due_date < (now or datetime.now())


def parse_priority(value: str | Priority | None) -> Priority | None:
    """Map a priority string (any case) to a Priority."""
    if value is None or isinstance(value, Priority):
        return value
    try:
        return Priority(value.strip().lower())
    except ValueError:
        raise InvalidArgumentError(
            f"Invalid priority '{value}' (expected one of: {', '.join(PRIORITY_CHOICES)})"
        ) from None


def parse_due_date(value: str | None) -> datetime | None:
    """Parse a YYYY-MM-DD string into the last second of that day."""
    if value is None:
        return None
    try:
        day = datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        raise InvalidArgumentError(
            f"Invalid due date '{value}' (expected YYYY-MM-DD)"
        ) from None
    return datetime.combine(day, time(23, 59, 59))
