"""Tests for todo.models module."""

from __future__ import annotations

from datetime import datetime

import pytest

from todo.errors import InvalidArgumentError
from todo.models import Priority, Task, parse_due_date, parse_priority


class TestTask:
    """Tests for Task model."""

    def test_defaults(self) -> None:
        """Test default values."""
        task = Task(id=1, title="Write tests")
        assert task.id == 1
        assert task.title == "Write tests"
        assert task.completed is False
        assert task.completed_at is None
        assert task.priority is None
        assert task.due_date is None
        assert task.categories == []
        assert isinstance(task.created_at, datetime)

    def test_priority_from_string(self) -> None:
        """Test priority is validated from its lowercase name."""
        task = Task(id=1, title="x", priority="high")  # type: ignore[arg-type]
        assert task.priority is Priority.HIGH

    def test_invalid_priority_rejected(self) -> None:
        """Test unknown priorities are rejected."""
        with pytest.raises(Exception):
            Task(id=1, title="x", priority="urgent")  # type: ignore[arg-type]

    def test_duplicate_categories_dropped(self) -> None:
        """Test categories keep first occurrence order without duplicates."""
        task = Task(id=1, title="x", categories=["work", "home", "work"])
        assert task.categories == ["work", "home"]

    def test_mark_complete(self) -> None:
        """Test completing sets the flag and timestamp."""
        task = Task(id=1, title="x")
        when = datetime(2025, 1, 10, 12, 0)
        assert task.mark_complete(when) is True
        assert task.completed is True
        assert task.completed_at == when

    def test_mark_complete_twice(self) -> None:
        """Test completing again keeps the original timestamp."""
        task = Task(id=1, title="x")
        first = datetime(2025, 1, 10, 12, 0)
        task.mark_complete(first)
        assert task.mark_complete(datetime(2025, 2, 1)) is False
        assert task.completed_at == first

    def test_is_overdue(self) -> None:
        """Test overdue only applies to pending tasks past their due date."""
        now = datetime(2025, 1, 15, 9, 0)
        task = Task(id=1, title="x", due_date=datetime(2025, 1, 14, 23, 59, 59))
        assert task.is_overdue(now) is True

        task.mark_complete()
        assert task.is_overdue(now) is False

    def test_not_overdue_without_due_date(self) -> None:
        """Test tasks without due dates are never overdue."""
        assert Task(id=1, title="x").is_overdue() is False


class TestParsePriority:
    """Tests for parse_priority function."""

    def test_none(self) -> None:
        """Test None stays None."""
        assert parse_priority(None) is None

    def test_names(self) -> None:
        """Test each name maps to its priority."""
        assert parse_priority("high") is Priority.HIGH
        assert parse_priority("medium") is Priority.MEDIUM
        assert parse_priority("low") is Priority.LOW

    def test_case_insensitive(self) -> None:
        """Test names are matched regardless of case."""
        assert parse_priority("HIGH") is Priority.HIGH
        assert parse_priority(" Medium ") is Priority.MEDIUM

    def test_passthrough(self) -> None:
        """Test Priority values pass through unchanged."""
        assert parse_priority(Priority.LOW) is Priority.LOW

    def test_invalid(self) -> None:
        """Test unknown names raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="urgent"):
            parse_priority("urgent")


class TestParseDueDate:
    """Tests for parse_due_date function."""

    def test_none(self) -> None:
        """Test None stays None."""
        assert parse_due_date(None) is None

    def test_end_of_day(self) -> None:
        """Test dates resolve to the last second of the day."""
        assert parse_due_date("2025-03-01") == datetime(2025, 3, 1, 23, 59, 59)

    def test_invalid_format(self) -> None:
        """Test other formats raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="YYYY-MM-DD"):
            parse_due_date("03/01/2025")

    def test_invalid_date(self) -> None:
        """Test impossible dates raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            parse_due_date("2025-02-30")
