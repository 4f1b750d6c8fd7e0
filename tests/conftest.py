"""Shared fixtures for todo tests."""

from __future__ import annotations

import json
import os
from collections.abc import Generator
from pathlib import Path

import pytest


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def temp_todo_dir(temp_project: Path) -> Path:
    """Create a temporary .todo directory."""
    todo_dir = temp_project / ".todo"
    todo_dir.mkdir()
    return todo_dir


@pytest.fixture
def sample_tasks_data() -> list[dict]:
    """Sample task records as they appear on disk."""
    return [
        {
            "id": 1,
            "title": "Write quarterly report",
            "completed": False,
            "created_at": "2025-01-10T10:00:00",
            "completed_at": None,
            "priority": "high",
            "due_date": "2025-01-31T23:59:59",
            "categories": ["work"],
        },
        {
            "id": 2,
            "title": "Buy groceries",
            "completed": False,
            "created_at": "2025-01-10T11:00:00",
            "completed_at": None,
            "priority": "low",
            "due_date": None,
            "categories": ["home", "errands"],
        },
        {
            "id": 3,
            "title": "Review pull request",
            "completed": True,
            "created_at": "2025-01-09T09:00:00",
            "completed_at": "2025-01-09T17:30:00",
            "priority": "medium",
            "due_date": None,
            "categories": ["work"],
        },
        {
            "id": 5,
            "title": "Call the REPORTER back",
            "completed": False,
            "created_at": "2025-01-11T08:15:00",
            "completed_at": None,
            "priority": None,
            "due_date": None,
            "categories": [],
        },
    ]


@pytest.fixture
def sample_tasks_file(temp_project: Path, sample_tasks_data: list[dict]) -> Path:
    """Write sample tasks to todos.json in the project directory."""
    path = temp_project / "todos.json"
    with open(path, "w") as f:
        json.dump(sample_tasks_data, f)
    return path
