"""Configuration models for todo."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from todo.errors import StoreError


class StoreConfig(BaseModel):
    """Configuration for the task file."""

    path: str = "todos.json"


class DisplayConfig(BaseModel):
    """Configuration for terminal output."""

    color: bool = True
    banner: bool = True
    datetime_format: str = "%Y-%m-%d %H:%M"
    date_format: str = "%Y-%m-%d"


class TodoConfig(BaseModel):
    """Main configuration for todo."""

    store: StoreConfig = Field(default_factory=StoreConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> TodoConfig:
        """Load configuration from file or return defaults."""
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            return cls.model_validate(data)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            raise StoreError(f"Invalid config file: {e}", path=path) from e

    def store_path(self, override: str | Path | None = None) -> Path:
        """Resolve the task file, preferring an explicit override."""
        if override:
            return Path(override)
        return Path(self.store.path)


# Default config directory
TODO_DIR = Path(".todo")
CONFIG_FILE = TODO_DIR / "config.json"
