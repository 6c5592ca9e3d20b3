"""Error types with formatted context."""

from __future__ import annotations

from pathlib import Path


class ConfigError(Exception):
    """Raised when a utrim.toml file cannot be read or holds an invalid value."""

    def __init__(self, message: str, path: Path) -> None:
        self.message = message
        self.path = path
        super().__init__(self.format())

    def format(self) -> str:
        return f"error: {self.message}\n --> {self.path}"
