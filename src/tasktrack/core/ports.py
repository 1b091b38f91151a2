# src/tasktrack/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the session.

The session depends on these Protocols instead of concrete implementations,
so tests can drive it with scripted input and an in-memory repository.
"""

from collections.abc import Iterator
from typing import Any, Protocol


class Console(Protocol):
    """Line-oriented terminal I/O."""

    def read_line(self, prompt: str = "") -> str:
        """Return one line with surrounding whitespace trimmed. Raises TaskError(IO) on failure."""
        ...

    def write_line(self, text: str = "") -> None: ...


class TaskRepo(Protocol):
    def __len__(self) -> int: ...
    def is_empty(self) -> bool: ...
    def create(self, description: str, priority: int) -> Any: ...
    def get(self, index: int) -> Any: ...
    def delete(self, index: int) -> Any: ...
    def update(self, index: int, *, status: Any = None, priority: int | None = None) -> Any: ...
    def list(self) -> Iterator[tuple[int, Any]]: ...
    def snapshot(self) -> list[Any]: ...
