# src/tasktrack/core/errors.py

"""
Single error type used by every fallible operation.

Call sites decide by `kind` whether to recover (re-prompt, fall back to an
empty list) or to propagate.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    IO = "io"
    PARSE = "parse"
    NOT_FOUND = "not_found"
    SERIALIZATION = "serialization"
    INVALID_INPUT = "invalid_input"


class TaskError(Exception):
    """Tagged application error; `str()` is a one-line user-facing message."""

    def __init__(self, kind: ErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(self._render())

    def _render(self) -> str:
        detail = f" ({self.detail})" if self.detail else ""
        if self.kind is ErrorKind.IO:
            return f"I/O Error: {self.detail or 'unknown failure'}"
        if self.kind is ErrorKind.PARSE:
            return f"Parsing Error: Expected a number, got something else.{detail}"
        if self.kind is ErrorKind.NOT_FOUND:
            return "Application Error: Task not found at that index."
        if self.kind is ErrorKind.SERIALIZATION:
            return f"Data Error: Could not read or write data file.{detail}"
        return "Input Error: Please enter a valid command or value."

    @classmethod
    def io(cls, detail: str) -> TaskError:
        return cls(ErrorKind.IO, detail)

    @classmethod
    def parse(cls, raw: str) -> TaskError:
        return cls(ErrorKind.PARSE, f"invalid digit in {raw!r}" if raw else "empty input")

    @classmethod
    def not_found(cls, index: int) -> TaskError:
        return cls(ErrorKind.NOT_FOUND, f"index={index}")

    @classmethod
    def serialization(cls, detail: str) -> TaskError:
        return cls(ErrorKind.SERIALIZATION, detail)

    @classmethod
    def invalid_input(cls, detail: str | None = None) -> TaskError:
        return cls(ErrorKind.INVALID_INPUT, detail)
