# src/tasktrack/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from ..core.errors import TaskError

# Wire names kept compatible with tasks.json files written by earlier versions.
FIELD_DESCRIPTION = "desc"
FIELD_STATUS = "progress"
FIELD_PRIORITY = "prio"


class TaskStatus(StrEnum):
    """
    Task progress.

    The values are the exact tags stored in the data file.
    """

    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    DONE = "Done"

    @classmethod
    def from_selector(cls, raw: str) -> TaskStatus:
        """Map a one-letter prompt selector (d/i/p) to a status."""
        try:
            return _SELECTORS[raw.strip().casefold()]
        except KeyError:
            raise TaskError.invalid_input(f"unknown status selector {raw!r}") from None

    @classmethod
    def from_tag(cls, raw: Any) -> TaskStatus:
        if not isinstance(raw, str):
            raise TaskError.serialization(f"status tag must be a string, got {type(raw).__name__}")
        try:
            return cls(raw)
        except ValueError:
            raise TaskError.serialization(f"unknown status tag {raw!r}") from None


_SELECTORS = {
    "d": TaskStatus.DONE,
    "i": TaskStatus.IN_PROGRESS,
    "p": TaskStatus.PENDING,
}


@dataclass(slots=True)
class Task:
    description: str
    status: TaskStatus
    priority: int

    def to_dict(self) -> dict[str, Any]:
        return {
            FIELD_DESCRIPTION: self.description,
            FIELD_STATUS: self.status.value,
            FIELD_PRIORITY: self.priority,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        if not isinstance(raw, dict):
            raise TaskError.serialization(f"task entry must be an object, got {type(raw).__name__}")

        missing = [k for k in (FIELD_DESCRIPTION, FIELD_STATUS, FIELD_PRIORITY) if k not in raw]
        if missing:
            raise TaskError.serialization(f"missing field(s): {', '.join(missing)}")

        desc = raw[FIELD_DESCRIPTION]
        if not isinstance(desc, str):
            raise TaskError.serialization("desc must be a string")

        prio = raw[FIELD_PRIORITY]
        # bool is an int subclass; reject it so true/false never load as 1/0.
        if isinstance(prio, bool) or not isinstance(prio, int):
            raise TaskError.serialization("prio must be an integer")

        return cls(description=desc, status=TaskStatus.from_tag(raw[FIELD_STATUS]), priority=prio)
