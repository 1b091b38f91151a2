# src/tasktrack/tasks/storage.py

"""
JSON persistence for the task list.

The whole list is written as one pretty-printed JSON array on every save and
read back in the same order on load.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..core.errors import TaskError
from .task_models import Task

logger = logging.getLogger(__name__)


def load_tasks(path: str | Path) -> list[Task]:
    """
    Read and decode the task file.

    Raises TaskError(IO) when the file is missing or unreadable and
    TaskError(SERIALIZATION) when it is not a JSON array of task objects.
    """
    path = Path(path)
    try:
        raw = path.read_text("utf-8")
    except FileNotFoundError as e:
        raise TaskError.io(f"{path} does not exist") from e
    except UnicodeDecodeError as e:
        raise TaskError.serialization(f"{path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise TaskError.io(f"cannot read {path}: {e}") from e

    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        # ValueError covers JSONDecodeError and over-long integer literals.
        raise TaskError.serialization(str(e)) from e

    if not isinstance(data, list):
        raise TaskError.serialization(f"expected a JSON array, got {type(data).__name__}")

    tasks = [Task.from_dict(item) for item in data]
    logger.info("Loaded %d tasks from %s", len(tasks), path)
    return tasks


def load_tasks_or_empty(path: str | Path) -> list[Task]:
    """Load tasks, falling back to an empty list on any TaskError."""
    try:
        return load_tasks(path)
    except TaskError as e:
        if not Path(path).exists():
            logger.info("No task file at %s, starting with an empty list.", path)
        else:
            logger.warning("Could not load tasks from %s: %s", path, e)
        return []


def save_tasks(path: str | Path, tasks: Iterable[Task]) -> None:
    """
    Write all tasks to `path`.

    The JSON goes to a sibling temp file first and is then moved over the
    target, so a failed write leaves the previous file intact.
    """
    path = Path(path)
    try:
        payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False, indent=2)
    except (TypeError, ValueError) as e:
        raise TaskError.serialization(str(e)) from e

    tmp = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(payload + "\n", "utf-8")
        os.replace(tmp, path)
    except OSError as e:
        with contextlib.suppress(OSError):
            tmp.unlink()
        raise TaskError.io(f"cannot write {path}: {e}") from e

    logger.debug("Saved tasks to %s", path)
