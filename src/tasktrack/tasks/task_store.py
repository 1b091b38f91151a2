# src/tasktrack/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace

from ..core.errors import TaskError
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory ordered task collection.

    Addressing:
    - tasks are addressed by zero-based position, the same number `list()` shows
    - valid positions are 0 <= index < len(store); anything else is NOT_FOUND
    - delete shifts every later task down by one position

    The store is owned by a single session; there is no locking.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(tasks)
        logger.debug("TaskStore ready total=%s", len(self._tasks))

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- low-level helpers ----

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self._tasks):
            logger.debug("Index out of range index=%s total=%s", index, len(self._tasks))
            raise TaskError.not_found(index)
        return index

    # ---- public API ----

    def is_empty(self) -> bool:
        return not self._tasks

    def create(self, description: str, priority: int) -> Task:
        """Append a new Pending task and return it."""
        task = Task(description=description, status=TaskStatus.PENDING, priority=int(priority))
        self._tasks.append(task)
        logger.debug("Task created index=%s priority=%s", len(self._tasks) - 1, task.priority)
        return task

    def get(self, index: int) -> Task:
        return self._tasks[self._check_index(index)]

    def delete(self, index: int) -> Task:
        """Remove and return the task at `index`; later tasks move down by one."""
        removed = self._tasks.pop(self._check_index(index))
        logger.debug("Task deleted index=%s remaining=%s", index, len(self._tasks))
        return removed

    def update(
        self,
        index: int,
        *,
        status: TaskStatus | None = None,
        priority: int | None = None,
    ) -> Task:
        """Change status and/or priority in place. Fields left as None are kept."""
        task = self._tasks[self._check_index(index)]

        if status is not None:
            task.status = status
        if priority is not None:
            task.priority = int(priority)

        logger.debug("Task updated index=%s status=%s priority=%s", index, task.status, task.priority)
        return task

    def list(self) -> Iterator[tuple[int, Task]]:
        """Yield (position, task) pairs in current order. Each call starts over."""
        yield from enumerate(self._tasks)

    def snapshot(self) -> list[Task]:
        """Detached copies of all tasks, suitable for saving."""
        return [replace(t) for t in self._tasks]
