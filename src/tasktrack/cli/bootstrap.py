# src/tasktrack/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings (injectable, defaults to get_settings()),
- loads the task file with an empty-list fallback,
- wires the owned TaskStore into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.storage import load_tasks_or_empty
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    if settings is None:
        settings = get_settings()

    tasks = load_tasks_or_empty(settings.tasks_path)
    state = AppState(settings=settings, task_store=TaskStore(tasks))
    logger.info("Initial state ready tasks=%d", len(state.task_store))
    return state
