# src/tasktrack/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings stay on the state so handlers can reach paths/app name.
    settings: object
    task_store: TaskRepo
