# src/tasktrack/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .session import SessionController

logger = logging.getLogger(__name__)


class SessionSignal(Enum):
    """What the loop should do after a command."""

    CONTINUE = "continue"
    EXIT = "exit"


CommandHandler = Callable[["SessionController"], SessionSignal]


@dataclass(frozen=True, slots=True)
class Command:
    name: str
    handler: CommandHandler
    help_text: str
    mutating: bool = False
    aliases: tuple[str, ...] = field(default_factory=tuple)


class CommandRegistry:
    """Single-letter command registry used by the session (s, c, d, u, e, ...)."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._order: list[str] = []

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        *,
        mutating: bool = False,
    ) -> None:
        key = name.casefold()
        command = Command(
            name=key,
            handler=handler,
            help_text=help_text,
            mutating=mutating,
            aliases=tuple(a.casefold() for a in aliases or []),
        )
        self._commands[key] = command
        if key not in self._order:
            self._order.append(key)
        for alias in command.aliases:
            self._commands[alias] = command

    def resolve(self, line: str) -> Command | None:
        """Look up a command by name or alias (trimmed, case-folded)."""
        return self._commands.get(line.strip().casefold())

    def build_help(self) -> str:
        lines = ["What do you want to do?"]
        for name in self._order:
            lines.append(f"{name.upper()}: {self._commands[name].help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_show(session: SessionController) -> SessionSignal:
    session.show_tasks()
    return SessionSignal.CONTINUE


def cmd_create(session: SessionController) -> SessionSignal:
    session.say("Creating a new task. What's the description of the new task?")
    description = session.read("> ")

    priority = session.prompt_int(
        "And what's the priority of the task? (Enter a number, empty to cancel)"
    )
    if priority is None:
        session.say("Cancelled.")
        return SessionSignal.CONTINUE

    session.store.create(description, priority)
    session.say("Task added!")
    return SessionSignal.CONTINUE


def cmd_delete(session: SessionController) -> SessionSignal:
    if session.store.is_empty():
        session.say("Task list is empty!")
        return SessionSignal.CONTINUE

    session.say("Deleting a task.")
    index = session.prompt_index("remove")
    if index is None:
        session.say("Cancelled.")
        return SessionSignal.CONTINUE

    session.store.delete(index)
    session.say("Task removed!")
    return SessionSignal.CONTINUE


def cmd_update(session: SessionController) -> SessionSignal:
    """
    u -> pick a task, then a status letter (d/i/p), then optionally a new priority.
    """
    if session.store.is_empty():
        session.say("Task list is empty!")
        return SessionSignal.CONTINUE

    session.say("Updating a task.")
    index = session.prompt_index("update")
    if index is None:
        session.say("Cancelled.")
        return SessionSignal.CONTINUE

    task = session.store.get(index)
    status = session.prompt_status(task.description)
    if status is None:
        session.say("Cancelled.")
        return SessionSignal.CONTINUE

    # Empty keeps the current priority here rather than cancelling.
    priority = session.prompt_int(
        f"New priority for the task? (Enter a number, empty keeps {task.priority})"
    )

    session.store.update(index, status=status, priority=priority)
    session.say("Task updated!")
    return SessionSignal.CONTINUE


def cmd_exit(session: SessionController) -> SessionSignal:
    session.persist()
    session.say("Exiting application.")
    return SessionSignal.EXIT


registry.register("s", cmd_show, help_text="Show Task list", aliases=["show", "list"])
registry.register("c", cmd_create, help_text="Create a new task", aliases=["create"], mutating=True)
registry.register("d", cmd_delete, help_text="Delete a task", aliases=["delete"], mutating=True)
registry.register("u", cmd_update, help_text="Update a task", aliases=["update"], mutating=True)
registry.register("e", cmd_exit, help_text="Exit", aliases=["exit", "quit"])
