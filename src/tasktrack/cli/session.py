# src/tasktrack/cli/session.py

"""
Interactive session: menu -> command -> prompts -> save.

The controller never exits the process. `run()` returns an exit code and the
caller (cli/main.py) decides what to do with it.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from ..core.errors import ErrorKind, TaskError
from ..core.ports import Console, TaskRepo
from ..core.state import AppState
from ..tasks.storage import save_tasks
from ..tasks.task_models import TaskStatus
from .commands import CommandRegistry, SessionSignal
from .commands import registry as default_registry

logger = logging.getLogger(__name__)

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")


def parse_int(raw: str, *, signed: bool = True) -> int:
    """Strict integer parse (no underscores, no whitespace inside). Raises TaskError(PARSE)."""
    pattern = _SIGNED_INT if signed else _UNSIGNED_INT
    if not pattern.fullmatch(raw):
        raise TaskError.parse(raw)
    try:
        return int(raw)
    except ValueError:
        # digit strings past the int conversion limit
        raise TaskError.parse(raw[:20] + "...") from None


class SessionController:
    def __init__(
        self,
        state: AppState,
        console: Console,
        registry: CommandRegistry | None = None,
    ) -> None:
        self.state = state
        self.console = console
        self.registry = registry or default_registry

    @property
    def store(self) -> TaskRepo:
        return self.state.task_store

    @property
    def tasks_path(self) -> Path:
        return Path(getattr(self.state.settings, "tasks_path", "tasks.json"))

    # ---- I/O helpers ----

    def say(self, text: str = "") -> None:
        self.console.write_line(text)

    def read(self, prompt: str = "") -> str:
        return self.console.read_line(prompt)

    # ---- prompts (empty line -> None) ----

    def prompt_int(self, question: str, *, signed: bool = True) -> int | None:
        """Ask until the answer parses as an integer. Empty answer returns None."""
        while True:
            self.say(question)
            raw = self.read("> ")
            if raw == "":
                return None
            try:
                return parse_int(raw, signed=signed)
            except TaskError as e:
                self.say(str(e))

    def prompt_index(self, verb: str) -> int | None:
        """Show the list and ask for a position until it addresses an existing task."""
        while True:
            self.show_tasks()
            index = self.prompt_int(
                f"What task would you like to {verb}? (Enter the number of the task, empty to cancel)",
                signed=False,
            )
            if index is None:
                return None
            try:
                self.store.get(index)
            except TaskError as e:
                if e.kind is not ErrorKind.NOT_FOUND:
                    raise
                self.say("Could not find task!")
                continue
            return index

    def prompt_status(self, description: str) -> TaskStatus | None:
        while True:
            self.say(
                f"What progress would you like to set to {description}?\n"
                "D : Done\nI : In Progress\nP : Pending\n(empty to cancel)"
            )
            raw = self.read("> ")
            if raw == "":
                return None
            try:
                return TaskStatus.from_selector(raw)
            except TaskError:
                self.say("Unknown status, try again.")

    # ---- shared actions ----

    def show_tasks(self) -> None:
        if self.store.is_empty():
            self.say("Task list is empty!")
            return
        for i, task in self.store.list():
            self.say(f"{i}. Task: {task.description}, Progress: {task.status}, Priority: {task.priority}")

    def persist(self) -> None:
        """Save the whole list; a failure is reported and logged, never raised."""
        try:
            save_tasks(self.tasks_path, self.store.snapshot())
        except TaskError as e:
            logger.warning("Failed to save tasks to %s: %s", self.tasks_path, e)
            self.say(f"Warning: changes were not saved. {e}")

    # ---- loop ----

    def handle_line(self, line: str) -> SessionSignal:
        command = self.registry.resolve(line)
        if command is None:
            logger.debug("Unknown command %r", line)
            self.say("Unknown command, try again.")
            return SessionSignal.CONTINUE

        signal = SessionSignal.CONTINUE
        try:
            signal = command.handler(self)
        except TaskError as e:
            # e.g. input closed in the middle of a prompt
            logger.info("Command %s aborted: %s", command.name, e)
            self.say(str(e))
        except Exception:
            logger.exception("Command handler crashed.")
            self.say("Internal error while handling a command.")

        if command.mutating:
            self.persist()
        return signal

    def run(self) -> int:
        """Run until `exit` (returns 0) or until the command line cannot be read (returns 1)."""
        logger.info("Session started tasks=%s path=%s", len(self.store), self.tasks_path)

        while True:
            self.say()
            self.say(self.registry.build_help())
            try:
                line = self.read()
            except TaskError as e:
                logger.error("Could not read command: %s", e)
                self.say(f"Error reading command: {e}")
                return 1

            if self.handle_line(line) is SessionSignal.EXIT:
                logger.info("Session finished.")
                return 0
