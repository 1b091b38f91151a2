# tests/test_session.py

from __future__ import annotations

import json

import pytest

from tasktrack.cli.bootstrap import create_initial_state
from tasktrack.cli.commands import CommandRegistry, SessionSignal
from tasktrack.cli.session import SessionController, parse_int
from tasktrack.core.errors import ErrorKind, TaskError
from tasktrack.tasks.storage import load_tasks, save_tasks
from tasktrack.tasks.task_models import Task, TaskStatus

from .fakes import FakeConsole


def _run(state, *lines: str) -> tuple[int, FakeConsole]:
    console = FakeConsole(lines)
    code = SessionController(state, console).run()
    return code, console


def _seed(state, *descriptions: str) -> None:
    for i, d in enumerate(descriptions):
        state.task_store.create(d, i)


def test_create_reprompts_until_priority_is_an_integer(state) -> None:
    code, console = _run(state, "c", "Buy milk", "abc", "5", "e")

    assert code == 0
    assert "Parsing Error: Expected a number, got something else." in console.text
    assert state.task_store.snapshot() == [Task("Buy milk", TaskStatus.PENDING, 5)]
    assert "Task added!" in console.lines


def test_create_keeps_description_verbatim_after_trim(state) -> None:
    _run(state, "C", "   Call   Bob  ", "-3", "e")
    assert state.task_store.get(0) == Task("Call   Bob", TaskStatus.PENDING, -3)


def test_create_with_empty_priority_is_cancelled(state) -> None:
    _, console = _run(state, "c", "x", "", "e")
    assert "Cancelled." in console.lines
    assert state.task_store.is_empty()


def test_missing_file_starts_empty_and_show_says_so(settings) -> None:
    state = create_initial_state(settings=settings)
    code, console = _run(state, "s", "e")

    assert code == 0
    assert "Task list is empty!" in console.lines
    assert not any("Error" in line for line in console.lines)


def test_show_lists_position_description_status_priority(state) -> None:
    _seed(state, "A", "B")
    state.task_store.update(1, status=TaskStatus.DONE)

    _, console = _run(state, "show", "e")

    assert "0. Task: A, Progress: Pending, Priority: 0" in console.lines
    assert "1. Task: B, Progress: Done, Priority: 1" in console.lines


def test_delete_reprompts_on_index_equal_to_length(state) -> None:
    _seed(state, "A", "B")

    _, console = _run(state, "d", "2", "1", "e")

    assert "Could not find task!" in console.lines
    assert "Task removed!" in console.lines
    assert [t.description for t in state.task_store.snapshot()] == ["A"]


def test_delete_rejects_negative_index_as_parse_error(state) -> None:
    _seed(state, "A", "B")

    _, console = _run(state, "d", "-1", "0", "e")

    assert "Parsing Error" in console.text
    assert [t.description for t in state.task_store.snapshot()] == ["B"]


def test_delete_and_update_on_empty_store_do_not_prompt(state) -> None:
    _, console = _run(state, "d", "u", "e")

    assert console.lines.count("Task list is empty!") == 2
    # One read per command, nothing else.
    assert console.prompts == ["", "", ""]


def test_delete_cancel_with_empty_line(state) -> None:
    _seed(state, "A")
    _, console = _run(state, "d", "", "e")

    assert "Cancelled." in console.lines
    assert len(state.task_store) == 1


def test_update_status_reprompts_on_unknown_letter(state) -> None:
    _seed(state, "Buy milk")

    _, console = _run(state, "u", "5", "0", "x", "d", "", "e")

    assert "Could not find task!" in console.lines
    assert "Unknown status, try again." in console.lines
    assert "Task updated!" in console.lines
    assert state.task_store.get(0) == Task("Buy milk", TaskStatus.DONE, 0)


def test_update_can_change_priority(state) -> None:
    _seed(state, "A")

    _run(state, "u", "0", "i", "oops", "42", "e")

    assert state.task_store.get(0) == Task("A", TaskStatus.IN_PROGRESS, 42)


def test_update_cancel_at_status_prompt(state) -> None:
    _seed(state, "A")

    _, console = _run(state, "u", "0", "", "e")

    assert "Cancelled." in console.lines
    assert state.task_store.get(0).status is TaskStatus.PENDING


def test_unknown_command(state) -> None:
    _, console = _run(state, "zz", "e")
    assert "Unknown command, try again." in console.lines


def test_mutating_commands_persist(state, settings) -> None:
    _run(state, "c", "Buy milk", "3", "u", "0", "d", "")

    # Input ran out at the next command read; the file still has both changes.
    assert load_tasks(settings.tasks_path) == [Task("Buy milk", TaskStatus.DONE, 3)]


def test_exit_persists_and_returns_zero(state, settings) -> None:
    _seed(state, "A")

    code, console = _run(state, "exit")

    assert code == 0
    assert console.lines[-1] == "Exiting application."
    data = json.loads(settings.tasks_path.read_text("utf-8"))
    assert data == [{"desc": "A", "progress": "Pending", "prio": 0}]


def test_eof_on_command_read_returns_one(state) -> None:
    code, console = _run(state)

    assert code == 1
    assert console.lines[-1].startswith("Error reading command:")


def test_eof_inside_prompt_aborts_command_then_exits(state) -> None:
    code, console = _run(state, "c", "half typed")

    assert code == 1
    assert state.task_store.is_empty()
    assert "I/O Error: end of input" in console.lines


def test_save_failure_is_reported_and_loop_continues(state, settings, tmp_path) -> None:
    blocked = tmp_path / "blocked"
    blocked.mkdir()
    settings.tasks_path = blocked

    code, console = _run(state, "c", "A", "1", "s", "e")

    assert code == 0
    assert any(line.startswith("Warning: changes were not saved.") for line in console.lines)
    assert "0. Task: A, Progress: Pending, Priority: 1" in console.lines


def test_loaded_state_round_trip_through_session(settings) -> None:
    save_tasks(settings.tasks_path, [Task("Buy milk", TaskStatus.PENDING, 3)])

    state = create_initial_state(settings=settings)
    _run(state, "u", "0", "d", "", "e")

    assert load_tasks(settings.tasks_path) == [Task("Buy milk", TaskStatus.DONE, 3)]


def test_handler_crash_is_reported(state) -> None:
    reg = CommandRegistry()

    def boom(session):
        raise RuntimeError("boom")

    def leave(session):
        return SessionSignal.EXIT

    reg.register("b", boom, "boom")
    reg.register("e", leave, "exit")

    console = FakeConsole(["b", "e"])
    assert SessionController(state, console, registry=reg).run() == 0
    assert "Internal error while handling a command." in console.lines


@pytest.mark.parametrize(("raw", "expected"), [("5", 5), ("+5", 5), ("-5", -5), ("007", 7)])
def test_parse_int_signed(raw: str, expected: int) -> None:
    assert parse_int(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "1_000", "1.5", "-1", "5 5", "1" * 5000])
def test_parse_int_unsigned_rejects(raw: str) -> None:
    with pytest.raises(TaskError) as exc:
        parse_int(raw, signed=False)
    assert exc.value.kind is ErrorKind.PARSE


@pytest.mark.parametrize("raw", ["-" + "1" * 5000, "+" + "7" * 5000])
def test_parse_int_signed_rejects_overlong_numbers(raw: str) -> None:
    with pytest.raises(TaskError) as exc:
        parse_int(raw)
    assert exc.value.kind is ErrorKind.PARSE


def test_create_reprompts_on_overlong_priority(state) -> None:
    _, console = _run(state, "c", "x", "1" * 5000, "5", "e")

    assert "Internal error while handling a command." not in console.lines
    assert "Parsing Error" in console.text
    assert state.task_store.snapshot() == [Task("x", TaskStatus.PENDING, 5)]


def test_delete_reprompts_on_overlong_index(state) -> None:
    _seed(state, "A", "B")

    _, console = _run(state, "d", "9" * 5000, "0", "e")

    assert "Parsing Error" in console.text
    assert [t.description for t in state.task_store.snapshot()] == ["B"]
