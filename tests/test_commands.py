# tests/test_commands.py

from __future__ import annotations

from datetime import date, timedelta

from todo_list.cli.bootstrap import create_initial_state
from todo_list.cli.commands import (
    EMPTY_LIST_TEXT,
    CommandRegistry,
    parse_due_token,
    registry,
)
from todo_list.connectors.console_connector import handle_line
from todo_list.tasks.task_models import TaskFilter


def test_command_registry_routes_by_name_and_alias(state) -> None:
    reg = CommandRegistry()
    seen: list[list[str]] = []

    def handler(state, args):
        seen.append(args)
        return "ok:" + ",".join(args)

    reg.register("a", handler, "a", aliases=["aa"])

    assert reg.handle(state, "/a x y") == "ok:x,y"
    assert reg.handle(state, "/AA") == "ok:"
    assert seen == [["x", "y"], []]
    assert "/a - a" in reg.build_help()


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_list_done_flow(state) -> None:
    out = registry.handle(state, "/add Buy milk")
    assert out is not None and "Buy milk" in out

    registry.handle(state, "/add Call Bob due:2030-05-01")
    bob = state.tasks.filter("all")[1]
    assert bob.text == "Call Bob"
    assert bob.due_date == date(2030, 5, 1)

    milk = state.tasks.filter("all")[0]
    out = registry.handle(state, f"/done {milk.id}")
    assert out is not None and f"[x] #{milk.id} Buy milk" in out

    out = registry.handle(state, "/list completed")
    assert state.current_filter is TaskFilter.COMPLETED
    assert out is not None and "Buy milk" in out and "Call Bob" not in out

    assert registry.handle(state, "/count") == "Completed: 1 of 2"


def test_add_rejects_blank_and_bad_date(state) -> None:
    assert "Usage" in (registry.handle(state, "/add") or "")
    assert "Bad due date" in (registry.handle(state, "/add x due:someday") or "")
    assert state.tasks.filter("all") == []


def test_edit_keeps_due_date_unless_given(state) -> None:
    task = state.tasks.add("old", date(2030, 1, 1))

    registry.handle(state, f"/edit {task.id} new text")
    assert state.tasks.get(task.id).text == "new text"
    assert state.tasks.get(task.id).due_date == date(2030, 1, 1)

    registry.handle(state, f"/edit {task.id} new text due:none")
    assert state.tasks.get(task.id).due_date is None

    out = registry.handle(state, f"/edit {task.id} due:2031-01-01")
    assert out is not None and "cannot be empty" in out
    assert state.tasks.get(task.id).due_date is None

    assert "No task" in (registry.handle(state, "/edit 999 x") or "")


def test_delete_and_clear_with_confirmation(state) -> None:
    a = state.tasks.add("a")
    state.tasks.add("b")

    registry.handle(state, f"/del {a.id}")
    assert [t.text for t in state.tasks.filter("all")] == ["b"]

    # deleting an unknown id is harmless
    registry.handle(state, "/del 424242")
    assert len(state.tasks.filter("all")) == 1

    assert "confirm" in (registry.handle(state, "/clear") or "")
    assert len(state.tasks.filter("all")) == 1

    out = registry.handle(state, "/clear yes")
    assert out is not None and EMPTY_LIST_TEXT in out
    assert state.tasks.filter("all") == []


def test_group_and_sort(state) -> None:
    today = date.today()
    state.tasks.add("later one")
    state.tasks.add("tomorrow one", today + timedelta(days=1))
    state.tasks.add("today one", today)

    out = registry.handle(state, "/group") or ""
    assert out.index("Today:") < out.index("today one") < out.index("Tomorrow:")
    assert out.index("Tomorrow:") < out.index("tomorrow one") < out.index("Later:")
    assert out.index("Later:") < out.index("later one")

    registry.handle(state, "/sort")
    assert [t.text for t in state.tasks.filter("all")] == ["later one", "today one", "tomorrow one"]


def test_theme_command(state) -> None:
    assert registry.handle(state, "/theme") == "Theme is light."
    assert registry.handle(state, "/theme dark") == "Theme set to dark."
    assert registry.handle(state, "/theme toggle") == "Theme switched to light."
    assert "Usage" in (registry.handle(state, "/theme pink") or "")


def test_console_plain_text_adds_task(state) -> None:
    out = handle_line(state, "water the plants due:today")
    assert out is not None and "water the plants" in out
    task = state.tasks.filter("all")[0]
    assert task.due_date == date.today()

    assert handle_line(state, "") is None


def test_parse_due_token() -> None:
    base = date(2026, 12, 31)
    assert parse_due_token("today", today=base) == base
    assert parse_due_token("Tomorrow", today=base) == date(2027, 1, 1)
    assert parse_due_token("none", today=base) is None
    assert parse_due_token("2027-02-03", today=base) == date(2027, 2, 3)


def test_bootstrap_wires_persistent_state(settings) -> None:
    state = create_initial_state(settings=settings)
    state.tasks.add("persisted")
    state.theme.set("dark")

    again = create_initial_state(settings=settings)
    assert [t.text for t in again.tasks.filter("all")] == ["persisted"]
    assert again.theme.get() == "dark"
    assert settings.storage_path.exists()
