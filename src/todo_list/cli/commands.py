# src/todo_list/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, timedelta
from typing import cast

from ..core.state import AppState
from ..tasks.task_models import DueBucket, Task, TaskFilter, parse_due_date

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

EMPTY_LIST_TEXT = "Your task box is empty! Let's get something done today."

_UNSET = object()


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- parsing / rendering helpers ----


def parse_due_token(value: str, *, today: date | None = None) -> date | None:
    """Value of a `due:` token: ISO date, "today", "tomorrow", or "none"/"" to clear."""
    v = value.strip().lower()
    if v in ("", "none", "-"):
        return None
    if today is None:
        today = date.today()
    if v == "today":
        return today
    if v == "tomorrow":
        return today + timedelta(days=1)
    return parse_due_date(v)


def split_text_and_due(args: list[str]) -> tuple[str, object]:
    """
    Split command args into task text and an optional `due:` value.

    Returns (text, due) where due is _UNSET when no `due:` token was given.
    Raises ValueError for an unparseable date.
    """
    words: list[str] = []
    due: object = _UNSET
    for a in args:
        if a.lower().startswith("due:"):
            due = parse_due_token(a[4:])
        else:
            words.append(a)
    return " ".join(words), due


def _parse_id(raw: str) -> int | None:
    try:
        return int(raw.lstrip("#"))
    except ValueError:
        return None


def format_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    due = f" (due {task.due_date.isoformat()})" if task.due_date else ""
    return f"[{mark}] #{task.id} {task.text}{due}"


def render_tasks(tasks: list[Task]) -> str:
    if not tasks:
        return EMPTY_LIST_TEXT
    return "\n".join(format_task(t) for t in tasks)


def render_current(state: AppState) -> str:
    """Redraw the list with the active filter (called after every mutation)."""
    tasks = state.tasks.filter(state.current_filter)
    header = f"Tasks ({state.current_filter}):"
    return f"{header}\n{render_tasks(tasks)}"


# ---- commands ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    try:
        text, due = split_text_and_due(args)
    except ValueError as e:
        return f"Bad due date: {e}. Use YYYY-MM-DD, today or tomorrow."

    task = state.tasks.add(text, None if due is _UNSET else cast(date | None, due))
    if task is None:
        return "Usage: /add <text> [due:YYYY-MM-DD|today|tomorrow]"
    return render_current(state)


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list                         -> show with the active filter
    /list all|pending|completed   -> switch filter and show
    """
    if args:
        state.current_filter = TaskFilter.from_raw(args[0])
    return render_current(state)


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args[0]) if args else None
    if task_id is None:
        return "Usage: /done <id>"
    state.tasks.toggle_complete(task_id)
    return render_current(state)


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <id> <text> [due:...]

    Without a due: token the current due date is kept.
    """
    task_id = _parse_id(args[0]) if args else None
    if task_id is None:
        return "Usage: /edit <id> <text> [due:YYYY-MM-DD|today|tomorrow|none]"

    task = state.tasks.get(task_id)
    if task is None:
        return f"No task #{task_id}."

    try:
        text, due = split_text_and_due(args[1:])
    except ValueError as e:
        return f"Bad due date: {e}. Use YYYY-MM-DD, today, tomorrow or none."

    if not text.strip():
        return "Task text cannot be empty; edit ignored."

    new_due = task.due_date if due is _UNSET else cast(date | None, due)
    state.tasks.edit(task_id, text, new_due)
    return render_current(state)


def cmd_delete(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args[0]) if args else None
    if task_id is None:
        return "Usage: /del <id>"
    state.tasks.delete(task_id)
    return render_current(state)


def cmd_clear(state: AppState, args: list[str]) -> str:
    if not args or args[0].lower() not in ("yes", "y"):
        return "Clear all tasks? Type /clear yes to confirm."
    state.tasks.clear_all()
    return render_current(state)


def cmd_count(state: AppState, args: list[str]) -> str:
    total = len(state.tasks.filter(TaskFilter.ALL))
    return f"Completed: {state.tasks.count_completed()} of {total}"


def cmd_group(state: AppState, args: list[str]) -> str:
    groups = state.tasks.group_by_due_date()
    titles = {
        DueBucket.TODAY: "Today",
        DueBucket.TOMORROW: "Tomorrow",
        DueBucket.LATER: "Later",
    }
    blocks = []
    for bucket in DueBucket:
        items = groups.get(bucket.value, [])
        body = "\n".join(f"  {format_task(t)}" for t in items) if items else "  -"
        blocks.append(f"{titles[bucket]}:\n{body}")
    return "\n".join(blocks)


def cmd_sort(state: AppState, args: list[str]) -> str:
    state.tasks.sort_by_due_date()
    return render_current(state)


def cmd_theme(state: AppState, args: list[str]) -> str:
    """
    /theme               -> show current theme
    /theme light|dark    -> set theme
    /theme toggle        -> switch between light and dark
    """
    if not args:
        return f"Theme is {state.theme.get()}."

    arg = args[0].lower()
    if arg == "toggle":
        return f"Theme switched to {state.theme.toggle()}."

    try:
        theme = state.theme.set(arg)
    except ValueError:
        return "Usage: /theme light | /theme dark | /theme toggle"
    return f"Theme set to {theme}."


def cmd_status(state: AppState, args: list[str]) -> str:
    storage_path = getattr(state.settings, "storage_path", "?")
    total = len(state.tasks.filter(TaskFilter.ALL))
    return (
        "Status:\n"
        f"  Tasks: {total} ({state.tasks.count_completed()} completed)\n"
        f"  Filter: {state.current_filter}\n"
        f"  Theme: {state.theme.get()}\n"
        f"  Storage: {storage_path}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add", cmd_add, help_text="Add a task: /add <text> [due:YYYY-MM-DD|today|tomorrow]."
)
registry.register(
    "list", cmd_list, help_text="Show tasks: /list [all|pending|completed].", aliases=["ls"]
)
registry.register("done", cmd_done, help_text="Toggle completion: /done <id>.", aliases=["toggle"])
registry.register(
    "edit", cmd_edit, help_text="Edit a task: /edit <id> <text> [due:...|due:none]."
)
registry.register("del", cmd_delete, help_text="Delete a task: /del <id>.", aliases=["rm"])
registry.register("clear", cmd_clear, help_text="Delete all tasks: /clear yes.")
registry.register("count", cmd_count, help_text="Show how many tasks are completed.")
registry.register("group", cmd_group, help_text="Group tasks by due day (today/tomorrow/later).")
registry.register("sort", cmd_sort, help_text="Sort tasks by due date (no date first).")
registry.register("theme", cmd_theme, help_text="Theme: /theme [light|dark|toggle].")
registry.register("status", cmd_status, help_text="Show task totals, filter, theme and storage.")
