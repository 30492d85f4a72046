# src/todo_list/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import TaskFilter
from ..theme.theme_store import ThemeStore
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state for easy access in commands.
    settings: object

    tasks: TaskRepo
    theme: ThemeStore

    # Active list filter (the UI's filter selector).
    current_filter: TaskFilter = TaskFilter.ALL
