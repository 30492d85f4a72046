# src/todo_list/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the storage, TaskStore and ThemeStore into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..storage.kv_store import KeyValueStore
from ..tasks.task_store import TaskStore
from ..theme.theme_store import ThemeStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    storage = KeyValueStore(settings.storage_path)
    state = AppState(
        settings=settings,
        tasks=TaskStore(storage, key=settings.tasks_key),
        theme=ThemeStore(storage, key=settings.theme_key, default=settings.default_theme),
    )
    logger.debug("State created storage=%s", settings.storage_path)
    return state
