# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_list.core.state import AppState
from todo_list.storage.kv_store import KeyValueStore
from todo_list.tasks.task_store import TaskStore
from todo_list.theme.theme_store import ThemeStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=tmp_path / "data",
        storage_path=tmp_path / "data" / "storage.sqlite3",
        tasks_key="todos",
        theme_key="theme",
        default_theme="light",
    )


@pytest.fixture()
def storage(settings: SimpleNamespace) -> KeyValueStore:
    return KeyValueStore(settings.storage_path)


@pytest.fixture()
def state(settings: SimpleNamespace, storage: KeyValueStore) -> AppState:
    """
    AppState wired with real SQLite storage.

    Persistence is part of what we want to test, so no fakes here.
    """
    return AppState(
        settings=settings,
        tasks=TaskStore(storage, key=settings.tasks_key),
        theme=ThemeStore(storage, key=settings.theme_key, default=settings.default_theme),
    )
