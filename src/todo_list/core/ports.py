# src/todo_list/core/ports.py

"""
Ports (interfaces) used by the core.

Stores and the UI depend on Protocols instead of concrete implementations.
This keeps the storage backend swappable and makes testing easier.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Protocol


class KeyValueStorage(Protocol):
    """Opaque durable string store (the browser localStorage equivalent)."""

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def delete(self, key: str) -> None: ...


class TaskRepo(Protocol):
    # Mutations
    def add(self, text: str | None, due_date: date | None = None) -> Any | None: ...
    def delete(self, task_id: int) -> None: ...
    def toggle_complete(self, task_id: int) -> None: ...
    def edit(self, task_id: int, text: str | None, due_date: date | None = None) -> bool: ...
    def clear_all(self) -> None: ...
    def sort_by_due_date(self) -> None: ...

    # Views
    def get(self, task_id: int) -> Any | None: ...
    def filter(self, status: str | None = "all") -> list[Any]: ...
    def count_completed(self) -> int: ...
    def group_by_due_date(self, today: date | None = None) -> Mapping[str, list[Any]]: ...
