# src/todo_list/tasks/task_store.py

from __future__ import annotations

import json
import logging
import threading
import time
from datetime import date, timedelta

from ..core.ports import KeyValueStorage
from .task_models import DueBucket, Task, TaskFilter

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory ordered task collection mirrored to a key-value storage.

    Persistence:
    - the whole collection is serialized as one JSON list under `key`
    - every mutation that changes state writes the full list before returning
    - unreadable or corrupt storage loads as an empty collection
    - a failed write is logged and not retried; memory stays authoritative

    Invalid input (blank text) and unknown ids are no-ops, never errors.

    Thread-safety:
    - read-modify-persist runs under one re-entrant lock
    """

    def __init__(self, storage: KeyValueStorage, key: str = "todos") -> None:
        self._storage = storage
        self._key = key
        self._lock = threading.RLock()
        self._tasks: list[Task] = self._load()
        self._last_id = max((t.id for t in self._tasks), default=0)
        logger.info("TaskStore ready key=%s total=%s", self._key, len(self._tasks))

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- low-level helpers ----

    def _load(self) -> list[Task]:
        try:
            raw = self._storage.get(self._key)
        except Exception:
            logger.exception("Failed to read tasks from storage key=%s; starting empty.", self._key)
            return []

        if not raw:
            return []

        try:
            data = json.loads(raw)
        except (ValueError, RecursionError):
            logger.warning("Stored tasks under key=%s are not valid JSON; starting empty.", self._key)
            return []

        if not isinstance(data, list):
            logger.warning("Stored tasks under key=%s are not a list; starting empty.", self._key)
            return []

        out: list[Task] = []
        seen: set[int] = set()
        for rec in data:
            try:
                task = Task.from_record(rec)
            except ValueError as e:
                logger.warning("Skipping malformed task record %r: %s", rec, e)
                continue
            if task.id in seen:
                logger.warning("Skipping task with duplicate id=%s", task.id)
                continue
            seen.add(task.id)
            out.append(task)
        return out

    def _save(self) -> None:
        payload = json.dumps([t.to_record() for t in self._tasks], ensure_ascii=False)
        try:
            self._storage.set(self._key, payload)
        except Exception:
            logger.exception(
                "Failed to persist %d tasks to key=%s; in-memory state kept.",
                len(self._tasks),
                self._key,
            )

    def _next_id(self) -> int:
        # Time-derived like Date.now(), but never repeats or goes backwards.
        candidate = int(time.time() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate

    def _find(self, task_id: int) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    # ---- mutations ----

    def add(self, text: str | None, due_date: date | None = None) -> Task | None:
        """Append a new pending task. Returns None (and stores nothing) for blank text."""
        clean = (text or "").strip()
        if not clean:
            logger.debug("add ignored: blank text")
            return None

        with self._lock:
            task = Task(id=self._next_id(), text=clean, completed=False, due_date=due_date)
            self._tasks.append(task)
            self._save()
        logger.debug("Task added id=%s due=%s", task.id, due_date)
        return task

    def delete(self, task_id: int) -> None:
        with self._lock:
            before = len(self._tasks)
            self._tasks = [t for t in self._tasks if t.id != task_id]
            if len(self._tasks) == before:
                logger.debug("delete ignored: no task id=%s", task_id)
                return
            self._save()
        logger.debug("Task deleted id=%s", task_id)

    def toggle_complete(self, task_id: int) -> None:
        with self._lock:
            task = self._find(task_id)
            if task is None:
                logger.debug("toggle ignored: no task id=%s", task_id)
                return
            task.completed = not task.completed
            self._save()
        logger.debug("Task toggled id=%s completed=%s", task_id, task.completed)

    def edit(self, task_id: int, text: str | None, due_date: date | None = None) -> bool:
        """
        Replace text and due date of a task.

        A blank `text` rejects the whole edit (due date is not applied either).
        Returns True only if something changed and was persisted.
        """
        clean = (text or "").strip()
        if not clean:
            logger.debug("edit rejected: blank text id=%s", task_id)
            return False

        with self._lock:
            task = self._find(task_id)
            if task is None:
                logger.debug("edit ignored: no task id=%s", task_id)
                return False
            if task.text == clean and task.due_date == due_date:
                return False
            task.text = clean
            task.due_date = due_date
            self._save()
        logger.debug("Task edited id=%s due=%s", task_id, due_date)
        return True

    def clear_all(self) -> None:
        with self._lock:
            removed = len(self._tasks)
            self._tasks = []
            self._save()
        logger.debug("All tasks cleared (removed=%d)", removed)

    def sort_by_due_date(self) -> None:
        """Reorder storage by ascending due date; tasks without one go first. Stable."""
        with self._lock:
            ordered = sorted(
                self._tasks,
                key=lambda t: (t.due_date is not None, t.due_date or date.min),
            )
            if [t.id for t in ordered] == [t.id for t in self._tasks]:
                return
            self._tasks = ordered
            self._save()
        logger.debug("Tasks sorted by due date")

    # ---- views ----

    def get(self, task_id: int) -> Task | None:
        return self._find(task_id)

    def all(self) -> list[Task]:
        return self.filter(TaskFilter.ALL)

    def filter(self, status: str | None = TaskFilter.ALL) -> list[Task]:
        """
        Tasks matching `status` in store order.

        The list is new, the Task objects are the stored ones.
        Unknown statuses behave like "all".
        """
        f = TaskFilter.from_raw(status)
        if f is TaskFilter.COMPLETED:
            return [t for t in self._tasks if t.completed]
        if f is TaskFilter.PENDING:
            return [t for t in self._tasks if not t.completed]
        return list(self._tasks)

    def count_completed(self) -> int:
        return sum(1 for t in self._tasks if t.completed)

    def group_by_due_date(self, today: date | None = None) -> dict[str, list[Task]]:
        """
        Bucket tasks into today / tomorrow / later, keeping store order inside each bucket.

        Buckets are computed against `today` (default: the local date right now).
        No due date, past dates and anything after tomorrow all land in "later".
        """
        if today is None:
            today = date.today()
        tomorrow = today + timedelta(days=1)

        groups: dict[str, list[Task]] = {b.value: [] for b in DueBucket}
        for t in self._tasks:
            if t.due_date == today:
                groups[DueBucket.TODAY].append(t)
            elif t.due_date == tomorrow:
                groups[DueBucket.TOMORROW].append(t)
            else:
                groups[DueBucket.LATER].append(t)
        return groups
