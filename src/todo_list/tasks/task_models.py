# src/todo_list/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import Any


class TaskFilter(StrEnum):
    """Completion filter used by list views."""

    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"

    @classmethod
    def from_raw(cls, raw: str | None) -> TaskFilter:
        if not raw:
            return cls.ALL
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return cls.ALL


class DueBucket(StrEnum):
    """Day-relative display groups. Derived on every query, never stored."""

    TODAY = "today"
    TOMORROW = "tomorrow"
    LATER = "later"


def parse_due_date(raw: Any) -> date | None:
    """
    Normalize a due date coming from user input or a stored record.

    - None / blank string -> None (no due date)
    - date -> itself; datetime -> its calendar date (time-of-day dropped)
    - "YYYY-MM-DD" or a full ISO timestamp -> date

    Raises ValueError for anything else.
    """
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if isinstance(raw, str):
        s = raw.strip()
        if not s:
            return None
        try:
            return date.fromisoformat(s)
        except ValueError:
            # JS Date.toISOString() style: "2025-01-01T00:00:00.000Z"
            return datetime.fromisoformat(s.replace("Z", "+00:00")).date()
    raise ValueError(f"Unsupported due date value: {raw!r}")


@dataclass(slots=True)
class Task:
    id: int
    text: str
    completed: bool = False
    due_date: date | None = None

    def to_record(self) -> dict[str, Any]:
        """On-disk shape. `dueDate` is omitted when the task has no due date."""
        rec: dict[str, Any] = {"id": self.id, "text": self.text, "completed": self.completed}
        if self.due_date is not None:
            rec["dueDate"] = self.due_date.isoformat()
        return rec

    @classmethod
    def from_record(cls, rec: Any) -> Task:
        """Build a Task from a stored record. Raises ValueError if it is unusable."""
        if not isinstance(rec, dict):
            raise ValueError("record is not an object")

        raw_id = rec.get("id")
        if isinstance(raw_id, bool) or not isinstance(raw_id, (int, float, str)):
            raise ValueError(f"bad id: {raw_id!r}")
        try:
            task_id = int(raw_id)
        except (TypeError, ValueError, OverflowError) as e:
            raise ValueError(f"bad id: {raw_id!r}") from e

        text = str(rec.get("text") or "").strip()
        if not text:
            raise ValueError("empty text")

        return cls(
            id=task_id,
            text=text,
            completed=rec.get("completed") is True,
            due_date=parse_due_date(rec.get("dueDate")),
        )
