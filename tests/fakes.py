# tests/fakes.py

from __future__ import annotations


class InMemoryStorage:
    """
    Dict-backed KeyValueStorage.

    Counts writes so tests can assert when a store persisted.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})
        self.writes = 0

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.writes += 1
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class FailingStorage:
    """KeyValueStorage whose reads and/or writes always raise."""

    def __init__(self, *, fail_get: bool = True, fail_set: bool = True) -> None:
        self.fail_get = fail_get
        self.fail_set = fail_set
        self.data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        if self.fail_get:
            raise OSError("storage unavailable")
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_set:
            raise OSError("disk full")
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)
