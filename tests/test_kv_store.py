# tests/test_kv_store.py

from __future__ import annotations

from pathlib import Path

from todo_list.storage.kv_store import KeyValueStore


def test_kv_get_set_replace_delete(tmp_path: Path) -> None:
    store = KeyValueStore(tmp_path / "nested" / "kv.sqlite3")

    assert store.get("todos") is None

    store.set("todos", "[]")
    store.set("theme", "dark")
    assert store.get("todos") == "[]"
    assert store.keys() == ["theme", "todos"]

    store.set("todos", '[{"id": 1}]')
    assert store.get("todos") == '[{"id": 1}]'

    store.delete("todos")
    assert store.get("todos") is None
    assert store.keys() == ["theme"]

    # deleting a missing key is fine
    store.delete("todos")


def test_kv_survives_reopen(tmp_path: Path) -> None:
    db = tmp_path / "kv.sqlite3"
    KeyValueStore(db).set("theme", "light")

    assert KeyValueStore(db).get("theme") == "light"
