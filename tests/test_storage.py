# tests/test_storage.py

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from todolist.manager import TaskStore
from todolist.storage import JsonFileStorage, MemoryStorage

from .factories import make_task


def test_memory_storage_returns_last_save() -> None:
    storage = MemoryStorage()
    assert storage.load() == []

    tasks = [make_task(1), make_task(2, completed=True)]
    storage.save(tasks)
    tasks[0].text = "changed after save"

    loaded = storage.load()
    assert [t.id for t in loaded] == [1, 2]
    assert loaded[0].text == "task 1"


def test_memory_storage_theme() -> None:
    storage = MemoryStorage()
    assert storage.load_theme() is False
    storage.save_theme(True)
    assert storage.load_theme() is True


def test_json_storage_missing_file(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path / "nothing-here")

    assert storage.load() == []
    assert storage.load_theme() is False


def test_json_storage_round_trip(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path / "todo")
    store = TaskStore(storage)
    first = store.add("Write report", "high")
    store.add("Buy milk 🥛", "low")
    store.toggle_completed(first.id)

    reloaded = TaskStore(JsonFileStorage(tmp_path / "todo"))

    assert [(t.id, t.text, t.completed, t.priority.value) for t in reloaded.tasks] == [
        (t.id, t.text, t.completed, t.priority.value) for t in store.tasks
    ]
    data = json.loads(storage.path.read_text(encoding="utf-8"))
    assert set(data) == {"tasks", "dark_theme", "updated_at"}


def test_json_storage_theme_and_tasks_share_file(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path)
    storage.save([make_task(1)])
    storage.save_theme(True)
    storage.save([make_task(1), make_task(2)])

    assert storage.load_theme() is True
    assert [t.id for t in storage.load()] == [1, 2]


def test_json_storage_rejects_blank_text(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path)
    storage.path.write_text(
        json.dumps({"tasks": [{"id": 1, "text": "   ", "priority": "low"}]}),
        encoding="utf-8",
    )

    with pytest.raises(ValidationError):
        storage.load()
