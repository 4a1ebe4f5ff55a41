# tests/conftest.py

from __future__ import annotations

import pytest

from todolist.manager import TaskStore
from todolist.storage import MemoryStorage


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def store(storage: MemoryStorage) -> TaskStore:
    """Empty store on in-memory storage (no demo seed)."""
    return TaskStore(storage)
