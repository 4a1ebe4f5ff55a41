"""
TODOLIST - Session Task List
============================

Add, edit, complete, delete, filter and sort short prioritized tasks.
State lives in memory for the session; storage is a pluggable hook.

Usage:
    from todolist import TaskStore, ViewProjector, MemoryStorage

    store = TaskStore(MemoryStorage())
    task = store.add("Write the report", "high")
    store.toggle_completed(task.id)
    store.set_filter("active")

    view = ViewProjector.project(store)
    print(view.stats)
"""

from .schema import (
    Task,
    TaskPriority,
    TaskFilter,
    TaskStats,
    TaskView,
    SavedSession,
    DEMO_TASKS,
    create_demo_tasks
)

from .errors import TodoListError, InvalidArgumentError
from .storage import TaskStorage, MemoryStorage, JsonFileStorage
from .manager import TaskStore
from .projector import ViewProjector

__version__ = "1.0.0"
__all__ = [
    "TaskStore",
    "ViewProjector",
    "Task",
    "TaskPriority",
    "TaskFilter",
    "TaskStats",
    "TaskView",
    "SavedSession",
    "DEMO_TASKS",
    "create_demo_tasks",
    "TodoListError",
    "InvalidArgumentError",
    "TaskStorage",
    "MemoryStorage",
    "JsonFileStorage"
]
