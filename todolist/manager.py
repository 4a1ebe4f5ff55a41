"""
TODOLIST - Task Store
=====================
Owns the task collection and the current filter.
Every mutation goes through the storage hook; views are derived
separately by the projector, never stored here.
"""

import logging
import time
from typing import Iterable, List, Optional, Tuple, Union

from .schema import Task, TaskFilter, TaskPriority, parse_filter, parse_priority
from .storage import TaskStorage

logger = logging.getLogger("todolist")


class TaskStore:
    """
    Session task list.

    Not thread-safe: callers in a threaded host must serialize mutations.
    """

    def __init__(self, storage: TaskStorage):
        self.storage = storage
        self._tasks = _check_unique_ids(storage.load())
        self._filter = TaskFilter.ALL
        self._last_id = max((t.id for t in self._tasks), default=0)
        logger.info(f"📂 Loaded {len(self._tasks)} tasks")

    # ========================================
    # QUERIES
    # ========================================

    @property
    def tasks(self) -> Tuple[Task, ...]:
        """Tasks in insertion order"""
        return tuple(self._tasks)

    @property
    def filter(self) -> TaskFilter:
        return self._filter

    def get(self, task_id: int) -> Optional[Task]:
        """Get task by ID"""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def __len__(self) -> int:
        return len(self._tasks)

    # ========================================
    # MUTATIONS
    # ========================================

    def add(
        self,
        text: str,
        priority: Union[TaskPriority, str] = TaskPriority.MEDIUM
    ) -> Optional[Task]:
        """Append a new open task; blank text is ignored"""
        priority = parse_priority(priority)
        text = text.strip()
        if not text:
            logger.debug("Ignored add with empty text")
            return None

        task = Task(id=self._next_id(), text=text, priority=priority)
        self._tasks.append(task)
        self._save()

        logger.info(f"✅ Added task: {task.text} ({task.id}, {task.priority.value})")
        return task

    def toggle_completed(self, task_id: int) -> Optional[Task]:
        """Flip the completed flag"""
        task = self.get(task_id)
        if not task:
            logger.warning(f"Task not found: {task_id}")
            return None

        task.completed = not task.completed
        self._save()

        logger.info(f"{'☑️' if task.completed else '⬜'} Toggled task: {task.text} ({task_id})")
        return task

    def delete(self, task_id: int) -> bool:
        """Remove a task; unknown ids are a no-op"""
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        removed = len(self._tasks) < before
        self._save()

        if removed:
            logger.info(f"🗑️ Deleted task: {task_id}")
        else:
            logger.warning(f"Task not found: {task_id}")
        return removed

    def edit(self, task_id: int, new_text: str) -> Optional[Task]:
        """Replace task text; blank text leaves the task untouched"""
        new_text = new_text.strip()
        if not new_text:
            logger.debug(f"Ignored edit with empty text for task {task_id}")
            return None

        task = self.get(task_id)
        if not task:
            logger.warning(f"Task not found: {task_id}")
            return None

        if task.text == new_text:
            return task

        task.text = new_text
        self._save()

        logger.info(f"✏️ Edited task: {task_id} -> {new_text}")
        return task

    def clear_completed(self) -> int:
        """Drop every completed task, return how many were removed"""
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if not t.completed]
        removed = before - len(self._tasks)
        self._save()

        logger.info(f"🧹 Cleared {removed} completed tasks")
        return removed

    def set_filter(self, mode: Union[TaskFilter, str]) -> TaskFilter:
        """Select the filter mode; unknown modes are rejected"""
        self._filter = parse_filter(mode)
        return self._filter

    def seed(self, tasks: Iterable[Task]) -> None:
        """Replace the collection, e.g. with demo tasks on first start"""
        tasks = _check_unique_ids(tasks)

        self._tasks = tasks
        self._last_id = max((t.id for t in tasks), default=0)
        self._save()

        logger.info(f"🌱 Seeded {len(tasks)} tasks")

    # ========================================
    # HELPER METHODS
    # ========================================

    def _next_id(self) -> int:
        """Millisecond timestamp, bumped past every id already issued"""
        self._last_id = max(int(time.time() * 1000), self._last_id + 1)
        return self._last_id

    def _save(self) -> None:
        self.storage.save(self._tasks)


def _check_unique_ids(tasks: Iterable[Task]) -> List[Task]:
    tasks = list(tasks)
    ids = [t.id for t in tasks]
    if len(set(ids)) != len(ids):
        raise ValueError(f"Duplicate task ids: {ids}")
    return tasks
