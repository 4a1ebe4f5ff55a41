"""
TODOLIST - Task Schema Definition
=================================
Task, filter and view models for the session task list.
"""

from enum import Enum
from typing import List
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from .errors import InvalidArgumentError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskPriority(str, Enum):
    """Task priority levels"""
    HIGH = "high"       # Shown first among open tasks
    MEDIUM = "medium"   # Normal priority
    LOW = "low"         # Nice to have

    @property
    def rank(self) -> int:
        return PRIORITY_RANK[self]


PRIORITY_RANK = {
    TaskPriority.HIGH: 3,
    TaskPriority.MEDIUM: 2,
    TaskPriority.LOW: 1,
}


class TaskFilter(str, Enum):
    """Named view restrictions over the task list"""
    ALL = "all"               # Every task
    ACTIVE = "active"         # Not completed
    COMPLETED = "completed"   # Completed only
    HIGH = "high"             # High priority, any state


def parse_priority(priority) -> TaskPriority:
    try:
        return TaskPriority(priority)
    except ValueError:
        raise InvalidArgumentError("priority", priority, [p.value for p in TaskPriority]) from None


def parse_filter(mode) -> TaskFilter:
    try:
        return TaskFilter(mode)
    except ValueError:
        raise InvalidArgumentError("filter", mode, [f.value for f in TaskFilter]) from None


class Task(BaseModel):
    """Individual to-do item"""
    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(frozen=True)
    text: str
    completed: bool = False
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM, frozen=True)
    created_at: datetime = Field(default_factory=_utcnow, frozen=True)

    @field_validator("text")
    @classmethod
    def _text_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("task text must not be empty")
        return value


class TaskStats(BaseModel):
    """Aggregate counts over the whole task list"""
    total: int = 0
    completed: int = 0
    active: int = 0


class TaskView(BaseModel):
    """One projection of the store, ready to render"""
    filter: TaskFilter = TaskFilter.ALL
    tasks: List[Task] = Field(default_factory=list)  # Filtered, display order
    stats: TaskStats = Field(default_factory=TaskStats)

    @computed_field
    @property
    def is_empty(self) -> bool:
        return not self.tasks

    @computed_field
    @property
    def show_clear_completed(self) -> bool:
        return self.stats.completed > 0


class SavedSession(BaseModel):
    """Everything a storage backend keeps between load() and save()"""
    tasks: List[Task] = Field(default_factory=list)
    dark_theme: bool = False
    updated_at: datetime = Field(default_factory=_utcnow)


# ============================================================
# DEMO SEED
# ============================================================

DEMO_TASKS = [
    {
        "id": 1,
        "text": "Welcome to your new todo app! 🎉",
        "completed": False,
        "priority": "high",
    },
    {
        "id": 2,
        "text": "Double-click any task to edit it",
        "completed": False,
        "priority": "medium",
    },
    {
        "id": 3,
        "text": "Click the checkbox to mark as complete",
        "completed": True,
        "priority": "low",
    },
]


def create_demo_tasks() -> List[Task]:
    """Build the three fixed demo tasks shown on first start"""
    created_at = _utcnow()
    return [Task(created_at=created_at, **task_def) for task_def in DEMO_TASKS]
