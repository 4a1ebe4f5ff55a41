"""
TODOLIST - Storage Backends
===========================
The persistence collaborator the TaskStore calls after every mutation.

MemoryStorage keeps state for the lifetime of the process only.
JsonFileStorage writes {tasks_dir}/tasks.json and honours the same contract:
load() returns the most recently saved sequence.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Protocol, Sequence

from .schema import SavedSession, Task

logger = logging.getLogger("todolist")

TASKS_FILE_NAME = "tasks.json"


class TaskStorage(Protocol):
    """Save/load hook for tasks plus the dark theme flag"""

    def load(self) -> List[Task]: ...

    def save(self, tasks: Sequence[Task]) -> None: ...

    def load_theme(self) -> bool: ...

    def save_theme(self, dark: bool) -> None: ...


class MemoryStorage:
    """In-process storage; data is lost when the session ends"""

    def __init__(self, tasks: Sequence[Task] = ()):
        self._tasks: List[Task] = [t.model_copy() for t in tasks]
        self._dark_theme = False

    def load(self) -> List[Task]:
        return [t.model_copy() for t in self._tasks]

    def save(self, tasks: Sequence[Task]) -> None:
        # Copies, so later mutations in the store don't leak in unsaved
        self._tasks = [t.model_copy() for t in tasks]
        logger.debug(f"💾 Saved {len(self._tasks)} tasks in memory")

    def load_theme(self) -> bool:
        return self._dark_theme

    def save_theme(self, dark: bool) -> None:
        self._dark_theme = bool(dark)


class JsonFileStorage:
    """
    File storage: {tasks_dir}/tasks.json

    Tasks and the theme flag share one file; writing one keeps the other.
    """

    def __init__(self, tasks_dir: str = ".todo"):
        self.tasks_dir = Path(tasks_dir)

    @property
    def path(self) -> Path:
        return self.tasks_dir / TASKS_FILE_NAME

    def _read(self) -> SavedSession:
        if not self.path.exists():
            return SavedSession()
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return SavedSession(**data)

    def _write(self, session: SavedSession) -> None:
        session.updated_at = datetime.now(timezone.utc)
        self.tasks_dir.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(session.model_dump(mode="json"), f, indent=2, ensure_ascii=False)

    def load(self) -> List[Task]:
        session = self._read()
        logger.debug(f"📂 Loaded {len(session.tasks)} tasks from {self.path}")
        return session.tasks

    def save(self, tasks: Sequence[Task]) -> None:
        session = self._read()
        session.tasks = list(tasks)
        self._write(session)
        logger.debug(f"💾 Saved {len(session.tasks)} tasks to {self.path}")

    def load_theme(self) -> bool:
        return self._read().dark_theme

    def save_theme(self, dark: bool) -> None:
        session = self._read()
        session.dark_theme = bool(dark)
        self._write(session)
