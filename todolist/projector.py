"""
TODOLIST - View Projector
=========================
Pure read-side derivation: what to display, in which order, and the counts.
Recomputed from the store on every render.
"""

from typing import List, Sequence

from .schema import Task, TaskFilter, TaskPriority, TaskStats, TaskView, parse_filter


class ViewProjector:
    """Stateless; never mutates or keeps the tasks it is given"""

    @staticmethod
    def filtered_tasks(tasks: Sequence[Task], filter: TaskFilter) -> List[Task]:
        filter = parse_filter(filter)
        if filter == TaskFilter.ACTIVE:
            return [t for t in tasks if not t.completed]
        if filter == TaskFilter.COMPLETED:
            return [t for t in tasks if t.completed]
        if filter == TaskFilter.HIGH:
            return [t for t in tasks if t.priority == TaskPriority.HIGH]
        return list(tasks)

    @staticmethod
    def display_order(selected: Sequence[Task]) -> List[Task]:
        """Open before completed, then priority descending; stable"""
        return sorted(selected, key=lambda t: (t.completed, -t.priority.rank))

    @staticmethod
    def stats(tasks: Sequence[Task]) -> TaskStats:
        total = len(tasks)
        completed = sum(1 for t in tasks if t.completed)
        return TaskStats(total=total, completed=completed, active=total - completed)

    @classmethod
    def project(cls, store) -> TaskView:
        """Build the full view for the store's current filter"""
        tasks = store.tasks
        selected = cls.filtered_tasks(tasks, store.filter)
        return TaskView(
            filter=store.filter,
            tasks=cls.display_order(selected),
            stats=cls.stats(tasks),
        )
