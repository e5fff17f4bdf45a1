import logging
import uuid
from collections.abc import Iterable
from datetime import datetime

from zentryx.models.task import Task

logger = logging.getLogger(__name__)


def _priority_key(task: Task) -> tuple:
    # timestamp() accepts both naive (local) and aware datetimes
    due_ts = task.due.timestamp() if task.due is not None else 0.0
    return (task.completed, task.due is None, due_ts, task.priority)


def prioritize(tasks: Iterable[Task]) -> list[Task]:
    """Return tasks in prioritized order without touching the input.

    Incomplete before completed, tasks with a due date before tasks
    without, earlier due first, then priority (1 highest). Full ties keep
    insertion order.
    """
    return sorted(tasks, key=_priority_key)


class TaskList:
    """In-memory task collection. Tasks are added and toggled, never deleted."""

    def __init__(self):
        self._tasks: list[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> list[Task]:
        """Tasks in insertion order."""
        return list(self._tasks)

    def add_task(
        self,
        title: str,
        minutes: int = 25,
        priority: int = 3,
        due: datetime | None = None,
    ) -> Task | None:
        title = (title or "").strip()
        if not title:
            logger.warning("Ignoring task with a blank title")
            return None
        task = Task(title=title, minutes=minutes, priority=priority, due=due)
        self._tasks.append(task)
        return task

    def get_task(self, task_id: uuid.UUID) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def toggle_completed(self, task_id: uuid.UUID) -> Task | None:
        task = self.get_task(task_id)
        if task is None:
            return None
        task.completed = not task.completed
        return task

    def prioritized(self) -> list[Task]:
        return prioritize(self._tasks)

    def completed_count(self) -> int:
        return sum(1 for t in self._tasks if t.completed)
