from __future__ import annotations

import logging
import threading

from .errors import TaskNotFoundError
from .models import Task

logger = logging.getLogger(__name__)


class InMemoryTaskStore:
    """
    In-memory, insertion-ordered task collection.

    - ids start at 1 and are never reused, even after removal
    - lookups are linear scans over the list
    - every operation runs under one lock, so callers on FastAPI's threadpool
      see a sequentially consistent store
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._last_id = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def _index_of(self, task_id: int) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise TaskNotFoundError(task_id)

    def list(self) -> list[Task]:
        with self._lock:
            return list(self._tasks)

    def add(self, task: Task) -> Task:
        """Assign the next id to ``task``, store it and return it."""
        with self._lock:
            self._last_id += 1
            task.id = self._last_id
            self._tasks.append(task)
            logger.debug("Task stored id=%s", task.id)
            return task

    def find(self, task_id: int) -> Task:
        with self._lock:
            return self._tasks[self._index_of(task_id)]

    def replace(self, task_id: int, title: str) -> Task:
        with self._lock:
            task = self._tasks[self._index_of(task_id)]
            task.title = title
            return task

    def remove(self, task_id: int) -> Task:
        with self._lock:
            return self._tasks.pop(self._index_of(task_id))

    def clear(self) -> None:
        """Drop every task. The id sequence keeps counting."""
        with self._lock:
            self._tasks.clear()
