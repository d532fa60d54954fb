"""Task service: validation in front of the in-memory store."""

from __future__ import annotations

import logging
from typing import Optional

from .errors import (
    InvalidArgument,
    InvalidTitleError,
    NotFound,
    Ok,
    TaskNotFoundError,
    TaskResult,
)
from .models import Task, TaskCreate, TaskEdit
from .store import InMemoryTaskStore
from .validation import validate_title

logger = logging.getLogger(__name__)


class TaskService:
    """Orchestrates store operations and reports outcomes as result values.

    Titles are validated before any store access, so a rejected request never
    mutates the store.

    Args:
        store: Store owned by this service. A fresh one is created when omitted.
    """

    def __init__(self, store: Optional[InMemoryTaskStore] = None):
        self.store = store if store is not None else InMemoryTaskStore()

    def get_tasks(self) -> list[Task]:
        return self.store.list()

    def get_task(self, task_id: int) -> TaskResult:
        try:
            return Ok(self.store.find(task_id))
        except TaskNotFoundError as e:
            return NotFound(e.task_id)

    def create_task(self, candidate: TaskCreate) -> TaskResult:
        try:
            title = validate_title(candidate.title)
        except InvalidTitleError as e:
            logger.info("Rejected task create: %s", e)
            return InvalidArgument(str(e))
        task = self.store.add(Task(title=title))
        logger.info("Task created id=%s", task.id)
        return Ok(task)

    def update_task(self, task_id: int, candidate: TaskEdit) -> TaskResult:
        try:
            title = validate_title(candidate.title)
            task = self.store.replace(task_id, title)
        except InvalidTitleError as e:
            logger.info("Rejected task update id=%s: %s", task_id, e)
            return InvalidArgument(str(e))
        except TaskNotFoundError as e:
            return NotFound(e.task_id)
        logger.info("Task updated id=%s", task.id)
        return Ok(task)

    # Task has a single mutable field, so a partial update replaces it too.
    patch_task = update_task

    def delete_task(self, task_id: int) -> TaskResult:
        try:
            task = self.store.remove(task_id)
        except TaskNotFoundError as e:
            return NotFound(e.task_id)
        logger.info("Task deleted id=%s", task.id)
        return Ok(task)
