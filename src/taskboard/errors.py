"""Task errors and the result values returned by :class:`TaskService`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .models import Task


class TaskNotFoundError(LookupError):
    """No task in the store has the requested id."""

    def __init__(self, task_id: int):
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id


class InvalidTitleError(ValueError):
    """A supplied title is missing, empty or whitespace-only."""


@dataclass(frozen=True)
class Ok:
    task: Task


@dataclass(frozen=True)
class NotFound:
    task_id: int

    @property
    def message(self) -> str:
        return f"Task not found: {self.task_id}"


@dataclass(frozen=True)
class InvalidArgument:
    message: str


TaskResult = Union[Ok, NotFound, InvalidArgument]
