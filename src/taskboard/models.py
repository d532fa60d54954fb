from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Task(BaseModel):
    """A to-do record. ``id`` stays ``None`` until the store assigns one."""

    id: Optional[int] = None
    title: str


class TaskCreate(BaseModel):
    """Body of ``POST /tasks``.

    ``title`` is optional here so that a missing or null title is rejected by
    title validation (400) rather than by request parsing.
    """

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None


class TaskEdit(BaseModel):
    """Body of ``PUT``/``PATCH /tasks/{id}``."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
