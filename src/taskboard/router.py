"""FastAPI routes for the task board."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Response
from fastapi.responses import JSONResponse

from .handler import TaskOperation, TaskRequest, TaskResponse, handle_request
from .models import Task
from .service import TaskService

logger = logging.getLogger(__name__)


def create_task_router(service: TaskService, prefix: str = "") -> APIRouter:
    """Create the ``/tasks`` router bound to ``service``.

    Args:
        service: Service every route dispatches to.
        prefix: Optional path prefix placed in front of ``/tasks``.
    """
    router = APIRouter(prefix=f"{prefix}/tasks", tags=["Tasks"])

    def dispatch(request: TaskRequest) -> Response:
        response: TaskResponse = handle_request(service, request)
        logger.debug(
            "%s task_id=%s -> %s",
            request.operation.value,
            request.task_id,
            response.status_code,
        )
        if response.status_code == 204:
            return Response(status_code=204)
        return JSONResponse(status_code=response.status_code, content=response.body)

    @router.get("", response_model=list[Task])
    async def list_tasks():
        """List all tasks in insertion order."""
        return dispatch(TaskRequest(TaskOperation.LIST))

    @router.post("", response_model=Task, status_code=201)
    async def create_task(body: Any = Body(None)):  # noqa: B008
        """Create a task from ``{"title": ...}``."""
        return dispatch(TaskRequest(TaskOperation.CREATE, body=body))

    @router.get("/{task_id}", response_model=Task)
    async def get_task(task_id: int):
        return dispatch(TaskRequest(TaskOperation.GET, task_id=task_id))

    @router.put("/{task_id}", response_model=Task)
    async def replace_task(task_id: int, body: Any = Body(None)):  # noqa: B008
        return dispatch(TaskRequest(TaskOperation.REPLACE, task_id=task_id, body=body))

    @router.patch("/{task_id}", response_model=Task)
    async def patch_task(task_id: int, body: Any = Body(None)):  # noqa: B008
        return dispatch(TaskRequest(TaskOperation.PATCH, task_id=task_id, body=body))

    @router.delete("/{task_id}", status_code=204)
    async def delete_task(task_id: int):
        return dispatch(TaskRequest(TaskOperation.DELETE, task_id=task_id))

    return router
