"""Framework-independent request dispatch.

``handle_request`` maps a parsed :class:`TaskRequest` onto a
:class:`TaskService` call and turns the result into a :class:`TaskResponse`
carrying an HTTP status code and a JSON-ready body. The FastAPI router is a
thin adapter over this function.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from .errors import InvalidArgument, NotFound, Ok, TaskResult
from .models import TaskCreate, TaskEdit
from .service import TaskService


class TaskOperation(str, Enum):
    LIST = "list"
    GET = "get"
    CREATE = "create"
    REPLACE = "replace"
    PATCH = "patch"
    DELETE = "delete"


@dataclass(frozen=True)
class TaskRequest:
    """A parsed inbound request.

    Attributes:
        operation: Which task operation to run.
        task_id: Target id for get/replace/patch/delete.
        body: Decoded JSON body for create/replace/patch.
    """

    operation: TaskOperation
    task_id: Optional[int] = None
    body: Any = None


@dataclass(frozen=True)
class TaskResponse:
    status_code: int
    body: Any = None


def _parse(model: type[BaseModel], body: Any) -> BaseModel | InvalidArgument:
    if body is None:
        body = {}
    if not isinstance(body, dict):
        return InvalidArgument("request body must be a JSON object")
    try:
        return model.model_validate(body)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "body"
        return InvalidArgument(f"{field}: {first['msg']}")


def _to_response(result: TaskResult, success_code: int = 200) -> TaskResponse:
    if isinstance(result, Ok):
        return TaskResponse(success_code, result.task.model_dump())
    if isinstance(result, NotFound):
        return TaskResponse(404, {"detail": result.message})
    if isinstance(result, InvalidArgument):
        return TaskResponse(400, {"detail": result.message})
    raise TypeError(f"unexpected result {result!r}")


def _require_id(request: TaskRequest) -> int:
    if request.task_id is None:
        raise ValueError(f"{request.operation.value} requires a task_id")
    return request.task_id


def handle_request(service: TaskService, request: TaskRequest) -> TaskResponse:
    """Run ``request`` against ``service``.

    Returns:
        200 with the task list or task, 201 with a created task, 204 with no
        body for a delete, 404 ``{"detail": ...}`` for an unknown id and 400
        ``{"detail": ...}`` for an invalid title or body.
    """
    op = request.operation

    if op is TaskOperation.LIST:
        return TaskResponse(200, [t.model_dump() for t in service.get_tasks()])

    if op is TaskOperation.CREATE:
        candidate = _parse(TaskCreate, request.body)
        if isinstance(candidate, InvalidArgument):
            return _to_response(candidate)
        return _to_response(service.create_task(candidate), success_code=201)

    task_id = _require_id(request)

    if op is TaskOperation.GET:
        return _to_response(service.get_task(task_id))

    if op in (TaskOperation.REPLACE, TaskOperation.PATCH):
        candidate = _parse(TaskEdit, request.body)
        if isinstance(candidate, InvalidArgument):
            return _to_response(candidate)
        if op is TaskOperation.REPLACE:
            return _to_response(service.update_task(task_id, candidate))
        return _to_response(service.patch_task(task_id, candidate))

    if op is TaskOperation.DELETE:
        result = service.delete_task(task_id)
        if isinstance(result, Ok):
            return TaskResponse(204)
        return _to_response(result)

    raise ValueError(f"unsupported operation {op!r}")
