#!/usr/bin/env python3
"""FastAPI entrypoint for the task board service."""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .config import SETTINGS, Settings
from .logging import setup_logging
from .router import create_task_router
from .service import TaskService

logger = logging.getLogger(__name__)


def _describe(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ())]
    # drop the "body"/"path"/"query" source marker when a field name follows
    field = ".".join(loc[1:] if len(loc) > 1 else loc) or "request"
    return f"{field}: {first.get('msg', 'invalid')}"


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed JSON and non-integer ids with 400, like a blank title."""
    detail = _describe(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, detail)
    return JSONResponse(status_code=400, content={"detail": detail})


# --- FastAPI factory ---
def create_app(
    settings: Optional[Settings] = None,
    service: Optional[TaskService] = None,
) -> FastAPI:
    settings = settings or SETTINGS
    app = FastAPI(title="Taskboard", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Each app owns its own store through its service
    app.state.settings = settings
    app.state.task_service = service if service is not None else TaskService()

    @app.get("/healthz")
    async def health_check():
        return Response(status_code=200)

    @app.get("/health")
    async def health_check_alt():
        return {
            "status": "healthy",
            "service": "taskboard",
            "tasks": len(app.state.task_service.store),
        }

    app.include_router(
        create_task_router(app.state.task_service, prefix=settings.api_prefix)
    )

    logger.info("Taskboard app ready prefix=%r", settings.api_prefix)
    return app


def main(argv: Optional[list[str]] = None) -> None:
    import uvicorn

    ap = argparse.ArgumentParser(description="Run the taskboard HTTP service")
    ap.add_argument("--host", default=SETTINGS.host)
    ap.add_argument("--port", type=int, default=SETTINGS.port)
    ap.add_argument("--log-level", default=SETTINGS.log_level)
    ap.add_argument(
        "--reload",
        action="store_true",
        help="Reload server on code changes (dev mode)",
    )
    args = ap.parse_args(argv)

    setup_logging(args.log_level, json_format=SETTINGS.log_json)

    if args.reload:
        uvicorn.run(
            "taskboard.main:create_app",
            factory=True,
            host=args.host,
            port=args.port,
            reload=True,
        )
    else:
        uvicorn.run(create_app(), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
