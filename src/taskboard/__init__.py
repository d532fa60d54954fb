"""In-memory task board HTTP service.

The package init stays light so that submodules such as ``taskboard.store``
can be imported without pulling in FastAPI. The application factory is
available via lazy attribute access.
"""

__all__ = ["create_app", "TaskService", "InMemoryTaskStore"]

__version__ = "0.1.0"


def __getattr__(name: str):  # pragma: no cover - small helper
    if name == "create_app":
        from .main import create_app as _create_app

        return _create_app
    if name == "TaskService":
        from .service import TaskService as _service

        return _service
    if name == "InMemoryTaskStore":
        from .store import InMemoryTaskStore as _store

        return _store
    raise AttributeError(name)
