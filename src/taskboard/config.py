"""Configuration utilities for the task board service.

Settings are resolved from environment variables through the small
``_getenv`` helpers below and collected in a ``Settings`` dataclass that the
app factory and CLI rely on.
"""

import os
from dataclasses import dataclass, field


def _getenv(name: str, default: str | None = None) -> str | None:
    """Return the value of an environment variable.

    Args:
        name: Name of the environment variable to read.
        default: Value returned when the variable is not set.

    Returns:
        The string value stored in the environment or ``default`` when the
        variable is missing.
    """
    return os.getenv(name, default)


def _getenv_int(name: str, default: int) -> int:
    """Retrieve an integer environment variable.

    Args:
        name: Environment variable name.
        default: Fallback value when the variable is unset or invalid.

    Returns:
        The parsed integer value or ``default`` if conversion fails.
    """
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _getenv_bool(name: str, default: bool) -> bool:
    """Retrieve a boolean environment variable.

    ``"1"``, ``"true"``, ``"yes"`` and ``"on"`` (any case) are truthy; every
    other value is ``False``.

    Args:
        name: Environment variable name.
        default: Fallback value when the variable is unset.

    Returns:
        The parsed flag, or ``default`` if the variable is missing.
    """
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes", "on"}


def _getenv_list(name: str, default: list[str]) -> list[str]:
    """Split a comma separated environment variable into a list."""
    v = os.getenv(name)
    if v is None or not v.strip():
        return list(default)
    return [item.strip() for item in v.split(",") if item.strip()]


@dataclass(slots=True)
class Settings:
    """Service configuration resolved from environment variables.

    Attributes:
        host: Interface the CLI binds uvicorn to.
        port: Port the CLI binds uvicorn to.
        api_prefix: Path prefix for the task routes (``""`` mounts at root).
        cors_allow_origins: Origins accepted by the CORS middleware.
        log_level: Root logging level name.
        log_json: Emit JSON log lines instead of plain text.
    """

    host: str = field(
        default_factory=lambda: _getenv("TASKBOARD_HOST", "0.0.0.0") or "0.0.0.0"
    )
    port: int = field(default_factory=lambda: _getenv_int("TASKBOARD_PORT", 8080))
    api_prefix: str = field(
        default_factory=lambda: (_getenv("TASKBOARD_API_PREFIX", "") or "").rstrip("/")
    )
    cors_allow_origins: list[str] = field(
        default_factory=lambda: _getenv_list("CORS_ALLOW_ORIGINS", ["*"])
    )

    # Logging
    log_level: str = field(
        default_factory=lambda: (_getenv("TASKBOARD_LOG_LEVEL", "INFO") or "INFO").upper()
    )
    log_json: bool = field(
        default_factory=lambda: _getenv_bool("TASKBOARD_LOG_JSON", False)
    )


def load_settings() -> Settings:
    """Load settings from environment variables."""

    return Settings()


SETTINGS = load_settings()
