from __future__ import annotations

from typing import Any

from .errors import InvalidTitleError


def validate_title(title: Any) -> str:
    """Return ``title`` unchanged if it has at least one non-whitespace character.

    Raises:
        InvalidTitleError: ``title`` is ``None``, not a string, empty or
            whitespace-only.
    """
    if title is None:
        raise InvalidTitleError("title is required")
    if not isinstance(title, str):
        raise InvalidTitleError("title must be a string")
    if not title.strip():
        raise InvalidTitleError("title must not be blank")
    return title
