"""Validation states shown next to editor fields."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Status(enum.Enum):
    """Severity of a field's validation state."""

    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class FieldStatus:
    """The state of one field together with the message that explains it."""

    status: Status
    message: str


def _is_blank(text: str) -> bool:
    return not text.split()


def check_required(
    text: str,
    ok_message: str,
    missing_message: str,
    level: Status = Status.ERROR,
) -> FieldStatus:
    """Report ``level`` when ``text`` is empty, otherwise OK.

    Whitespace counts as content here; only the empty string is missing.
    """
    if text == "":
        return FieldStatus(level, missing_message)
    return FieldStatus(Status.OK, ok_message)


def check_not_blank(text: str, ok_message: str, missing_message: str) -> FieldStatus:
    """Report an error when ``text`` holds nothing but whitespace."""
    if _is_blank(text):
        return FieldStatus(Status.ERROR, missing_message)
    return FieldStatus(Status.OK, ok_message)


def fits_length(text: str, limit: int) -> bool:
    """Return whether ``text`` has at most ``limit`` characters."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    return len(text) <= limit