"""Tag vocabulary for tagged-tuple outcomes."""

from __future__ import annotations

from enum import Enum

__all__ = ["ERROR", "OK", "Tag"]


class Tag(Enum):
    """Leading slot of a tagged tuple such as ``(OK, value)``.

    Tags are matched by identity, so plain strings like ``"ok"`` are never
    mistaken for a tag.
    """

    OK = "ok"
    ERROR = "error"

    def __repr__(self) -> str:
        return self.name


OK = Tag.OK
ERROR = Tag.ERROR
