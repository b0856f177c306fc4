"""Outcome-shaped types standing in for a collaborator's own result classes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Reply:
    """Outcome type with boolean flag attributes."""

    is_ok: bool
    is_err: bool
    value: Any = None
    error: Any = None


class ReplyFactory:
    """Constructors for Reply, usable as an OutcomeFactory."""

    @staticmethod
    def ok(value: Any) -> Reply:
        return Reply(is_ok=True, is_err=False, value=value)

    @staticmethod
    def error(error: Any) -> Reply:
        return Reply(is_ok=False, is_err=True, error=error)


class Answer:
    """Outcome type with flag methods."""

    def __init__(self, success: bool, payload: Any) -> None:  # noqa: FBT001
        self._success = success
        self.value = payload if success else None
        self.error = None if success else payload

    def is_ok(self) -> bool:
        return self._success

    def is_err(self) -> bool:
        return not self._success


class ArrayLike:
    """Element-wise comparison result that refuses truth testing, like an ndarray."""

    def __eq__(self, other: object) -> ArrayLike:  # type: ignore[override]
        return ArrayLike()

    def __ne__(self, other: object) -> ArrayLike:  # type: ignore[override]
        return ArrayLike()

    def __bool__(self) -> bool:
        msg = "The truth value of an array with more than one element is ambiguous"
        raise ValueError(msg)

    __hash__ = object.__hash__
