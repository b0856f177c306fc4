"""Fatal misuse errors: dual struct+exception for Outcome and raise-based code."""

from __future__ import annotations

from typing import Any, Literal

import msgspec

__all__ = [
    "UnwrapError",
    "WrongVariant",
]

type Variant = Literal["ok", "error"]


class WrongVariant(msgspec.Struct, frozen=True, gc=False):
    """Unwrap called on the wrong variant - struct variant for Outcome[T, WrongVariant]."""

    expected: Variant
    found: Any
    message: str

    def to_exception(self) -> UnwrapError:
        """Convert to exception for raise-based code."""
        return UnwrapError(self.message, expected=self.expected, found=self.found)


class UnwrapError(RuntimeError):
    """Unwrap called on the wrong variant - exception variant.

    Raised by ``unwrap``, ``unwrap_err``, ``expect`` and ``expect_err`` when
    the outcome holds the other branch. ``expected`` names the branch the
    caller asked for and ``found`` carries the payload that was there instead.
    """

    def __init__(self, message: str, *, expected: Variant, found: Any = None) -> None:
        self.message = message
        self.expected = expected
        self.found = found
        super().__init__(message)

    def to_struct(self) -> WrongVariant:
        """Convert to struct for Outcome-based code."""
        return WrongVariant(expected=self.expected, found=self.found, message=self.message)
