"""Conversion of native success/failure encodings into Outcome values.

Recognised inputs, first match wins:

    Ok(...) / Err(...)        -> returned unchanged
    (ERROR, x)                -> Err(x)
    (OK, x)                   -> Ok(x)
    (OK, a, b, ...)           -> Ok((a, b, ...))
    (ERROR, a, b, ...)        -> Err((a, b, ...))
    (OK,) / (ERROR,)          -> Ok(()) / Err(())
    OK                        -> Ok(None)
    outcome-shaped object     -> Ok(obj.value) / Err(obj.error)
    anything else             -> Ok(value)

Only tuples are tagged sequences; lists and other sequences are plain values.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from verdict._logging import get_logger
from verdict.types.outcome import Err, Ok, Outcome
from verdict.types.tags import Tag

__all__ = ["OutcomeShaped", "coerce", "is_outcome_shaped", "wrap"]

_log = get_logger(__name__)


@runtime_checkable
class OutcomeShaped(Protocol):
    """Protocol for objects that look like an outcome.

    ``is_ok`` and ``is_err`` may be plain boolean attributes or zero-argument
    methods returning a boolean. ``value`` holds the success payload and
    ``error`` the failure payload; the slot of the other branch is ignored.

    Example:
        ```python
        @dataclass(frozen=True)
        class Reply:
            is_ok: bool
            is_err: bool
            value: Any = None
            error: Any = None

        coerce(Reply(is_ok=False, is_err=True, error="timeout"))
        # Err(error='timeout')
        ```
    """

    @property
    def value(self) -> Any: ...

    @property
    def error(self) -> Any: ...

    def is_ok(self) -> bool: ...

    def is_err(self) -> bool: ...


def _read_flag(obj: object, name: str) -> bool:
    flag = getattr(obj, name)
    if callable(flag):
        flag = flag()
    return bool(flag)


def is_outcome_shaped(obj: object) -> bool:
    """Return True if ``obj`` exposes a consistent outcome shape.

    Classes are never outcome-shaped, and neither is an object whose flags
    are both set or both clear.
    """
    if isinstance(obj, type) or not isinstance(obj, OutcomeShaped):
        return False
    return _read_flag(obj, "is_ok") != _read_flag(obj, "is_err")


def coerce(value: Any) -> Outcome[Any, Any]:
    """Create an Outcome based on the input.

    Never raises: anything that is not a recognised encoding becomes a
    successful value.

    Examples:
        >>> coerce((OK, "success"))
        Ok(value='success')
        >>> coerce((ERROR, "failed"))
        Err(error='failed')
        >>> coerce((OK, 1, 2))
        Ok(value=(1, 2))
        >>> coerce(OK)
        Ok(value=None)
        >>> coerce("anything")
        Ok(value='anything')
    """
    match value:
        case Ok() | Err():
            return value
        case tuple((first, error)) if first is Tag.ERROR:
            return Err(error)
        case tuple((first, payload)) if first is Tag.OK:
            return Ok(payload)
        case tuple((first, *rest)) if first is Tag.OK:
            return Ok(tuple(rest))
        case tuple((first, *rest)) if first is Tag.ERROR:
            return Err(tuple(rest))
        case _ if value is Tag.OK:
            return Ok(None)

    if is_outcome_shaped(value):
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug("outcome.coerced_foreign", source=type(value).__qualname__)
        if _read_flag(value, "is_ok"):
            return Ok(value.value)
        return Err(value.error)

    return Ok(value)


def wrap(value: Any) -> Outcome[Any, Any]:
    """Alias for :func:`coerce`."""
    return coerce(value)
