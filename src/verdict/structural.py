"""Combinators over any outcome-shaped value, and conversion into foreign types.

The functions here accept ``Ok``/``Err`` as well as a collaborator's own
outcome type (see :class:`verdict.coerce.OutcomeShaped`). The short-circuit
branch hands back the receiver itself, so a foreign value stays foreign.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

from verdict._logging import get_logger
from verdict.coerce import _read_flag, coerce, is_outcome_shaped

__all__ = ["OutcomeFactory", "and_then", "if_err", "if_ok", "into", "or_else"]

_log = get_logger(__name__)


class OutcomeFactory[R](Protocol):
    """Protocol for a collaborator's outcome constructors.

    The ``verdict`` module itself satisfies it through its ``ok`` and
    ``error`` functions.
    """

    def ok(self, value: Any) -> R: ...

    def error(self, error: Any) -> R: ...


def _check(outcome: object) -> bool:
    """Return the success flag of ``outcome``, rejecting non-outcomes."""
    if not is_outcome_shaped(outcome):
        msg = f"expected an outcome-shaped value, got {type(outcome).__qualname__}"
        raise TypeError(msg)
    return _read_flag(outcome, "is_ok")


def and_then(outcome: Any, f: Callable[[Any], Any]) -> Any:
    """Return ``f(outcome.value)`` on success, else ``outcome`` unchanged.

    Raises:
        TypeError: If ``outcome`` is not outcome-shaped.
    """
    if _check(outcome):
        return f(outcome.value)
    return outcome


def or_else(outcome: Any, f: Callable[[Any], Any]) -> Any:
    """Return ``outcome`` unchanged on success, else ``f(outcome.error)``.

    Raises:
        TypeError: If ``outcome`` is not outcome-shaped.
    """
    if _check(outcome):
        return outcome
    return f(outcome.error)


def if_ok(outcome: Any, other: Any) -> Any:
    """Return ``outcome`` on success, else ``other``."""
    return outcome if _check(outcome) else other


def if_err(outcome: Any, other: Any) -> Any:
    """Return ``other`` on success, else ``outcome``."""
    return other if _check(outcome) else outcome


def into[R](outcome: Any, factory: OutcomeFactory[R]) -> R:
    """Rebuild ``outcome`` through a collaborator's constructors.

    The input is coerced first, so tagged tuples and bare values are
    accepted too.

    Example:
        ```python
        into((ERROR, "timeout"), MyResult)  # MyResult.error("timeout")
        into(my_result, verdict)            # back to Ok/Err
        ```
    """
    result = coerce(outcome)
    if _log.isEnabledFor(logging.DEBUG):
        _log.debug("outcome.into_foreign", target=getattr(factory, "__name__", type(factory).__qualname__))
    if result.is_ok():
        return factory.ok(result.value)
    return factory.error(result.error)
