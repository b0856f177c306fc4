"""Outcome type: Ok[T] | Err[E] for explicit success/failure values."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from verdict._logging import get_logger
from verdict.errors import UnwrapError, Variant

if TYPE_CHECKING:
    from verdict.to_tuple import TupleOptions

__all__ = ["Err", "Ok", "Outcome", "error", "ok"]

_log = get_logger(__name__)


def _fatal(message: str, *, expected: Variant, found: Any) -> NoReturn:
    if _log.isEnabledFor(logging.DEBUG):
        _log.debug("outcome.fatal_misuse", expected=expected, message=message)
    raise UnwrapError(message, expected=expected, found=found)


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Outcome containing a value of type T.

    The failure slot of an Ok is always empty: ``Ok(1).error is None``.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    @property
    def error(self) -> None:
        """The empty failure slot."""
        return None

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the outcome is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the outcome is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    # --- chaining ---

    def and_then[U, F](self, f: Callable[[T], Ok[U] | Err[F]]) -> Ok[U] | Err[F]:
        """Apply a function that returns an Outcome to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Outcome[U, F].

        Returns:
            The Outcome returned by f.
        """
        return f(self.value)

    def or_else(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def if_ok(self, _other: Any) -> Ok[T]:
        """Return self if Ok, else return other.

        Since this is Ok, returns self.
        """
        return self

    def if_err[O](self, other: O) -> O:
        """Return other if self is Ok, else return self.

        Since this is Ok, returns other.
        """
        return other

    or_ = if_ok
    and_ = if_err

    # --- transforming ---

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        The return of ``f`` is always wrapped, even if it is itself an Outcome.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return ``f(value)``, ignoring the default."""
        return f(self.value)

    def map_err_or[U](self, default: U, _f: Callable[[Any], U]) -> U:
        """Return the default since there is no error to map."""
        return default

    def map_or_else[U](self, err_f: Callable[[Any], U], ok_f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return ``ok_f(value)``; ``err_f`` is not called."""
        return ok_f(self.value)

    # --- extracting ---

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since this is Ok.

        Raises:
            UnwrapError: Always, with a message embedding the Ok value.
        """
        _fatal(f"expected error, got {self.value!r}", expected="error", found=self.value)

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def expect_err(self, msg: str) -> NoReturn:
        """Raise with the caller's message since this is Ok.

        Raises:
            UnwrapError: Always, with ``msg`` as its message.
        """
        _fatal(msg, expected="error", found=self.value)

    def unwrap_or(self, default: Any) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_err_or[D](self, default: D) -> D:
        """Return the default since this is Ok."""
        return default

    def unwrap_or_else(self, _f: Callable[[Any], Any]) -> T:
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def unwrap_err_or_else[U](self, f: Callable[[T], U]) -> U:
        """Compute a fallback error from the Ok value."""
        return f(self.value)

    def ok_or_none(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def error_or_none(self) -> None:
        """Return None since this is Ok."""
        return None

    def to_tuple(self, options: TupleOptions | None = None, *, flatten: bool | None = None) -> tuple[Any, ...]:
        """Convert to a tagged tuple, see :func:`verdict.to_tuple.to_tuple`."""
        from verdict.to_tuple import to_tuple

        return to_tuple(self, options, flatten=flatten)


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Outcome containing an error of type E.

    The success slot of an Err is always empty: ``Err("x").value is None``.

    Examples:
        >>> err = Err("something went wrong")
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    @property
    def value(self) -> None:
        """The empty success slot."""
        return None

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the outcome is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the outcome is Err[E].
        """
        return True

    # --- chaining ---

    def and_then(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Outcome.

        Returns:
            The Outcome returned by f.
        """
        return f(self.error)

    def if_ok[O](self, other: O) -> O:
        """Return other since this is Err."""
        return other

    def if_err(self, _other: Any) -> Err[E]:
        """Return self since this is Err."""
        return self

    or_ = if_ok
    and_ = if_err

    # --- transforming ---

    def map(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def map_or[U](self, default: U, _f: Callable[[Any], U]) -> U:
        """Return the default since there is no value to map."""
        return default

    def map_err_or[U](self, default: U, f: Callable[[E], U]) -> U:  # noqa: ARG002
        """Return ``f(error)``, ignoring the default."""
        return f(self.error)

    def map_or_else[U](self, err_f: Callable[[E], U], ok_f: Callable[[Any], U]) -> U:  # noqa: ARG002
        """Return ``err_f(error)``; ``ok_f`` is not called."""
        return err_f(self.error)

    # --- extracting ---

    def unwrap(self) -> NoReturn:
        """Raise since this is Err.

        Raises:
            UnwrapError: Always, with a message embedding the error value.
        """
        _fatal(f"expected ok, got {self.error!r}", expected="ok", found=self.error)

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise with the caller's message since this is Err.

        The message is used verbatim; the error value is available on the
        raised exception as ``found``.

        Raises:
            UnwrapError: Always, with ``msg`` as its message.
        """
        _fatal(msg, expected="ok", found=self.error)

    def expect_err(self, _msg: str) -> E:
        """Return the contained error, ignoring the message."""
        return self.error

    def unwrap_or[D](self, default: D) -> D:
        """Return the default value since this is Err."""
        return default

    def unwrap_err_or(self, default: Any) -> E:  # noqa: ARG002
        """Return the contained error, ignoring the default."""
        return self.error

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a fallback value from the error."""
        return f(self.error)

    def unwrap_err_or_else(self, _f: Callable[[Any], Any]) -> E:
        """Return the contained error, ignoring the fallback function."""
        return self.error

    def ok_or_none(self) -> None:
        """Return None since this is Err."""
        return None

    def error_or_none(self) -> E:
        """Return the contained error."""
        return self.error

    def to_tuple(self, options: TupleOptions | None = None, *, flatten: bool | None = None) -> tuple[Any, ...]:
        """Convert to a tagged tuple, see :func:`verdict.to_tuple.to_tuple`."""
        from verdict.to_tuple import to_tuple

        return to_tuple(self, options, flatten=flatten)


type Outcome[T, E = Any] = Ok[T] | Err[E]


def ok[T](value: T = None) -> Ok[T]:  # type: ignore[assignment]
    """Create a success outcome.

    Examples:
        >>> ok(1)
        Ok(value=1)
        >>> ok()
        Ok(value=None)
    """
    return Ok(value)


def error[E](error: E) -> Err[E]:
    """Create a failure outcome.

    Examples:
        >>> error("boom")
        Err(error='boom')
    """
    return Err(error)
