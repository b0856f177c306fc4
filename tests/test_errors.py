"""Tests for UnwrapError and its struct twin."""

import pytest

from verdict import Err, UnwrapError, WrongVariant, error, ok


class TestUnwrapError:
    """Tests for the exception variant."""

    def test_attributes(self):
        """The exception records the expected branch and the payload found."""
        exc = UnwrapError("bang!", expected="ok", found=3)
        assert exc.message == "bang!"
        assert exc.expected == "ok"
        assert exc.found == 3
        assert str(exc) == "bang!"

    def test_to_struct(self):
        """The exception converts to a WrongVariant struct."""
        exc = UnwrapError("bang!", expected="error", found=(1, 2))
        assert exc.to_struct() == WrongVariant(expected="error", found=(1, 2), message="bang!")

    def test_boundary_turns_misuse_into_err(self):
        """A boundary can catch misuse and return it as a failure."""
        try:
            ok(1).unwrap_err()
        except UnwrapError as exc:
            result = error(exc.to_struct())
        assert result == Err(WrongVariant(expected="error", found=1, message="expected error, got 1"))


class TestWrongVariant:
    """Tests for the struct variant."""

    def test_to_exception(self):
        """The struct converts back to the exception."""
        exc = WrongVariant(expected="ok", found="x", message="m").to_exception()
        assert isinstance(exc, UnwrapError)
        assert (exc.expected, exc.found, str(exc)) == ("ok", "x", "m")

    def test_is_frozen(self):
        """WrongVariant is immutable."""
        struct = WrongVariant(expected="ok", found=None, message="m")
        with pytest.raises(AttributeError):
            struct.message = "other"  # type: ignore[misc]
