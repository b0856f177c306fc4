"""Conversion of Outcome values back into tagged tuples."""

from __future__ import annotations

from typing import Any

import msgspec

from verdict.coerce import coerce
from verdict.types.tags import Tag

__all__ = ["TupleOptions", "to_tuple"]


class TupleOptions(msgspec.Struct, frozen=True, gc=False):
    """Options for :func:`to_tuple`.

    Attributes:
        flatten: If the payload is a tuple, prepend the tag to its elements
            (True) or nest it as the second slot (False).
    """

    flatten: bool = True


_DEFAULT_OPTIONS = TupleOptions()


def to_tuple(outcome: Any, options: TupleOptions | None = None, *, flatten: bool | None = None) -> tuple[Any, ...]:
    """Convert an Outcome back to a tagged tuple.

    Anything that is not already an Outcome is passed through
    :func:`verdict.coerce.coerce` first. A ``flatten`` keyword overrides the
    value carried by ``options``.

    Examples:
        >>> to_tuple(Ok({"success": 3.1415}))
        (OK, {'success': 3.1415})
        >>> to_tuple(Err((1, 2, 3)))
        (ERROR, 1, 2, 3)
        >>> to_tuple(Ok((1, 2, 3)), flatten=False)
        (OK, (1, 2, 3))
    """
    if options is None:
        options = _DEFAULT_OPTIONS
    if flatten is not None:
        options = msgspec.structs.replace(options, flatten=flatten)

    outcome = coerce(outcome)
    if outcome.is_ok():
        tag, payload = Tag.OK, outcome.value
    else:
        tag, payload = Tag.ERROR, outcome.error

    if options.flatten and isinstance(payload, tuple):
        return (tag, *payload)
    return (tag, payload)
