"""Core types: Outcome, Ok, Err and the tag vocabulary."""

from verdict.types.outcome import Err, Ok, Outcome, error, ok
from verdict.types.tags import ERROR, OK, Tag

__all__ = [
    "ERROR",
    "OK",
    "Err",
    "Ok",
    "Outcome",
    "Tag",
    "error",
    "ok",
]
