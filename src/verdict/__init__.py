"""verdict: immutable success/failure outcomes for Python 3.13+.

Flat imports (preferred):
    from verdict import Ok, Err, Outcome, ok, error, coerce, to_tuple, OK, ERROR

Submodule imports (for organization):
    from verdict.types import Ok, Err, Tag
    from verdict.structural import and_then, into
"""

# Types
from verdict.types import (
    ERROR,
    OK,
    Err,
    Ok,
    Outcome,
    Tag,
    error,
    ok,
)

# Conversion
from verdict.coerce import OutcomeShaped, coerce, is_outcome_shaped, wrap
from verdict.to_tuple import TupleOptions, to_tuple

# Foreign outcome types
from verdict.structural import OutcomeFactory, into

# Errors
from verdict.errors import UnwrapError, WrongVariant

# Configuration
from verdict.config import Settings, get_config, init

__all__ = [
    "ERROR",
    "OK",
    "Err",
    "Ok",
    "Outcome",
    "OutcomeFactory",
    "OutcomeShaped",
    "Settings",
    "Tag",
    "TupleOptions",
    "UnwrapError",
    "WrongVariant",
    "coerce",
    "error",
    "get_config",
    "init",
    "into",
    "is_outcome_shaped",
    "ok",
    "to_tuple",
    "wrap",
]
