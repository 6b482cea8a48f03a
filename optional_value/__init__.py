"""
optional-value: an explicit container for values that may be absent.

Absence is modeled as one of two variants, Present or Empty, instead of
an ambient None.
"""

__version__ = "0.1.0"

from optional_value.domain.monads import (
    Optional,
    Present,
    Empty,
    empty,
    of,
    of_nullable,
)
from optional_value.utils.error_manager import (
    OptionalValueError,
    NullReferenceError,
    NoSuchElementError,
)

__all__ = [
    "Optional",
    "Present",
    "Empty",
    "empty",
    "of",
    "of_nullable",
    "OptionalValueError",
    "NullReferenceError",
    "NoSuchElementError",
]
