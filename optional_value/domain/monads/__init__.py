"""Optional container and its combinators."""

from .optional import Optional, Present, Empty, empty, of, of_nullable
from .composition import (
    sequence_optionals, traverse_optional, cat_optionals, first_present,
    lift_optional, compose, pipe,
)

__all__ = [
    # Container
    'Optional', 'Present', 'Empty',
    # Factories
    'empty', 'of', 'of_nullable',
    # Combinators
    'sequence_optionals', 'traverse_optional', 'cat_optionals',
    'first_present', 'lift_optional', 'compose', 'pipe',
]
