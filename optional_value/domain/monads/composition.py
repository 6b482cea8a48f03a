"""Utilities for composing optional values.

This module provides helper functions and combinators for working with
collections of optionals and for building transformation pipelines.
"""

from typing import TypeVar, Callable, Iterable
from functools import reduce

from .optional import Optional, of, empty

T = TypeVar('T')
U = TypeVar('U')


# Optional combinators

def sequence_optionals(optionals: Iterable[Optional[T]]) -> Optional[list[T]]:
    """Convert a list of Optionals into an Optional of list.

    Returns empty if any Optional is empty.
    """
    values = []
    for opt in optionals:
        if opt.is_empty():
            return empty()
        values.append(opt.get())
    return of(values)


def traverse_optional(
    f: Callable[[T], Optional[U]],
    items: Iterable[T]
) -> Optional[list[U]]:
    """Apply an Optional-returning function to each item and collect results."""
    return sequence_optionals(f(item) for item in items)


def cat_optionals(optionals: Iterable[Optional[T]]) -> list[T]:
    """Extract all present values from a list of Optionals."""
    return [value for opt in optionals for value in opt]


def first_present(optionals: Iterable[Optional[T]]) -> Optional[T]:
    """Return the first present Optional, or empty if there is none."""
    for opt in optionals:
        if opt.is_present():
            return opt
    return empty()


def lift_optional(f: Callable[[T], U]) -> Callable[[Optional[T]], Optional[U]]:
    """Lift a function to work with Optional values."""
    return lambda opt: opt.map(f)


# Function composition

def compose(*functions: Callable) -> Callable:
    """Compose functions from right to left.

    compose(f, g, h)(x) = f(g(h(x)))
    """
    def composed(x):
        return reduce(lambda acc, f: f(acc), reversed(functions), x)
    return composed


def pipe(*functions: Callable) -> Callable:
    """Compose functions from left to right.

    pipe(f, g, h)(x) = h(g(f(x)))
    """
    def piped(x):
        return reduce(lambda acc, f: f(acc), functions, x)
    return piped
