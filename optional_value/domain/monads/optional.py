"""Optional container for values that may be absent."""

from __future__ import annotations
from typing import TypeVar, Generic, Callable, Iterator, Any
from abc import ABC, abstractmethod
from dataclasses import dataclass

from optional_value.utils.error_manager import NullReferenceError, NoSuchElementError

T = TypeVar('T')
U = TypeVar('U')


class Optional(ABC, Generic[T]):
    """
    Container that either holds exactly one non-None value (Present)
    or holds nothing (Empty).

    Instances are immutable. Use the module-level factories ``of``,
    ``of_nullable`` and ``empty`` instead of instantiating variants.
    """

    @abstractmethod
    def is_present(self) -> bool:
        """Check if this contains a value."""
        pass

    def is_empty(self) -> bool:
        """Check if this holds nothing."""
        return not self.is_present()

    @abstractmethod
    def get(self) -> T:
        """Get the value, raising NoSuchElementError if empty."""
        pass

    @abstractmethod
    def if_present(self, action: Callable[[T], Any]) -> None:
        """Run action with the value if present."""
        pass

    @abstractmethod
    def if_present_or_else(self, action: Callable[[T], Any],
                           empty_action: Callable[[], Any]) -> None:
        """Run action with the value, or empty_action if empty."""
        pass

    @abstractmethod
    def or_else(self, default: T) -> T:
        """Get the value or an already computed default."""
        pass

    @abstractmethod
    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """Get the value or compute a default, calling supplier only if empty."""
        pass

    @abstractmethod
    def or_else_throw(self, exception_supplier: Callable[[], BaseException] | None = None) -> T:
        """Get the value or raise the exception produced by exception_supplier."""
        pass

    @abstractmethod
    def or_(self, supplier: Callable[[], Optional[T]]) -> Optional[T]:
        """Return this if present, otherwise the optional produced by supplier."""
        pass

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Keep the value only if it satisfies predicate."""
        pass

    @abstractmethod
    def map(self, mapper: Callable[[T], U]) -> Optional[U]:
        """Transform the value if present."""
        pass

    @abstractmethod
    def flat_map(self, mapper: Callable[[T], Optional[U]]) -> Optional[U]:
        """Chain an optional-returning transformation without nesting."""
        pass

    @abstractmethod
    def to_nullable(self) -> T | None:
        """Convert to a plain value or None."""
        pass

    def stream(self) -> Iterator[T]:
        """Iterate over zero or one values."""
        return iter(self)

    def __iter__(self) -> Iterator[T]:
        if self.is_present():
            yield self.get()


@dataclass(frozen=True)
class Present(Optional[T]):
    """Present variant holding a non-None value.

    Equality and hashing delegate to the value, so an unhashable value
    makes the Present unhashable too.
    """
    value: T

    def __post_init__(self):
        if self.value is None:
            raise NullReferenceError("Present value must not be None")

    def is_present(self) -> bool:
        return True

    def get(self) -> T:
        return self.value

    def if_present(self, action: Callable[[T], Any]) -> None:
        action(self.value)

    def if_present_or_else(self, action: Callable[[T], Any],
                           empty_action: Callable[[], Any]) -> None:
        action(self.value)

    def or_else(self, default: T) -> T:
        return self.value

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        return self.value

    def or_else_throw(self, exception_supplier: Callable[[], BaseException] | None = None) -> T:
        return self.value

    def or_(self, supplier: Callable[[], Optional[T]]) -> Optional[T]:
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        return self if predicate(self.value) else _EMPTY

    def map(self, mapper: Callable[[T], U]) -> Optional[U]:
        return of_nullable(mapper(self.value))

    def flat_map(self, mapper: Callable[[T], Optional[U]]) -> Optional[U]:
        result = mapper(self.value)
        if result is None:
            raise NullReferenceError("flat_map mapper returned None")
        return result

    def to_nullable(self) -> T | None:
        return self.value

    def __str__(self) -> str:
        return f"Optional[{self.value}]"


class Empty(Optional[T]):
    """Empty variant holding nothing."""

    def is_present(self) -> bool:
        return False

    def get(self) -> T:
        raise NoSuchElementError("No value present")

    def if_present(self, action: Callable[[T], Any]) -> None:
        return None

    def if_present_or_else(self, action: Callable[[T], Any],
                           empty_action: Callable[[], Any]) -> None:
        empty_action()

    def or_else(self, default: T) -> T:
        return default

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        return supplier()

    def or_else_throw(self, exception_supplier: Callable[[], BaseException] | None = None) -> T:
        if exception_supplier is None:
            raise NoSuchElementError("No value present")
        raise exception_supplier()

    def or_(self, supplier: Callable[[], Optional[T]]) -> Optional[T]:
        result = supplier()
        if result is None:
            raise NullReferenceError("or_ supplier returned None")
        return result

    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        return _EMPTY

    def map(self, mapper: Callable[[T], U]) -> Optional[U]:
        return _EMPTY

    def flat_map(self, mapper: Callable[[T], Optional[U]]) -> Optional[U]:
        return _EMPTY

    def to_nullable(self) -> T | None:
        return None

    def __eq__(self, other):
        return isinstance(other, Empty)

    def __hash__(self):
        return hash(None)

    def __str__(self) -> str:
        return "Optional.empty"

    def __repr__(self) -> str:
        return "Empty()"


_EMPTY: Empty[Any] = Empty()


# Factories
def empty() -> Optional[Any]:
    """Return the empty optional."""
    return _EMPTY


def of(value: T) -> Optional[T]:
    """Wrap a value that must not be None."""
    if value is None:
        raise NullReferenceError("Optional.of called with None")
    return Present(value)


def of_nullable(value: T | None) -> Optional[T]:
    """Wrap a value, treating None as absence."""
    return Present(value) if value is not None else _EMPTY
