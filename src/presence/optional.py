"""
Optional container — a value that may or may not be there.

An Optional[T] is either Present(value: T) or Empty(). It lets code say
"this might be missing" in its return type instead of handing out None, and
offers combinators so the missing case is dealt with once, at the end:

    ┌──────────┐    map     ┌──────────┐   filter   ┌──────────┐
    │ lookup   │──Present───│ convert  │──Present───│ check    │──→ or_else(default)
    │          │            │          │            │          │
    └────┬─────┘            └────┬─────┘            └────┬─────┘
         │ Empty                 │ Empty                 │ Empty
         └───────────────────────┴───────────────────────┴──→ default

Instances are immutable values. Compare them with ==, never with `is`:
the shared EMPTY instance is only an allocation shortcut.

Callbacks (actions, predicates, mappers, suppliers) are called synchronously,
at most once per call, and anything they raise reaches the caller untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from presence.errors import (
    NoSuchElementError,
    NullResultError,
    NullValueError,
    OptionalError,
)

T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger(__name__)


def _logged(error: OptionalError) -> OptionalError:
    """Record a container-raised error at DEBUG level and hand it back for raising."""
    logger.debug("Raising %s: %s", error.code.value, error.message)
    return error


def _require(callback: Any, name: str) -> Any:
    if callback is None:
        raise _logged(NullValueError.for_argument(name))
    return callback


class Optional(Generic[T]):
    """
    Container holding zero or one non-None value.

    Two possible states:
      - Present(value: T) — a value is there, and it is never None
      - Empty()           — nothing is there

    Transformations on an empty Optional skip their callback and stay empty,
    so a chain only describes what happens to the value when it exists.

    Usage:
        >>> Optional.of(5).map(lambda x: x + 1).or_else(-1)
        6

        >>> Optional.of_nullable(None).map(lambda x: x + 1).or_else(-1)
        -1
    """

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def empty() -> Optional[T]:
        """Return an empty Optional."""
        return EMPTY

    @staticmethod
    def of(value: T) -> Optional[T]:
        """
        Wrap a value that must not be None.

        Raises NullValueError when given None; use of_nullable() for values
        that may legitimately be missing.

            Optional.of("Alice")  # → Optional['Alice']
            Optional.of(None)     # → NullValueError
        """
        return Present(value)

    @staticmethod
    def of_nullable(value: T | None) -> Optional[T]:
        """
        Wrap a value that may be None. None becomes an empty Optional.

            Optional.of_nullable(config.get("port"))
        """
        if value is None:
            return Optional.empty()
        return Present(value)

    # ──────────────────────── Introspection ────────────────────────

    def is_present(self) -> bool:
        """Check if a value is present."""
        return isinstance(self, Present)

    def is_empty(self) -> bool:
        """Check if this Optional holds nothing."""
        return not self.is_present()

    def get(self) -> T:
        """
        Extract the value. Raises NoSuchElementError if empty.

        Prefer or_else(), or_else_get() or or_else_throw() so the missing case
        is handled at the call site.
        """
        match self:
            case Present(v):
                return v
        raise _logged(NoSuchElementError())

    # ──────────────────────── Side Effects ────────────────────────

    def if_present(self, action: Callable[[T], Any]) -> None:
        """
        Call action with the value if present; do nothing otherwise.

            Optional.of(user).if_present(lambda u: audit.record(u.id))
        """
        match self:
            case Present(v):
                _require(action, "action")(v)

    # ──────────────────────── Transformations ────────────────────────

    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """
        Keep the value only if it satisfies the predicate.

        An empty Optional is returned unchanged without calling predicate.

            Optional.of(5).filter(lambda x: x > 10)  # → Optional.empty
        """
        _require(predicate, "predicate")
        match self:
            case Present(v):
                return self if predicate(v) else Optional.empty()
        return self

    def map(self, mapper: Callable[[T], U | None]) -> Optional[U]:
        """
        Transform the value. A None result collapses to an empty Optional.

            Optional.of({"name": "Alice"}).map(lambda d: d.get("email"))  # → Optional.empty
        """
        _require(mapper, "mapper")
        match self:
            case Present(v):
                return Optional.of_nullable(mapper(v))
        return Optional.empty()

    def flat_map(self, mapper: Callable[[T], Optional[U]]) -> Optional[U]:
        """
        Chain an Optional-returning function. The result is returned as-is.

        Unlike map(), the mapper must not return None: doing so raises
        NullResultError, because None is not an Optional.

            def find_manager(employee: Employee) -> Optional[Employee]: ...

            Optional.of(employee).flat_map(find_manager).flat_map(find_manager)
        """
        _require(mapper, "mapper")
        match self:
            case Present(v):
                result = mapper(v)
                if result is None:
                    raise _logged(NullResultError())
                return result
        return Optional.empty()

    # ──────────────────────── Fallbacks ────────────────────────

    def or_else(self, default: T | None) -> T | None:
        """Extract the value or return default as-is (default may be None)."""
        match self:
            case Present(v):
                return v
        return default

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """
        Extract the value or compute a fallback.

        supplier is only called when empty.

            Optional.of_nullable(cache.get(key)).or_else_get(lambda: load(key))
        """
        match self:
            case Present(v):
                return v
        return _require(supplier, "supplier")()

    def or_else_throw(self, exception_supplier: Callable[[], BaseException]) -> T:
        """
        Extract the value or raise the error produced by exception_supplier.

        exception_supplier is only called when empty. An exception class is a
        valid supplier on its own.

            Optional.of_nullable(user).or_else_throw(lambda: UserNotFound(user_id))
            Optional.of_nullable(row).or_else_throw(KeyError)
        """
        match self:
            case Present(v):
                return v
        error = _require(exception_supplier, "exception_supplier")()
        if error is None:
            raise _logged(NullValueError("exception_supplier returned None"))
        raise error

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Allow truthiness check: `if opt: ...` holds only when present."""
        return self.is_present()


@dataclass(frozen=True, slots=True)
class Present(Optional[T]):
    """The present state — wraps a non-None value of type T."""

    _value: T

    def __init__(self, value: T) -> None:
        if value is None:
            raise _logged(NullValueError.for_argument("value"))
        object.__setattr__(self, "_value", value)

    def __repr__(self) -> str:
        return f"Optional[{self._value!r}]"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Present):
            return self._value == other._value
        if isinstance(other, Optional):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)


# Enable structural pattern matching: case Present(value)
Present.__match_args__ = ("_value",)


@dataclass(frozen=True, slots=True)
class Empty(Optional[T]):
    """The empty state — holds nothing."""

    def __repr__(self) -> str:
        return "Optional.empty"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Empty):
            return True
        if isinstance(other, Optional):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return 0


EMPTY: Optional[Any] = Empty()
