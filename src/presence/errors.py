"""
Error taxonomy — the conditions an Optional raises on its own.

Every error carries an ErrorCode so callers can branch on a stable value
instead of parsing messages. Each exception also subclasses the closest
builtin (TypeError, LookupError, RuntimeError), so plain
`except LookupError:` handlers keep working.

Errors produced by caller callbacks, and the error returned by the supplier
given to `or_else_throw`, are never wrapped in these types.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class ErrorCode(Enum):
    """Structured codes for the failures an Optional can raise itself."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    """A value or callback that must not be None was None."""

    NO_SUCH_ELEMENT = "NO_SUCH_ELEMENT"
    """Unqualified extraction from an empty Optional."""

    INVALID_STATE = "INVALID_STATE"
    """A flat_map mapper returned None instead of an Optional."""


class OptionalError(Exception):
    """
    Base class for errors raised by the container.

    >>> err = NoSuchElementError()
    >>> err.code
    <ErrorCode.NO_SUCH_ELEMENT: 'NO_SUCH_ELEMENT'>
    >>> err.message
    'No value present'
    """

    code: ErrorCode = ErrorCode.INVALID_ARGUMENT
    default_message: str = ""

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code.value}: {self.message!r})"


class NullValueError(OptionalError, TypeError):
    """A None was passed where a value or a callback is required."""

    code = ErrorCode.INVALID_ARGUMENT
    default_message = "value must not be None"

    @classmethod
    def for_argument(cls, name: str) -> NullValueError:
        return cls(f"{name} must not be None")


class NoSuchElementError(OptionalError, LookupError):
    """get() was called on an empty Optional."""

    code = ErrorCode.NO_SUCH_ELEMENT
    default_message = "No value present"


class NullResultError(OptionalError, RuntimeError):
    """The mapper handed to flat_map returned None instead of an Optional."""

    code = ErrorCode.INVALID_STATE
    default_message = "flat_map mapper returned None instead of an Optional"
