"""
Test assertions for Optional values.

Expressive assert helpers that produce clear failure messages instead of a
bare NoSuchElementError from get().

Usage in tests:
    from presence import OptionalAssertions

    def test_find_user():
        user = OptionalAssertions.assert_present(repo.find(user_id))
        assert user.name == "Alice"

    def test_unknown_user():
        OptionalAssertions.assert_empty(repo.find(unknown_id))
"""

from __future__ import annotations

from typing import Any, TypeVar

from presence.optional import Optional

T = TypeVar("T")


class OptionalAssertions:
    """Expressive test assertions for Optional values."""

    @staticmethod
    def assert_present(opt: Optional[T], message: str = "") -> T:
        """
        Assert the Optional holds a value and return it.

            value = OptionalAssertions.assert_present(opt)
        """
        context = f" — {message}" if message else ""
        assert isinstance(opt, Optional), (
            f"Expected an Optional but got {type(opt).__name__}: {opt!r}{context}"
        )
        assert opt.is_present(), f"Expected a present Optional but got {opt!r}{context}"
        return opt.get()

    @staticmethod
    def assert_empty(opt: Optional[Any], message: str = "") -> None:
        """Assert the Optional holds nothing."""
        context = f" — {message}" if message else ""
        assert isinstance(opt, Optional), (
            f"Expected an Optional but got {type(opt).__name__}: {opt!r}{context}"
        )
        assert opt.is_empty(), f"Expected an empty Optional but got {opt!r}{context}"

    @staticmethod
    def assert_present_value(opt: Optional[T], expected_value: Any) -> None:
        """Assert the Optional holds exactly the expected value."""
        value = OptionalAssertions.assert_present(opt)
        assert value == expected_value, (
            f"Expected present value {expected_value!r} but got {value!r}"
        )
