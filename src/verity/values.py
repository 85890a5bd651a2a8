"""Scalar and size assertions for test code."""

from __future__ import annotations

from collections.abc import Sized
from typing import Any

from verity.failures import FailureHandling, format_message


class ValueChecks(FailureHandling):
    """Assertions on single values; failures raise ``ConstraintViolation``."""

    def is_empty(self, value: Sized | None, *, message: str | None = None) -> None:
        """Assert an empty string or collection."""
        if not self._present(("value", value)):
            return
        if isinstance(value, str):
            if value:
                self.fail_compare(format_message(message, "[Assertion failed] - empty string expected"), "", value)
        elif len(value) != 0:
            self.fail_compare(format_message(message, "[Assertion failed] - no elements expected"), 0, len(value))

    def has_size(self, expected_size: int, found: Sized | None, *, message: str | None = None) -> None:
        if not self._present(("found", found)):
            return
        if len(found) != expected_size:
            self.fail_compare(
                format_message(message, "[Assertion failed] - collection has wrong size"),
                expected_size,
                len(found),
            )

    def has_size_at_least(self, min_expected_size: int, found: Sized | None, *, message: str | None = None) -> None:
        if not self._present(("found", found)):
            return
        if len(found) < min_expected_size:
            self.fail_compare(
                format_message(message, "[Assertion failed] - collection does not have the minimal size"),
                min_expected_size,
                len(found),
            )

    def not_equals(self, first: Any, second: Any, *, message: str | None = None) -> None:
        """Assert that two values differ.

        The same object never passes; exactly one ``None`` always passes.
        """
        if first is second:
            self.fail(format_message(message, "[Assertion failed] - both objects are the same but should not be"))
        if (first is None) != (second is None):
            return
        if first == second:
            self.fail(format_message(message, "[Assertion failed] - both objects are equal but should not be"))

    def equals_without_whitespace(
        self, expected: str | None, found: str | None, *, message: str | None = None
    ) -> None:
        """Compare two strings after removing all spaces."""
        if not self._present(("expected", expected), ("found", found)):
            return
        expected_normalized = expected.replace(" ", "")
        found_normalized = found.replace(" ", "")
        if expected_normalized != found_normalized:
            self.fail_compare(
                format_message(message, "[Assertion failed] - strings without spaces are not equal"),
                expected_normalized,
                found_normalized,
            )


__all__ = ["ValueChecks"]
