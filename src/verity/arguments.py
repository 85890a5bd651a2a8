"""Defensive argument checks for production code.

Every check here raises :class:`~verity.errors.ArgumentViolation` (or its
subclass :class:`~verity.errors.NullArgument`) through the checker's
argument-failure dispatcher, so a checker configured with inactive argument
checks redirects the violation instead of raising.
"""

from __future__ import annotations

from collections.abc import Collection, Sized
from typing import Any, TypeVar

from verity.equivalence import NATIVE
from verity.errors import ArgumentViolation
from verity.failures import FailureHandling

A = TypeVar("A")


class ArgumentChecks(FailureHandling):
    """Scalar, range and arity checks on function arguments."""

    def not_empty_argument(self, argument: Sized | None, argument_name: str) -> None:
        """Require a string or collection argument with at least one element."""
        if not self._present((argument_name, argument)):
            return
        if len(argument) == 0:
            kind = "String" if isinstance(argument, str) else "Collection"
            self._argument_failure(
                ArgumentViolation(f"[Assertion failed] - {kind} argument {argument_name} must have length")
            )

    def argument_instance_of(self, argument: Any, type_: type[A], argument_name: str) -> A:
        """Require ``argument`` to be an instance of ``type_`` and return it."""
        self._instance_of(argument, type_, argument_name)
        return argument

    def not_null_element_argument(self, argument: Collection[Any] | None, argument_name: str) -> None:
        if not self._present((argument_name, argument)):
            return
        if any(element is None for element in argument):
            self._argument_failure(
                ArgumentViolation(
                    f"[Assertion failed] - collection {argument_name} should not contain a None element,"
                    f" but it has one or more - {argument_name} = {argument}"
                )
            )

    def false_argument(self, value: bool, argument_name: str) -> None:
        if value:
            self._argument_failure(
                ArgumentViolation(
                    f"[Assertion failed] - boolean argument {argument_name} should be false but is true"
                )
            )

    def not_zero_argument(self, value: float, argument_name: str, epsilon: float | None = None) -> None:
        """Require a non-zero number.

        With ``epsilon`` the value counts as zero when ``abs(value) < epsilon``,
        which is what float arguments usually need.
        """
        is_zero = value == 0 if epsilon is None else abs(value) < epsilon
        if is_zero:
            self._argument_failure(
                ArgumentViolation(f"[Assertion failed] - the argument {argument_name} must not be zero")
            )

    def not_zero_or_negative_argument(self, value: float, argument_name: str) -> None:
        if value <= 0:
            self._argument_failure(
                ArgumentViolation(
                    f"[Assertion failed] - the argument {argument_name} must not be zero or negative, but is {value}"
                )
            )

    def not_negative_argument(self, value: float, argument_name: str) -> None:
        if value < 0:
            self._argument_failure(
                ArgumentViolation(
                    f"[Assertion failed] - the argument {argument_name} must not be negative, but is {value}"
                )
            )

    def equal_arguments(self, value_a: Any, value_b: Any, argument_name_a: str, argument_name_b: str) -> None:
        if not NATIVE.equals(value_a, value_b):
            self._argument_failure(
                ArgumentViolation(
                    f"[Assertion failed] - the arguments {argument_name_a} and {argument_name_b} are not equal,"
                    f" the first one is {value_a} the second one is {value_b}"
                )
            )

    def argument_between(self, value: float, minimum: float, maximum: float, argument_name: str) -> None:
        """Require ``minimum <= value <= maximum``."""
        if value < minimum:
            self._argument_failure(
                ArgumentViolation(
                    f"[Assertion failed] - argument {argument_name} must be greater or equal {minimum}"
                    f" but is {value}"
                )
            )
        elif value > maximum:
            self._argument_failure(
                ArgumentViolation(
                    f"[Assertion failed] - argument {argument_name} must be less or equal {maximum} but is {value}"
                )
            )

    def argument_greater_equals(self, minimum: float, value: float, argument_name: str) -> None:
        # written negated so that NaN fails
        if not value >= minimum:
            self._argument_failure(
                ArgumentViolation(
                    f"[Assertion failed] - argument {argument_name} must be greater or equal {minimum}"
                    f" but is {value}"
                )
            )

    def argument_less_equals(self, maximum: float, value: float, argument_name: str) -> None:
        if not value <= maximum:
            self._argument_failure(
                ArgumentViolation(
                    f"[Assertion failed] - argument {argument_name} must be less or equal {maximum} but is {value}"
                )
            )

    def argument_exact_not_null_count(self, expected_count: int, argument_names: str, *arguments: Any) -> None:
        """Require exactly ``expected_count`` of ``arguments`` to be non-None."""
        found = sum(1 for argument in arguments if argument is not None)
        if found != expected_count:
            self._argument_failure(
                ArgumentViolation(
                    f"[Assertion failed] - the arguments {argument_names} contain {found} arguments which are"
                    f" not None, but expected are {expected_count} - parameters={list(arguments)}"
                )
            )

    def same_size_argument(
        self,
        collection_a: Sized | None,
        collection_b: Sized | None,
        argument_name_a: str,
        argument_name_b: str,
    ) -> None:
        if not self._present((argument_name_a, collection_a), (argument_name_b, collection_b)):
            return
        if len(collection_a) != len(collection_b):
            self._argument_failure(
                ArgumentViolation(
                    f"[Assertion failed] - collections have different size: len({argument_name_a}) ="
                    f" {len(collection_a)}, len({argument_name_b}) = {len(collection_b)}"
                )
            )

    def min_one_element_argument(self, collection: Sized | None, argument_name: str) -> None:
        if not self._present((argument_name, collection)):
            return
        if len(collection) < 1:
            self._argument_failure(
                ArgumentViolation(
                    f"[Assertion failed] - argument collection {argument_name}"
                    " should have one or more element(s) - but it is empty"
                )
            )

    def equals_argument(self, expected: Any, argument: Any, argument_name: str) -> None:
        if expected is argument:
            return
        if not NATIVE.equals(expected, argument):
            self._argument_failure(
                ArgumentViolation(
                    f"[Assertion failed] - argument {argument_name} is not equal to {expected}, it was {argument}"
                )
            )

    def equals_or_null_argument(self, expected: Any, argument: Any, argument_name: str) -> None:
        """Like :meth:`equals_argument`, but a ``None`` argument passes."""
        if argument is not None:
            self.equals_argument(expected, argument, argument_name)


__all__ = ["ArgumentChecks"]
