"""Check error types."""

from __future__ import annotations

from typing import Any


class ConfigError(Exception):
    """Raised when the ``[tool.verity]`` table is misconfigured."""


class ArgumentViolation(ValueError):
    """Raised when a precondition on a function argument is broken."""


class NullArgument(ArgumentViolation):
    """Raised when a required argument is ``None``."""

    def __init__(self, argument_name: str) -> None:
        self.argument_name = argument_name
        super().__init__(f"[Assertion failed] - argument {argument_name} must not be None")


class RelationError(ArgumentViolation):
    """Raised when an equivalence relation fails while two sequences are compared.

    The original exception is available as ``__cause__``.
    """

    def __init__(
        self,
        index: int,
        expected_element: Any,
        found_element: Any,
        expected: Any,
        found: Any,
    ) -> None:
        self.index = index
        self.expected_element = expected_element
        self.found_element = found_element
        super().__init__(
            "[Exception while assertion check] - the relation raised while comparing "
            f"index {index} (expected={expected_element} found={found_element})"
            f" - expected list {expected} found list {found}"
        )


class ConstraintViolation(AssertionError):
    """Raised when an expected-versus-found assertion fails."""

    def __init__(self, message: str, expected: Any = None, found: Any = None) -> None:
        self.message = message
        self.expected = expected
        self.found = found
        super().__init__(message)


__all__ = [
    "ArgumentViolation",
    "ConfigError",
    "ConstraintViolation",
    "NullArgument",
    "RelationError",
]
