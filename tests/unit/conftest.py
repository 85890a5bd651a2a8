"""Shared fixtures for unit tests."""

import io

import pytest
from rich.console import Console

from verity import AlternativeFailureAction, CheckConfig, Checker


class IntegerEquivalence:
    """Compares ints; None only equals None."""

    def equals(self, first: int | None, second: int | None) -> bool:
        if first is None:
            return second is None
        return first == second


@pytest.fixture
def checker() -> Checker:
    """Provide a checker with the default (raising) configuration."""
    return Checker()


@pytest.fixture
def integers() -> IntegerEquivalence:
    return IntegerEquivalence()


@pytest.fixture
def console_output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def inactive_checker(console_output):
    """Build checkers with argument checks switched off."""

    def make(action: AlternativeFailureAction = AlternativeFailureAction.NONE) -> Checker:
        config = CheckConfig(active_argument_checks=False, alternative_failure_action=action)
        return Checker(config, console=Console(file=console_output, width=400))

    return make
