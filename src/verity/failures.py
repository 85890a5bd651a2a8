"""Failure primitives shared by every check family."""

from __future__ import annotations

import logging
from typing import Any, NoReturn, TypeVar

from rich.console import Console

from verity.config import DEFAULT_CONFIG, CheckConfig
from verity.errors import ArgumentViolation, ConstraintViolation, NullArgument
from verity.types import AlternativeFailureAction

logger = logging.getLogger(__name__)

V = TypeVar("V")


def format_message(message: str | None, cause: str) -> str:
    """Prefix ``cause`` with the caller's message, if there is one."""
    if message is None:
        return cause
    return f"{message} {cause}"


class FailureHandling:
    """Raise or redirect check failures according to a :class:`CheckConfig`.

    Constraint violations always raise. Argument violations raise while
    ``config.active_argument_checks`` is true; otherwise they are passed to
    the configured alternative action and the check returns.
    """

    def __init__(self, config: CheckConfig = DEFAULT_CONFIG, console: Console | None = None) -> None:
        self._config = config
        self._console = console

    @property
    def config(self) -> CheckConfig:
        return self._config

    @property
    def console(self) -> Console:
        if self._console is None:
            self._console = Console()
        return self._console

    def fail(self, message: str) -> NoReturn:
        raise ConstraintViolation(message)

    def fail_compare(self, message: str, expected: Any, found: Any) -> NoReturn:
        raise ConstraintViolation(
            f"{message} expected <{expected}> but was <{found}>",
            expected=expected,
            found=found,
        )

    def _argument_failure(self, violation: ArgumentViolation) -> None:
        if self._config.active_argument_checks:
            raise violation
        self._redirect(violation)

    def _redirect(self, violation: ArgumentViolation) -> None:
        match self._config.alternative_failure_action:
            case AlternativeFailureAction.NONE:
                return
            case AlternativeFailureAction.LOG:
                logger.warning("Check failure - message=%s", violation)
            case AlternativeFailureAction.PRINT:
                self.console.print(f"Check failure - message={violation}", markup=False, highlight=False)

    def not_null_argument(self, argument: V | None, argument_name: str) -> V | None:
        """Require ``argument`` to be present and return it.

        Raises
        ------
        NullArgument
            If ``argument`` is ``None`` and argument checks are active.
        """
        if argument is None:
            self._argument_failure(NullArgument(argument_name))
        return argument

    def _present(self, *arguments: tuple[str, Any]) -> bool:
        """Run :meth:`not_null_argument` on each ``(name, value)`` pair; False if any was None.

        False is only returned when the failure was redirected.
        """
        present = True
        for name, value in arguments:
            if value is None:
                self.not_null_argument(value, name)
                present = False
        return present

    def _instance_of(self, argument: Any, type_: type, argument_name: str) -> bool:
        """Type precondition; False when it did not hold and the failure was redirected."""
        if not self._present((argument_name, argument)):
            return False
        if isinstance(argument, type_):
            return True
        self._argument_failure(
            ArgumentViolation(
                f"[Assertion failed] - type {type_.__qualname__} expected for argument {argument_name}"
                f" but got an object of type {type(argument).__qualname__}"
            )
        )
        return False


__all__ = ["FailureHandling", "format_message"]
