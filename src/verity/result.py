"""Non-raising evaluation of checks."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Literal

from pydantic import BaseModel, SerializationInfo, field_serializer

from verity.errors import ArgumentViolation, ConstraintViolation, RelationError

logger = logging.getLogger(__name__)

ErrorKind = Literal["argument", "constraint"]


class CheckResult(BaseModel):
    """Outcome of running one check through :func:`evaluate`.

    Attributes:
    ----------
    check_name: str
        Name of the check that was run
    passed: bool
        Whether the check passed
    message: str | None
        Failure message, None when passed
    error_kind: "argument" | "constraint" | None
        Which kind of violation the check raised
    expected: str | None
        Stringified expected value of a comparison failure
    found: str | None
        Stringified found value of a comparison failure
    """

    check_name: str
    passed: bool
    message: str | None = None
    error_kind: ErrorKind | None = None
    expected: str | None = None
    found: str | None = None

    @field_serializer("expected", "found")
    def _truncate(self, v: str | None, info: SerializationInfo) -> str | None:
        """Truncate expected and found to 50 characters when asked to."""
        ctx = info.context or {}
        if v is not None and ctx.get("truncate"):
            max_len = 50
            if len(v) <= max_len:
                return v
            return v[:max_len] + "..."
        return v

    def __repr__(self) -> str:
        return self.model_dump_json(
            indent=2,
            exclude_none=True,
            context={"truncate": True},
        )

    def __bool__(self) -> bool:
        return self.passed


def evaluate(check: Callable[..., Any], *args: Any, **kwargs: Any) -> CheckResult:
    """Run ``check`` and report its outcome instead of raising.

    Argument and constraint violations are turned into a failed result.
    :class:`~verity.errors.RelationError` and any other exception propagate,
    since they signal a broken relation or check rather than a failed one.
    """
    check_name = getattr(check, "__name__", repr(check))
    try:
        check(*args, **kwargs)
    except RelationError:
        raise
    except ConstraintViolation as exc:
        logger.debug("%s failed: %s", check_name, exc)
        return CheckResult(
            check_name=check_name,
            passed=False,
            message=exc.message,
            error_kind="constraint",
            expected=None if exc.expected is None else str(exc.expected),
            found=None if exc.found is None else str(exc.found),
        )
    except ArgumentViolation as exc:
        logger.debug("%s rejected its arguments: %s", check_name, exc)
        return CheckResult(check_name=check_name, passed=False, message=str(exc), error_kind="argument")
    return CheckResult(check_name=check_name, passed=True)


__all__ = ["CheckResult", "ErrorKind", "evaluate"]
