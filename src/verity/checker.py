"""The checker entry points.

:class:`Checker` bundles every check family for one explicit
:class:`~verity.config.CheckConfig`. Production code that wants its own
failure policy builds one and keeps it; everything else uses ``check``,
which resolves the configuration of the current context on each call.
"""

from __future__ import annotations

from typing import Any

from verity.arguments import ArgumentChecks
from verity.comparisons import CollectionChecks
from verity.context import current_config


class Checker(ArgumentChecks, CollectionChecks):
    """Argument checks, value assertions and collection comparisons."""

    def __repr__(self) -> str:
        return f"Checker({self.config!r})"


def current_checker() -> Checker:
    """Return a checker for the configuration active in this context."""
    return Checker(current_config())


class _ContextChecker:
    """Proxy forwarding attribute access to :func:`current_checker`."""

    def __getattr__(self, name: str) -> Any:
        return getattr(current_checker(), name)

    def __dir__(self) -> list[str]:
        return [name for name in dir(Checker) if not name.startswith("_")]

    def __repr__(self) -> str:
        return f"<check bound to {current_config()!r}>"


check = _ContextChecker()

__all__ = ["Checker", "check", "current_checker"]
