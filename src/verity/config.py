"""Check configuration and ``pyproject.toml`` loading."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from verity.errors import ConfigError
from verity.types import AlternativeFailureAction

logger = logging.getLogger(__name__)

PYPROJECT_FILE = "pyproject.toml"
TOOL_TABLE = "verity"


@dataclass(frozen=True, slots=True)
class CheckConfig:
    """How a checker reacts to failures.

    Attributes
    ----------
    active_argument_checks
        When true, argument violations raise. When false they are handed to
        ``alternative_failure_action`` and the check returns. Deprecated.
    alternative_failure_action
        Redirect target for argument violations while checks are inactive.
        Deprecated.
    """

    active_argument_checks: bool = True
    alternative_failure_action: AlternativeFailureAction = AlternativeFailureAction.NONE


DEFAULT_CONFIG = CheckConfig()


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest ``pyproject.toml`` at or above ``start``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT_FILE
        if candidate.is_file():
            return candidate
    return None


def _parse_action(value: Any) -> AlternativeFailureAction:
    if not isinstance(value, str):
        msg = f"alternative-failure-action must be a string, got {value!r}"
        raise ConfigError(msg)
    try:
        return AlternativeFailureAction(value.lower())
    except ValueError:
        choices = ", ".join(action.value for action in AlternativeFailureAction)
        msg = f"Unknown alternative-failure-action: {value}. Available: {choices}"
        raise ConfigError(msg) from None


def config_from_mapping(table: dict[str, Any]) -> CheckConfig:
    """Build a :class:`CheckConfig` from a ``[tool.verity]`` table."""
    known = {"active-argument-checks", "alternative-failure-action"}
    unknown = sorted(set(table) - known)
    if unknown:
        msg = f"Unknown [tool.{TOOL_TABLE}] keys: {', '.join(unknown)}"
        raise ConfigError(msg)

    active = table.get("active-argument-checks", DEFAULT_CONFIG.active_argument_checks)
    if not isinstance(active, bool):
        msg = f"active-argument-checks must be a boolean, got {active!r}"
        raise ConfigError(msg)

    action = DEFAULT_CONFIG.alternative_failure_action
    if "alternative-failure-action" in table:
        action = _parse_action(table["alternative-failure-action"])

    return CheckConfig(active_argument_checks=active, alternative_failure_action=action)


def load_config(start: Path | None = None) -> CheckConfig:
    """Load the configuration from the nearest ``pyproject.toml``.

    Args:
        start: Directory to search from; defaults to the working directory.

    Returns:
        The parsed configuration, or ``DEFAULT_CONFIG`` when no file or no
        ``[tool.verity]`` table exists.

    Raises:
        ConfigError: If the file cannot be parsed or the table is invalid.
    """
    path = find_pyproject(start)
    if path is None:
        logger.debug("No %s found, using default check config", PYPROJECT_FILE)
        return DEFAULT_CONFIG

    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Cannot parse {path}: {exc}"
        raise ConfigError(msg) from exc

    table = data.get("tool", {}).get(TOOL_TABLE)
    if table is None:
        logger.debug("No [tool.%s] table in %s, using default check config", TOOL_TABLE, path)
        return DEFAULT_CONFIG

    config = config_from_mapping(table)
    logger.debug("Loaded check config from %s: %s", path, config)
    return config


__all__ = [
    "DEFAULT_CONFIG",
    "CheckConfig",
    "config_from_mapping",
    "find_pyproject",
    "load_config",
]
