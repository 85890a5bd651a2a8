"""Verity - argument checks and collection assertions."""

from .checker import Checker, check, current_checker
from .config import DEFAULT_CONFIG, CheckConfig, load_config
from .context import config_scope, current_config
from .equivalence import NATIVE, Equivalence, FunctionEquivalence, NativeEquivalence, relation
from .errors import ArgumentViolation, ConfigError, ConstraintViolation, NullArgument, RelationError
from .failures import format_message
from .result import CheckResult, evaluate
from .types import AlternativeFailureAction
from .version import __version__


__all__ = [
    # Checking
    "Checker",
    "check",
    "current_checker",
    "evaluate",
    "CheckResult",
    "format_message",
    # Equivalence
    "Equivalence",
    "NATIVE",
    "NativeEquivalence",
    "FunctionEquivalence",
    "relation",
    # Errors
    "ArgumentViolation",
    "NullArgument",
    "RelationError",
    "ConstraintViolation",
    "ConfigError",
    # Configuration
    "CheckConfig",
    "DEFAULT_CONFIG",
    "AlternativeFailureAction",
    "load_config",
    "config_scope",
    "current_config",
    "__version__",
]
