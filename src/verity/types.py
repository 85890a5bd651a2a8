"""Shared types for verity checks."""

from enum import Enum


class AlternativeFailureAction(Enum):
    """What to do with an argument violation when argument checks are inactive.

    Deprecated.
    """

    NONE = "none"  # Drop the failure silently
    LOG = "log"  # Emit a warning through the verity logger
    PRINT = "print"  # Write a line to the console
