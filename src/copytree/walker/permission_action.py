"""Permission action enum for handling filesystem errors during traversal."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory cannot be listed or a file cannot be read.

    Values:
        IGNORE: Skip the inaccessible subtree or file silently
        WARN: Skip it, but record the error so the caller can report it
        RAISE: Raise a WalkIOError immediately (default)
    """

    IGNORE = "ignore"
    WARN = "warn"
    RAISE = "raise"
