"""Gitignore-aware collection of the files below a set of roots."""

from .file_walker import FileWalker
from .permission_action import PermissionAction

__all__ = ["FileWalker", "PermissionAction"]
