from abc import ABC, abstractmethod
from typing import Sequence, Union

from copytree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Concrete rule types (glob patterns, gitignore-style patterns, compositions of both)
    decide whether a path should be left out of the tree and the content listing. All
    implementations provide ``exclude``; loading rules from files and adding individual
    rules are optional capabilities that depend on the rule type.

    Example:
        >>> from copytree.exclusion_rules.glob_rules import GlobExclusionRules
        >>> rules = GlobExclusionRules(current_dir="/work")
        >>> rules.add_rule("**/*.pyc")
        >>> rules.exclude("pkg/module.pyc")
        True
        >>> rules.exclude("pkg/module.py")
        False
        >>> rules.load_rules("patterns.txt")
        Traceback (most recent call last):
            ...
        NotImplementedError: GlobExclusionRules doesn't support loading rules from files.
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded based on the configured rules.

        Args:
            path (str): The file or directory path to check. Directories may carry a
                trailing slash so that directory-only patterns can recognize them.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def has_rules(self) -> bool:
        """Check whether any rule is configured. Rule types without state always report True."""
        return True

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        Rule types that don't support file operations use this default implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
