"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from copytree.exceptions import InvalidPatternError
from copytree.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    Patterns are compiled by the pathspec library and matched the same way Git matches
    them, including negation (``!``), directory-only patterns (trailing ``/``),
    character classes and ``**``. Rules may be loaded from files or added one at a
    time; later rules can override earlier ones through negation.

    Unlike :class:`~copytree.exclusion_rules.glob_rules.GlobExclusionRules`, this
    grammar can reject a pattern. Every rejected pattern raises
    :class:`~copytree.exceptions.InvalidPatternError` as soon as it is added.

    Paths passed to ``exclude`` are matched as given, relative to whatever directory
    the rules are anchored to; the caller is responsible for that anchoring.

    Attributes:
        spec (GitIgnoreSpec): Compiled pattern matcher.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("debug.log")
        True
        >>> rules.exclude("keep.log")
        False
        >>> rules.add_rule("build/")
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("build/app.js")
        True
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreExclusionRules with patterns from specified files.

        Args:
            rules_files: Path(s) to the file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
            InvalidPatternError: If any pattern in the files cannot be compiled.
        """
        self._lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines([])

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded based on the loaded patterns.

        Args:
            path: Path relative to the directory the patterns belong to. Directories
                should end with ``/`` for directory-only patterns to apply.

        Returns:
            bool: True if the last matching pattern excludes the path.
        """
        return bool(self.spec.match_file(path))

    def has_rules(self) -> bool:
        return bool(self._lines)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
            InvalidPatternError: If any pattern cannot be compiled.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r", encoding="utf-8", errors="replace") as f:
                self._extend(f.read().splitlines())

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern directly.

        Args:
            rule: A single pattern, e.g. ``"*.pyc"``, ``"node_modules/"`` or ``"!keep.txt"``.

        Raises:
            InvalidPatternError: If pathspec rejects the pattern.
        """
        self._extend([rule])

    def _extend(self, lines: Sequence[str]) -> None:
        # Validate each line on its own so the error names the offending pattern
        for line in lines:
            try:
                GitIgnoreSpec.from_lines([line])
            except ValueError as e:
                raise InvalidPatternError(line, str(e)) from e

        self._lines.extend(lines)
        self.spec = GitIgnoreSpec.from_lines(self._lines)
