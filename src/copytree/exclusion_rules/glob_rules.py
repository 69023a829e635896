"""Exclusion rules built from glob-style patterns."""

from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from copytree.paths import match_components
from copytree.types import PathType

from .base_rules import BaseExclusionRules
from .glob_pattern import GlobPattern


class GlobExclusionRules(BaseExclusionRules):
    """The set of user-supplied glob exclusion patterns.

    A path is excluded when at least one pattern matches its complete component
    sequence. The order in which patterns were added does not affect the outcome, and
    an empty set excludes nothing.

    Candidates are normalized relative to ``current_dir`` before matching, so an
    absolute path, a ``./``-prefixed path and a bare relative path naming the same file
    all give the same answer. Patterns written without a leading ``**/`` therefore
    match relative to the directory the tool runs from, not to each walked root.

    Attributes:
        current_dir (Path): Directory that candidate paths are made relative to.
        patterns (List[GlobPattern]): The compiled patterns.

    Example:
        >>> rules = GlobExclusionRules(["src/*"], current_dir="/work")
        >>> rules.exclude("/work/src/main.rs")
        True
        >>> rules.exclude("./src/main.rs")
        True
        >>> rules.exclude("src/main.rs")
        True
        >>> rules.exclude("src/nested/main.rs")
        False
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None, current_dir: Optional[PathType] = None) -> None:
        """Initialize the rule set.

        Args:
            patterns: Raw glob patterns to compile. Defaults to none.
            current_dir: Directory to normalize candidate paths against. Read from the
                process once, here, when omitted.
        """
        self.current_dir = Path(current_dir) if current_dir is not None else Path.cwd()
        self.patterns: List[GlobPattern] = []
        for pattern in patterns or ():
            self.add_rule(pattern)

    def add_rule(self, rule: str) -> None:
        """Compile and add one glob pattern. Compilation cannot fail."""
        self.patterns.append(GlobPattern.compile(rule))

    def exclude(self, path: str) -> bool:
        """Check if a path is matched by any pattern.

        Args:
            path: Absolute or relative path; a trailing slash is ignored.

        Returns:
            True if any pattern matches the path relative to ``current_dir``.
        """
        if not self.patterns:
            return False
        return self.exclude_components(match_components(path, self.current_dir))

    def exclude_components(self, components: Sequence[str]) -> bool:
        """Check an already-normalized component sequence against every pattern."""
        return any(pattern.matches(components) for pattern in self.patterns)

    def has_rules(self) -> bool:
        return bool(self.patterns)
