"""Compilation and matching of glob-style exclusion patterns.

The grammar is deliberately small:

- ``/`` separates pattern components; empty components are discarded.
- ``**`` as a whole component matches zero or more path components.
- Inside any other component, ``*`` matches any run of characters, ``?`` matches
  exactly one character, and every other character matches itself.

Matching is whole-path: every component of the candidate must be consumed. Both the
component-level and the character-level matchers are written as recursive backtracking
searches over a pair of cursors, memoized on that pair so that wildcard-heavy patterns
stay quadratic rather than exponential.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Sequence, Tuple, Union

ANY_DEPTH_TOKEN = "**"


@dataclass(frozen=True)
class AnyDepth:
    """Pattern component matching zero or more whole path components (``**``)."""

    def __str__(self) -> str:
        return ANY_DEPTH_TOKEN


@dataclass(frozen=True)
class Segment:
    """Pattern component matching exactly one path component.

    Attributes:
        text: The component pattern. ``*`` and ``?`` are wildcards, every other
            character is literal.

    Example:
        >>> Segment("*.py").matches("main.py")
        True
        >>> Segment("?.txt").matches("ab.txt")
        False
    """

    text: str

    def matches(self, candidate: str) -> bool:
        """Check whether a single path component satisfies this segment."""
        pattern = self.text

        @lru_cache(maxsize=None)
        def match_from(p: int, c: int) -> bool:
            if p == len(pattern):
                return c == len(candidate)

            char = pattern[p]
            if char == "*":
                # Consume nothing first, then one more character at a time
                return any(match_from(p + 1, k) for k in range(c, len(candidate) + 1))
            if c == len(candidate):
                return False
            if char == "?" or char == candidate[c]:
                return match_from(p + 1, c + 1)
            return False

        return match_from(0, 0)

    def __str__(self) -> str:
        return self.text


ComponentPattern = Union[AnyDepth, Segment]


@dataclass(frozen=True)
class GlobPattern:
    """A compiled glob exclusion pattern.

    Instances are immutable and can be shared freely; matching keeps its memo table
    local to each call.

    Attributes:
        source: The raw pattern string the pattern was compiled from.
        components: Ordered component patterns.

    Example:
        >>> pattern = GlobPattern.compile("**/target/**")
        >>> pattern.matches(["crates", "core", "target", "debug", "core.d"])
        True
        >>> pattern.matches(["crates", "target"])
        True
        >>> GlobPattern.compile("src/*").matches(["src", "nested", "main.py"])
        False
    """

    source: str
    components: Tuple[ComponentPattern, ...]

    @classmethod
    def compile(cls, pattern: str) -> "GlobPattern":
        """Compile a raw pattern string.

        Compilation never fails: every string is a valid pattern.

        Args:
            pattern: The raw pattern, using ``/`` as the separator.

        Returns:
            The compiled pattern.
        """
        components: Tuple[ComponentPattern, ...] = tuple(
            AnyDepth() if part == ANY_DEPTH_TOKEN else Segment(part) for part in pattern.split("/") if part
        )
        return cls(source=pattern, components=components)

    def matches(self, path_components: Sequence[str]) -> bool:
        """Check whether the full component sequence is matched by this pattern.

        Args:
            path_components: The candidate path as a sequence of components.

        Returns:
            True if the pattern consumes the whole path, False otherwise.
        """
        patterns = self.components
        path = tuple(path_components)

        @lru_cache(maxsize=None)
        def match_from(p: int, c: int) -> bool:
            if p == len(patterns):
                return c == len(path)

            head = patterns[p]
            if isinstance(head, AnyDepth):
                return any(match_from(p + 1, k) for k in range(c, len(path) + 1))
            if c == len(path):
                return False
            return head.matches(path[c]) and match_from(p + 1, c + 1)

        return match_from(0, 0)

    def __str__(self) -> str:
        return "/".join(str(component) for component in self.components)


def compile_pattern(pattern: str) -> GlobPattern:
    """Compile a raw pattern string into a :class:`GlobPattern`."""
    return GlobPattern.compile(pattern)


def matches(pattern: Union[str, GlobPattern], path_components: Sequence[str]) -> bool:
    """Check a path against a pattern, compiling the pattern first if needed.

    Example:
        >>> matches("a/**/b", ["a", "b"])
        True
        >>> matches("**/target", ["x", "target"])
        True
        >>> matches("docs", ["docs", "index.md"])
        False
    """
    if isinstance(pattern, str):
        pattern = GlobPattern.compile(pattern)
    return pattern.matches(path_components)
