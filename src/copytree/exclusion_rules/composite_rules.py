"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    A path is excluded if ANY of the constituent rules excludes it. The command line
    uses this to apply glob patterns (``-x``) and gitignore-style patterns (``-i``,
    ``--ignore-file``) as one exclusion set, so tree inclusion and content inclusion
    are always decided by the same rules.

    Attributes:
        rules (List[BaseExclusionRules]): Constituent exclusion rules.

    Example:
        >>> from copytree.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> from copytree.exclusion_rules.glob_rules import GlobExclusionRules
        >>> globs = GlobExclusionRules(["**/target/**"], current_dir="/work")
        >>> gitignore = GitIgnoreExclusionRules()
        >>> gitignore.add_rule("*.log")
        >>> composite = CompositeExclusionRules([globs, gitignore])
        >>> composite.exclude("crate/target/debug/app")
        True
        >>> composite.exclude("server.log")
        True
        >>> composite.exclude("src/lib.rs")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine.

        Raises:
            ValueError: If rules list is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded by any constituent rule.

        Uses short-circuit evaluation: stops as soon as one rule excludes the path.
        """
        return any(rule.exclude(path) for rule in self.rules)

    def has_rules(self) -> bool:
        """True if ANY constituent rule has rules configured."""
        return any(rule.has_rules() for rule in self.rules)
