"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .glob_pattern import AnyDepth, GlobPattern, Segment, compile_pattern, matches
from .glob_rules import GlobExclusionRules

__all__ = [
    "AnyDepth",
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "GitIgnoreExclusionRules",
    "GlobExclusionRules",
    "GlobPattern",
    "Segment",
    "compile_pattern",
    "matches",
]
