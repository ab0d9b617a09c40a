"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .pattern_rules import GlobExclusionRules, matches_pattern, translate_pattern

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "GitIgnoreExclusionRules",
    "GlobExclusionRules",
    "matches_pattern",
    "translate_pattern",
]
