"""Exclusion rules driven by a mapping of glob patterns to enabled flags."""

import posixpath
import re
from typing import Dict, List, Mapping, Optional, Pattern

from .base_rules import BaseExclusionRules


def translate_pattern(pattern: str) -> str:
    """Translate a glob pattern into an anchored regular expression.

    Only a small glob subset is recognized: ``*`` matches any run of characters,
    path separators included, and ``?`` matches exactly one character. Every other
    character, ``.`` among them, matches itself literally.

    Args:
        pattern: The glob pattern to translate.

    Returns:
        A regular expression source string that matches the whole candidate.

    Example:
        >>> translate_pattern("*.log")
        '^.*\\\\.log$'
        >>> translate_pattern("build/?")
        '^build/.$'
    """
    parts = []
    for char in pattern:
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return "^" + "".join(parts) + "$"


_compiled: Dict[str, Pattern[str]] = {}


def _compile(pattern: str) -> Pattern[str]:
    regex = _compiled.get(pattern)
    if regex is None:
        regex = re.compile(translate_pattern(pattern), re.DOTALL)
        _compiled[pattern] = regex
    return regex


def matches_pattern(path: str, pattern: str) -> bool:
    """Check whether a path matches a glob pattern.

    The pattern is tried against the full path and then against its base name, so
    both root-relative patterns (``build/output``) and bare-name patterns
    (``*.log``) work.

    Args:
        path: A path relative to the traversal root, using ``/`` separators.
        pattern: The glob pattern.

    Returns:
        True if the pattern matches the whole path or the whole base name.

    Example:
        >>> matches_pattern("src/debug.log", "*.log")
        True
        >>> matches_pattern("src/debug.log", "debug.log")
        True
        >>> matches_pattern("src/debug.log", "debug")
        False
        >>> matches_pattern("build/output", "build/output")
        True
    """
    regex = _compile(pattern)
    if regex.fullmatch(path):
        return True
    return regex.fullmatch(posixpath.basename(path)) is not None


class GlobExclusionRules(BaseExclusionRules):
    """Exclusion rules backed by a pattern-to-enabled-flag mapping.

    This mirrors the way editors store file-exclusion settings: each key is a glob
    pattern and its value says whether the pattern is active. Disabled patterns are
    kept but never match, so flipping a flag back to True re-enables them.

    Attributes:
        patterns (Dict[str, bool]): Copy of the pattern mapping, in insertion order.

    Example:
        >>> rules = GlobExclusionRules({"*.log": True, "dist": False})
        >>> rules.exclude("debug.log")
        True
        >>> rules.exclude("dist")
        False
        >>> rules.add_rule("dist")
        >>> rules.exclude("dist")
        True
        >>> rules.enabled_patterns
        ['*.log', 'dist']
    """

    def __init__(self, patterns: Optional[Mapping[str, bool]] = None):
        self.patterns: Dict[str, bool] = dict(patterns or {})

    @property
    def enabled_patterns(self) -> List[str]:
        return [pattern for pattern, enabled in self.patterns.items() if enabled]

    def exclude(self, path: str, is_dir: bool = False) -> bool:
        """Check a root-relative path against every enabled pattern.

        Args:
            path: The path relative to the traversal root.
            is_dir: Ignored; glob patterns do not distinguish directories.

        Returns:
            True if any enabled pattern matches the path or its base name.
        """
        return any(matches_pattern(path, pattern) for pattern in self.enabled_patterns)

    def add_rule(self, rule: str) -> None:
        """Enable a pattern, adding it if it is not yet known."""
        self.patterns[rule] = True

    def disable_rule(self, rule: str) -> None:
        """Record a pattern as disabled, overriding any earlier enable."""
        self.patterns[rule] = False
