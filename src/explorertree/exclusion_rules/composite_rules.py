"""Composite exclusion rules for combining several rule sources."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Exclusion rules that hide a path when ANY constituent rule hides it.

    The command-line tool uses this to combine the glob pattern mapping with
    gitignore-style files given through ``--exclude-from``.

    Attributes:
        rules (List[BaseExclusionRules]): The constituent rules, evaluated in order.

    Example:
        >>> from explorertree.exclusion_rules.pattern_rules import GlobExclusionRules
        >>> logs = GlobExclusionRules({"*.log": True})
        >>> dist = GlobExclusionRules({"dist": True})
        >>> composite = CompositeExclusionRules([logs, dist])
        >>> composite.exclude("app/debug.log"), composite.exclude("dist"), composite.exclude("src")
        (True, True, False)
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Exclusion rules to combine.

        Raises:
            ValueError: If no rules are given.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str, is_dir: bool = False) -> bool:
        """Check if a path should be excluded by any constituent rule.

        Args:
            path: Path relative to the traversal root.
            is_dir: Passed through to every constituent rule.

        Returns:
            True as soon as one rule excludes the path.
        """
        return any(rule.exclude(path, is_dir=is_dir) for rule in self.rules)

