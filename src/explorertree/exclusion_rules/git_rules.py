"""Exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from explorertree.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules read from .gitignore-style files.

    Patterns are matched with the pathspec library the same way Git matches them,
    so the full gitignore grammar is available: character classes, ``**``,
    negation with ``!`` and directory-only patterns ending in ``/``.

    Paths are expected relative to the traversal root with ``/`` separators. A
    directory-only pattern such as ``build/`` can only match the directory entry
    itself when the caller passes ``is_dir=True``.

    Attributes:
        spec (PathSpec): Compiled pattern matcher.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("build/")
        >>> rules.add_rule("*.py[co]")
        >>> rules.exclude("build"), rules.exclude("build", is_dir=True)
        (False, True)
        >>> rules.exclude("pkg/module.pyc")
        True
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize the rules, optionally loading patterns from files.

        Args:
            rules_files: Path(s) to gitignore-style file(s).

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.spec = PathSpec.from_lines(GitWildMatchPattern, [])

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str, is_dir: bool = False) -> bool:
        """Check a root-relative path against the loaded patterns.

        Args:
            path: The path relative to the traversal root.
            is_dir: Whether the path names a directory; directories are matched with a
                trailing slash so that directory-only patterns apply.

        Returns:
            True if the last matching pattern excludes the path.
        """
        if is_dir and not path.endswith("/"):
            path = path + "/"
        return bool(self.spec.match_file(path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns found in one or more gitignore-style files.

        Later patterns take precedence over earlier ones, which matters for negations.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                lines = f.read().splitlines()

            self._extend(PathSpec.from_lines(GitWildMatchPattern, lines).patterns)

    def add_rule(self, rule: str) -> None:
        """Add a single gitignore pattern, e.g. ``"*.pyc"`` or ``"!keep.pyc"``."""
        self._extend([GitWildMatchPattern(rule)])

    def _extend(self, patterns: Sequence[GitWildMatchPattern]) -> None:
        # PathSpec may hold its patterns in a tuple
        if not hasattr(self.spec.patterns, "extend"):
            self.spec.patterns = list(self.spec.patterns)
        self.spec.patterns.extend(patterns)
