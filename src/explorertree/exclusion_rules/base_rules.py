from abc import ABC, abstractmethod
from typing import Sequence, Union

from explorertree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Concrete rules decide whether an entry, identified by its path relative to the
    traversal root, is hidden from the tree. Hiding a directory hides its whole
    subtree because the tree builder never descends into it.

    Loading rules from files and adding single rules are optional capabilities; rule
    types that do not support them keep the default implementations, which raise
    NotImplementedError.

    Example:
        >>> from explorertree.exclusion_rules.pattern_rules import GlobExclusionRules
        >>> rules = GlobExclusionRules({"*.log": True})
        >>> rules.exclude("logs/debug.log")
        True
        >>> rules.exclude("logs/debug.txt")
        False
    """

    @abstractmethod
    def exclude(self, path: str, is_dir: bool = False) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): The entry's path relative to the traversal root, using forward
                slashes as separators.
            is_dir (bool): True when the caller already knows the entry is a directory.
                Rules that do not distinguish directories ignore it.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add. The format depends on the implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
