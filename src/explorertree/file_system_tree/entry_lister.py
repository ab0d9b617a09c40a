"""Listing of a single directory's visible children in tree order."""

import os
import unicodedata
from typing import List, Optional, Tuple

from explorertree.exclusion_rules.base_rules import BaseExclusionRules
from explorertree.types import DirectoryEntry, PathType


def relative_entry_path(directory: PathType, name: str, root: PathType) -> str:
    """Return the path of ``directory/name`` relative to ``root`` with ``/`` separators.

    Only the platform's own separator is rewritten, so a backslash that is part of
    a POSIX file name survives.

    Example:
        >>> relative_entry_path("/srv/proj/src", "main.py", "/srv/proj")
        'src/main.py'
        >>> relative_entry_path("/srv/proj", "README.md", "/srv/proj")
        'README.md'
    """
    relative = os.path.relpath(os.path.join(os.fspath(directory), name), os.fspath(root))
    if os.sep != "/":
        relative = relative.replace(os.sep, "/")
    return relative


def _strip_accents(text: str) -> str:
    return "".join(char for char in unicodedata.normalize("NFD", text) if not unicodedata.combining(char))


def collation_key(name: str) -> Tuple[str, str, str]:
    """Sort key ordering names the way a root-locale string comparison does.

    Names compare first by their letters with case and accents ignored, then
    unaccented before accented, then lowercase before uppercase.

    Example:
        >>> sorted(["fig", "Éclair", "apple", "eclair"], key=collation_key)
        ['apple', 'eclair', 'Éclair', 'fig']
        >>> sorted(["Alpha", "alpha"], key=collation_key)
        ['alpha', 'Alpha']
    """
    folded = name.casefold()
    return (_strip_accents(folded), unicodedata.normalize("NFD", folded), name.swapcase())


def sort_key(entry: DirectoryEntry) -> Tuple[bool, Tuple[str, str, str]]:
    """Directories first, then names in collation order."""
    return (not entry.is_dir, collation_key(entry.name))


def list_directory_entries(
    directory: PathType,
    root: Optional[PathType] = None,
    exclusion_rules: Optional[BaseExclusionRules] = None,
) -> List[DirectoryEntry]:
    """List the immediate children of a directory that are not excluded.

    Each child's path relative to ``root`` is checked against the exclusion rules
    before its type is resolved. Types are resolved through symbolic links, so a
    link to a directory is listed as a directory. A child whose type cannot be
    resolved, such as a dangling link, is listed as a file.

    If the directory itself cannot be read the result is empty; callers never see
    the error.

    Args:
        directory: The directory to list.
        root: The traversal root that relative paths are computed against. Defaults
            to ``directory``.
        exclusion_rules: Rules deciding which children are hidden. None hides nothing.

    Returns:
        Directories followed by files, each group ordered by name.

    Example:
        >>> import tempfile
        >>> from pathlib import Path
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     (Path(tmp) / "src").mkdir()
        ...     (Path(tmp) / "README.md").touch()
        ...     (Path(tmp) / "lib").mkdir()
        ...     [entry.name for entry in list_directory_entries(tmp)]
        ['lib', 'src', 'README.md']
    """
    if root is None:
        root = directory

    try:
        with os.scandir(directory) as scanner:
            children = list(scanner)
    except OSError:
        return []

    entries: List[DirectoryEntry] = []
    for child in children:
        relative_path = relative_entry_path(directory, child.name, root)
        if exclusion_rules and exclusion_rules.exclude(relative_path):
            continue

        try:
            is_dir = child.is_dir(follow_symlinks=True)
        except OSError:
            is_dir = False

        if is_dir and exclusion_rules and exclusion_rules.exclude(relative_path, is_dir=True):
            continue

        entries.append(DirectoryEntry(child.name, is_dir))

    return sorted(entries, key=sort_key)
