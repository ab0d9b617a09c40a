"""Tree representation of a directory structure with configurable exclusion rules.

This module provides the FileSystemTree class, which builds an anytree
representation of a directory with the entry lister and renders it using
box-drawing connectors, and the build_tree function, which renders the subtree of
a single directory.
"""

import os
from pathlib import Path
from typing import Iterator, Optional, Set, Tuple

from explorertree.exclusion_rules.base_rules import BaseExclusionRules
from explorertree.file_system_tree.entry_lister import list_directory_entries
from explorertree.file_system_tree.file_system_node import FileSystemNode
from explorertree.types import PathType

MIDDLE_CONNECTOR = "├─ "
LAST_CONNECTOR = "└─ "
MIDDLE_CONTINUATION = "│  "
LAST_CONTINUATION = "   "


def root_display_name(root_path: PathType) -> str:
    """Return the name shown on the header line for a traversal root.

    Example:
        >>> root_display_name("/srv/proj")
        'proj'
        >>> root_display_name("/srv/proj/")
        'proj'
        >>> root_display_name("/")
        '/'
    """
    path = Path(root_path)
    if path.name:
        return path.name
    resolved = path.resolve()
    return resolved.name or str(resolved)


class FileSystemTree:
    """A tree representation of a directory structure with support for exclusion rules.

    The tree is built lazily on first access by listing each directory with
    list_directory_entries and recursing into subdirectories depth first. Entries
    hidden by the exclusion rules are absent together with their subtrees. When
    include_files is False only directories are kept.

    Unreadable directories become nodes without children; building the tree never
    fails because part of it cannot be read. Symbolic links are followed, and a
    directory that is already being expanded higher up the current branch is shown
    without expanding it again.

    Attributes:
        root_path (Path): The root directory.
        include_files (bool): Whether files are part of the tree.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for hiding entries.
        relative_to (Path): The traversal root that exclusion paths are computed
            against. Defaults to root_path.

    Example:
        >>> tree = FileSystemTree("proj")  # doctest: +SKIP
        >>> print(tree.get_tree_representation(), end="")  # doctest: +SKIP
        proj
        ├─ lib
        ├─ src
        └─ README.md
    """

    def __init__(
        self,
        root_path: PathType,
        include_files: bool = True,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        relative_to: Optional[PathType] = None,
    ) -> None:
        self.root_path = Path(root_path)
        self.include_files = include_files
        self.exclusion_rules = exclusion_rules
        self.relative_to = Path(relative_to) if relative_to is not None else self.root_path
        self._tree: Optional[FileSystemNode] = None

    def get_tree(self) -> FileSystemNode:
        """Get the root node of the tree, building it on first access."""
        if self._tree is None:
            self._tree = self._build_tree()
        return self._tree

    def _build_tree(self) -> FileSystemNode:
        root = FileSystemNode(root_display_name(self.root_path), is_dir=True)
        ancestors: Set[Tuple[int, int]] = set()
        self._add_children(root, self.root_path, ancestors)
        return root

    def _add_children(self, node: FileSystemNode, path: Path, ancestors: Set[Tuple[int, int]]) -> None:
        identity = _directory_identity(path)
        if identity is not None:
            if identity in ancestors:
                return
            ancestors.add(identity)

        for entry in list_directory_entries(path, self.relative_to, self.exclusion_rules):
            if not entry.is_dir and not self.include_files:
                continue
            child = FileSystemNode(entry.name, parent=node, is_dir=entry.is_dir)
            if entry.is_dir:
                self._add_children(child, path / entry.name, ancestors)

        if identity is not None:
            ancestors.discard(identity)

    def stream_subtree(self, prefix: str = "") -> Iterator[str]:
        """Generate the lines below the root, without line breaks.

        Args:
            prefix: Text placed in front of every line, used when this subtree is
                nested inside an enclosing rendering.

        Yields:
            One line per entry in depth-first pre-order.
        """
        yield from _render_children(self.get_tree(), prefix)

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the whole tree one line at a time, starting with the root's name.

        Yields:
            The root header line followed by every entry line, without line breaks.
        """
        yield self.get_tree().name
        yield from self.stream_subtree()

    def get_tree_representation(self) -> str:
        """Get the whole tree as text, every line terminated by a line break."""
        return "".join(f"{line}\n" for line in self.stream_tree_representation())

    def refresh(self) -> None:
        """Discard the cached tree so the next access reflects the filesystem again."""
        self._tree = None


def _directory_identity(path: Path) -> Optional[Tuple[int, int]]:
    try:
        stat_info = os.stat(path)
    except OSError:
        return None
    return (stat_info.st_dev, stat_info.st_ino)


def _render_children(node: FileSystemNode, prefix: str) -> Iterator[str]:
    children = node.children
    for i, child in enumerate(children):
        is_last = i == len(children) - 1
        connector = LAST_CONNECTOR if is_last else MIDDLE_CONNECTOR
        yield f"{prefix}{connector}{child.name}"
        if child.is_dir:
            yield from _render_children(child, prefix + (LAST_CONTINUATION if is_last else MIDDLE_CONTINUATION))


def build_tree(
    directory: PathType,
    prefix: str = "",
    include_files: bool = True,
    exclusion_rules: Optional[BaseExclusionRules] = None,
    root: Optional[PathType] = None,
) -> str:
    """Render the subtree below a directory, without the directory's own name.

    Every entry becomes one line made of the prefix, a connector and the entry's
    name. The last visible entry of each directory gets the ``└─`` connector and the
    others ``├─``. Subdirectories follow their own line, indented with ``│`` guides
    under middle entries and blanks under last entries.

    Args:
        directory: The directory whose contents are rendered.
        prefix: Text placed in front of every line.
        include_files: If False only directories are rendered.
        exclusion_rules: Rules for hiding entries and their subtrees.
        root: The traversal root for exclusion paths. Defaults to ``directory``.

    Returns:
        The rendered lines, each ending with a line break; an empty string if the
        directory has no visible entries or cannot be read.

    Example:
        >>> import tempfile
        >>> from pathlib import Path
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     (Path(tmp) / "src").mkdir()
        ...     (Path(tmp) / "src" / "main.py").touch()
        ...     (Path(tmp) / "README.md").touch()
        ...     print(build_tree(tmp), end="")
        ├─ src
        │  └─ main.py
        └─ README.md
    """
    tree = FileSystemTree(directory, include_files=include_files, exclusion_rules=exclusion_rules, relative_to=root)
    return "".join(f"{line}\n" for line in tree.stream_subtree(prefix))
