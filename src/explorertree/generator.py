"""Tree generation for a whole traversal root, and the user-facing tree command."""

from pathlib import Path
from typing import Optional

from explorertree.exceptions import NoTargetFolderError, TreeGenerationError
from explorertree.exclusion_rules.base_rules import BaseExclusionRules
from explorertree.exclusion_rules.pattern_rules import GlobExclusionRules
from explorertree.file_system_tree.file_system_tree import FileSystemTree
from explorertree.host import TreeHost
from explorertree.types import PathType


def generate_tree(
    root_path: PathType,
    include_files: bool = True,
    exclusion_rules: Optional[BaseExclusionRules] = None,
) -> str:
    """Render the tree of a traversal root, headed by the root's own name.

    Args:
        root_path: The folder to render.
        include_files: If False only directories are shown.
        exclusion_rules: Rules hiding entries and their subtrees.

    Returns:
        The root's name on the first line followed by one line per visible entry.

    Raises:
        TreeGenerationError: If the root does not exist or is not a directory.
    """
    root = Path(root_path)
    if not root.exists():
        raise TreeGenerationError(str(root), "Root path does not exist")
    if not root.is_dir():
        raise TreeGenerationError(str(root), "Root path is not a directory")

    tree = FileSystemTree(root, include_files=include_files, exclusion_rules=exclusion_rules)
    return tree.get_tree_representation()


def resolve_target(host: TreeHost, target: Optional[PathType] = None) -> Path:
    """Pick the folder to render: the explicit target, else the host's first workspace folder.

    Raises:
        NoTargetFolderError: If neither is available.
    """
    if target is not None:
        return Path(target)
    folders = host.workspace_folders()
    if not folders:
        raise NoTargetFolderError()
    return Path(folders[0])


def run_generate_tree(
    host: TreeHost,
    target: Optional[PathType] = None,
    exclusion_rules: Optional[BaseExclusionRules] = None,
) -> Optional[str]:
    """Run the tree command from start to finish against a host.

    The folder is resolved, the user picks a mode, and the tree is handed to
    host.show_result. A missing folder and any failure during generation are
    reported through host.show_error; a dismissed mode prompt ends the command
    without a message. Nothing is shown unless the whole tree was generated.

    Args:
        host: The environment to prompt and report through.
        target: The folder to render. Defaults to the host's first workspace folder.
        exclusion_rules: Rules to apply. Defaults to the host's exclusion settings.

    Returns:
        The generated tree, or None if the command did not complete.
    """
    try:
        root = resolve_target(host, target)
    except NoTargetFolderError as e:
        host.show_error(str(e))
        return None

    try:
        mode = host.choose_mode()
        if mode is None:
            return None

        if exclusion_rules is None:
            exclusion_rules = GlobExclusionRules(host.exclude_patterns())

        tree = generate_tree(root, mode.include_files, exclusion_rules)
    except Exception as e:
        host.show_error(f"Error generating tree: {e}")
        return None

    host.show_result(tree)
    return tree
