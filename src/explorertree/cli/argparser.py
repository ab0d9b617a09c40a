"""Command-line argument parsing for explorertree.

This module defines the command-line interface for explorertree, handling argument
parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Set, Type, Union

from explorertree import __version__
from explorertree.config import load_exclude_settings
from explorertree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from explorertree.exclusion_rules.pattern_rules import GlobExclusionRules
from explorertree.types import TreeMode

MODES = {
    "all": TreeMode.ALL_FILES_AND_FOLDERS,
    "folders": TreeMode.FOLDERS_ONLY,
}


def create_exclusion_action(
    glob_rules: GlobExclusionRules, git_rules: GitIgnoreExclusionRules
) -> Type[argparse.Action]:
    """Create a custom action class that updates the exclusion rules during parsing.

    Pattern options are applied in the order they appear on the command line, so a
    later ``--no-exclude`` overrides an earlier ``--exclude`` of the same pattern.
    Settings file entries never override patterns given on the command line.

    Args:
        glob_rules: The glob pattern mapping to update.
        git_rules: The gitignore-style rules to load exclusion files into.

    Returns:
        A custom action class for use with argparse.
    """

    # Patterns given explicitly on the command line
    passed: Set[str] = set()

    class ExclusionRulesAction(argparse.Action):
        """Action to update exclusion rules as arguments are processed."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-x", "--exclude"):
                glob_rules.add_rule(str(values))
                passed.add(str(values))
            elif option_string in ("-X", "--no-exclude"):
                glob_rules.disable_rule(str(values))
                passed.add(str(values))
            elif option_string in ("-e", "--exclude-from"):
                git_rules.load_rules(Path(str(values)))
            else:  # -s/--settings
                for pattern, enabled in load_exclude_settings(Path(str(values))).items():
                    if pattern not in passed:
                        glob_rules.patterns[pattern] = enabled

            items = getattr(namespace, self.dest, None) or []
            setattr(namespace, self.dest, items + [values])

    return ExclusionRulesAction


def create_parser(glob_rules: GlobExclusionRules, git_rules: GitIgnoreExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        glob_rules: The glob pattern mapping to fill from -x, -X and -s.
        git_rules: The gitignore-style rules to fill from -e.

    Returns:
        An ArgumentParser instance configured with explorertree's options.
    """
    description = """
    explorertree: render a directory as a text tree.

    Directories are listed before files and every level is sorted by name. Entries
    matching an enabled exclusion pattern are hidden together with everything below
    them. Patterns support '*' (any characters, '/' included) and '?' (one character)
    and are matched against the path relative to the directory being rendered as well
    as against the bare entry name.
    """

    epilog = """
    Examples:
      # Render the current directory, asking which mode to use
      explorertree

      # Render a project with files, hiding logs and build output
      explorertree -m all -x "*.log" -x "build/output" /path/to/project

      # Folders only, written to a file
      explorertree -m folders -o tree.txt /path/to/project

      # Use the exclusions of an editor settings file, but show dist anyway
      explorertree -s .vscode/settings.json -X dist /path/to/project

      # Add gitignore-style exclusions
      explorertree -e .gitignore /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="explorertree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"explorertree {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(glob_rules, git_rules)

    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        help="The directory to render. Defaults to the first workspace folder.",
    )
    parser.add_argument(
        "-w",
        "--workspace",
        type=Path,
        metavar="DIR",
        action="append",
        help="Workspace folder used when no directory is given (default: the current directory).",
    )
    parser.add_argument(
        "-m",
        "--mode",
        choices=sorted(MODES),
        help="Tree mode: 'all' files and folders, or 'folders' only. Prompts when omitted.",
    )
    parser.add_argument(
        "-x",
        "--exclude",
        type=str,
        metavar="PATTERN",
        dest="patterns",
        action=ExclusionAction,
        help="Enable an exclusion glob pattern (can be specified multiple times).",
    )
    parser.add_argument(
        "-X",
        "--no-exclude",
        type=str,
        metavar="PATTERN",
        dest="patterns",
        action=ExclusionAction,
        help="Disable an exclusion glob pattern, e.g. one enabled by a settings file.",
    )
    parser.add_argument(
        "-s",
        "--settings",
        type=Path,
        metavar="FILE",
        dest="settings",
        action=ExclusionAction,
        help="JSON settings file whose 'files.exclude' object supplies exclusion patterns.",
    )
    parser.add_argument(
        "-e",
        "--exclude-from",
        type=Path,
        metavar="FILE",
        dest="exclude_from",
        action=ExclusionAction,
        help="Gitignore-style exclusion file (can be specified multiple times).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments beyond what argparse checks.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.output is not None and args.output.is_dir():
        raise ValueError(f"--output must name a file, not a directory: {args.output}")
