"""Command-line interface for explorertree.

This module runs the tree command from a terminal. The terminal plays the part of
the host: the target folder comes from the command line or the workspace folders,
the mode from -m/--mode or an interactive prompt, the exclusion patterns from
options and settings files, and the finished tree is written to stdout or a file.

Exit Codes:
    0: Tree written, or mode selection dismissed
    1: No target folder, generation failure, or invalid configuration
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Render a project with files
    $ explorertree -m all /path/to/project

    # Folders only, hiding build output
    $ explorertree -m folders -x "build" /path/to/project
"""

import sys
from pathlib import Path
from typing import Union

from explorertree.cli.argparser import MODES, create_parser, validate_args
from explorertree.cli.safe_writer import SafeWriter
from explorertree.cli.signal_handler import setup_signal_handling, signal_handler
from explorertree.exclusion_rules.base_rules import BaseExclusionRules
from explorertree.exclusion_rules.composite_rules import CompositeExclusionRules
from explorertree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from explorertree.exclusion_rules.pattern_rules import GlobExclusionRules
from explorertree.generator import run_generate_tree
from explorertree.host import ConsoleHost


def combine_rules(glob_rules: GlobExclusionRules, git_rules: GitIgnoreExclusionRules) -> BaseExclusionRules:
    """Combine the glob patterns with gitignore-style rules, when any were loaded."""
    if not git_rules.spec.patterns:
        return glob_rules
    return CompositeExclusionRules([glob_rules, git_rules])


def main() -> None:
    """Main entry point for the explorertree command-line interface.

    Exit codes:
        0: Successful completion or dismissed mode prompt
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        glob_rules = GlobExclusionRules()
        git_rules = GitIgnoreExclusionRules()

        parser = create_parser(glob_rules, git_rules)
        args = parser.parse_args()
        validate_args(args)

        output_file: Union[int, Path] = args.output if args.output else sys.stdout.fileno()

        def write_output(text: str) -> None:
            with SafeWriter(output_file) as safe_writer:
                safe_writer.write_tree(text)

        host = ConsoleHost(
            write_output,
            mode=MODES[args.mode] if args.mode else None,
            workspace_folders=args.workspace or [Path.cwd()],
            exclude_patterns=glob_rules.patterns,
        )

        try:
            run_generate_tree(host, args.directory, combine_rules(glob_rules, git_rules))
        except BrokenPipeError:
            pass

        if host.error_shown:
            sys.exit(1)

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    status = signal_handler.exit_status()
    if status is not None:
        sys.exit(status)


if __name__ == "__main__":
    main()
