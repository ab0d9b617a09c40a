"""Unit tests for the argument parser module in the explorertree CLI."""

import argparse
import json
from pathlib import Path

import pytest

from explorertree.cli.argparser import create_exclusion_action, create_parser, validate_args
from explorertree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from explorertree.exclusion_rules.pattern_rules import GlobExclusionRules


@pytest.fixture
def rules():
    return GlobExclusionRules(), GitIgnoreExclusionRules()


@pytest.fixture
def parser(rules):
    return create_parser(*rules)


def test_create_exclusion_action(rules):
    ExclusionAction = create_exclusion_action(*rules)
    assert issubclass(ExclusionAction, argparse.Action)

    action = ExclusionAction(option_strings=["-x", "--exclude"], dest="patterns", help="test help")
    assert action.option_strings == ["-x", "--exclude"]
    assert action.dest == "patterns"


def test_defaults(parser):
    args = parser.parse_args([])
    assert args.directory is None
    assert args.workspace is None
    assert args.mode is None
    assert args.output is None
    assert args.patterns is None


def test_directory_and_mode(parser):
    args = parser.parse_args(["-m", "folders", "/srv/proj"])
    assert args.directory == Path("/srv/proj")
    assert args.mode == "folders"


def test_workspace_is_repeatable(parser):
    args = parser.parse_args(["-w", "/srv/a", "--workspace", "/srv/b"])
    assert args.workspace == [Path("/srv/a"), Path("/srv/b")]


def test_patterns_in_command_line_order(rules, parser):
    glob_rules, _ = rules
    args = parser.parse_args(["-x", "*.log", "-x", "dist", "--no-exclude", "*.log"])
    assert glob_rules.patterns == {"*.log": False, "dist": True}
    assert args.patterns == ["*.log", "dist", "*.log"]


def test_settings_do_not_override_command_line(rules, parser, tmp_path):
    glob_rules, _ = rules
    settings = tmp_path / "settings.json"
    settings.write_text(json.dumps({"files.exclude": {"*.log": True, "dist": True, "out": False}}))

    parser.parse_args(["-X", "dist", "-s", str(settings), "-x", "out"])
    assert glob_rules.patterns == {"dist": False, "*.log": True, "out": True}


def test_exclude_from_loads_gitignore(rules, parser, tmp_path):
    _, git_rules = rules
    gitignore = tmp_path / ".gitignore"
    gitignore.write_text("build/\n")
    args = parser.parse_args(["-e", str(gitignore)])
    assert args.exclude_from == [gitignore]
    assert git_rules.exclude("build", is_dir=True)


def test_exclude_from_missing_file(parser, tmp_path):
    with pytest.raises(FileNotFoundError):
        parser.parse_args(["-e", str(tmp_path / "missing")])


def test_invalid_mode(parser):
    with pytest.raises(SystemExit):
        parser.parse_args(["-m", "everything"])


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("explorertree ")


def test_validate_args_output_directory(parser, tmp_path):
    args = parser.parse_args(["-o", str(tmp_path)])
    with pytest.raises(ValueError, match="--output must name a file"):
        validate_args(args)


def test_validate_args_ok(parser, tmp_path):
    validate_args(parser.parse_args(["-o", str(tmp_path / "tree.txt")]))
