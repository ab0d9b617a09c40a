"""Integration tests for the command-line interface.

These run the installed module in a subprocess and cover:
- Mode selection from options and from standard input
- Exclusion patterns, settings files and gitignore files
- Exit codes for missing folders and broken pipes
"""

import json
import subprocess
import sys

import pytest

# Slow tests; only run when --run-cli-tests is given
pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


@pytest.fixture
def temp_project(tmp_path):
    base_dir = tmp_path / "project"
    (base_dir / "src" / "utils").mkdir(parents=True)
    (base_dir / "docs").mkdir()
    (base_dir / "node_modules" / "left-pad").mkdir(parents=True)
    (base_dir / "src" / "main.py").write_text("def main():\n    pass\n")
    (base_dir / "src" / "utils" / "helpers.py").write_text("def helper():\n    pass\n")
    (base_dir / "docs" / "README.md").write_text("# Test Project\n")
    (base_dir / "node_modules" / "left-pad" / "index.js").write_text("module.exports = {}\n")
    (base_dir / "server.log").write_text("DEBUG: test log\n")
    (base_dir / "package.json").write_text('{"name": "test"}\n')
    return base_dir


def run_cli(*args, input_text=""):
    return subprocess.run(
        [sys.executable, "-m", "explorertree.cli.main", *map(str, args)],
        input=input_text,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_all_files(temp_project):
    result = run_cli("-m", "all", "-x", "node_modules", temp_project)
    assert result.returncode == 0
    assert result.stdout == (
        "project\n"
        "├─ docs\n"
        "│  └─ README.md\n"
        "├─ src\n"
        "│  ├─ utils\n"
        "│  │  └─ helpers.py\n"
        "│  └─ main.py\n"
        "├─ package.json\n"
        "└─ server.log\n"
    )


def test_folders_only_from_prompt(temp_project):
    result = run_cli(temp_project, input_text="2\n")
    assert result.returncode == 0
    assert result.stdout == "project\n├─ docs\n├─ node_modules\n│  └─ left-pad\n└─ src\n   └─ utils\n"
    assert "Select tree generation mode:" in result.stderr


def test_cancelled_prompt(temp_project):
    result = run_cli(temp_project, input_text="")
    assert result.returncode == 0
    assert result.stdout == ""
    assert "Error" not in result.stderr


def test_settings_and_gitignore(temp_project, tmp_path):
    settings = tmp_path / "settings.json"
    settings.write_text(json.dumps({"files": {"exclude": {"*.log": True, "docs": False}}}))
    gitignore = tmp_path / ".gitignore"
    gitignore.write_text("node_modules/\nutils/\n")

    result = run_cli("-m", "all", "-s", settings, "-e", gitignore, temp_project)
    assert result.returncode == 0
    assert "server.log" not in result.stdout
    assert "node_modules" not in result.stdout
    assert "utils" not in result.stdout
    assert "├─ docs\n" in result.stdout


def test_output_file(temp_project, tmp_path):
    output = tmp_path / "tree.md"
    result = run_cli("-m", "folders", "-x", "node_modules", "-o", output, temp_project)
    assert result.returncode == 0
    assert result.stdout == ""
    assert output.read_text(encoding="utf-8") == "project\n├─ docs\n└─ src\n   └─ utils\n"


def test_missing_directory(tmp_path):
    result = run_cli("-m", "all", tmp_path / "missing")
    assert result.returncode == 1
    assert "Error: Error generating tree: Root path does not exist" in result.stderr
    assert result.stdout == ""


def test_version():
    result = run_cli("--version")
    assert result.returncode == 0
    assert result.stdout.startswith("explorertree ")
