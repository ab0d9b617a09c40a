"""Tests for shared types."""

from explorertree.types import DirectoryEntry, TreeMode


def test_tree_mode_labels():
    assert [mode.value for mode in TreeMode] == ["All files and folders", "Folders only"]


def test_tree_mode_include_files():
    assert TreeMode.ALL_FILES_AND_FOLDERS.include_files is True
    assert TreeMode.FOLDERS_ONLY.include_files is False


def test_directory_entry_fields():
    entry = DirectoryEntry("src", True)
    assert entry.name == "src"
    assert entry.is_dir
    assert entry == DirectoryEntry(name="src", is_dir=True)
