"""Tests for reading exclusion settings files."""

import json

import pytest

from explorertree.config import exclude_patterns_from_settings, load_exclude_settings


def test_flat_settings_key():
    settings = {"files.exclude": {"*.log": True, "dist": False}, "editor.tabSize": 4}
    assert exclude_patterns_from_settings(settings) == {"*.log": True, "dist": False}


def test_nested_settings_key():
    settings = {"files": {"exclude": {"node_modules": True}}}
    assert exclude_patterns_from_settings(settings) == {"node_modules": True}


def test_conditional_value_is_enabled():
    settings = {"files.exclude": {"*.js": {"when": "$(basename).ts"}, "*.map": "yes"}}
    assert exclude_patterns_from_settings(settings) == {"*.js": True, "*.map": False}


def test_missing_settings_is_empty():
    assert exclude_patterns_from_settings({}) == {}
    assert exclude_patterns_from_settings({"files": "nope"}) == {}


def test_malformed_exclusions_raise():
    with pytest.raises(ValueError, match="files.exclude"):
        exclude_patterns_from_settings({"files.exclude": ["*.log"]})


def test_load_exclude_settings(tmp_path):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps({"files.exclude": {"**/.git": True, "build": False}}))
    assert load_exclude_settings(settings_file) == {"**/.git": True, "build": False}


def test_load_exclude_settings_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_exclude_settings(tmp_path / "missing.json")


def test_load_exclude_settings_invalid_json(tmp_path):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text("{not json")
    with pytest.raises(ValueError, match="Invalid settings file"):
        load_exclude_settings(settings_file)


def test_load_exclude_settings_not_an_object(tmp_path):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text("[1, 2]")
    with pytest.raises(ValueError, match="expected a JSON object"):
        load_exclude_settings(settings_file)
