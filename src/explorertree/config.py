"""Reading exclusion settings from editor-style JSON settings files."""

import json
from pathlib import Path
from typing import Any, Dict, Mapping

from explorertree.types import PathType

SETTINGS_KEY = "files.exclude"


def exclude_patterns_from_settings(settings: Mapping[str, Any]) -> Dict[str, bool]:
    """Extract the pattern-to-enabled-flag mapping from parsed settings.

    Both the flat form (``{"files.exclude": {...}}``) and the nested form
    (``{"files": {"exclude": {...}}}``) are accepted. A pattern is enabled when its
    value is ``true`` or an object (a conditional exclusion); any other value
    disables it. Settings without exclusions yield an empty mapping.

    Raises:
        ValueError: If the exclusion setting is present but is not an object.

    Example:
        >>> exclude_patterns_from_settings({"files.exclude": {"*.log": True, "dist": False}})
        {'*.log': True, 'dist': False}
        >>> exclude_patterns_from_settings({"files": {"exclude": {"*.tmp": {"when": "$(basename).ts"}}}})
        {'*.tmp': True}
        >>> exclude_patterns_from_settings({})
        {}
    """
    patterns = settings.get(SETTINGS_KEY)
    if patterns is None:
        files = settings.get("files")
        if isinstance(files, Mapping):
            patterns = files.get("exclude")
    if patterns is None:
        return {}
    if not isinstance(patterns, Mapping):
        raise ValueError(f"'{SETTINGS_KEY}' must be an object mapping patterns to true/false")
    return {str(pattern): value is True or isinstance(value, Mapping) for pattern, value in patterns.items()}


def load_exclude_settings(settings_file: PathType) -> Dict[str, bool]:
    """Read a JSON settings file and return its exclusion patterns.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or its exclusion setting is malformed.
    """
    path = Path(settings_file)
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            settings = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid settings file {path}: {e}")

    if not isinstance(settings, Mapping):
        raise ValueError(f"Invalid settings file {path}: expected a JSON object")
    return exclude_patterns_from_settings(settings)
