from enum import Enum
from os import PathLike
from typing import NamedTuple, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class DirectoryEntry(NamedTuple):
    """One immediate child of a listed directory.

    Attributes:
        name: The base name of the entry.
        is_dir: True if the entry resolves (following symlinks) to a directory.
    """

    name: str
    is_dir: bool


class TreeMode(str, Enum):
    """The two ways a tree can be generated.

    The values double as the labels offered to the user when asking for a mode.

    Attributes:
        ALL_FILES_AND_FOLDERS: Show directories and files.
        FOLDERS_ONLY: Show directories only.
    """

    ALL_FILES_AND_FOLDERS = "All files and folders"
    FOLDERS_ONLY = "Folders only"

    @property
    def include_files(self) -> bool:
        return self is TreeMode.ALL_FILES_AND_FOLDERS
