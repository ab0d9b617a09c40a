"""Directory tree rendering utilities.

This package renders a directory's structure as a box-drawing text tree, optionally
limited to folders, while honoring glob-style and gitignore-style exclusion rules.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("explorertree")
except PackageNotFoundError:
    __version__ = "unknown"
