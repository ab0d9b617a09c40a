"""Directory listing and tree rendering with configurable exclusion rules.

This package lists directories in tree order, builds an anytree representation of
a directory structure, and renders it with box-drawing connectors.
"""
