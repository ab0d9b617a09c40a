"""Command-line interface for explorertree."""
