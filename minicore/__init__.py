"""Everyday Unix command-line utilities behind a single entry point."""

__version__ = "0.1.0"