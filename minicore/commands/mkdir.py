"""Create directories."""

from __future__ import annotations

import os
import re
from itertools import accumulate

from minicore.options import CommandError, UsageError, run_command

USAGE = "usage: mkdir [-p] [-m mode] dir..."
DESCRIPTION = "Create directories"

DEFAULT_MODE = 0o777
_OCTAL = re.compile(r"\+?[0-7]+")


def make_directory(path, mode: int = DEFAULT_MODE) -> None:
    """Create one directory and give it exactly ``mode``."""
    path = os.fspath(path)
    if os.path.lexists(path):
        raise CommandError(f'"{path}" already exists')
    os.mkdir(path)
    os.chmod(path, mode)


def make_directories(path, mode: int = DEFAULT_MODE) -> None:
    """Create a directory and any missing parents.

    It is an error for the final directory to exist already.
    """
    path = os.fspath(path)
    parts = [part for part in path.split("/") if part]
    if not parts:
        return
    root = "/" if path.startswith("/") else ""
    *parents, last = (root + prefix for prefix in accumulate(parts, lambda a, b: f"{a}/{b}"))
    for parent in parents:
        if not os.path.exists(parent):
            make_directory(parent, mode)
    if os.path.exists(last):
        raise CommandError(f'"{path}" already exists')
    make_directory(last, mode)


def _parse_mode(text: str) -> int:
    if not _OCTAL.fullmatch(text) or int(text, 8) > 0xFFFFFFFF:
        raise CommandError(f"invalid mode: {text}")
    return int(text, 8)


def _run(args: list[str]) -> None:
    if not args:
        raise UsageError()
    mode = DEFAULT_MODE
    recursive = False
    directories: list[str] = []
    remaining = iter(args)
    for arg in remaining:
        if arg == "-m":
            value = next(remaining, None)
            if value is None:
                raise CommandError("option requires an argument -m")
            mode = _parse_mode(value)
        elif arg == "-p":
            recursive = True
        else:
            directories.append(arg)

    create = make_directories if recursive else make_directory
    for directory in directories:
        try:
            create(directory, mode)
        except OSError as exc:
            raise CommandError(f'"{directory}": {exc.strerror or exc}') from None


def main(argv=None) -> int:
    """Run the mkdir command."""
    return run_command("mkdir", USAGE, _run, argv)