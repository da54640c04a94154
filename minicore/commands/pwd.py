"""Print name of current/working directory."""

from __future__ import annotations

import os

from minicore.options import UsageError, run_command, split_args

USAGE = "usage: pwd [-L|-P]"
DESCRIPTION = "Print name of current/working directory"


def current_directory(physical: bool) -> str:
    """Return the working directory, from ``PWD`` unless ``physical``."""
    if not physical:
        logical = os.environ.get("PWD")
        if logical is not None:
            return logical
    return os.getcwd()


def _run(args: list[str]) -> None:
    options, operands = split_args(args, "")
    physical = False
    for letter, _ in options:
        if letter == "L":
            physical = False
        elif letter == "P":
            physical = True
        else:
            raise UsageError(f"invalid option -- '{letter}'")
    if operands:
        raise UsageError()
    print(current_directory(physical))


def main(argv=None) -> int:
    """Run the pwd command."""
    return run_command("pwd", USAGE, _run, argv)