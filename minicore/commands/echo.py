"""Display a line of text."""

from __future__ import annotations

import sys

from minicore.options import UsageError, run_command, split_args

USAGE = "usage: echo [-n] [STRING]..."
DESCRIPTION = "Display a line of text"


def _run(args: list[str]) -> None:
    options, strings = split_args(args, "")
    no_newline = False
    for letter, _ in options:
        if letter != "n":
            raise UsageError(f"invalid option -- '{letter}'")
        no_newline = True
    sys.stdout.write(" ".join(strings))
    if not no_newline:
        sys.stdout.write("\n")


def main(argv=None) -> int:
    """Run the echo command."""
    return run_command("echo", USAGE, _run, argv)