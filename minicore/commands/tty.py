"""Print the file name of the terminal."""

from __future__ import annotations

import os

from minicore.options import UsageError, run_command, split_args

USAGE = "usage: tty [-s]"
DESCRIPTION = "Print the file name of the terminal"

_STDIN = 0


def tty_name() -> str | None:
    """Return the terminal name of standard input, or ``None`` if it is not one."""
    if not os.isatty(_STDIN):
        return None
    try:
        return os.ttyname(_STDIN)
    except OSError:
        return None


def _run(args: list[str]) -> int:
    options, operands = split_args(args, "")
    silent = False
    for letter, _ in options:
        if letter != "s":
            raise UsageError(f"invalid option -- '{letter}'")
        silent = True
    if operands:
        raise UsageError()

    name = tty_name()
    if name is None:
        if not silent:
            print("not a tty")
        return 1
    if not silent:
        print(name)
    return 0


def main(argv=None) -> int:
    """Run the tty command."""
    return run_command("tty", USAGE, _run, argv)