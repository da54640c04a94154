"""Print resolved symbolic links or canonical file names."""

from __future__ import annotations

import os

from minicore.options import CommandError, UsageError, run_command, split_args

USAGE = "usage: readlink [-f] FILE"
DESCRIPTION = "Print resolved symbolic links or canonical file names"


def resolve(path, follow: bool) -> str:
    """Return the target of a symbolic link, or the canonical path if ``follow``."""
    if follow:
        return os.path.realpath(path, strict=True)
    return os.readlink(path)


def _run(args: list[str]) -> None:
    options, operands = split_args(args, "")
    follow = False
    for letter, _ in options:
        if letter != "f":
            raise UsageError(f"invalid option -- '{letter}'")
        follow = True

    if len(operands) > 1:
        raise UsageError("too many arguments")
    if not operands:
        raise UsageError("missing file operand")

    path = operands[0]
    try:
        print(resolve(path, follow))
    except OSError as exc:
        raise CommandError(f"{path}: {exc.strerror or exc}") from None


def main(argv=None) -> int:
    """Run the readlink command."""
    return run_command("readlink", USAGE, _run, argv)