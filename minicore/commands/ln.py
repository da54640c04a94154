"""Make links between files."""

from __future__ import annotations

import os

from minicore.options import UsageError, run_command, split_args

USAGE = "usage: ln [-s] [-f] TARGET LINK_NAME"
DESCRIPTION = "Make links between files"


def make_link(target, link_name, symbolic: bool, force: bool) -> None:
    """Create a hard or symbolic link named ``link_name`` to ``target``."""
    if force:
        try:
            os.remove(link_name)
        except OSError:
            pass
    if symbolic:
        os.symlink(target, link_name)
    else:
        os.link(target, link_name)


def _run(args: list[str]) -> None:
    flags, operands = split_args(args, "")
    symbolic = False
    force = False
    for letter, _ in flags:
        if letter == "s":
            symbolic = True
        elif letter == "f":
            force = True
        else:
            raise UsageError(f"invalid option -- '{letter}'")

    if len(operands) > 2:
        raise UsageError("too many arguments")
    if not operands:
        raise UsageError("missing file operand")
    if len(operands) == 1:
        raise UsageError(f"missing destination file operand after '{operands[0]}'")

    target, link_name = operands
    make_link(target, link_name, symbolic, force)


def main(argv=None) -> int:
    """Run the ln command."""
    return run_command("ln", USAGE, _run, argv)