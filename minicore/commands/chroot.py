"""Run command or interactive shell with special root directory."""

from __future__ import annotations

import os
import sys

from minicore.options import CommandError, UsageError, run_command

USAGE = "usage: chroot [-g group] [-u user] newroot [command]"
DESCRIPTION = "Run command or interactive shell with special root directory"


def current_shell() -> str:
    """Return the user's shell, falling back to ``/bin/sh``."""
    return os.environ.get("SHELL", "/bin/sh")


def _run(args: list[str]) -> int | None:
    if not args:
        raise UsageError("missing operand")
    new_root, *command = args

    try:
        os.chroot(new_root)
    except OSError as exc:
        raise CommandError(
            f"failed to change root to {new_root}: {exc.strerror or exc}"
        ) from None
    try:
        os.chdir("/")
    except OSError as exc:
        raise CommandError(
            f"failed to change directory to /: {exc.strerror or exc}"
        ) from None

    if command:
        program = command[0]
        try:
            os.execvp(program, command)
        except OSError as exc:
            raise CommandError(
                f"failed to execute {program}: {exc.strerror or exc}"
            ) from None
        return None

    shell = current_shell()
    try:
        os.execvp(shell, [shell])
    except OSError as exc:
        print(f"chroot: failed to execute shell: {exc.strerror or exc}", file=sys.stderr)
    return None


def main(argv=None) -> int:
    """Run the chroot command."""
    return run_command("chroot", USAGE, _run, argv)