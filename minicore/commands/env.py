"""Set the environment for command invocation."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Iterable, Mapping

from minicore.options import CommandError, UsageError, run_command

USAGE = "usage: env [-i] [NAME=VALUE]... [COMMAND [ARG]...]"
DESCRIPTION = "Set the environment for command invocation"


def build_environment(
    args: Iterable[str], base: Mapping[str, str]
) -> tuple[dict[str, str], list[str]]:
    """Return the environment and the command line that ``args`` describe.

    Leading ``-i`` options drop ``base``; ``NAME=VALUE`` arguments then set
    variables; everything from the first other argument on is the command.
    """
    ignore_env = False
    assignments: list[tuple[str, str]] = []
    command: list[str] = []
    remaining = iter(args)
    for arg in remaining:
        if not assignments and arg.startswith("-") and len(arg) > 1:
            for letter in arg[1:]:
                if letter != "i":
                    raise UsageError(f"invalid option -- '{letter}'")
            ignore_env = True
            continue
        name, sep, value = arg.partition("=")
        if sep and name:
            assignments.append((name, value))
            continue
        command = [arg, *remaining]
        break

    env = {} if ignore_env else dict(base)
    env.update(assignments)
    return env, command


def _run(args: list[str]) -> int | None:
    env, command = build_environment(args, os.environ)
    if not command:
        for key, value in env.items():
            print(f"{key}={value}")
        return None
    try:
        completed = subprocess.run(command, env=env, check=False)
    except OSError as exc:
        raise CommandError(f"{command[0]}: {exc.strerror or exc}") from None
    return completed.returncode if completed.returncode >= 0 else 1


def main(argv=None) -> int:
    """Run the env command."""
    return run_command("env", USAGE, _run, argv)