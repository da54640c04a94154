"""Print the environment."""

from __future__ import annotations

import os

from minicore.options import run_command

USAGE = "usage: printenv [NAME]..."
DESCRIPTION = "Print the environment"


def _run(args: list[str]) -> None:
    if not args:
        for key, value in os.environ.items():
            print(f"{key}={value}")
        return
    for name in args:
        value = os.environ.get(name)
        if value is not None:
            print(value)


def main(argv=None) -> int:
    """Run the printenv command."""
    return run_command("printenv", USAGE, _run, argv)