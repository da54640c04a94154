"""Move (rename) files."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from minicore.options import CommandError, UsageError, run_command

USAGE = "usage: mv [-f | -i | -n] [-v] source... destination"
DESCRIPTION = "Move (rename) files"


@dataclass
class MoveOptions:
    force: bool = False
    interactive: bool = False
    no_clobber: bool = False
    verbose: bool = False


def move_path(source, destination, options: MoveOptions) -> None:
    """Rename ``source`` to ``destination``."""
    source = os.fspath(source)
    destination = os.fspath(destination)

    if options.interactive and os.path.exists(destination):
        print(f"overwrite '{destination}'? ", end="", flush=True)
        if sys.stdin.readline().strip().lower() != "y":
            return
    if options.no_clobber and os.path.exists(destination):
        return
    if options.force:
        try:
            os.remove(destination)
        except OSError:
            pass

    os.rename(source, destination)

    if options.verbose:
        print(f"renamed '{source}' -> '{destination}'")


_FLAGS = {
    "-f": "force",
    "-i": "interactive",
    "-n": "no_clobber",
    "-v": "verbose",
}


def _run(args: list[str]) -> None:
    if len(args) < 2:
        raise UsageError()
    options = MoveOptions()
    paths: list[str] = []
    for arg in args:
        if arg in _FLAGS:
            setattr(options, _FLAGS[arg], True)
        else:
            paths.append(arg)

    if len(paths) < 2:
        raise UsageError()
    *sources, destination = paths
    into_directory = os.path.isdir(destination)

    if len(sources) > 1 and not into_directory:
        raise CommandError(f"target '{destination}' is not a directory")

    for source in sources:
        target = (
            os.path.join(destination, Path(source).name) if into_directory else destination
        )
        try:
            move_path(source, target, options)
        except OSError as exc:
            raise CommandError(
                f"cannot move '{source}' to '{target}': {exc.strerror or exc}"
            ) from None


def main(argv=None) -> int:
    """Run the mv command."""
    return run_command("mv", USAGE, _run, argv)