"""Remove files or directories."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass

from minicore.options import CommandError, UsageError, run_command

USAGE = "usage: rm [-rf] file..."
DESCRIPTION = "Remove files or directories"


@dataclass
class RemoveOptions:
    recursive: bool = False
    force: bool = False


def remove_path(path, options: RemoveOptions) -> None:
    """Remove a file, or a whole directory tree when recursive."""
    path = os.fspath(path)
    if not options.force and not os.path.exists(path):
        raise CommandError(f"{path}: No such file or directory")

    if os.path.isdir(path):
        if not options.recursive:
            raise CommandError(f"{path}: is a directory")
        if os.path.islink(path):
            os.remove(path)
        else:
            shutil.rmtree(path)
    else:
        os.remove(path)


_FLAGS = {
    "-r": (True, False),
    "-R": (True, False),
    "-f": (False, True),
    "-rf": (True, True),
    "-fR": (True, True),
    "-Rf": (True, True),
    "-fr": (True, True),
}


def _run(args: list[str]) -> None:
    if not args:
        raise UsageError()
    options = RemoveOptions()
    files: list[str] = []
    for arg in args:
        if arg in _FLAGS:
            recursive, force = _FLAGS[arg]
            options.recursive |= recursive
            options.force |= force
        else:
            files.append(arg)

    if not files:
        raise CommandError("missing operand")

    for path in files:
        try:
            remove_path(path, options)
        except CommandError:
            if not options.force:
                raise
        except OSError as exc:
            if not options.force:
                raise CommandError(f"{path}: {exc.strerror or exc}") from None


def main(argv=None) -> int:
    """Run the rm command."""
    return run_command("rm", USAGE, _run, argv)