"""Copy files and directories."""

from __future__ import annotations

import os
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path

from minicore.options import CommandError, UsageError, run_command

USAGE = "usage: cp [-R [-H | -L | -P]] [-fi | -n] [-apvX] source_file target_file"
DESCRIPTION = "Copy files and directories"


@dataclass
class CopyOptions:
    recursive: bool = False
    force: bool = False
    interactive: bool = False
    no_clobber: bool = False
    preserve_attributes: bool = False
    verbose: bool = False


def _confirm(destination: str) -> bool:
    print(f"overwrite '{destination}'? ", end="", flush=True)
    return sys.stdin.readline().strip().lower() == "y"


def copy_path(source, destination, options: CopyOptions) -> None:
    """Copy ``source`` to ``destination``, descending into directories."""
    source = os.fspath(source)
    destination = os.fspath(destination)

    if options.interactive and os.path.exists(destination):
        if not _confirm(destination):
            return
    if options.no_clobber and os.path.exists(destination):
        return
    if options.force:
        try:
            os.remove(destination)
        except OSError:
            pass

    if os.path.isdir(source):
        if not options.recursive:
            raise CommandError(f"-r not specified; omitting directory '{source}'")
        os.makedirs(destination, exist_ok=True)
        for name in sorted(os.listdir(source)):
            copy_path(
                os.path.join(source, name), os.path.join(destination, name), options
            )
    else:
        shutil.copyfile(source, destination)
        shutil.copymode(source, destination)

    if options.preserve_attributes:
        os.chmod(destination, os.stat(source).st_mode)

    if options.verbose:
        print(f"'{source}' -> '{destination}'")


_FLAGS = {
    "-R": "recursive",
    "-r": "recursive",
    "-f": "force",
    "-i": "interactive",
    "-n": "no_clobber",
    "-p": "preserve_attributes",
    "-v": "verbose",
}


def _run(args: list[str]) -> None:
    if len(args) < 2:
        raise UsageError()
    options = CopyOptions()
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
            copy_path(source, target, options)
        except OSError as exc:
            raise CommandError(
                f"cannot copy '{source}' to '{target}': {exc.strerror or exc}"
            ) from None


def main(argv=None) -> int:
    """Run the cp command."""
    return run_command("cp", USAGE, _run, argv)