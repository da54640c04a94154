"""Estimate file space usage."""

from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from minicore.options import CommandError, UsageError, run_command, split_args

USAGE = "usage: du [-ahsH] [file ...]"
DESCRIPTION = "Estimate file space usage"

_UNITS = ("", "K", "M", "G", "T", "P")


@dataclass
class DuOptions:
    all: bool = False
    human_readable: bool = False
    summarize: bool = False
    dereference: bool = False


def format_size(size: int, human_readable: bool) -> str:
    """Render a count of 512-byte blocks, scaled to a unit when asked."""
    if not human_readable:
        return str(size)
    value = size * 512.0
    index = 0
    while value >= 1024.0 and index < len(_UNITS) - 1:
        value /= 1024.0
        index += 1
    if index == 0:
        return f"{int(value):>4}"
    if index == 1:
        return f"{value:>3.0f}K"
    return f"{value:>3.1f}{_UNITS[index]}"


def _is_current(path) -> bool:
    return Path(path) == Path(".")


def disk_usage(path, options: DuOptions, out: TextIO | None = None) -> int:
    """Return the blocks used by ``path`` and below, reporting as ``du`` does."""
    out = sys.stdout if out is None else out
    path = os.fspath(path)
    info = os.stat(path) if options.dereference else os.lstat(path)
    total = info.st_blocks

    if stat.S_ISDIR(info.st_mode):
        for name in sorted(os.listdir(path)):
            total += disk_usage(os.path.join(path, name), options, out)
        if not options.summarize or _is_current(path):
            out.write(f"{format_size(total, options.human_readable)}\t{path}\n")
    elif options.all:
        out.write(f"{format_size(total, options.human_readable)}\t{path}\n")

    return total


_FLAGS = {"a": "all", "h": "human_readable", "s": "summarize", "H": "dereference"}


def _run(args: list[str]) -> None:
    flags, paths = split_args(args, "")
    options = DuOptions()
    for letter, _ in flags:
        if letter not in _FLAGS:
            raise UsageError(f"invalid option -- '{letter}'")
        setattr(options, _FLAGS[letter], True)

    if not paths:
        paths = ["."]

    grand_total = 0
    for path in paths:
        try:
            size = disk_usage(path, options)
        except OSError as exc:
            raise CommandError(f"{path}: {exc.strerror or exc}") from None
        grand_total += size
        if options.summarize and not _is_current(path):
            print(f"{size}\t{path}")

    if options.summarize and len(paths) > 1:
        print(f"{grand_total}\ttotal")


def main(argv=None) -> int:
    """Run the du command."""
    return run_command("du", USAGE, _run, argv)