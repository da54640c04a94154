"""Checksum and count the blocks in a file."""

from __future__ import annotations

import sys
from typing import BinaryIO

from minicore.options import CommandError, UsageError, run_command, split_args

USAGE = "usage: sum [FILE]..."
DESCRIPTION = "Checksum and count the blocks in a file"

_MASK = 0xFFFFFFFF
_CHUNK = 4096


def calculate_sum(stream: BinaryIO) -> tuple[int, int]:
    """Return the byte sum modulo 65535 and the byte count of a stream."""
    total = 0
    size = 0
    for chunk in iter(lambda: stream.read(_CHUNK), b""):
        total = (total + sum(chunk)) & _MASK
        size = (size + len(chunk)) & _MASK
    return total % 65535, size


def _run(args: list[str]) -> None:
    options, files = split_args(args, "")
    for letter, _ in options:
        raise UsageError(f"invalid option -- '{letter}'")

    if not files:
        total, size = calculate_sum(sys.stdin.buffer)
        print(f"{total} {size}")
        return
    for path in files:
        try:
            with open(path, "rb") as handle:
                total, size = calculate_sum(handle)
        except OSError as exc:
            raise CommandError(f"{path}: {exc.strerror or exc}") from None
        print(f"{total} {size} {path}")


def main(argv=None) -> int:
    """Run the sum command."""
    return run_command("sum", USAGE, _run, argv)