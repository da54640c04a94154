"""Calculate the CRC32 checksums of files."""

from __future__ import annotations

import sys
from typing import BinaryIO

from minicore.options import CommandError, UsageError, run_command, split_args

USAGE = "usage: cksum [FILE...]"
DESCRIPTION = "Calculate the CRC32 checksums of files"

_POLYNOMIAL = 0x04C11DB7
_MASK = 0xFFFFFFFF
_CHUNK = 4096


def crc32_table() -> list[int]:
    """Return the most-significant-bit-first CRC-32 lookup table."""
    table = []
    for index in range(256):
        crc = index << 24
        for _ in range(8):
            crc = ((crc << 1) ^ _POLYNOMIAL) if crc & 0x80000000 else crc << 1
            crc &= _MASK
        table.append(crc)
    return table


_TABLE = tuple(crc32_table())


def _feed(crc: int, byte: int) -> int:
    return ((crc << 8) & _MASK) ^ _TABLE[(crc >> 24) ^ byte]


def cksum(stream: BinaryIO) -> tuple[int, int]:
    """Return the POSIX checksum and byte count of a binary stream."""
    crc = 0
    length = 0
    for chunk in iter(lambda: stream.read(_CHUNK), b""):
        length += len(chunk)
        for byte in chunk:
            crc = _feed(crc, byte)

    remaining = length
    while remaining:
        crc = _feed(crc, remaining & 0xFF)
        remaining >>= 8

    return (~crc) & _MASK, length


def _run(args: list[str]) -> None:
    options, files = split_args(args, "")
    for letter, _ in options:
        raise UsageError(f"invalid option -- '{letter}'")

    if not files:
        crc, length = cksum(sys.stdin.buffer)
        print(f"{crc} {length}")
        return
    for path in files:
        try:
            with open(path, "rb") as handle:
                crc, length = cksum(handle)
        except OSError as exc:
            raise CommandError(f"{path}: {exc.strerror or exc}") from None
        print(f"{crc} {length} {path}")


def main(argv=None) -> int:
    """Run the cksum command."""
    return run_command("cksum", USAGE, _run, argv)