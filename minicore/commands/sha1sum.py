"""Compute and check SHA1 message digest."""

from __future__ import annotations

import struct
import sys
from typing import BinaryIO

from minicore.options import CommandError, UsageError, run_command, split_args

USAGE = "usage: sha1sum [file...]"
DESCRIPTION = "Compute and check SHA1 message digest"

_MASK = 0xFFFFFFFF
_INITIAL = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)
_CHUNK = 8192


def _rotl(value: int, count: int) -> int:
    return ((value << count) | (value >> (32 - count))) & _MASK


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    words = list(struct.unpack(">16I", block))
    for i in range(16, 80):
        words.append(_rotl(words[i - 3] ^ words[i - 8] ^ words[i - 14] ^ words[i - 16], 1))

    a, b, c, d, e = state
    for i, word in enumerate(words):
        if i < 20:
            f, k = (b & c) | (~b & d), 0x5A827999
        elif i < 40:
            f, k = b ^ c ^ d, 0x6ED9EBA1
        elif i < 60:
            f, k = (b & c) | (b & d) | (c & d), 0x8F1BBCDC
        else:
            f, k = b ^ c ^ d, 0xCA62C1D6
        temp = (_rotl(a, 5) + f + e + k + word) & _MASK
        a, b, c, d, e = temp, a, _rotl(b, 30), c, d

    return tuple((x + y) & _MASK for x, y in zip(state, (a, b, c, d, e)))


class Sha1:
    """Incremental SHA-1 digest."""

    def __init__(self, data: bytes = b"") -> None:
        self._state = _INITIAL
        self._pending = b""
        self._length = 0
        self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the digest."""
        self._length += len(data)
        buffer = self._pending + bytes(data)
        whole = len(buffer) - len(buffer) % 64
        for start in range(0, whole, 64):
            self._state = _compress(self._state, buffer[start : start + 64])
        self._pending = buffer[whole:]

    def digest(self) -> bytes:
        """Return the 20-byte digest of everything fed so far."""
        pad_zeros = (55 - self._length % 64) % 64
        tail = (
            self._pending
            + b"\x80"
            + b"\x00" * pad_zeros
            + struct.pack(">Q", (self._length * 8) & 0xFFFFFFFFFFFFFFFF)
        )
        state = self._state
        for start in range(0, len(tail), 64):
            state = _compress(state, tail[start : start + 64])
        return struct.pack(">5I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hex."""
        return self.digest().hex()


def sha1_hex(stream: BinaryIO) -> str:
    """Return the hex SHA-1 digest of a binary stream."""
    hasher = Sha1()
    for chunk in iter(lambda: stream.read(_CHUNK), b""):
        hasher.update(chunk)
    return hasher.hexdigest()


def _run(args: list[str]) -> None:
    options, files = split_args(args, "")
    for letter, _ in options:
        raise UsageError(f"invalid option -- '{letter}'")

    if not files:
        print(sha1_hex(sys.stdin.buffer))
        return
    for path in files:
        try:
            with open(path, "rb") as handle:
                digest = sha1_hex(handle)
        except OSError as exc:
            raise CommandError(f"{path}: {exc.strerror or exc}") from None
        print(f"{digest}  {path}")


def main(argv=None) -> int:
    """Run the sha1sum command."""
    return run_command("sha1sum", USAGE, _run, argv)