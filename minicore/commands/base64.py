"""Encode or decode using Base64 representation."""

from __future__ import annotations

import binascii
import os
import sys

from minicore.options import UsageError, run_command, split_args

USAGE = "usage: base64 <string> [-d] [-i] [-o output_file] [file]"
DESCRIPTION = "Encode or decode using Base64 representation"

_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_VALUES = {byte: value for value, byte in enumerate(_ALPHABET)}
_PAD = ord("=")


def encode(data: bytes) -> bytes:
    """Encode bytes as Base64 with ``=`` padding."""
    return binascii.b2a_base64(bytes(data), newline=False)


def decode(data: bytes) -> bytes:
    """Decode Base64 in groups of four characters.

    Characters outside the alphabet still take a position in the group but
    contribute no bits; ``=`` ends the group; a trailing incomplete group is
    ignored.
    """
    out = bytearray()
    for group in zip(*[iter(data)] * 4):
        num = 0
        valid = 0
        for byte in group:
            num <<= 6
            if byte == _PAD:
                break
            value = _VALUES.get(byte)
            if value is None:
                continue
            num |= value
            valid += 1
        out.append((num >> 16) & 0xFF)
        if valid > 2:
            out.append((num >> 8) & 0xFF)
        if valid > 3:
            out.append(num & 0xFF)
    return bytes(out)


def _run(args: list[str]) -> None:
    options, operands = split_args(args, "io")
    decoding = False
    input_path: str | None = None
    output_path: str | None = None
    for letter, value in options:
        if letter == "d":
            decoding = True
        elif letter == "i":
            input_path = value
        elif letter == "o":
            output_path = value
        else:
            raise UsageError(f"invalid option -- '{letter}'")

    if len(operands) > 1:
        raise UsageError("too many arguments")
    if input_path is not None and operands:
        raise UsageError("cannot specify both input file and string")

    if input_path is not None:
        with open(input_path, "rb") as handle:
            data = handle.read()
    elif operands:
        data = os.fsencode(operands[0])
    else:
        data = sys.stdin.buffer.read()

    result = decode(data) if decoding else encode(data)

    if output_path is not None:
        with open(output_path, "wb") as handle:
            handle.write(result)
    else:
        sys.stdout.flush()
        sys.stdout.buffer.write(result + b"\n")
        sys.stdout.buffer.flush()


def main(argv=None) -> int:
    """Run the base64 command."""
    return run_command("base64", USAGE, _run, argv)