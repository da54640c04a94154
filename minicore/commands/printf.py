"""Format and print data."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from minicore.options import UsageError, run_command

USAGE = "usage: printf FORMAT [ARGUMENT]..."
DESCRIPTION = "Format and print data"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _as_integer(text: str) -> str:
    if _INTEGER.fullmatch(text):
        value = int(text)
        if _INT_MIN <= value <= _INT_MAX:
            return str(value)
    return "0"


def parse_format(fmt: str, args: Sequence[str]) -> str:
    """Expand ``%s``, ``%d`` and ``%%`` in ``fmt`` using ``args`` in order.

    Any other ``%`` is copied as is; a directive with no argument left
    produces nothing; a ``%d`` argument that is not a 32-bit integer gives 0.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    pending: str | None = None
    while True:
        if pending is not None:
            char, pending = pending, None
        else:
            char = next(chars, None)
            if char is None:
                break
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec == "%":
            pieces.append("%")
        elif spec == "s":
            arg = next(remaining, None)
            if arg is not None:
                pieces.append(arg)
        elif spec == "d":
            arg = next(remaining, None)
            if arg is not None:
                pieces.append(_as_integer(arg))
        else:
            pieces.append("%")
            pending = spec
    return "".join(pieces)


def _run(args: list[str]) -> None:
    if not args:
        raise UsageError()
    fmt, *rest = args
    sys.stdout.write(parse_format(fmt, rest))
    sys.stdout.flush()


def main(argv=None) -> int:
    """Run the printf command."""
    return run_command("printf", USAGE, _run, argv)