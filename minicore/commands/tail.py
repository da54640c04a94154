"""Output or follow the last part of files."""

from __future__ import annotations

import re
import sys
import time
from collections import deque
from typing import TextIO

from minicore.options import CommandError, UsageError, run_command, split_args

USAGE = "usage: tail [-f] [-n lines] [FILE]"
DESCRIPTION = "Output or follow the last part of files"

_COUNT = re.compile(r"\+?[0-9]+")
_POLL_SECONDS = 0.1


def _strip(line: str) -> str:
    if line.endswith("\n"):
        return line[:-1].removesuffix("\r")
    return line


def tail_lines(stream: TextIO, num_lines: int) -> list[str]:
    """Return the last ``num_lines`` lines of a text stream, without newlines."""
    return list(deque((_strip(line) for line in stream), maxlen=num_lines))


def follow(stream: TextIO, num_lines: int, out: TextIO) -> None:
    """Write the last lines of ``stream``, then every line added to it, forever."""
    for line in tail_lines(stream, num_lines):
        out.write(line + "\n")
    out.flush()
    while True:
        line = stream.readline()
        if line:
            out.write(_strip(line) + "\n")
            out.flush()
        else:
            time.sleep(_POLL_SECONDS)


def _process(stream: TextIO, num_lines: int, live: bool) -> None:
    if live:
        follow(stream, num_lines, sys.stdout)
    else:
        for line in tail_lines(stream, num_lines):
            print(line)


def _run(args: list[str]) -> None:
    options, operands = split_args(args, "n")
    num_lines = 10
    live = False
    for letter, value in options:
        if letter == "n":
            value = value or ""
            if not _COUNT.fullmatch(value):
                raise UsageError(f"invalid number of lines: '{value}'")
            num_lines = int(value)
        elif letter == "f":
            live = True
        else:
            raise UsageError(f"invalid option -- '{letter}'")

    if len(operands) > 1:
        raise UsageError("only one input file may be specified")

    try:
        if operands:
            with open(operands[0], encoding="utf-8", newline="") as handle:
                _process(handle, num_lines, live)
        else:
            _process(sys.stdin, num_lines, live)
    except UnicodeDecodeError:
        raise CommandError("stream did not contain valid UTF-8") from None


def main(argv=None) -> int:
    """Run the tail command."""
    return run_command("tail", USAGE, _run, argv)