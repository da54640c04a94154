"""Delay for a specified amount of time."""

from __future__ import annotations

import re
import time

from minicore.options import CommandError, UsageError, run_command, split_args

USAGE = "usage: sleep NUMBER[msMhd]"
DESCRIPTION = "Delay for a specified amount of time"

_NUMBER = re.compile(r"[0-9.]*")
_MULTIPLIERS = {"": 1.0, "s": 1.0, "m": 60.0, "h": 3600.0, "d": 86400.0}


def parse_duration(text: str) -> float:
    """Return the seconds that ``NUMBER[smhd]`` stands for.

    Only the character right after the number is read as the unit; a
    missing unit means seconds.
    """
    match = _NUMBER.match(text)
    number = match.group()
    suffix = text[match.end() : match.end() + 1]
    multiplier = _MULTIPLIERS.get(suffix)
    if multiplier is None:
        raise ValueError(suffix)
    try:
        value = float(number)
    except ValueError:
        raise ValueError("invalid float literal") from None
    return value * multiplier


def _run(args: list[str]) -> None:
    options, operands = split_args(args, "")
    for letter, _ in options:
        raise UsageError(f"invalid option -- '{letter}'")

    total = 0.0
    for operand in operands:
        try:
            total += parse_duration(operand)
        except ValueError as exc:
            raise CommandError(f"invalid time interval '{exc}'") from None

    if total == 0:
        raise UsageError()
    time.sleep(total)


def main(argv=None) -> int:
    """Run the sleep command."""
    return run_command("sleep", USAGE, _run, argv)