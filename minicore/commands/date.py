"""Print or set the system date and time."""

from __future__ import annotations

from datetime import datetime, timezone

from minicore.options import UsageError, run_command, split_args

USAGE = "usage: date -u [+FORMAT]"
DESCRIPTION = "Print or set the system date and time"

DEFAULT_FORMAT = "%a %b %r %H:%M:%S %Z %Y"


def format_now(utc: bool, fmt: str = DEFAULT_FORMAT) -> str:
    """Format the current time, in UTC or in the local time zone."""
    now = datetime.now(timezone.utc) if utc else datetime.now().astimezone()
    return now.strftime(fmt)


def _run(args: list[str]) -> None:
    options, operands = split_args(args, "")
    utc = False
    for letter, _ in options:
        if letter != "u":
            raise UsageError(f"invalid option -- '{letter}'")
        utc = True

    fmt = DEFAULT_FORMAT
    for operand in operands:
        if not operand.startswith("+"):
            raise UsageError(f"invalid date '{operand}'")
        fmt = operand[1:]

    print(format_now(utc, fmt))


def main(argv=None) -> int:
    """Run the date command."""
    return run_command("date", USAGE, _run, argv)