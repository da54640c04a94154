"""Send a signal to a process."""

from __future__ import annotations

import os
import re
import signal as signals
from collections.abc import Iterable

from minicore.options import CommandError, UsageError, run_command, split_args

USAGE = "usage: kill [-s SIGNAL] PID..."
DESCRIPTION = "Send a signal to a process"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _parse_int(text: str) -> int | None:
    if _INTEGER.fullmatch(text):
        value = int(text)
        if _INT_MIN <= value <= _INT_MAX:
            return value
    return None


def send_signals(pids: Iterable[int], signal: int) -> None:
    """Send ``signal`` to every process in ``pids``, stopping at a failure."""
    for pid in pids:
        try:
            os.kill(pid, signal)
        except OSError as exc:
            raise CommandError(
                f"failed to send signal to process {pid}: {exc.strerror or exc}"
            ) from None


def _run(args: list[str]) -> None:
    options, operands = split_args(args, "s")
    signal = int(signals.SIGTERM)
    for letter, value in options:
        if letter != "s":
            raise UsageError(f"invalid option -- '{letter}'")
        parsed = _parse_int(value or "")
        if parsed is None:
            raise UsageError("invalid signal")
        signal = parsed

    pids = []
    for operand in operands:
        pid = _parse_int(operand)
        if pid is None:
            raise UsageError("invalid PID")
        pids.append(pid)
    if not pids:
        raise UsageError("PID argument required")

    send_signals(pids, signal)


def main(argv=None) -> int:
    """Run the kill command."""
    return run_command("kill", USAGE, _run, argv)