"""Run programs and summarize system resource usage."""

from __future__ import annotations

import resource
import subprocess
import time
from collections.abc import Sequence

from minicore.options import UsageError, run_command

USAGE = "usage: time COMMAND [ARGS]"
DESCRIPTION = "Run programs and summarize system resource usage"

_U32_MAX = 0xFFFFFFFF


def run_timed(args: Sequence[str]) -> tuple[int, float, float, float]:
    """Run a command and return its exit status with user, system and real seconds.

    User and system times are those of all waited-for children.
    """
    start = time.monotonic()
    completed = subprocess.run(list(args), check=False)
    real = time.monotonic() - start
    usage = resource.getrusage(resource.RUSAGE_CHILDREN)
    return completed.returncode, usage.ru_utime, usage.ru_stime, real


def _cpu_percent(busy: float, real: float) -> int:
    if real > 0:
        return max(0, min(int(busy / real * 100.0), _U32_MAX))
    return _U32_MAX if busy > 0 else 0


def format_report(program: str, user: float, system: float, real: float) -> str:
    """Return the summary line for a timed command."""
    cpu = _cpu_percent(user + system, real)
    return (
        f"{program}  {user:.2f}s user {system:.2f}s system "
        f"{cpu}% cpu {real:.3f} total"
    )


def _run(args: list[str]) -> int | None:
    if not args:
        raise UsageError("missing command")
    code, user, system, real = run_timed(args)
    print(format_report(args[0], user, system, real))
    return code if code > 0 else None


def main(argv=None) -> int:
    """Run the time command."""
    return run_command("time", USAGE, _run, argv)