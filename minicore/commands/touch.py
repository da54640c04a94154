"""Change file timestamps."""

from __future__ import annotations

import os
import re
import time

from minicore.options import CommandError, UsageError, run_command

USAGE = "usage: touch [-c] [-t time] files..."
DESCRIPTION = "Change file timestamps"

_SECONDS = re.compile(r"\+?[0-9]+")
_U64_MAX = 2**64 - 1


def _to_ns(seconds: float) -> int:
    if isinstance(seconds, int):
        return seconds * 1_000_000_000
    return round(seconds * 1e9)


def touch(path, no_create: bool = False, mtime: float | None = None) -> None:
    """Set the modification time of ``path``, creating it unless ``no_create``.

    ``mtime`` is in seconds since the epoch; ``None`` means now. The access
    time is left as it is and existing content is kept.
    """
    path = os.fspath(path)
    if no_create:
        try:
            os.stat(path)
        except OSError:
            raise CommandError(
                f'cannot touch "{path}": No such file or directory'
            ) from None

    flags = os.O_WRONLY | (0 if no_create else os.O_CREAT)
    os.close(os.open(path, flags, 0o666))

    mtime_ns = time.time_ns() if mtime is None else _to_ns(mtime)
    atime_ns = os.stat(path).st_atime_ns
    os.utime(path, ns=(atime_ns, mtime_ns))


def _parse_seconds(text: str) -> int:
    if not _SECONDS.fullmatch(text) or int(text) > _U64_MAX:
        raise CommandError(f'invalid time: "{text}"')
    return int(text)


def _run(args: list[str]) -> None:
    if not args:
        raise UsageError()
    no_create = False
    mtime: float = time.time()
    files: list[str] = []
    remaining = iter(args)
    for arg in remaining:
        if arg == "-c":
            no_create = True
        elif arg == "-t":
            value = next(remaining, None)
            if value is None:
                raise CommandError("option requires an argument -t")
            mtime = _parse_seconds(value)
        else:
            files.append(arg)

    if not files:
        raise UsageError()

    for path in files:
        try:
            touch(path, no_create, mtime)
        except OSError as exc:
            raise CommandError(f'"{path}": {exc.strerror or exc}') from None


def main(argv=None) -> int:
    """Run the touch command."""
    return run_command("touch", USAGE, _run, argv)