"""Display file or file system status."""

from __future__ import annotations

import os
import stat
import sys
from datetime import datetime

from minicore.options import CommandError, UsageError, run_command, split_args

USAGE = "usage: stat [FILE]..."
DESCRIPTION = "Display file or file system status"

_TYPES = {
    stat.S_IFDIR: "d",
    stat.S_IFCHR: "c",
    stat.S_IFBLK: "b",
    stat.S_IFIFO: "p",
    stat.S_IFSOCK: "s",
    stat.S_IFLNK: "l",
}
_PERMISSIONS = (
    (0o400, "r"),
    (0o200, "w"),
    (0o100, "x"),
    (0o040, "r"),
    (0o020, "w"),
    (0o010, "x"),
    (0o004, "r"),
    (0o002, "w"),
    (0o001, "x"),
)


def format_mode(mode: int) -> str:
    """Render a mode with its file type letter, e.g. ``prw-r--r--``."""
    type_char = _TYPES.get(stat.S_IFMT(mode), "-")
    return type_char + "".join(ch if mode & mask else "-" for mask, ch in _PERMISSIONS)


def format_time(seconds: int) -> str:
    """Render seconds since the epoch in local time."""
    return datetime.fromtimestamp(int(seconds)).strftime("%a %b %d %H:%M:%S %Y")


def describe(path) -> str:
    """Return the status report for ``path``, following symbolic links."""
    st = os.stat(path)
    lines = [
        f"  File: {os.fspath(path)}",
        f"  Size: {st.st_size:>10}    Blocks: {st.st_blocks:>10}    "
        f"IO Block: {st.st_blksize:>10}",
        f"Device: {st.st_dev:>10}    Inode: {st.st_ino:>11}    Links: {st.st_nlink:>10}",
        f"Access: {format_mode(st.st_mode)}    Uid: {st.st_uid:>13}    "
        f"Gid: {st.st_gid:>13}",
        f"Access: {format_time(int(st.st_atime))}",
        f"Modify: {format_time(int(st.st_mtime))}",
        f"Change: {format_time(int(st.st_ctime))}",
        "",
    ]
    return "\n".join(lines) + "\n"


def _run(args: list[str]) -> None:
    options, files = split_args(args, "")
    for letter, _ in options:
        raise UsageError(f"invalid option -- '{letter}'")

    for path in files or ["."]:
        try:
            report = describe(path)
        except OSError as exc:
            raise CommandError(f"{path}: {exc.strerror or exc}") from None
        sys.stdout.write(report)


def main(argv=None) -> int:
    """Run the stat command."""
    return run_command("stat", USAGE, _run, argv)