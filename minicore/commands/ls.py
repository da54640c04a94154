"""List directory contents."""

from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass
from datetime import datetime

from minicore.options import CommandError, UsageError, run_command, split_args

USAGE = "usage: ls [-alhrt] [file ...]"
DESCRIPTION = "List directory contents"

_UNITS = ("B", "K", "M", "G", "T", "P")
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


@dataclass
class LsOptions:
    all: bool = False
    long: bool = False
    human_readable: bool = False
    reverse: bool = False
    sort_by_time: bool = False


@dataclass
class FileInfo:
    """A listed path and its status."""

    path: str
    stat: os.stat_result

    @property
    def name(self) -> str:
        """The last component of the path, or the path itself for ``.``/``..``."""
        base = _file_name(self.path)
        return self.path if base is None else base


def _file_name(path: str) -> str | None:
    base = os.path.basename(path.rstrip("/"))
    if base in ("", ".", ".."):
        return None
    return base


def _parent(path: str) -> str | None:
    stripped = path.rstrip("/") or "/"
    if stripped == "/":
        return None
    return os.path.dirname(stripped)


def format_mode(mode: int) -> str:
    """Render a mode as ``ls -l`` does, e.g. ``drwxr-xr-x``."""
    kind = stat.S_IFMT(mode)
    type_char = "d" if kind == stat.S_IFDIR else "l" if kind == stat.S_IFLNK else "-"
    return type_char + "".join(ch if mode & mask else "-" for mask, ch in _PERMISSIONS)


def format_time(mtime: float) -> str:
    """Render a modification time in local time."""
    seconds = max(0, int(mtime))
    return datetime.fromtimestamp(seconds).strftime("%Y %b %r %H:%M")


def format_size(size: int, human_readable: bool) -> str:
    """Render a size in bytes, scaled to a unit when asked."""
    if not human_readable:
        return str(size)
    value = float(size)
    index = 0
    while value >= 1024.0 and index < len(_UNITS) - 1:
        value /= 1024.0
        index += 1
    if index == 0:
        return f"{int(value):>4}"
    if index == 1:
        return f"{value:>3.0f}K"
    return f"{value:>3.1f}{_UNITS[index]}"


def _name_key(info: FileInfo) -> tuple[int, bytes]:
    base = _file_name(info.path)
    return (0, b"") if base is None else (1, os.fsencode(base))


def list_directory(path, options: LsOptions) -> list[FileInfo]:
    """Return the entries of a directory, filtered and sorted."""
    path = os.fspath(path)
    entries = []
    with os.scandir(path) as listing:
        for entry in listing:
            if not options.all and entry.name.startswith("."):
                continue
            entries.append(FileInfo(entry.path, entry.stat(follow_symlinks=False)))

    if options.all:
        specials = []
        try:
            specials.append(FileInfo(".", os.stat(path)))
        except OSError:
            pass
        parent = _parent(path)
        try:
            specials.append(FileInfo("..", os.stat(path if parent is None else parent)))
        except OSError:
            pass
        entries = specials + entries

    if options.sort_by_time:
        entries.sort(key=lambda info: info.stat.st_mtime_ns, reverse=not options.reverse)
    else:
        entries.sort(key=_name_key, reverse=options.reverse)
    return entries


def display_entries(entries: list[FileInfo], options: LsOptions, columns: int = 80) -> str:
    """Return the listing text, long or in columns ``columns`` wide."""
    if options.long:
        lines = [f"total {sum(info.stat.st_blocks for info in entries)}"]
        for info in entries:
            st = info.stat
            lines.append(
                f"{format_mode(st.st_mode)} {st.st_nlink:>3} {st.st_uid:>5} "
                f"{st.st_gid:>5} {format_size(st.st_size, options.human_readable):>6} "
                f"{format_time(st.st_mtime)} {info.name}"
            )
        return "".join(line + "\n" for line in lines)

    if not entries:
        return ""
    names = [info.name for info in entries]
    column_width = max(len(name.encode("utf-8", "surrogateescape")) for name in names) + 3
    ncols = min((columns + column_width) // column_width, len(names))
    nrows = -(-len(names) // ncols)
    grid: list[list[str]] = [[] for _ in range(nrows)]
    for index, name in enumerate(names):
        grid[index % nrows].append(name)
    return "".join(
        "".join(f"{name:<{column_width}}" for name in row) + "\n" for row in grid
    )


def _terminal_width() -> int:
    try:
        return int(os.environ.get("COLUMNS", "80"))
    except ValueError:
        return 80


_FLAGS = {
    "a": "all",
    "l": "long",
    "h": "human_readable",
    "r": "reverse",
    "t": "sort_by_time",
}


def _run(args: list[str]) -> None:
    flags, paths = split_args(args, "")
    options = LsOptions()
    for letter, _ in flags:
        if letter not in _FLAGS:
            raise UsageError(f"invalid option -- '{letter}'")
        setattr(options, _FLAGS[letter], True)

    if not paths:
        paths = ["."]
    several = len(paths) > 1
    width = _terminal_width()

    for path in paths:
        if several:
            print(f"{path}:")
        try:
            entries = list_directory(path, options)
            sys.stdout.write(display_entries(entries, options, width))
        except OSError as exc:
            raise CommandError(f"{path}: {exc.strerror or exc}") from None
        if several:
            print()


def main(argv=None) -> int:
    """Run the ls command."""
    return run_command("ls", USAGE, _run, argv)