"""Report file system disk space usage."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from minicore.options import CommandError, UsageError, run_command, split_args

USAGE = "usage: df [-k]"
DESCRIPTION = "Report file system disk space usage"

MOUNT_TABLE = "/etc/mtab"

_ESCAPE = re.compile(r"\\([0-7]{3})")


@dataclass(frozen=True)
class FsUsage:
    """Block and inode counts of one mounted file system."""

    block_size: int
    blocks: int
    blocks_free: int
    blocks_available: int
    files: int
    files_free: int

    @classmethod
    def from_statvfs(cls, result: os.statvfs_result) -> FsUsage:
        return cls(
            block_size=result.f_bsize,
            blocks=result.f_blocks,
            blocks_free=result.f_bfree,
            blocks_available=result.f_bavail,
            files=result.f_files,
            files_free=result.f_ffree,
        )


def format_size(size: int, use_512_blocks: bool) -> str:
    """Render a count of 512-byte blocks, halved into kilobytes when asked."""
    if use_512_blocks:
        return str(size * 512 // 1024)
    return str(size)


def usage_row(
    filesystem: str, mount_point: str, stats: FsUsage, use_512_blocks: bool
) -> str:
    """Return the report line for one file system."""
    block_size = 512 if use_512_blocks else stats.block_size
    total = stats.blocks * block_size // 512
    available = stats.blocks_available * block_size // 512
    used = total - stats.blocks_free * block_size // 512
    capacity = int(used / total * 100.0) if total > 0 else 0

    iused = stats.files - stats.files_free
    ifree = stats.files_free
    iused_percent = int(iused / stats.files * 100.0) if stats.files > 0 else 0

    return (
        f"{filesystem:<15} "
        f"{format_size(total, use_512_blocks):>10} "
        f"{format_size(used, use_512_blocks):>10} "
        f"{format_size(available, use_512_blocks):>10} "
        f"{capacity:>3}% {iused:>7} {ifree:>9} {iused_percent:>5}%  {mount_point}"
    )


def _unescape(field: str) -> str:
    return _ESCAPE.sub(lambda match: chr(int(match.group(1), 8)), field)


def read_mounts(path: str = MOUNT_TABLE) -> list[tuple[str, str]]:
    """Return ``(filesystem, mount point)`` pairs from a mount table file."""
    mounts = []
    with open(path, encoding="utf-8", errors="surrogateescape") as handle:
        for line in handle:
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            fields = stripped.split()
            if len(fields) < 2:
                continue
            mounts.append((_unescape(fields[0]), _unescape(fields[1])))
    return mounts


_HEADER = (
    f"{'Filesystem':<15} {'512-blocks':>10} {'Used':>10} {'Available':>10} "
    f"{'Capacity':>3} {'iused':>7} {'ifree':>9} {'%iused':>5}  {'Mounted on'}"
)


def _run(args: list[str]) -> None:
    options, _ = split_args(args, "")
    use_512_blocks = True
    for letter, _value in options:
        if letter != "k":
            raise UsageError(f"invalid option -- '{letter}'")
        use_512_blocks = False

    print(_HEADER)
    try:
        mounts = read_mounts(MOUNT_TABLE)
    except OSError:
        raise CommandError(f"Failed to open {MOUNT_TABLE}") from None

    for filesystem, mount_point in mounts:
        try:
            stats = FsUsage.from_statvfs(os.statvfs(mount_point))
        except OSError as exc:
            raise CommandError(
                f"Failed to print filesystem information: {exc.strerror or exc}"
            ) from None
        print(usage_row(filesystem, mount_point, stats, use_512_blocks))


def main(argv=None) -> int:
    """Run the df command."""
    return run_command("df", USAGE, _run, argv)