"""The multi-call entry point that dispatches to the commands."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable
from importlib.metadata import PackageNotFoundError, version

from minicore.commands import base64 as base64_cmd
from minicore.commands import cat as cat_cmd
from minicore.commands import chmod as chmod_cmd
from minicore.commands import chown as chown_cmd
from minicore.commands import chroot as chroot_cmd
from minicore.commands import cksum as cksum_cmd
from minicore.commands import cp as cp_cmd
from minicore.commands import date as date_cmd
from minicore.commands import df as df_cmd
from minicore.commands import du as du_cmd
from minicore.commands import echo as echo_cmd
from minicore.commands import env as env_cmd
from minicore.commands import hostid as hostid_cmd
from minicore.commands import http as http_cmd
from minicore.commands import id as id_cmd
from minicore.commands import kill as kill_cmd
from minicore.commands import ln as ln_cmd
from minicore.commands import ls as ls_cmd
from minicore.commands import mk as mk_cmd
from minicore.commands import mkdir as mkdir_cmd
from minicore.commands import mv as mv_cmd
from minicore.commands import printenv as printenv_cmd
from minicore.commands import printf as printf_cmd
from minicore.commands import pwd as pwd_cmd
from minicore.commands import readlink as readlink_cmd
from minicore.commands import rm as rm_cmd
from minicore.commands import sha1sum as sha1sum_cmd
from minicore.commands import sleep as sleep_cmd
from minicore.commands import stat as stat_cmd
from minicore.commands import sum as sum_cmd
from minicore.commands import tail as tail_cmd
from minicore.commands import time as time_cmd
from minicore.commands import touch as touch_cmd
from minicore.commands import tty as tty_cmd

Runner = Callable[[list[str]], int]

_OPTIONS_USAGE = """\
Options:
  -h, --help     Print help
  -v, --version  Print version"""


def _curl_main(argv: list[str]) -> int:
    from minicore.commands import curl

    return curl.main(argv)


_COMMAND_TABLE: list[tuple[str, str, Runner]] = [
    ("cat", "Concatenate and print files", cat_cmd.main),
    ("cp", "Copy files and directories", cp_cmd.main),
    ("du", "Estimate file space usage", du_cmd.main),
    ("echo", "Display a line of text", echo_cmd.main),
    ("env", "Set the environment for command invocation", env_cmd.main),
    ("ln", "Make links between files", ln_cmd.main),
    ("ls", "List directory contents", ls_cmd.main),
    ("mkdir", "Create directories", mkdir_cmd.main),
    ("mv", "Move (rename) files", mv_cmd.main),
    ("printenv", "Print the environment", printenv_cmd.main),
    ("printf", "Format and print data", printf_cmd.main),
    ("pwd", "Print name of current/working directory", pwd_cmd.main),
    (
        "readlink",
        "Print resolved symbolic links or canonical file names",
        readlink_cmd.main,
    ),
    ("rm", "Remove files or directories", rm_cmd.main),
    ("stat", "Display file or file system status", stat_cmd.main),
    ("sleep", "Delay for a specified amount of time", sleep_cmd.main),
    ("sum", "Checksum and count the blocks in a file", sum_cmd.main),
    ("id", "Print user and group information", id_cmd.main),
    ("tail", "Output or follow the last part of files", tail_cmd.main),
    ("touch", "Change file timestamps", touch_cmd.main),
    ("tty", "Print the file name of the terminal", tty_cmd.main),
    ("chmod", "Change file mode bits", chmod_cmd.main),
    ("date", "Print or set the system date and time", date_cmd.main),
    ("mk", "Maintain make (plan9) related files", mk_cmd.main),
    ("chown", "Change file owner and group", chown_cmd.main),
    ("base64", "Encode or decode using Base64 representation", base64_cmd.main),
    ("hostid", "Print the numeric identifier for the current host", hostid_cmd.main),
    ("df", "Report file system disk space usage", df_cmd.main),
    ("cksum", "Calculate the CRC32 checksums of files", cksum_cmd.main),
    (
        "chroot",
        "Run command or interactive shell with special root directory",
        chroot_cmd.main,
    ),
    ("http", "Make basic HTTP requests.", http_cmd.main),
    ("curl", "Transfer data from or to a server", _curl_main),
    ("sha1sum", "Compute and check SHA1 message digest", sha1sum_cmd.main),
    ("time", "Run programs and summarize system resource usage", time_cmd.main),
    ("kill", "Send a signal to a process", kill_cmd.main),
]

COMMANDS: dict[str, tuple[str, Runner]] = {
    name: (description, runner) for name, description, runner in _COMMAND_TABLE
}


def generate_usage(commands: Iterable[tuple[str, str]]) -> str:
    """Return the usage text listing ``(name, description)`` pairs."""
    pairs = list(commands)
    width = max((len(name) for name, _ in pairs), default=0) + 2
    listing = "\n".join(f"  {name:<{width}} {description}" for name, description in pairs)
    return (
        "usage: core <command> [arguments...]\n\nAvailable commands:\n" + listing
    )


def _usage() -> str:
    return generate_usage((name, desc) for name, (desc, _) in COMMANDS.items())


def _version() -> str:
    try:
        return version("minicore")
    except PackageNotFoundError:
        return "unknown"


def main(argv=None) -> int:
    """Run the command named by the program name or the first argument."""
    if argv is None:
        program = os.path.basename(sys.argv[0])
        if program in COMMANDS:
            return COMMANDS[program][1](sys.argv[1:])
        argv = sys.argv[1:]
    args = list(argv)

    if not args:
        print(_usage(), file=sys.stderr)
        return 1

    first, rest = args[0], args[1:]
    if first in ("-h", "--help"):
        print(f"{_usage()}\n\n{_OPTIONS_USAGE}")
        return 0
    if first in ("-v", "--version"):
        print(_version())
        return 0
    if first in COMMANDS:
        return COMMANDS[first][1](rest)

    if first.startswith("-"):
        print(f"core: invalid option -- '{first.lstrip('-')}'", file=sys.stderr)
    else:
        print(f"core: unknown command '{first}'", file=sys.stderr)
    print(_usage(), file=sys.stderr)
    return 1