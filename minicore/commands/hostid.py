"""Print the numeric identifier for the current host."""

from __future__ import annotations

import socket
import struct

from minicore.options import UsageError, run_command, split_args

USAGE = "usage: hostid"
DESCRIPTION = "Print the numeric identifier for the current host"

HOSTID_FILE = "/etc/hostid"
_MASK = 0xFFFFFFFF


def host_id() -> int:
    """Return the 32-bit host identifier.

    The identifier stored in the host id file wins; otherwise it is derived
    from the host's IPv4 address with its halves swapped, or 0.
    """
    try:
        with open(HOSTID_FILE, "rb") as handle:
            data = handle.read(4)
        if len(data) == 4:
            return struct.unpack("=I", data)[0]
    except OSError:
        pass
    try:
        packed = socket.inet_aton(socket.gethostbyname(socket.gethostname()))
    except (OSError, UnicodeError):
        return 0
    value = struct.unpack("=I", packed)[0]
    return ((value << 16) | (value >> 16)) & _MASK


def _run(args: list[str]) -> None:
    options, operands = split_args(args, "")
    for letter, _ in options:
        raise UsageError(f"invalid option -- '{letter}'")
    if operands:
        raise UsageError()
    print(f"{host_id():08x}")


def main(argv=None) -> int:
    """Run the hostid command."""
    return run_command("hostid", USAGE, _run, argv)