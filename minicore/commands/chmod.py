"""Change file mode bits."""

from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass

from minicore.options import CommandError, UsageError, run_command, split_args

USAGE = """\
usage:  chmod [-fhv] [-R [-H | -L | -P]] [-a | +a | =a  [i][# [ n]]] mode|entry file ...
        chmod [-fhv] [-R [-H | -L | -P]] [-E | -C | -N | -i | -I] file ..."""
DESCRIPTION = "Change file mode bits"

_OCTAL_DIGITS = frozenset("01234567")
_U32_MAX = 0xFFFFFFFF


@dataclass
class ChmodOptions:
    force: bool = False
    verbose: bool = False
    recursive: bool = False
    dereference: bool = False
    no_dereference: bool = False
    preserve_root: bool = True
    extended_acl: bool = False
    clear_acl: bool = False
    remove_acl: bool = False
    inherit_acl: bool = False
    no_inherit_acl: bool = False


class ChmodError(ValueError):
    """A mode string could not be understood."""


def _symbolic_bits(char: str, current_mode: int) -> int:
    if char == "r":
        return 0o444
    if char == "w":
        return 0o222
    if char == "x":
        return 0o111
    if char == "X":
        return 0o111 if current_mode & 0o111 else 0
    if char == "s":
        return 0o4000 | 0o2000
    if char == "t":
        return 0o1000
    raise ChmodError(f"Invalid mode character: {char}")


def parse_mode(mode: str, current_mode: int) -> int:
    """Return the mode that ``mode`` gives a file whose mode is ``current_mode``.

    ``mode`` is either an octal number or one of ``+``, ``-``, ``=`` followed
    by letters from ``rwxXst``. With ``=`` every letter replaces the
    permission bits in turn, keeping only the special bits.
    """
    if mode[:1] in ("+", "-", "="):
        op, rest = mode[0], mode[1:]
        new_mode = current_mode
        for char in rest:
            bits = _symbolic_bits(char, current_mode)
            if op == "+":
                new_mode |= bits
            elif op == "-":
                new_mode &= ~bits
            else:
                new_mode = (new_mode & 0o7000) | bits
        return new_mode
    if all(char in _OCTAL_DIGITS for char in mode):
        if not mode or int(mode, 8) > _U32_MAX:
            raise ChmodError("Invalid octal mode")
        return int(mode, 8)
    raise ChmodError("Invalid mode format")


def chmod_path(path, mode: str, options: ChmodOptions) -> None:
    """Apply ``mode`` to ``path``, and below it when recursive."""
    info = os.lstat(path) if options.no_dereference else os.stat(path)
    current = info.st_mode
    new_mode = parse_mode(mode, current)
    os.chmod(path, stat.S_IMODE(new_mode))

    if options.verbose:
        print(f"changed '{os.fspath(path)}' mode from {current:o} to {new_mode:o}")

    if options.recursive and stat.S_ISDIR(info.st_mode):
        for name in sorted(os.listdir(path)):
            chmod_path(os.path.join(path, name), mode, options)


_FLAGS = {
    "f": "force",
    "h": "no_dereference",
    "v": "verbose",
    "R": "recursive",
    "H": "dereference",
    "L": "dereference",
    "P": "preserve_root",
    "E": "extended_acl",
    "C": "clear_acl",
    "N": "remove_acl",
    "i": "inherit_acl",
    "I": "no_inherit_acl",
}


def _reason(exc: Exception) -> str:
    if isinstance(exc, OSError):
        return exc.strerror or str(exc)
    return str(exc)


def _run(args: list[str]) -> None:
    flags, operands = split_args(args, "")
    options = ChmodOptions()
    for letter, _ in flags:
        if letter not in _FLAGS:
            raise UsageError(f"invalid option -- '{letter}'")
        setattr(options, _FLAGS[letter], True)

    if len(operands) < 2:
        raise UsageError()
    mode, *files = operands

    for path in files:
        try:
            chmod_path(path, mode, options)
        except (OSError, ChmodError) as exc:
            message = f"changing permissions of '{path}': {_reason(exc)}"
            if not options.force:
                raise CommandError(message) from None
            print(f"chmod: {message}", file=sys.stderr)


def main(argv=None) -> int:
    """Run the chmod command."""
    return run_command("chmod", USAGE, _run, argv)