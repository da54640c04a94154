"""Command-line plumbing shared by the commands."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence


class UsageError(Exception):
    """The command line was malformed; the usage text should be shown."""


class CommandError(Exception):
    """The command could not do its work."""


def split_args(
    argv: Iterable[str], value_options: str = ""
) -> tuple[list[tuple[str, str | None]], list[str]]:
    """Split arguments into ``(letter, value)`` option pairs and operands.

    Arguments starting with ``-`` (other than ``-`` itself) are bundles of
    single-letter options. A letter listed in ``value_options`` takes the rest
    of its bundle, or the next argument, as its value. ``--`` ends the options.
    """
    options: list[tuple[str, str | None]] = []
    operands: list[str] = []
    remaining = iter(argv)
    for arg in remaining:
        if arg == "--":
            operands.extend(remaining)
            break
        if not (arg.startswith("-") and len(arg) > 1):
            operands.append(arg)
            continue
        letters = arg[1:]
        for pos, letter in enumerate(letters):
            if letter in value_options:
                value = letters[pos + 1 :]
                if not value:
                    try:
                        value = next(remaining)
                    except StopIteration:
                        raise UsageError(
                            f"option requires an argument -- '{letter}'"
                        ) from None
                options.append((letter, value))
                break
            options.append((letter, None))
    return options, operands


def run_command(
    name: str,
    usage: str,
    body: Callable[[list[str]], int | None],
    argv: Sequence[str] | None = None,
) -> int:
    """Run ``body`` on the arguments and turn its errors into an exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        result = body(args)
    except UsageError as exc:
        if str(exc):
            print(f"{name}: {exc}", file=sys.stderr)
        print(usage, file=sys.stderr)
        return 1
    except CommandError as exc:
        print(f"{name}: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"{name}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    return 0 if result is None else result