"""Concatenate and print files."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from minicore.options import CommandError, UsageError, run_command, split_args

USAGE = "usage: cat [-benstv] [file ...]"
DESCRIPTION = "Concatenate and print files"


@dataclass
class CatOptions:
    number_nonblank: bool = False
    show_ends: bool = False
    number: bool = False
    squeeze_blank: bool = False
    show_tabs: bool = False
    show_nonprinting: bool = False


def _strip_ending(raw: str) -> str:
    if raw.endswith("\n"):
        raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
    return raw


def _visible(char: str) -> str:
    code = ord(char)
    if (code < 32 or code == 127) and char not in "\t\n":
        return chr(code + 64)
    return char


def cat_lines(lines: Iterable[str], options: CatOptions) -> Iterator[str]:
    """Yield the output lines, each ending in a newline."""
    line_number = 1
    last_blank = False
    for raw in lines:
        line = _strip_ending(raw)
        is_blank = not line.strip()

        if options.squeeze_blank and is_blank and last_blank:
            continue
        if options.show_nonprinting:
            line = "".join(map(_visible, line))
        if options.show_tabs:
            line = line.replace("\t", "^I")

        prefix = ""
        if (options.number and not options.number_nonblank) or (
            options.number_nonblank and not is_blank
        ):
            prefix = f"{line_number:6}\t"
            line_number += 1

        yield prefix + line + ("$" if options.show_ends else "") + "\n"
        last_blank = is_blank


def _decoded(stream, label: str) -> Iterator[str]:
    for raw in stream:
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError:
            raise CommandError(f"{label}: stream did not contain valid UTF-8") from None


_FLAGS = {
    "b": ("number_nonblank",),
    "e": ("show_ends", "show_nonprinting"),
    "n": ("number",),
    "s": ("squeeze_blank",),
    "t": ("show_tabs", "show_nonprinting"),
    "v": ("show_nonprinting",),
}


def _run(args: list[str]) -> None:
    if not args:
        raise UsageError()
    flags, files = split_args(args, "")
    options = CatOptions()
    for letter, _ in flags:
        if letter not in _FLAGS:
            raise UsageError(f"invalid option -- '{letter}'")
        for field in _FLAGS[letter]:
            setattr(options, field, True)

    out = sys.stdout
    if not files:
        out.writelines(cat_lines(_decoded(sys.stdin.buffer, "<stdin>"), options))
        return
    for path in files:
        try:
            handle = open(path, "rb")
        except OSError as exc:
            raise CommandError(f"{path}: {exc.strerror or exc}") from None
        with handle:
            try:
                out.writelines(cat_lines(_decoded(handle, path), options))
            except OSError as exc:
                raise CommandError(f"{path}: {exc.strerror or exc}") from None


def main(argv=None) -> int:
    """Run the cat command."""
    return run_command("cat", USAGE, _run, argv)