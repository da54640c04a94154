"""Change file owner and group."""

from __future__ import annotations

import grp
import os
import pwd
import re

from minicore.options import CommandError, UsageError, run_command, split_args

USAGE = "usage: chown [-h] OWNER[:GROUP] FILE..."
DESCRIPTION = "Change file owner and group"

_NUMBER = re.compile(r"\+?[0-9]+")
_U32_MAX = 0xFFFFFFFF


def _numeric_id(text: str) -> int | None:
    if _NUMBER.fullmatch(text):
        value = int(text)
        if value <= _U32_MAX:
            return value
    return None


def parse_owner_group(spec: str) -> tuple[int, int | None]:
    """Turn ``OWNER[:GROUP]`` into a user id and an optional group id."""
    owner, _, group = spec.partition(":")

    uid = _numeric_id(owner)
    if uid is None:
        try:
            uid = pwd.getpwnam(owner).pw_uid
        except KeyError:
            raise CommandError(f"invalid owner: '{owner}'") from None

    gid = None
    if group:
        gid = _numeric_id(group)
        if gid is None:
            try:
                gid = grp.getgrnam(group).gr_gid
            except KeyError:
                raise CommandError(f"invalid group: '{group}'") from None
    return uid, gid


def change_owner(path, uid: int | None, gid: int | None, no_dereference: bool) -> None:
    """Change the owner and group of ``path``; ``None`` leaves one unchanged."""
    os.chown(
        path,
        -1 if uid is None else uid,
        -1 if gid is None else gid,
        follow_symlinks=not no_dereference,
    )


def _run(args: list[str]) -> None:
    flags, operands = split_args(args, "")
    no_dereference = False
    for letter, _ in flags:
        if letter != "h":
            raise UsageError(f"invalid option -- '{letter}'")
        no_dereference = True

    if not operands:
        raise UsageError("missing owner[:group]")
    spec, *files = operands
    uid, gid = parse_owner_group(spec)

    for path in files:
        try:
            change_owner(path, uid, gid, no_dereference)
        except OSError as exc:
            raise CommandError(
                f"changing ownership of '{path}': {exc.strerror or exc}"
            ) from None


def main(argv=None) -> int:
    """Run the chown command."""
    return run_command("chown", USAGE, _run, argv)