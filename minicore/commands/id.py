"""Print user and group information."""

from __future__ import annotations

import grp
import os
import pwd
import sys
from dataclasses import dataclass

from minicore.options import CommandError, UsageError, run_command

USAGE = "usage: id [-u] [-g] [-G] [-n] [user]"
DESCRIPTION = "Print user and group information"


@dataclass
class IdOptions:
    print_user: bool = False
    print_group: bool = False
    print_groups: bool = False
    use_name: bool = False


def _user_info(username: str | None, group: str | None) -> tuple[int, int, str]:
    if username is None:
        uid = os.getuid()
        try:
            name = pwd.getpwuid(uid).pw_name
        except KeyError:
            raise CommandError(f"cannot find name for user ID {uid}") from None
        gid = os.getgid()
    else:
        try:
            entry = pwd.getpwnam(username)
        except KeyError:
            raise CommandError(f"{username}: no such user") from None
        uid, gid, name = entry.pw_uid, entry.pw_gid, entry.pw_name
    if group is not None:
        try:
            gid = grp.getgrnam(group).gr_gid
        except KeyError:
            raise CommandError(f"{group}: no such group") from None
    return uid, gid, name


def _group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        raise CommandError(f"cannot find name for group ID {gid}") from None


def _groups(username: str | None, name: str, gid: int) -> list[int]:
    if username is None:
        return os.getgroups()
    return os.getgrouplist(name, gid)


def describe_id(options: IdOptions, username: str | None, group: str | None) -> str:
    """Return what ``id`` prints for the user, or the current user."""
    uid, gid, name = _user_info(username, group)

    if options.print_user:
        return f"{name if options.use_name else uid}\n"
    if options.print_group:
        return f"{_group_name(gid) if options.use_name else gid}\n"
    if options.print_groups:
        groups = _groups(username, name, gid)
        if options.use_name:
            names = []
            for member in groups:
                try:
                    names.append(grp.getgrgid(member).gr_name)
                except KeyError:
                    continue
            return " ".join(names) + "\n"
        return " ".join(map(str, groups)) + "\n"

    text = f"uid={uid}({name}) gid={gid}({_group_name(gid)})"
    groups = _groups(username, name, gid)
    if groups:
        text += " groups=" + ",".join(f"{g}({_group_name(g)})" for g in groups)
    return text + "\n"


def _run(args: list[str]) -> None:
    options = IdOptions()
    username: str | None = None
    group: str | None = None
    remaining = iter(args)
    for arg in remaining:
        if arg.startswith("-") and len(arg) > 1:
            for letter in arg[1:]:
                if letter == "u":
                    options.print_user = True
                elif letter == "g":
                    options.print_group = True
                    group = next(remaining, None)
                elif letter == "G":
                    options.print_groups = True
                elif letter == "n":
                    options.use_name = True
                else:
                    raise UsageError(f"invalid option -- '{letter}'")
            continue
        if username is not None:
            raise UsageError("too many arguments")
        username = arg

    sys.stdout.write(describe_id(options, username, group))


def main(argv=None) -> int:
    """Run the id command."""
    return run_command("id", USAGE, _run, argv)