import os
import pwd

import pytest

from minicore.commands.chown import change_owner, main, parse_owner_group
from minicore.options import CommandError


def test_numeric_owner_and_group():
    assert parse_owner_group("1000:100") == (1000, 100)


def test_numeric_owner_only():
    assert parse_owner_group("42") == (42, None)


def test_owner_by_name():
    name = pwd.getpwuid(os.getuid()).pw_name
    assert parse_owner_group(name) == (os.getuid(), None)


def test_unknown_owner():
    with pytest.raises(CommandError) as info:
        parse_owner_group("no-such-user-xyz")
    assert str(info.value) == "invalid owner: 'no-such-user-xyz'"


def test_unknown_group():
    with pytest.raises(CommandError) as info:
        parse_owner_group("0:no-such-group-xyz")
    assert str(info.value) == "invalid group: 'no-such-group-xyz'"


def test_change_owner_to_self(tmp_path):
    target = tmp_path / "file"
    target.write_text("x")
    change_owner(target, os.getuid(), None, False)
    assert os.stat(target).st_uid == os.getuid()


def test_change_owner_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        change_owner(tmp_path / "missing", os.getuid(), None, False)


def test_main_without_operands(capsys):
    assert main([]) == 1
    assert "missing owner[:group]" in capsys.readouterr().err


def test_main_changes_to_self(tmp_path):
    target = tmp_path / "file"
    target.write_text("x")
    assert main([str(os.getuid()), str(target)]) == 0
    assert os.stat(target).st_uid == os.getuid()


def test_main_reports_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing"
    assert main([str(os.getuid()), str(missing)]) == 1
    assert f"changing ownership of '{missing}'" in capsys.readouterr().err