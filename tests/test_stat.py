import os
import stat
import time

import pytest

from minicore.commands.stat import describe, format_mode, format_time, main


@pytest.fixture
def utc(monkeypatch):
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_format_mode_types():
    assert format_mode(stat.S_IFDIR | 0o755) == "drwxr-xr-x"
    assert format_mode(stat.S_IFIFO | 0o644) == "prw-r--r--"


def test_format_mode_type_letters():
    letters = {
        stat.S_IFCHR: "c",
        stat.S_IFBLK: "b",
        stat.S_IFSOCK: "s",
        stat.S_IFLNK: "l",
        stat.S_IFREG: "-",
    }
    for kind, letter in letters.items():
        assert format_mode(kind)[0] == letter
        assert format_mode(kind)[1:] == "-" * 9


def test_format_time_epoch(utc):
    assert format_time(0) == "Thu Jan 01 00:00:00 1970"


def test_describe_regular_file(tmp_path):
    target = tmp_path / "data.bin"
    target.write_bytes(b"z" * 123)
    lines = describe(target).split("\n")
    assert lines[0] == f"  File: {target}"
    assert lines[1].split()[1] == "123"
    assert lines[3].startswith("Access: -")
    assert lines[-2:] == ["", ""]
    assert len(lines) == 9


def test_describe_follows_symlink(tmp_path):
    target = tmp_path / "real"
    target.write_text("hello")
    link = tmp_path / "link"
    os.symlink(target, link)
    assert describe(link).split("\n")[1] == describe(target).split("\n")[1]


def test_describe_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        describe(tmp_path / "absent")


def test_main_defaults_to_current_directory(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("  File: .\n")
    assert "Access: d" in out


def test_main_missing_file(tmp_path, capsys):
    missing = str(tmp_path / "absent")
    assert main([missing]) == 1
    assert f"stat: {missing}:" in capsys.readouterr().err


def test_main_rejects_options(capsys):
    assert main(["-l"]) == 1
    assert "invalid option -- 'l'" in capsys.readouterr().err