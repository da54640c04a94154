import os
import stat

import pytest

from minicore.commands import mkdir
from minicore.options import CommandError


def _mode(path):
    return stat.S_IMODE(os.stat(path).st_mode)


def test_make_directory_sets_mode(tmp_path):
    target = tmp_path / "d"
    mkdir.make_directory(target, 0o700)
    assert target.is_dir()
    assert _mode(target) == 0o700


def test_make_directory_existing(tmp_path):
    with pytest.raises(CommandError, match="already exists"):
        mkdir.make_directory(tmp_path, 0o755)


def test_make_directory_missing_parent(tmp_path):
    with pytest.raises(FileNotFoundError):
        mkdir.make_directory(tmp_path / "a" / "b", 0o755)


def test_make_directories_nested(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    mkdir.make_directories(target, 0o750)
    assert target.is_dir()
    assert _mode(tmp_path / "a") == 0o750
    assert _mode(target) == 0o750


def test_make_directories_keeps_existing_parents(tmp_path):
    (tmp_path / "a").mkdir(mode=0o700)
    os.chmod(tmp_path / "a", 0o700)
    mkdir.make_directories(tmp_path / "a" / "b", 0o755)
    assert _mode(tmp_path / "a") == 0o700
    assert (tmp_path / "a" / "b").is_dir()


def test_make_directories_final_exists(tmp_path):
    (tmp_path / "x").mkdir()
    with pytest.raises(CommandError, match="already exists"):
        mkdir.make_directories(tmp_path / "x", 0o755)


def test_main_with_mode(tmp_path):
    target = tmp_path / "m"
    assert mkdir.main(["-m", "750", str(target)]) == 0
    assert _mode(target) == 0o750


def test_main_creates_every_directory(tmp_path):
    first, second = tmp_path / "one", tmp_path / "two"
    assert mkdir.main([str(first), str(second)]) == 0
    assert first.is_dir() and second.is_dir()


def test_main_parents(tmp_path):
    target = tmp_path / "p" / "q"
    assert mkdir.main(["-p", str(target)]) == 0
    assert target.is_dir()


def test_main_invalid_mode(tmp_path, capsys):
    assert mkdir.main(["-m", "9z", str(tmp_path / "n")]) == 1
    assert "invalid mode: 9z" in capsys.readouterr().err
    assert not (tmp_path / "n").exists()


def test_main_without_arguments():
    assert mkdir.main([]) == 1