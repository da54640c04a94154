import os
import time

import pytest

from minicore.commands.touch import main, touch
from minicore.options import CommandError


def test_touch_creates_file_with_mtime(tmp_path):
    path = tmp_path / "new"
    touch(path, False, 1000)
    assert path.exists()
    assert os.stat(path).st_mtime == 1000


def test_touch_keeps_content(tmp_path):
    path = tmp_path / "f"
    path.write_text("content")
    touch(path, False, 2000)
    assert path.read_text() == "content"
    assert os.stat(path).st_mtime == 2000


def test_touch_keeps_access_time(tmp_path):
    path = tmp_path / "f"
    path.write_text("x")
    os.utime(path, (500, 600))
    touch(path, False, 3000)
    st = os.stat(path)
    assert st.st_atime == 500
    assert st.st_mtime == 3000


def test_touch_default_time_is_now(tmp_path):
    path = tmp_path / "f"
    before = time.time()
    touch(path)
    after = time.time()
    assert before - 1 <= os.stat(path).st_mtime <= after + 1


def test_no_create_on_missing_file(tmp_path):
    path = tmp_path / "missing"
    with pytest.raises(CommandError, match="No such file or directory"):
        touch(path, True, 1000)
    assert not path.exists()


def test_no_create_on_existing_file(tmp_path):
    path = tmp_path / "f"
    path.write_text("")
    touch(path, True, 4000)
    assert os.stat(path).st_mtime == 4000


def test_main_with_time_option(tmp_path):
    path = tmp_path / "f"
    assert main(["-t", "5000", str(path)]) == 0
    assert os.stat(path).st_mtime == 5000


def test_main_no_create_missing(tmp_path):
    path = tmp_path / "missing"
    assert main(["-c", str(path)]) == 1
    assert not path.exists()


@pytest.mark.parametrize("value", ["abc", "-5", "1.5"])
def test_main_invalid_time(tmp_path, value):
    path = tmp_path / "f"
    assert main(["-t", value, str(path)]) == 1
    assert not path.exists()


def test_main_missing_time_argument():
    assert main(["-t"]) == 1


def test_main_without_files():
    assert main([]) == 1
    assert main(["-c"]) == 1