from minicore.commands.cat import CatOptions, cat_lines, main


def run(lines, **flags):
    return list(cat_lines(lines, CatOptions(**flags)))


def test_plain_lines_pass_through():
    assert run(["a\n", "b"]) == ["a\n", "b\n"]


def test_crlf_is_stripped():
    assert run(["a\r\n"]) == ["a\n"]


def test_number_all_lines():
    assert run(["a\n", "\n", "b\n"], number=True) == [
        "     1\ta\n",
        "     2\t\n",
        "     3\tb\n",
    ]


def test_number_nonblank_skips_blank_lines():
    assert run(["a\n", "\n", "b\n"], number=True, number_nonblank=True) == [
        "     1\ta\n",
        "\n",
        "     2\tb\n",
    ]


def test_squeeze_blank():
    assert run(["a\n", "\n", "  \n", "\n", "b\n"], squeeze_blank=True) == [
        "a\n",
        "\n",
        "b\n",
    ]


def test_show_ends():
    assert run(["a\n"], show_ends=True) == ["a$\n"]


def test_show_tabs():
    assert run(["a\tb\n"], show_tabs=True, show_nonprinting=True) == ["a^Ib\n"]


def test_show_nonprinting_shifts_controls():
    assert run(["x\x01y\n"], show_nonprinting=True) == ["xAy\n"]


def test_main_without_arguments_is_usage(capsys):
    assert main([]) == 1
    assert "usage: cat" in capsys.readouterr().err


def test_main_numbers_file(tmp_path, capsys):
    path = tmp_path / "f.txt"
    path.write_text("one\ntwo\n")
    assert main(["-n", str(path)]) == 0
    assert capsys.readouterr().out == "     1\tone\n     2\ttwo\n"


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "nope"
    assert main([str(missing)]) == 1
    assert str(missing) in capsys.readouterr().err


def test_main_invalid_option(capsys):
    assert main(["-z"]) == 1
    assert "invalid option -- 'z'" in capsys.readouterr().err