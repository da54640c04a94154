import pytest

from minicore.commands.printf import main, parse_format


@pytest.mark.parametrize(
    "fmt, args, expected",
    [
        ("%s-%d", ["a", "42"], "a-42"),
        ("100%%", [], "100%"),
        ("%x", ["1"], "%x"),
        ("%d", ["abc"], "0"),
        ("%d", ["99999999999"], "0"),
        ("%d", ["+7"], "7"),
        ("%s!", [], "!"),
        ("end%", [], "end%"),
        ("%s %s", ["a", "b", "c"], "a b"),
    ],
)
def test_parse_format(fmt, args, expected):
    assert parse_format(fmt, args) == expected


def test_plain_text_unchanged():
    assert parse_format("no directives\n", ["x"]) == "no directives\n"


def test_main_writes_without_newline(capsys):
    assert main(["%s=%d", "x", "5"]) == 0
    assert capsys.readouterr().out == "x=5"


def test_main_requires_format(capsys):
    assert main([]) == 1
    assert "usage: printf" in capsys.readouterr().err