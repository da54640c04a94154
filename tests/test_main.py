import os
import sys
from unittest import mock

from minicore.main import COMMANDS, generate_usage, main


def test_generate_usage_layout():
    text = generate_usage([("ab", "x"), ("abcd", "y")])
    assert text == (
        "usage: core <command> [arguments...]\n\nAvailable commands:\n"
        "  ab     x\n"
        "  abcd   y"
    )


def test_generate_usage_aligns_descriptions():
    pairs = [("cat", "Concatenate"), ("readlink", "Resolve"), ("ls", "List")]
    lines = generate_usage(pairs).splitlines()[3:]
    assert len(lines) == len(pairs)
    columns = {line.index(desc) for line, (_, desc) in zip(lines, pairs)}
    assert len(columns) == 1
    for line, (name, _) in zip(lines, pairs):
        assert line.startswith(f"  {name} ")


def test_generate_usage_empty():
    assert generate_usage([]).endswith("Available commands:\n")


def test_help_lists_every_command(capsys):
    assert main(["--help"]) == 0
    out = capsys.readouterr().out
    assert "Available commands:" in out
    for name in COMMANDS:
        assert f"  {name} " in out


def test_no_arguments_is_error(capsys):
    assert main([]) == 1
    assert "usage: core" in capsys.readouterr().err


def test_unknown_command(capsys):
    assert main(["no-such-command"]) == 1
    assert "no-such-command" in capsys.readouterr().err


def test_version_prints_something(capsys):
    assert main(["-v"]) == 0
    assert capsys.readouterr().out.strip()


def test_dispatches_to_command(capsys):
    assert main(["pwd", "-P"]) == 0
    assert capsys.readouterr().out == os.getcwd() + "\n"


def test_dispatches_to_echo(capsys):
    assert main(["echo", "hi", "there"]) == 0
    assert capsys.readouterr().out == "hi there\n"


def test_multi_call_by_program_name(capsys):
    with mock.patch.object(sys, "argv", ["/usr/local/bin/pwd", "-P"]):
        assert main() == 0
    assert capsys.readouterr().out == os.getcwd() + "\n"


def test_core_program_name_uses_first_argument(capsys):
    with mock.patch.object(sys, "argv", ["core", "pwd", "-P"]):
        assert main() == 0
    assert capsys.readouterr().out == os.getcwd() + "\n"