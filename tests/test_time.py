import sys

from minicore.commands.time import format_report, main, run_timed


def test_format_report_layout():
    assert format_report("ls", 0.0, 0.0, 1.0) == (
        "ls  0.00s user 0.00s system 0% cpu 1.000 total"
    )


def test_format_report_cpu_share():
    assert " 100% cpu " in format_report("p", 1.0, 1.0, 2.0)


def test_format_report_zero_real_time_without_work():
    assert " 0% cpu " in format_report("p", 0.0, 0.0, 0.0)


def test_run_timed_success():
    code, user, system, real = run_timed([sys.executable, "-c", "pass"])
    assert code == 0
    assert user >= 0.0
    assert system >= 0.0
    assert real > 0.0


def test_run_timed_reports_exit_status():
    code, _, _, _ = run_timed([sys.executable, "-c", "import sys; sys.exit(3)"])
    assert code == 3


def test_main_prints_report_and_returns_status(capsys):
    status = main([sys.executable, "-c", "import sys; sys.exit(4)"])
    assert status == 4
    out = capsys.readouterr().out
    assert out.startswith(f"{sys.executable}  ")
    assert out.rstrip().endswith(" total")


def test_main_success_returns_zero():
    assert main([sys.executable, "-c", "pass"]) == 0


def test_main_without_command_is_usage_error(capsys):
    assert main([]) == 1
    assert "missing command" in capsys.readouterr().err


def test_main_missing_program(tmp_path):
    assert main([str(tmp_path / "no-such-program")]) == 1