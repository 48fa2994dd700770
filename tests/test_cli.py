"""Tests for the aoc2022 command line.

Runs the typer app in-process with CliRunner. Each test works from an empty
temporary directory so the default ``input/`` lookup is under test control.
"""

import pytest
from typer.testing import CliRunner

from aoc2022 import runner as runner_module
from aoc2022.__main__ import app
from aoc2022.models import (
    EXIT_INPUT_NOT_FOUND,
    EXIT_INPUT_UNREADABLE,
    EXIT_SOLVER_FAILURE,
    EXIT_UNSUPPORTED_SELECTOR,
)

DAY01 = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n"

cli = CliRunner()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Empty cwd with an input/ directory containing 01a.txt."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("AOC2022_INPUT_DIR", raising=False)
    (tmp_path / "input").mkdir()
    (tmp_path / "input" / "01a.txt").write_text(DAY01, encoding="utf-8")
    return tmp_path


# --- Help and listing ---

@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_help_exits_zero(flag, workdir, monkeypatch):
    def fail(path):
        raise AssertionError("help must not read input")

    monkeypatch.setattr(runner_module, "read_input", fail)
    result = cli.invoke(app, [flag])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_list_shows_solvers(workdir):
    result = cli.invoke(app, ["--list"])
    assert result.exit_code == 0
    assert "Calorie" in result.output


# --- Successful runs ---

def test_solve_prints_result(workdir):
    result = cli.invoke(app, ["1", "a"])
    assert result.exit_code == 0
    assert result.stdout == "24000\n"


def test_zero_padded_day_and_upper_case_part(workdir):
    result = cli.invoke(app, ["0001", "A"])
    assert result.exit_code == 0
    assert result.stdout == "24000\n"


def test_input_override(workdir):
    (workdir / "custom.txt").write_text(DAY01, encoding="utf-8")
    result = cli.invoke(app, ["1", "b", "--input", "custom.txt"])
    assert result.exit_code == 0
    assert result.stdout == "45000\n"


def test_input_dir_from_env(workdir):
    other = workdir / "elsewhere"
    other.mkdir()
    (other / "01b.txt").write_text(DAY01, encoding="utf-8")
    result = cli.invoke(app, ["1", "b"], env={"AOC2022_INPUT_DIR": str(other)})
    assert result.exit_code == 0
    assert "45000" in result.output


def test_verbose(workdir):
    result = cli.invoke(app, ["1", "a", "-v"])
    assert result.exit_code == 0
    assert "24000" in result.output
    assert "01a.txt" in result.output


def test_identical_runs_identical_output(workdir):
    first = cli.invoke(app, ["1", "a"])
    second = cli.invoke(app, ["1", "a"])
    assert first.stdout == second.stdout


# --- Runner errors ---

def test_missing_input_file(workdir):
    result = cli.invoke(app, ["1", "b"])
    assert result.exit_code == EXIT_INPUT_NOT_FOUND
    assert "01b.txt" in result.output
    assert result.stdout == ""


@pytest.mark.parametrize("day", ["22", "25", "30", "0", "-5"])
def test_unsupported_day(day, workdir):
    result = cli.invoke(app, [day, "a"])
    assert result.exit_code == EXIT_UNSUPPORTED_SELECTOR


def test_unreadable_input(workdir):
    (workdir / "input" / "02a.txt").mkdir()
    result = cli.invoke(app, ["2", "a"])
    assert result.exit_code == EXIT_INPUT_UNREADABLE


def test_solver_failure(workdir):
    (workdir / "input" / "02a.txt").write_text("A Q\n", encoding="utf-8")
    result = cli.invoke(app, ["2", "a"])
    assert result.exit_code == EXIT_SOLVER_FAILURE


# --- Usage errors ---

@pytest.mark.parametrize("args", [[], ["1"], ["1", "c"], ["one", "a"]])
def test_usage_errors(args, workdir):
    result = cli.invoke(app, args)
    assert result.exit_code == 2


def test_unknown_option_still_usage_error(workdir):
    result = cli.invoke(app, ["1", "a", "--bogus"])
    assert result.exit_code == 2
