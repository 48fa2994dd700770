"""Tests for the runner: path construction, input loading and dispatch.

Covers the error taxonomy end to end: every failure surfaces as its own
RunnerError subclass with a distinct exit code.
"""

from pathlib import Path

import pytest

from aoc2022 import runner
from aoc2022.models import (
    ChallengeSelector,
    InputFileNotFound,
    InputFileUnreadable,
    Part,
    RunnerError,
    SolverFailure,
    UnsupportedSelector,
)

DAY01 = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n"


@pytest.fixture
def input_dir(tmp_path):
    """An input/ directory holding day 1 part A's sample."""
    d = tmp_path / "input"
    d.mkdir()
    (d / "01a.txt").write_text(DAY01, encoding="utf-8")
    return d


# --- Path construction ---

def test_input_path_pads_day():
    assert runner.input_path(ChallengeSelector(1, Part.A)) == Path("input/01a.txt")


def test_input_path_two_digit_day():
    assert runner.input_path(ChallengeSelector(22, Part.B)) == Path("input/22b.txt")


def test_input_path_custom_dir(tmp_path):
    assert runner.input_path(ChallengeSelector(5, Part.B), tmp_path) == tmp_path / "05b.txt"


# --- Successful runs ---

def test_run_reads_default_input(input_dir):
    assert runner.run(ChallengeSelector(1, Part.A), input_dir=input_dir) == 24000


def test_run_is_repeatable(input_dir):
    selector = ChallengeSelector(1, Part.A)
    assert runner.run(selector, input_dir=input_dir) == runner.run(selector, input_dir=input_dir)


def test_run_input_override(tmp_path):
    custom = tmp_path / "custom.txt"
    custom.write_text(DAY01, encoding="utf-8")
    assert runner.run(ChallengeSelector(1, Part.B), input_file=custom, input_dir=tmp_path / "nowhere") == 45000


# --- Errors ---

def test_unregistered_day(input_dir):
    with pytest.raises(UnsupportedSelector) as exc:
        runner.run(ChallengeSelector(25, Part.A), input_dir=input_dir)
    assert exc.value.day == 25
    assert "day 25, part a" in str(exc.value)


def test_unsupported_checked_before_file(monkeypatch, tmp_path):
    def fail(path):
        raise AssertionError("input should not be read")

    monkeypatch.setattr(runner, "read_input", fail)
    with pytest.raises(UnsupportedSelector):
        runner.run(ChallengeSelector(24, Part.B), input_dir=tmp_path)


def test_missing_input(tmp_path):
    with pytest.raises(InputFileNotFound) as exc:
        runner.run(ChallengeSelector(1, Part.B), input_dir=tmp_path)
    assert exc.value.path == tmp_path / "01b.txt"


def test_directory_as_input(tmp_path):
    with pytest.raises(InputFileUnreadable):
        runner.run(ChallengeSelector(1, Part.A), input_file=tmp_path)


def test_invalid_utf8(tmp_path):
    bad = tmp_path / "01a.txt"
    bad.write_bytes(b"\xff\xfe\x00garbage")
    with pytest.raises(InputFileUnreadable):
        runner.run(ChallengeSelector(1, Part.A), input_dir=tmp_path)


def test_solver_failure_wraps_cause(tmp_path):
    (tmp_path / "01a.txt").write_text("not a number\n", encoding="utf-8")
    with pytest.raises(SolverFailure) as exc:
        runner.run(ChallengeSelector(1, Part.A), input_dir=tmp_path)
    assert isinstance(exc.value.__cause__, ValueError)
    assert exc.value.selector == ChallengeSelector(1, Part.A)


def test_exit_codes_are_distinct():
    codes = {cls.exit_code for cls in (UnsupportedSelector, InputFileNotFound, InputFileUnreadable, SolverFailure)}
    assert len(codes) == 4
    assert 0 not in codes
    assert all(issubclass(cls, RunnerError) for cls in (UnsupportedSelector, SolverFailure))
