"""Data models for the aoc2022 runner.

Part enum, ChallengeSelector, SolverResult and the runner error taxonomy:
the typed structures that flow through CLI → runner → solvers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Union

MIN_DAY = 1
MAX_DAY = 25

# Exit codes per error class. 2 is left to click for usage errors.
EXIT_UNSUPPORTED_SELECTOR = 3
EXIT_INPUT_NOT_FOUND = 4
EXIT_INPUT_UNREADABLE = 5
EXIT_SOLVER_FAILURE = 6

SolverResult = Union[int, str]
Solver = Callable[[str], SolverResult]


class Part(str, Enum):
    """Subchallenge of a day."""

    A = "a"
    B = "b"


@dataclass(frozen=True)
class ChallengeSelector:
    """Identifies a single solver: which day, which part."""

    day: int
    part: Part

    def __post_init__(self) -> None:
        if not MIN_DAY <= self.day <= MAX_DAY:
            raise UnsupportedSelector(self.day, self.part)

    def __str__(self) -> str:
        return f"day {self.day}, part {self.part.value}"


class RunnerError(Exception):
    """Base class for every error the runner reports to the user."""

    exit_code = 1


class UnsupportedSelector(RunnerError):
    """No solver is registered for the requested day/part."""

    exit_code = EXIT_UNSUPPORTED_SELECTOR

    def __init__(self, day: int, part: Part) -> None:
        self.day = day
        self.part = part
        super().__init__(f"No solver registered for day {day}, part {part.value}")


class InputFileNotFound(RunnerError):
    """The input file does not exist."""

    exit_code = EXIT_INPUT_NOT_FOUND

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Input file not found: {path}")


class InputFileUnreadable(RunnerError):
    """The input file exists but could not be read as UTF-8 text."""

    exit_code = EXIT_INPUT_UNREADABLE

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read input file {path}: {reason}")


class SolverFailure(RunnerError):
    """The solver raised while processing the input."""

    exit_code = EXIT_SOLVER_FAILURE

    def __init__(self, selector: ChallengeSelector, cause: BaseException) -> None:
        self.selector = selector
        self.cause = cause
        detail = str(cause) or type(cause).__name__
        super().__init__(f"Error while solving {selector}: {detail}")


class InputFormatError(ValueError):
    """Puzzle input did not match the format a solver expects."""
