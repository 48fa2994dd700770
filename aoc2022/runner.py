"""aoc2022 runner — selector → input file → solver → result.

Data flow per invocation:
1. Look up the solver registered for (day, part)
2. Build the input path (or take the --input override)
3. Read the whole file as UTF-8 text, closing it before solving
4. Call the solver and hand back its result

Errors from each step surface as distinct RunnerError subclasses.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from aoc2022.models import (
    ChallengeSelector,
    InputFileNotFound,
    InputFileUnreadable,
    SolverFailure,
    SolverResult,
)
from aoc2022.solvers import get_solver

DEFAULT_INPUT_DIR = Path("input")


def input_path(selector: ChallengeSelector, input_dir: Union[str, Path] = DEFAULT_INPUT_DIR) -> Path:
    """Path of the default input file for a selector.

    (1, a) → 'input/01a.txt', (22, b) → 'input/22b.txt'
    """
    return Path(input_dir) / f"{selector.day:02d}{selector.part.value}.txt"


def read_input(path: Path) -> str:
    """Read a puzzle input file in full.

    Raises:
        InputFileNotFound: if the path does not exist.
        InputFileUnreadable: for any other OS error or invalid UTF-8.
    """
    try:
        with path.open(encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError as e:
        raise InputFileNotFound(path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileUnreadable(path, str(e)) from e


def run(
    selector: ChallengeSelector,
    input_file: Optional[Path] = None,
    input_dir: Union[str, Path] = DEFAULT_INPUT_DIR,
) -> SolverResult:
    """Solve one (day, part) selection.

    Args:
        selector: Which day and part to solve.
        input_file: Explicit input path; replaces the default location.
        input_dir: Directory holding the default ``<DD><part>.txt`` files.

    Returns:
        Whatever the solver computed (int or str).

    Raises:
        UnsupportedSelector: no solver for the day, checked before touching disk.
        InputFileNotFound / InputFileUnreadable: input could not be loaded.
        SolverFailure: the solver raised on the input contents.
    """
    solver = get_solver(selector)
    path = input_file if input_file is not None else input_path(selector, input_dir)
    text = read_input(path)

    try:
        return solver(text)
    except Exception as e:
        raise SolverFailure(selector, e) from e
