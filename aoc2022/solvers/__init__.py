"""Solver discovery and lookup for aoc2022.

Each day is a module in aoc2022/solvers/ named ``day<NN>.py`` defining:
    DAY      — challenge number (int)
    TITLE    — puzzle title shown by ``--list``
    solve_a  — (text) -> answer for part A
    solve_b  — (text) -> answer for part B

The registry is built once on first use and is read-only afterwards.
"""

from __future__ import annotations

import importlib
import re
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from aoc2022.models import ChallengeSelector, Part, Solver, UnsupportedSelector

_MODULE_RE = re.compile(r"^day\d{2}$")

_registry: Optional[Mapping[int, SolverInfo]] = None


@dataclass(frozen=True)
class SolverInfo:
    """Metadata and entry points for one day's solvers."""

    day: int
    title: str
    solve_a: Solver
    solve_b: Solver

    def for_part(self, part: Part) -> Solver:
        return self.solve_a if part == Part.A else self.solve_b


def _solvers_root() -> Path:
    """Absolute path to the solvers/ directory."""
    return Path(__file__).parent


def load_solver(module_name: str) -> SolverInfo:
    """Import a single day module and read its solver metadata.

    Args:
        module_name: Module name under aoc2022/solvers/ (e.g., 'day01').

    Raises:
        ImportError: if the module is missing.
        AttributeError: if it lacks DAY, solve_a or solve_b.
    """
    mod = importlib.import_module(f"aoc2022.solvers.{module_name}")
    return SolverInfo(
        day=mod.DAY,
        title=getattr(mod, "TITLE", ""),
        solve_a=mod.solve_a,
        solve_b=mod.solve_b,
    )


def _discover() -> dict[int, SolverInfo]:
    solvers: dict[int, SolverInfo] = {}
    for child in sorted(_solvers_root().iterdir()):
        if child.suffix != ".py" or not _MODULE_RE.match(child.stem):
            continue
        info = load_solver(child.stem)
        if info.day in solvers:
            raise RuntimeError(f"Tried to load a duplicate solver for day {info.day} ({child.name})")
        solvers[info.day] = info
    return solvers


def registry() -> Mapping[int, SolverInfo]:
    """Return the process-wide day → SolverInfo mapping, loading it on first use."""
    global _registry
    if _registry is None:
        _registry = MappingProxyType(_discover())
    return _registry


def list_solvers() -> list[SolverInfo]:
    """All registered solvers ordered by day."""
    return [registry()[day] for day in sorted(registry())]


def get_solver(selector: ChallengeSelector) -> Solver:
    """Look up the solver for a selector.

    Raises:
        UnsupportedSelector: if no module is registered for the day.
    """
    info = registry().get(selector.day)
    if info is None:
        raise UnsupportedSelector(selector.day, selector.part)
    return info.for_part(selector.part)
