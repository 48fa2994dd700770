"""CLI for the aoc2022 solutions.

Usage:
    python -m aoc2022 1 a                      # Day 1, part A from input/01a.txt
    python -m aoc2022 0022 B                   # Zero-padded day, upper-case part
    python -m aoc2022 5 a --input custom.txt   # Use a specific input file
    python -m aoc2022 --list                   # Show registered solvers
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from aoc2022.models import ChallengeSelector, InputFileNotFound, Part, RunnerError
from aoc2022.runner import DEFAULT_INPUT_DIR, input_path, run
from aoc2022.solvers import list_solvers

app = typer.Typer(
    name="aoc2022",
    help="Solves Advent of Code 2022 challenges.",
    add_completion=False,
    # Unknown dash tokens stay positional so a negative DAY reaches the range check
    context_settings={"help_option_names": ["-h", "--help"], "ignore_unknown_options": True},
)
console = Console(stderr=True)


def _render_solvers() -> None:
    table = Table(title="Registered Solvers", show_header=True, header_style="bold")
    table.add_column("Day", justify="right")
    table.add_column("Title", style="green", min_width=25)
    table.add_column("Parts", justify="center")

    for info in list_solvers():
        table.add_row(str(info.day), info.title, "a, b")

    console.print()
    console.print(table)
    console.print()


@app.command()
def main(
    day: Optional[int] = typer.Argument(None, help="Challenge number, may be zero-padded (e.g. 1, 01, 0022)"),
    part: Optional[Part] = typer.Argument(None, case_sensitive=False, help="Subchallenge: a or b"),
    input_file: Optional[Path] = typer.Option(
        None, "--input", "-i", help="Use this file as the puzzle input instead of <input-dir>/<DD><part>.txt",
    ),
    input_dir: Path = typer.Option(
        DEFAULT_INPUT_DIR, "--input-dir", envvar="AOC2022_INPUT_DIR", help="Directory holding the default input files",
    ),
    show_list: bool = typer.Option(False, "--list", "-l", help="Show registered solvers and exit"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print selector, input path and timing to stderr"),
) -> None:
    """Solve one challenge DAY, subchallenge PART and print the answer."""
    if show_list:
        _render_solvers()
        return

    if day is None:
        raise typer.BadParameter("a challenge number is required", param_hint="DAY")
    if part is None:
        raise typer.BadParameter("a subchallenge (a or b) is required", param_hint="PART")

    try:
        selector = ChallengeSelector(day, part)
        if verbose:
            path = input_file if input_file is not None else input_path(selector, input_dir)
            console.print(f"[bold]Solving:[/bold] {selector}")
            console.print(f"  Input: {escape(str(path))}")
        start = time.monotonic()
        result = run(selector, input_file=input_file, input_dir=input_dir)
        elapsed = time.monotonic() - start
    except InputFileNotFound as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        if input_file is None:
            console.print(
                f"  [dim]Make sure that {escape(str(e.path))} exists, is readable, "
                "and contains valid UTF-8 data.[/dim]"
            )
        raise typer.Exit(e.exit_code)
    except RunnerError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(e.exit_code)

    typer.echo(result)
    if verbose:
        console.print(f"  [dim]Solved in {elapsed:.3f}s[/dim]")


if __name__ == "__main__":
    app()
