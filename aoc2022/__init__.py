"""aoc2022 — Advent of Code 2022 solutions behind a small CLI runner.

Picks a solver by day and part, feeds it the matching puzzle input from
``input/<DD><part>.txt`` and prints the answer.

Usage:
    python -m aoc2022 1 a                    # Solve day 1, part A
    python -m aoc2022 05 B --input mine.txt  # Use a specific input file
    python -m aoc2022 --list                 # Show registered solvers
"""
