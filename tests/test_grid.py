"""Tests for the Grid helper."""

import pytest

from aoc2022.grid import Grid
from aoc2022.models import InputFormatError


@pytest.fixture
def grid():
    return Grid.parse("123\n456\n", int)


def test_parse_dimensions(grid):
    assert (grid.width, grid.height) == (3, 2)
    assert grid[(2, 1)] == 6


def test_out_of_bounds(grid):
    assert not grid.in_bounds((3, 0))
    with pytest.raises(IndexError):
        grid[(0, 2)]


def test_neighbors_stay_inside(grid):
    assert sorted(grid.neighbors((0, 0))) == [(0, 1), (1, 0)]


def test_ray(grid):
    assert list(grid.ray((0, 0), (1, 0))) == [(1, 0), (2, 0)]


def test_ragged_rows_rejected():
    with pytest.raises(InputFormatError):
        Grid.parse("123\n45\n")


def test_find_missing():
    with pytest.raises(InputFormatError):
        Grid.parse("ab\ncd\n").find("E")
