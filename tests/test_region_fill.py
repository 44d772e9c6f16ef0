import numpy as np
import pytest

from levelgen.cells import CellLabel
from levelgen.errors import GridBoundsError
from levelgen.grid import LevelGrid


def _cells(xs, ys):
    return {(x, y) for x in xs for y in ys}


def test_new_grid_is_all_wall():
    grid = LevelGrid(16)
    assert grid.count(CellLabel.WALL) == 16 * 16
    assert np.all(grid.border_cells() == int(CellLabel.WALL))


def test_positive_fill_covers_rectangle():
    grid = LevelGrid(10)
    grid.fill_block(2, 3, 4, 2, CellLabel.EMPTY)
    assert set(grid.positions(CellLabel.EMPTY)) == _cells(range(2, 6), range(3, 5))


def test_negative_width_fills_leftwards():
    grid = LevelGrid(10, fill=CellLabel.EMPTY)
    grid.fill_block(5, 5, -3, 2, CellLabel.WALL)
    assert set(grid.positions(CellLabel.WALL)) == _cells({3, 4, 5}, {5, 6})


def test_negative_height_fills_upwards():
    grid = LevelGrid(10, fill=CellLabel.EMPTY)
    grid.fill_block(5, 5, 3, -2, CellLabel.WALL)
    assert set(grid.positions(CellLabel.WALL)) == _cells({5, 6, 7}, {4, 5})


def test_both_extents_negative():
    grid = LevelGrid(10, fill=CellLabel.EMPTY)
    grid.fill_block(4, 4, -2, -3, CellLabel.DOOR)
    assert set(grid.positions(CellLabel.DOOR)) == _cells({3, 4}, {2, 3, 4})


def test_zero_extent_writes_nothing():
    grid = LevelGrid(8)
    grid.fill_block(3, 3, 0, 4, CellLabel.EMPTY)
    grid.fill_block(3, 3, 4, 0, CellLabel.EMPTY)
    # Nothing is covered, so coordinates are never checked
    grid.fill_block(100, 100, 0, 5, CellLabel.EMPTY)
    assert grid.count(CellLabel.EMPTY) == 0


def test_single_cell_fill():
    grid = LevelGrid(8)
    grid.fill_cell(7, 0, CellLabel.KEY)
    assert grid.label_at(7, 0) is CellLabel.KEY
    assert grid.positions(CellLabel.KEY) == [(7, 0)]


def test_later_fill_overwrites():
    grid = LevelGrid(8)
    grid.fill_block(1, 1, 4, 4, CellLabel.EMPTY)
    grid.fill_cell(2, 2, CellLabel.PLAYER)
    assert grid.label_at(2, 2) is CellLabel.PLAYER
    assert grid.count(CellLabel.EMPTY) == 15


def test_fill_past_far_edge_raises_without_writing():
    grid = LevelGrid(8)
    with pytest.raises(GridBoundsError) as excinfo:
        grid.fill_block(6, 6, 3, 1, CellLabel.EMPTY)
    assert excinfo.value.rect == (6, 6, 9, 7)
    assert grid.count(CellLabel.EMPTY) == 0


def test_negative_fill_past_origin_raises():
    grid = LevelGrid(8)
    with pytest.raises(GridBoundsError):
        grid.fill_block(0, 3, -2, 1, CellLabel.EMPTY)
    with pytest.raises(IndexError):
        grid.fill_block(3, 0, 1, -2, CellLabel.EMPTY)


def test_label_at_out_of_bounds_raises():
    grid = LevelGrid(4)
    with pytest.raises(GridBoundsError):
        grid.label_at(4, 0)
    assert not grid.in_bounds(-1, 2)


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        LevelGrid(0)
