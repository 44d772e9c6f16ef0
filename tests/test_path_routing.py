import pytest

from levelgen.cells import CellLabel
from levelgen.grid import LevelGrid
from levelgen.paths import (
    carve_corridor,
    door_position,
    is_eligible_target,
    nearest_target,
    route_paths,
)

ANCHORS = [(10, 10), (30, 10), (10, 40), (50, 50)]


def test_eligibility_treats_room_zero_target_as_free():
    assert is_eligible_target(3, {})
    assert is_eligible_target(2, {2: 0})
    assert not is_eligible_target(1, {1: 2})


def test_nearest_target_picks_closest_and_skips_last_room():
    # The last room is nearest to room 0 but can never be a target
    anchors = [(10, 10), (40, 10), (10, 45), (12, 30)]
    assert nearest_target(0, anchors, {}) == 1
    assert nearest_target(3, anchors, {}) == 2


def test_nearest_target_ties_go_to_lowest_index():
    anchors = [(20, 20), (10, 20), (30, 20), (40, 40)]
    assert nearest_target(0, anchors, {}) == 1


def test_nearest_target_none_when_everything_is_taken():
    assert nearest_target(2, ANCHORS, {0: 1, 1: 2}) is None


def test_route_paths_connection_rule():
    grid = LevelGrid(64)
    connections = route_paths(grid, ANCHORS, max_room_size=4)
    # 0 -> nearest (1); 1 -> only eligible (2); 2 finds nothing and falls back
    # to 0; 3 may use 2 because 2 is routed to room 0
    assert connections == {0: 1, 1: 2, 2: 0, 3: 2}


def test_corridor_is_vertical_then_horizontal():
    grid = LevelGrid(64)
    assert carve_corridor(grid, (10, 10), (30, 40)) == (20, 30)
    assert grid.label_at(10, 10) is CellLabel.EMPTY
    assert grid.label_at(10, 39) is CellLabel.EMPTY
    assert grid.label_at(10, 40) is CellLabel.EMPTY
    assert grid.label_at(29, 40) is CellLabel.EMPTY
    assert grid.label_at(30, 40) is CellLabel.WALL
    assert grid.label_at(11, 39) is CellLabel.WALL
    assert grid.count(CellLabel.EMPTY) == 30 + 20


def test_corridor_with_negative_legs():
    grid = LevelGrid(64)
    assert carve_corridor(grid, (30, 40), (10, 10)) == (-20, -30)
    assert grid.label_at(30, 40) is CellLabel.EMPTY
    assert grid.label_at(30, 11) is CellLabel.EMPTY
    assert grid.label_at(30, 10) is CellLabel.EMPTY
    assert grid.label_at(11, 10) is CellLabel.EMPTY
    assert grid.label_at(10, 10) is CellLabel.WALL


def test_corridor_to_self_carves_nothing():
    grid = LevelGrid(16)
    assert carve_corridor(grid, (5, 5), (5, 5)) == (0, 0)
    assert grid.count(CellLabel.EMPTY) == 0


@pytest.mark.parametrize(
    "fill_width, fill_height, expected",
    [
        (5, 10, (20, 24)),
        (3, -9, (20, 16)),
        (-12, 3, (16, 23)),
        (0, -2, (24, 18)),
        (7, 4, (24, 24)),
    ],
)
def test_door_position(fill_width, fill_height, expected):
    assert door_position((20, 20), fill_width, fill_height, 4) == expected


def test_route_paths_places_single_door_on_last_corridor():
    grid = LevelGrid(64)
    route_paths(grid, ANCHORS, max_room_size=4)
    # Room 3 at (50, 50) routes to (10, 40): vertical leg is 10 long (> 4)
    assert grid.positions(CellLabel.DOOR) == [(50, 46)]
