# levelgen/population.py
from typing import Sequence

import structlog

from levelgen.cells import CellLabel
from levelgen.grid import Anchor, LevelGrid

log = structlog.get_logger(__name__)

# Every third room, starting at the given index.
WEAPON_START, ENEMY_START, ROOM_STRIDE = 2, 1, 3
ENEMY_OFFSET = (1, 1)


def weapon_rooms(room_count: int) -> range:
    return range(WEAPON_START, room_count, ROOM_STRIDE)


def enemy_rooms(room_count: int) -> range:
    return range(ENEMY_START, room_count, ROOM_STRIDE)


def populate_rooms(grid: LevelGrid, anchors: Sequence[Anchor]) -> None:
    """Writes the player, key, weapons, enemies and end goal onto the grid.

    Later writes win, so with two rooms the end goal replaces the key.
    """
    room_count = len(anchors)

    grid.fill_cell(*anchors[0], CellLabel.PLAYER)
    grid.fill_cell(*anchors[1], CellLabel.KEY)

    for i in weapon_rooms(room_count):
        grid.fill_cell(*anchors[i], CellLabel.WEAPON)

    dx, dy = ENEMY_OFFSET
    for i in enemy_rooms(room_count):
        x, y = anchors[i]
        grid.fill_cell(x + dx, y + dy, CellLabel.ENEMY)

    grid.fill_cell(*anchors[-1], CellLabel.END)

    log.info(
        "Rooms populated",
        player=anchors[0],
        end=anchors[-1],
        weapons=len(weapon_rooms(room_count)),
        enemies=len(enemy_rooms(room_count)),
    )


__all__ = ["populate_rooms", "weapon_rooms", "enemy_rooms"]
