# levelgen/paths.py
import math
from typing import Dict, Optional, Sequence, Tuple

import structlog

from levelgen.cells import CellLabel
from levelgen.grid import Anchor, LevelGrid

log = structlog.get_logger(__name__)

# Target recorded for a room whose search finds no eligible candidate.
FALLBACK_TARGET = 0


def _sign(value: int) -> int:
    # Zero counts as positive.
    return -1 if value < 0 else 1


def is_eligible_target(j: int, connections: Dict[int, int]) -> bool:
    """A room can be chosen until it records a target other than room 0.

    Rooms that have not been routed yet and rooms routed to room 0 are both
    eligible.
    """
    return connections.get(j, FALLBACK_TARGET) == FALLBACK_TARGET


def nearest_target(
    i: int, anchors: Sequence[Anchor], connections: Dict[int, int]
) -> Optional[int]:
    """Index of the closest eligible room for room ``i``.

    The last room is never a candidate, so it ends up with exactly one
    corridor (its own). Ties go to the lowest index.
    """
    best: Optional[int] = None
    best_distance = math.inf
    for j in range(len(anchors) - 1):
        if j == i or not is_eligible_target(j, connections):
            continue
        distance = math.dist(anchors[i], anchors[j])
        if distance < best_distance:
            best_distance = distance
            best = j
    return best


def carve_corridor(grid: LevelGrid, start: Anchor, end: Anchor) -> Tuple[int, int]:
    """Carves an L-shaped corridor, vertical leg first.

    Returns the ``(fill_width, fill_height)`` vector from ``start`` to ``end``.
    """
    x, y = start
    fill_width = end[0] - x
    fill_height = end[1] - y
    grid.fill_block(x, y, 1, fill_height, CellLabel.EMPTY)
    grid.fill_block(x, y + fill_height, fill_width, 1, CellLabel.EMPTY)
    return fill_width, fill_height


def door_position(
    anchor: Anchor, fill_width: int, fill_height: int, max_room_size: int
) -> Anchor:
    """Where the exit door goes on the last room's corridor."""
    x, y = anchor
    if abs(fill_height) > max_room_size:
        return x, y + max_room_size * _sign(fill_height)
    return x + max_room_size * _sign(fill_width), y + fill_height


def route_paths(
    grid: LevelGrid, anchors: Sequence[Anchor], max_room_size: int
) -> Dict[int, int]:
    """Connects every room to its nearest eligible room and places the exit door.

    Rooms are processed in index order. Returns the room index -> target
    index mapping. The result is not guaranteed to be fully connected.
    """
    connections: Dict[int, int] = {}
    last = len(anchors) - 1
    for i, anchor in enumerate(anchors):
        target = nearest_target(i, anchors, connections)
        if target is None:
            log.debug("No eligible target, using fallback", room_index=i)
            target = FALLBACK_TARGET
        connections[i] = target

        fill_width, fill_height = carve_corridor(grid, anchor, anchors[target])
        log.debug(
            "Carved corridor",
            room_index=i,
            target=target,
            fill_width=fill_width,
            fill_height=fill_height,
        )

        if i == last:
            door = door_position(anchor, fill_width, fill_height, max_room_size)
            grid.fill_cell(door[0], door[1], CellLabel.DOOR)
            log.debug("Placed exit door", room_index=i, pos=door)

    log.info("Paths routed", connections=len(connections))
    return connections


__all__ = [
    "route_paths",
    "nearest_target",
    "carve_corridor",
    "door_position",
    "is_eligible_target",
]
