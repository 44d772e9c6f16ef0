# levelgen/rooms.py
from typing import List, Sequence

import structlog

from game_rng import GameRNG
from levelgen.cells import CellLabel
from levelgen.config import LevelConfig
from levelgen.errors import PlacementExhaustedError
from levelgen.grid import Anchor, LevelGrid

log = structlog.get_logger(__name__)

# Value held by a room slot before its anchor is accepted.
UNPLACED_ANCHOR: Anchor = (0, 0)


def too_close(candidate: Anchor, other: Anchor, separation: int) -> bool:
    """True when ``candidate`` lies inside the exclusion box of ``other``."""
    return (
        other[0] - separation < candidate[0] < other[0] + separation
        and other[1] - separation < candidate[1] < other[1] + separation
    )


def is_valid_anchor(
    candidate: Anchor, index: int, slots: Sequence[Anchor], separation: int
) -> bool:
    """Checks ``candidate`` for room ``index`` against every other slot."""
    for j, other in enumerate(slots):
        if j != index and too_close(candidate, other, separation):
            return False
    return True


def carve_room(grid: LevelGrid, anchor: Anchor, room_size: int) -> None:
    """Carves a ``2*room_size`` square of floor around ``anchor``."""
    x, y = anchor
    grid.fill_block(
        x - room_size, y - room_size, room_size * 2, room_size * 2, CellLabel.EMPTY
    )


def place_rooms(grid: LevelGrid, config: LevelConfig, rng: GameRNG) -> List[Anchor]:
    """Places ``config.rooms`` anchors by rejection sampling and carves each room.

    When ``config.check_unplaced_slots`` is set, slots that have not been
    placed yet still take part in the separation check at
    :data:`UNPLACED_ANCHOR`, which keeps early rooms away from the origin.
    Otherwise only already accepted anchors are checked.

    Raises :class:`PlacementExhaustedError` once a room uses up
    ``config.max_placement_attempts`` candidates.
    """
    low, high = config.anchor_range
    separation = config.separation
    slots: List[Anchor] = [UNPLACED_ANCHOR] * config.rooms

    for i in range(config.rooms):
        checked = slots if config.check_unplaced_slots else slots[:i]
        attempts = 0
        while True:
            if attempts >= config.max_placement_attempts:
                log.error(
                    "Room placement exhausted",
                    room_index=i,
                    attempts=attempts,
                    placed=i,
                )
                raise PlacementExhaustedError(i, attempts)
            attempts += 1
            candidate = (rng.get_range(low, high), rng.get_range(low, high))
            if is_valid_anchor(candidate, i, checked, separation):
                break

        slots[i] = candidate
        room_size = rng.get_range(config.min_room_size, config.max_room_size)
        carve_room(grid, candidate, room_size)
        log.debug(
            "Placed room",
            room_index=i,
            anchor=candidate,
            room_size=room_size,
            attempts=attempts,
        )

    log.info("Rooms placed", count=len(slots))
    return slots


__all__ = ["place_rooms", "carve_room", "is_valid_anchor", "too_close", "UNPLACED_ANCHOR"]
