# levelgen/procgen.py
from typing import Dict, List, NamedTuple, Optional

import structlog

try:
    from game_rng import GameRNG
except ImportError as e:
    structlog.get_logger().error("CRITICAL: GameRNG class not found.", error=str(e))
    raise

from levelgen.cells import CellLabel
from levelgen.config import LevelConfig
from levelgen.connectivity import unreachable_anchors
from levelgen.grid import Anchor, LevelGrid
from levelgen.paths import route_paths
from levelgen.population import populate_rooms
from levelgen.rooms import place_rooms

log = structlog.get_logger(__name__)


class GeneratedLevel(NamedTuple):
    """A finished level ready for projection."""
    grid: LevelGrid
    anchors: List[Anchor]
    connections: Dict[int, int]
    seed: int


def generate(config: LevelConfig, rng: Optional[GameRNG] = None) -> GeneratedLevel:
    """Builds one level: walls, rooms, corridors, door, then gameplay objects.

    ``rng`` defaults to a :class:`GameRNG` seeded from ``config.seed``. Raises
    :class:`~levelgen.errors.ConfigurationError` or
    :class:`~levelgen.errors.PlacementExhaustedError` without returning a grid.
    """
    try:
        config.validate()
    except ValueError as e:
        log.error("Invalid level configuration", error=str(e))
        raise

    if rng is None:
        rng = GameRNG(seed=config.seed)

    log.info(
        "Starting level generation",
        size=config.size,
        rooms=config.rooms,
        room_size=(config.min_room_size, config.max_room_size),
        seed=rng.initial_seed,
    )

    grid = LevelGrid(config.size, fill=CellLabel.WALL)

    log.info("Placing rooms...")
    anchors = place_rooms(grid, config, rng)

    log.info("Routing paths...")
    connections = route_paths(grid, anchors, config.max_room_size)

    log.info("Populating rooms...")
    populate_rooms(grid, anchors)

    cut_off = unreachable_anchors(grid, anchors)
    if cut_off:
        log.warning("Rooms unreachable from start", rooms=cut_off)

    log.info(
        "Level generation complete",
        seed=rng.initial_seed,
        player_start=anchors[0],
        end=anchors[-1],
    )
    return GeneratedLevel(grid, anchors, connections, rng.initial_seed)


__all__ = ["GeneratedLevel", "generate"]
