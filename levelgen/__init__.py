"""Procedural tile-grid level generation: rooms, corridors, door and gameplay objects."""

from .cells import CellLabel, DEFAULT_TILE_KEYS
from .config import LevelConfig, load_level_config
from .errors import (
    ConfigurationError,
    GridBoundsError,
    LevelGenerationError,
    PlacementExhaustedError,
)
from .grid import LevelGrid
from .procgen import GeneratedLevel, generate
from .projection import ProjectionReport, TileRenderer, project_grid

__all__ = [
    "CellLabel",
    "DEFAULT_TILE_KEYS",
    "LevelConfig",
    "load_level_config",
    "ConfigurationError",
    "GridBoundsError",
    "LevelGenerationError",
    "PlacementExhaustedError",
    "LevelGrid",
    "GeneratedLevel",
    "generate",
    "ProjectionReport",
    "TileRenderer",
    "project_grid",
]
