"""Exceptions raised while building a level.

``ConfigurationError`` and ``PlacementExhaustedError`` abort a whole
generation run. ``GridBoundsError`` signals a region fill that would write
outside the grid; it is raised before any cell is touched.
"""

from __future__ import annotations

from typing import Tuple


class LevelGenerationError(Exception):
    """Base class for level generation failures."""


class ConfigurationError(LevelGenerationError, ValueError):
    """A configuration value or combination can never produce a level."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


class PlacementExhaustedError(LevelGenerationError):
    """Rejection sampling ran out of attempts for one room."""

    def __init__(self, room_index: int, attempts: int):
        self.room_index = room_index
        self.attempts = attempts
        super().__init__(
            f"Could not place room {room_index} after {attempts} attempts"
        )


class GridBoundsError(LevelGenerationError, IndexError):
    """A region fill extends outside the grid."""

    def __init__(self, rect: Tuple[int, int, int, int], size: int):
        # rect is (x_start, y_start, x_stop, y_stop), stops exclusive
        self.rect = rect
        self.size = size
        super().__init__(f"Fill rectangle {rect} outside grid of size {size}")


__all__ = [
    "LevelGenerationError",
    "ConfigurationError",
    "PlacementExhaustedError",
    "GridBoundsError",
]
