# levelgen/cells.py
from enum import IntEnum
from typing import Final, Mapping


class CellLabel(IntEnum):
    """Semantic label stored in every grid cell."""

    EMPTY = 0
    PLAYER = 1
    ENEMY = 2
    WALL = 3
    DOOR = 4
    KEY = 5
    WEAPON = 6
    END = 7

    @property
    def key(self) -> str:
        """Stable lowercase identifier, e.g. ``"player"``."""
        return self.name.lower()

    @classmethod
    def from_key(cls, key: str) -> "CellLabel":
        try:
            return cls[key.upper()]
        except KeyError:
            raise ValueError(f"Unknown cell label: {key!r}") from None


# Every label except WALL can be stepped on once the door is unlocked.
WALKABLE_LABELS: Final[frozenset[CellLabel]] = frozenset(
    label for label in CellLabel if label is not CellLabel.WALL
)

# Labels the projection step is asked to instantiate.
RENDERED_LABELS: Final[tuple[CellLabel, ...]] = tuple(
    label for label in CellLabel if label is not CellLabel.EMPTY
)

DEFAULT_TILE_KEYS: Final[Mapping[CellLabel, str]] = {
    label: label.key for label in RENDERED_LABELS
}


__all__ = ["CellLabel", "WALKABLE_LABELS", "RENDERED_LABELS", "DEFAULT_TILE_KEYS"]
