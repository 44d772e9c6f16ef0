# levelgen/config.py
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import structlog
import yaml

from levelgen.cells import DEFAULT_TILE_KEYS, CellLabel
from levelgen.errors import ConfigurationError

log = structlog.get_logger(__name__)

RECOMMENDED_MIN_SIZE = 64
RECOMMENDED_MAX_SIZE = 128


def _default_tile_keys() -> Dict[CellLabel, str]:
    return dict(DEFAULT_TILE_KEYS)


@dataclass
class LevelConfig:
    size: int = 64
    rooms: int = 8
    min_room_size: int = 2
    max_room_size: int = 4
    seed: Optional[int] = None
    max_placement_attempts: int = 1000
    # Treat not-yet-placed room slots as anchors at (0, 0) during placement.
    check_unplaced_slots: bool = True
    tile_keys: Dict[CellLabel, str] = field(default_factory=_default_tile_keys)

    @property
    def separation(self) -> int:
        """Side of the exclusion box around every anchor."""
        return self.max_room_size * 2

    @property
    def anchor_range(self) -> tuple[int, int]:
        """Half-open range anchors are sampled from, on both axes."""
        return self.max_room_size + 1, self.size - self.max_room_size

    def max_packable_rooms(self) -> int:
        """Upper bound on rooms that can satisfy the separation rule."""
        low, high = self.anchor_range
        span = high - low
        if span <= 0:
            return 0
        per_axis = (span - 1) // self.separation + 1
        return per_axis * per_axis

    def validate(self) -> None:
        """Raise :class:`ConfigurationError` for the first violated constraint."""
        if self.rooms < 2:
            raise ConfigurationError("rooms", f"need at least 2 rooms, got {self.rooms}")
        if self.min_room_size <= 0 or self.max_room_size <= 0:
            raise ConfigurationError(
                "min_room_size",
                f"room sizes must be positive, got {self.min_room_size}..{self.max_room_size}",
            )
        if self.min_room_size > self.max_room_size:
            raise ConfigurationError(
                "min_room_size",
                f"min_room_size {self.min_room_size} exceeds max_room_size {self.max_room_size}",
            )
        # At 1 the enemy offset (+1, +1) can land on the exit door.
        if self.max_room_size < 2:
            raise ConfigurationError(
                "max_room_size",
                f"max_room_size must be at least 2, got {self.max_room_size}",
            )
        if self.size <= self.max_room_size * 2 + 1:
            raise ConfigurationError(
                "size",
                f"size {self.size} leaves no room for anchors with max_room_size {self.max_room_size}",
            )
        if self.max_placement_attempts < 1:
            raise ConfigurationError(
                "max_placement_attempts",
                f"must be at least 1, got {self.max_placement_attempts}",
            )
        capacity = self.max_packable_rooms()
        if self.rooms > capacity:
            raise ConfigurationError(
                "rooms",
                f"{self.rooms} rooms cannot be separated by {self.separation} "
                f"on a {self.size} grid (at most {capacity})",
            )
        if not RECOMMENDED_MIN_SIZE <= self.size <= RECOMMENDED_MAX_SIZE:
            log.warning(
                "Grid size outside recommended range",
                size=self.size,
                recommended=(RECOMMENDED_MIN_SIZE, RECOMMENDED_MAX_SIZE),
            )


def parse_tile_keys(raw: Mapping[str, Any]) -> Dict[CellLabel, str]:
    """Convert a ``{"wall": "stone_wall", ...}`` mapping into label keys."""
    tile_keys: Dict[CellLabel, str] = {}
    for name, key in raw.items():
        try:
            label = CellLabel.from_key(str(name))
        except ValueError as e:
            raise ConfigurationError("tile_keys", str(e)) from e
        if label is CellLabel.EMPTY:
            raise ConfigurationError("tile_keys", "empty cells are never rendered")
        tile_keys[label] = str(key)
    return tile_keys


def config_from_dict(data: Mapping[str, Any]) -> LevelConfig:
    """Build a :class:`LevelConfig` from a loaded YAML document."""
    level_section = dict(data.get("level") or {})
    known = {f.name for f in fields(LevelConfig)} - {"tile_keys"}
    unknown = sorted(set(level_section) - known)
    if unknown:
        raise ConfigurationError("level", f"unknown keys {unknown}")

    config = LevelConfig(**level_section)
    raw_keys = data.get("tile_keys")
    if raw_keys:
        config.tile_keys = parse_tile_keys(raw_keys)
    return config


def load_level_config(config_path: Path) -> LevelConfig:
    """Loads a level configuration from a YAML file."""
    config_path = Path(config_path)
    if not config_path.is_file():
        log.error("Level config file not found", path=str(config_path))
        raise FileNotFoundError(f"Level configuration file not found: {config_path}")
    try:
        with config_path.open("r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        log.error(
            "Error parsing level config YAML",
            path=str(config_path),
            error=str(e),
            exc_info=True,
        )
        raise
    if data is None:
        log.warning("Level config file is empty, using defaults.", path=str(config_path))
        data = {}
    config = config_from_dict(data)
    log.info(
        "Level config loaded",
        path=str(config_path),
        size=config.size,
        rooms=config.rooms,
        seed=config.seed,
    )
    return config


__all__ = ["LevelConfig", "config_from_dict", "load_level_config", "parse_tile_keys"]
