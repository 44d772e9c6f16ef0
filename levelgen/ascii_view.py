# levelgen/ascii_view.py
from typing import Dict, Final, List, Mapping, Optional, Tuple

import structlog

from levelgen.cells import DEFAULT_TILE_KEYS, CellLabel
from levelgen.grid import LevelGrid
from levelgen.projection import ProjectionReport, project_grid

log = structlog.get_logger(__name__)

EMPTY_GLYPH: Final[str] = "."
UNKNOWN_GLYPH: Final[str] = "?"

DEFAULT_GLYPHS: Final[Dict[str, str]] = {
    "wall": "#",
    "player": "@",
    "enemy": "e",
    "door": "+",
    "key": "k",
    "weapon": "/",
    "end": ">",
}


class AsciiCanvas:
    """Text stand-in for a scene: one character per grid cell."""

    def __init__(self, size: int, glyphs: Optional[Mapping[str, str]] = None):
        self.size = size
        self.glyphs: Dict[str, str] = dict(glyphs or DEFAULT_GLYPHS)
        self.rows: List[List[str]] = [[EMPTY_GLYPH] * size for _ in range(size)]

    def render(self, tile_key: str, position: Tuple[int, int]) -> None:
        x, y = position
        glyph = self.glyphs.get(tile_key)
        if glyph is None:
            log.warning("No glyph for tile key", tile_key=tile_key, pos=position)
            glyph = UNKNOWN_GLYPH
        self.rows[y][x] = glyph

    def to_text(self) -> str:
        return "\n".join("".join(row) for row in self.rows)


def render_text(
    grid: LevelGrid, tile_keys: Mapping[CellLabel, str] = DEFAULT_TILE_KEYS
) -> str:
    """Projects ``grid`` onto a fresh :class:`AsciiCanvas` and returns its text."""
    canvas = AsciiCanvas(grid.size)
    report: ProjectionReport = project_grid(grid, canvas, tile_keys)
    if report.skipped:
        log.debug("ASCII view skipped cells", skipped=report.skipped)
    return canvas.to_text()


__all__ = ["AsciiCanvas", "render_text", "DEFAULT_GLYPHS"]
