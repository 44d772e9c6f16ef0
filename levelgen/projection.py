"""Hand a finished level grid to an external renderer.

The generator never creates visual objects itself. :func:`project_grid` walks
the grid and asks a :class:`TileRenderer` to instantiate one tile per
non-empty cell, keyed by whatever the host registered for that label in the
tile-key lookup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Protocol, Set, Tuple

import structlog

from levelgen.cells import CellLabel
from levelgen.grid import LevelGrid

log = structlog.get_logger(__name__)


class TileRenderer(Protocol):
    """Capability supplied by the host rendering environment.

    ``render`` is called once per non-empty cell with the tile key looked up
    for the cell's label and the cell position as ``(x, y)``.
    """

    def render(self, tile_key: str, position: Tuple[int, int]) -> None:
        ...


@dataclass
class ProjectionReport:
    rendered: int = 0
    skipped: int = 0
    missing_labels: Set[CellLabel] = field(default_factory=set)


def project_grid(
    grid: LevelGrid,
    renderer: TileRenderer,
    tile_keys: Mapping[CellLabel, str],
) -> ProjectionReport:
    """Renders every non-empty cell; cells without a tile key are skipped."""
    report = ProjectionReport()
    for x, y, label in grid.iter_cells():
        if label is CellLabel.EMPTY:
            continue
        tile_key = tile_keys.get(label)
        if tile_key is None:
            if label not in report.missing_labels:
                log.error("No tile key registered for label", label=label.name)
            report.missing_labels.add(label)
            report.skipped += 1
            continue
        renderer.render(tile_key, (x, y))
        report.rendered += 1

    log.info(
        "Grid projected",
        rendered=report.rendered,
        skipped=report.skipped,
        missing=sorted(label.key for label in report.missing_labels),
    )
    return report


__all__ = ["TileRenderer", "ProjectionReport", "project_grid"]
