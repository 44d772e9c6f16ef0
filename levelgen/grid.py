# levelgen/grid.py
from typing import Iterator, List, Tuple

import numpy as np
import structlog

from levelgen.cells import CellLabel
from levelgen.errors import GridBoundsError

log = structlog.get_logger(__name__)

Anchor = Tuple[int, int]


def _span(start: int, extent: int) -> Tuple[int, int]:
    """Half-open index range covered by ``extent`` cells from ``start``.

    A negative extent runs backwards: ``_span(5, -3)`` covers 3, 4 and 5.
    """
    if extent >= 0:
        return start, start + extent
    return start + extent + 1, start + 1


class LevelGrid:
    """Square buffer of :class:`CellLabel` values indexed ``[y, x]``."""

    def __init__(self, size: int, fill: CellLabel = CellLabel.WALL):
        if size <= 0:
            log.error("Invalid grid size", size=size)
            raise ValueError("Grid size must be a positive integer.")
        self._size = size
        self.cells: np.ndarray = np.full(
            (size, size), fill_value=int(fill), dtype=np.uint8, order="C"
        )
        log.debug("Allocated level grid", size=size, fill=fill.name)

    @property
    def size(self) -> int:
        return self._size

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._size and 0 <= y < self._size

    def label_at(self, x: int, y: int) -> CellLabel:
        if not self.in_bounds(x, y):
            raise GridBoundsError((x, y, x + 1, y + 1), self._size)
        return CellLabel(int(self.cells[y, x]))

    def fill_block(
        self, x: int, y: int, width: int, height: int, label: CellLabel
    ) -> None:
        """Write ``label`` into the rectangle anchored at ``(x, y)``.

        Negative ``width``/``height`` extend left/up from the anchor instead of
        right/down. A zero extent writes nothing. Raises
        :class:`GridBoundsError` without writing if any covered cell lies
        outside the grid.
        """
        x0, x1 = _span(x, width)
        y0, y1 = _span(y, height)
        if x0 == x1 or y0 == y1:
            return
        if x0 < 0 or y0 < 0 or x1 > self._size or y1 > self._size:
            log.error(
                "Fill outside grid bounds",
                x=x,
                y=y,
                width=width,
                height=height,
                label=label.name,
                size=self._size,
            )
            raise GridBoundsError((x0, y0, x1, y1), self._size)
        self.cells[y0:y1, x0:x1] = int(label)

    def fill_cell(self, x: int, y: int, label: CellLabel) -> None:
        self.fill_block(x, y, 1, 1, label)

    def count(self, label: CellLabel) -> int:
        return int(np.count_nonzero(self.cells == int(label)))

    def positions(self, label: CellLabel) -> List[Anchor]:
        """All ``(x, y)`` coordinates holding ``label`` in row-major order."""
        return [(int(x), int(y)) for y, x in np.argwhere(self.cells == int(label))]

    def border_cells(self) -> np.ndarray:
        """Labels along the outer ring of the grid."""
        return np.concatenate(
            (
                self.cells[0, :],
                self.cells[-1, :],
                self.cells[1:-1, 0],
                self.cells[1:-1, -1],
            )
        )

    def iter_cells(self) -> Iterator[Tuple[int, int, CellLabel]]:
        """Yield ``(x, y, label)`` for every cell, rows first."""
        for y in range(self._size):
            row = self.cells[y]
            for x in range(self._size):
                yield x, y, CellLabel(int(row[x]))


__all__ = ["LevelGrid", "Anchor"]
