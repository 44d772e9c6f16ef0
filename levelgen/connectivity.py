# levelgen/connectivity.py
from collections import deque
from typing import List, Sequence

import numpy as np

from levelgen.cells import WALKABLE_LABELS
from levelgen.grid import Anchor, LevelGrid


def walkable_mask(grid: LevelGrid) -> np.ndarray:
    """Boolean array, True for every cell holding a walkable label."""
    return np.isin(grid.cells, [int(label) for label in WALKABLE_LABELS])


def reachable_mask(grid: LevelGrid, start: Anchor) -> np.ndarray:
    """Flood fills 4-connected walkable cells from ``start``.

    Returns an all-False mask when ``start`` is out of bounds or a wall.
    """
    size = grid.size
    walkable = walkable_mask(grid)
    reached = np.zeros((size, size), dtype=bool)
    sx, sy = start
    if not grid.in_bounds(sx, sy) or not walkable[sy, sx]:
        return reached

    queue = deque([(sy, sx)])
    reached[sy, sx] = True
    while queue:
        cy, cx = queue.popleft()
        for dy, dx in ((0, 1), (1, 0), (0, -1), (-1, 0)):
            ny, nx = cy + dy, cx + dx
            if (
                0 <= ny < size
                and 0 <= nx < size
                and walkable[ny, nx]
                and not reached[ny, nx]
            ):
                reached[ny, nx] = True
                queue.append((ny, nx))
    return reached


def is_reachable(grid: LevelGrid, start: Anchor, goal: Anchor) -> bool:
    gx, gy = goal
    if not grid.in_bounds(gx, gy):
        return False
    return bool(reachable_mask(grid, start)[gy, gx])


def unreachable_anchors(grid: LevelGrid, anchors: Sequence[Anchor]) -> List[int]:
    """Indices of rooms whose anchor cannot be reached from room 0."""
    if not anchors:
        return []
    reached = reachable_mask(grid, anchors[0])
    return [i for i, (x, y) in enumerate(anchors) if not reached[y, x]]


__all__ = ["walkable_mask", "reachable_mask", "is_reachable", "unreachable_anchors"]
