"""
Neighbor Accounting

Keeps the cached neighbor sums consistent. After initialization the only
writes to a neighbor sum come from increment_neighbors / decrement_neighbors,
called once per cell that becomes or stops being ALIVE.
"""

import numpy as np

from .cell import MAX_NEIGHBOR_SUM, Tag
from .errors import NeighborSumOverflow
from .grid import NEIGHBOR_OFFSETS


def _shift_neighbors(grid, x, y, delta):
    # Width or height below 3 makes some neighbors coincide; each visit counts.
    idx, visits = np.unique(grid.neighbor_indices(x, y), return_counts=True)
    updated = grid.sums[idx].astype(np.int16) + delta * visits
    if updated.min() < 0 or updated.max() > MAX_NEIGHBOR_SUM:
        raise NeighborSumOverflow(
            f"Neighbor sum around ({x}, {y}) would leave [0, {MAX_NEIGHBOR_SUM}]")
    grid.sums[idx] = updated


def increment_neighbors(grid, x, y):
    """Add 1 to the neighbor sum of all 8 neighbors of (x, y)."""
    _shift_neighbors(grid, x, y, 1)


def decrement_neighbors(grid, x, y):
    """Subtract 1 from the neighbor sum of all 8 neighbors of (x, y)."""
    _shift_neighbors(grid, x, y, -1)


def _moore_counts(alive):
    """Count Moore neighborhood (8 neighbors) using np.roll with periodic boundaries."""
    n = np.zeros(alive.shape, dtype=np.uint8)
    for dx, dy in NEIGHBOR_OFFSETS:
        n += np.roll(np.roll(alive, -dy, axis=0), -dx, axis=1)
    return n


def rescan(grid):
    """Rebuild every neighbor sum from the current tags."""
    alive = (grid.tags == int(Tag.ALIVE)).reshape(grid.height, grid.width).astype(np.uint8)
    grid.sums[:] = _moore_counts(alive).ravel()


def count_alive_neighbors(grid, x, y):
    return sum(1 for nx, ny in grid.neighbors(x, y) if grid.tag_at(nx, ny) == Tag.ALIVE)


def verify_neighbor_sums(grid):
    """Return the (x, y) of every cell whose cached sum disagrees with its neighbors."""
    alive = (grid.tags == int(Tag.ALIVE)).reshape(grid.height, grid.width).astype(np.uint8)
    expected = _moore_counts(alive).ravel()
    return [grid.coords(i) for i in np.flatnonzero(expected != grid.sums)]
