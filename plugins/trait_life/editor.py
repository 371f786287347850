"""
Manual cell editing between ticks.
"""

from .cell import Tag
from .neighbors import decrement_neighbors, increment_neighbors


def toggle(grid, x, y):
    """Flip (x, y) between EMPTY and ALIVE, keeping its trait.

    Cells in a transitional tag are left untouched and False is returned.
    Out-of-range coordinates raise InvalidCoordinate, and a neighbor sum
    that would leave [0, 8] raises NeighborSumOverflow; either way the grid
    is unchanged.
    """
    cell = grid.get(x, y)
    if cell.is_transitional:
        return False
    # Tag is written only after the neighbor update succeeds. Re-read the
    # cell: on a 1-wide or 1-high grid it is its own neighbor.
    if cell.tag == Tag.EMPTY:
        increment_neighbors(grid, x, y)
        grid.set(x, y, grid.get(x, y).with_tag(Tag.ALIVE))
    else:
        decrement_neighbors(grid, x, y)
        grid.set(x, y, grid.get(x, y).with_tag(Tag.EMPTY))
    return True
