"""
Step Engine - Two-Phase Life Rule

A tick is classify() followed by commit():

- classify decides every cell's next tag from one snapshot of tags and
  cached neighbor sums (B3/S23), marking births BORN and deaths DYING.
  Newborn traits are drawn here. Neighbor sums are left alone.
- commit turns BORN into ALIVE and DYING into EMPTY and pushes each change
  into the neighbors' cached sums.

Because all decisions for a tick come from the same snapshot, the scan
order never affects which cells are born or die.
"""

import numpy as np

from .cell import MAX_NEIGHBOR_SUM, Tag
from .errors import NeighborSumOverflow
from .inheritance import inherit_trait
from .neighbors import decrement_neighbors, increment_neighbors

BIRTH = frozenset({3})
SURVIVE = frozenset({2, 3})


def next_tag(tag, neighbor_sum):
    """Classify-phase transition for a single cell."""
    tag = Tag(tag)
    if tag == Tag.EMPTY:
        return Tag.BORN if neighbor_sum in BIRTH else Tag.EMPTY
    if tag == Tag.ALIVE:
        return Tag.ALIVE if neighbor_sum in SURVIVE else Tag.DYING
    # BORN / DYING are pending from an earlier classify; leave them for commit.
    return tag


# TRANSITIONS[tag, neighbor_sum] -> next tag, precomputed from next_tag.
TRANSITIONS = np.array(
    [[int(next_tag(t, s)) for s in range(MAX_NEIGHBOR_SUM + 1)] for t in Tag],
    dtype=np.uint8,
)


class StepEngine:
    """Applies the life rule to a Grid, drawing newborn traits from ``rng``."""

    def __init__(self, rng):
        self.rng = rng

    def classify(self, grid):
        """Mark births and deaths for the coming commit. Returns True if any cell changed."""
        new_tags = TRANSITIONS[grid.tags, grid.sums]
        changed = np.flatnonzero(new_tags != grid.tags)
        if changed.size == 0:
            return False

        born = changed[new_tags[changed] == Tag.BORN]
        # Traits are drawn before any tag is written, so every draw sees the
        # same snapshot of ALIVE neighbors.
        born_traits = [inherit_trait(grid, *grid.coords(i), self.rng) for i in born]

        grid.tags[changed] = new_tags[changed]
        if born.size:
            grid.traits[born] = born_traits
        return True

    def commit(self, grid):
        """Apply pending births and deaths. Returns True if any cell changed.

        If a neighbor-sum update fails partway, tags and sums are restored
        to their pre-commit values before the error propagates.
        """
        born = np.flatnonzero(grid.tags == Tag.BORN)
        dying = np.flatnonzero(grid.tags == Tag.DYING)
        if born.size == 0 and dying.size == 0:
            return False

        saved_tags = grid.tags.copy()
        saved_sums = grid.sums.copy()
        try:
            for i in born:
                increment_neighbors(grid, *grid.coords(i))
                grid.tags[i] = Tag.ALIVE
            for i in dying:
                decrement_neighbors(grid, *grid.coords(i))
                grid.tags[i] = Tag.EMPTY
        except NeighborSumOverflow:
            grid.tags[:] = saved_tags
            grid.sums[:] = saved_sums
            raise
        return True

    def tick(self, grid):
        """One full generation. Returns True if anything changed."""
        classified = self.classify(grid)
        committed = self.commit(grid)
        return classified or committed
