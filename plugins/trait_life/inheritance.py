"""
Trait inheritance for newborn cells.

Each ALIVE neighbor passes its trait on with probability trait / 8, one
independent trial per neighbor. The newborn's trait is the number of
successful trials, so it always lies in [0, 8].
"""

from .cell import MAX_TRAIT, Tag


def inherit_trait(grid, x, y, rng):
    """Draw the trait of a cell being born at (x, y).

    Neighbors are visited in Grid.neighbors order and only ALIVE ones draw
    from ``rng``, so the same grid and generator state always give the
    same result.
    """
    trait = 0
    for i in grid.neighbor_indices(x, y):
        if grid.tags[i] != Tag.ALIVE:
            continue
        if rng.random() < grid.traits[i] / MAX_TRAIT:
            trait += 1
    return trait
