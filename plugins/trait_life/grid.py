"""
Toroidal Grid of Cells

The grid keeps each cell field in its own flat uint8 buffer of length
width*height, indexed ``y * width + x`` (row-major). Edges wrap, so every
cell has exactly eight neighbors.

Cell values move in and out through ``get``/``set`` as ``Cell`` records;
the engine modules work on the buffers directly.
"""

import logging
import numbers

import numpy as np

from .cell import MAX_NEIGHBOR_SUM, MAX_TRAIT, Cell, Tag
from .errors import InvalidCellValue, InvalidCoordinate, InvalidDimension, InvalidSeedLength

logger = logging.getLogger(__name__)

# (dx, dy) in the order neighbors are visited. Trait inheritance draws from
# the random stream in this order, so it must never change.
NEIGHBOR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


class Grid:
    """Fixed-size toroidal grid of cells."""

    def __init__(self, width, height):
        if (not isinstance(width, numbers.Integral) or not isinstance(height, numbers.Integral)
                or isinstance(width, bool) or isinstance(height, bool)
                or width <= 0 or height <= 0):
            raise InvalidDimension(width, height)
        self.width = int(width)
        self.height = int(height)
        self.size = self.width * self.height
        self.tags = np.zeros(self.size, dtype=np.uint8)
        self.traits = np.zeros(self.size, dtype=np.uint8)
        self.sums = np.zeros(self.size, dtype=np.uint8)

    def __repr__(self):
        return f"Grid({self.width}, {self.height})"

    # -- addressing -------------------------------------------------------

    def _check(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise InvalidCoordinate(x, y, self.width, self.height)

    def index(self, x, y):
        """Flat buffer index of (x, y)."""
        self._check(x, y)
        return y * self.width + x

    def coords(self, index):
        y, x = divmod(int(index), self.width)
        return x, y

    def neighbors(self, x, y):
        """The 8 wrapped neighbor coordinates of (x, y), in NEIGHBOR_OFFSETS order."""
        self._check(x, y)
        return [((x + dx) % self.width, (y + dy) % self.height)
                for dx, dy in NEIGHBOR_OFFSETS]

    def neighbor_indices(self, x, y):
        return [ny * self.width + nx for nx, ny in self.neighbors(x, y)]

    # -- cell access ------------------------------------------------------

    def get(self, x, y):
        i = self.index(x, y)
        return Cell(Tag(int(self.tags[i])), int(self.traits[i]), int(self.sums[i]))

    @staticmethod
    def _encode(cell):
        """Check all three fields before any buffer is written."""
        try:
            tag = int(Tag(cell.tag))
        except ValueError:
            raise InvalidCellValue(f"Unknown tag {cell.tag!r}") from None
        if not 0 <= cell.trait <= MAX_TRAIT:
            raise InvalidCellValue(f"Trait {cell.trait!r} outside [0, {MAX_TRAIT}]")
        if not 0 <= cell.neighbor_sum <= MAX_NEIGHBOR_SUM:
            raise InvalidCellValue(
                f"Neighbor sum {cell.neighbor_sum!r} outside [0, {MAX_NEIGHBOR_SUM}]")
        return tag, int(cell.trait), int(cell.neighbor_sum)

    def set(self, x, y, cell):
        i = self.index(x, y)
        tag, trait, neighbor_sum = self._encode(cell)
        self.tags[i] = tag
        self.traits[i] = trait
        self.sums[i] = neighbor_sum

    def fill(self, cell):
        """Set every cell to ``cell``. Neighbor sums are taken as given."""
        tag, trait, neighbor_sum = self._encode(cell)
        self.tags[:] = tag
        self.traits[:] = trait
        self.sums[:] = neighbor_sum

    def assign_founder_trait(self, trait):
        """Give every ALIVE cell ``trait``.

        Only meant right after initialize_from_bits, before the first tick;
        afterwards traits change only through births.
        """
        if not 0 <= trait <= MAX_TRAIT:
            raise InvalidCellValue(f"Trait {trait!r} outside [0, {MAX_TRAIT}]")
        self.traits[self.tags == Tag.ALIVE] = trait

    def initialize_from_bits(self, bits):
        """Seed the grid from one boolean per cell, in row-major order.

        Truthy values become ALIVE, falsy values EMPTY. Every trait is reset
        to 0 and neighbor sums are rebuilt by a full rescan. A sequence of
        the wrong length raises InvalidSeedLength and leaves the grid as it
        was.
        """
        from .neighbors import rescan

        alive = np.asarray(bits).astype(bool).ravel()
        if alive.size != self.size:
            raise InvalidSeedLength(alive.size, self.size)

        self.tags[:] = np.where(alive, int(Tag.ALIVE), int(Tag.EMPTY))
        self.traits[:] = 0
        rescan(self)
        logger.debug("Initialized %dx%d grid with %d alive cells",
                     self.width, self.height, int(alive.sum()))

    # -- read-only views --------------------------------------------------

    def tag_at(self, x, y):
        return Tag(int(self.tags[self.index(x, y)]))

    def trait_at(self, x, y):
        return int(self.traits[self.index(x, y)])

    def neighbor_sum_at(self, x, y):
        return int(self.sums[self.index(x, y)])

    def count(self, tag):
        return int((self.tags == int(tag)).sum())

    def alive_cells(self):
        """Coordinates of every ALIVE cell, row-major."""
        return [self.coords(i) for i in np.flatnonzero(self.tags == int(Tag.ALIVE))]

    def snapshot(self):
        """Read-only (tags, traits, sums) copies shaped (height, width)."""
        views = []
        for buf in (self.tags, self.traits, self.sums):
            arr = buf.reshape(self.height, self.width).copy()
            arr.flags.writeable = False
            views.append(arr)
        return tuple(views)

    def copy(self):
        other = Grid(self.width, self.height)
        other.tags[:] = self.tags
        other.traits[:] = self.traits
        other.sums[:] = self.sums
        return other

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width == other.width and self.height == other.height
                and np.array_equal(self.tags, other.tags)
                and np.array_equal(self.traits, other.traits)
                and np.array_equal(self.sums, other.sums))

    __hash__ = None
