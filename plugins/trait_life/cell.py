"""
Per-cell state: life tag, heritable trait and cached neighbor sum.

The three fields are independent. A cell value is immutable; the
``with_*`` helpers return a copy with one field replaced.
"""

import enum
from typing import NamedTuple


class Tag(enum.IntEnum):
    """Life status of a cell. BORN and DYING only exist mid-tick."""

    EMPTY = 0
    BORN = 1
    ALIVE = 2
    DYING = 3


TRANSITIONAL_TAGS = (Tag.BORN, Tag.DYING)

MAX_TRAIT = 8
MAX_NEIGHBOR_SUM = 8


class Cell(NamedTuple):
    tag: Tag = Tag.EMPTY
    trait: int = 0
    neighbor_sum: int = 0

    def with_tag(self, tag):
        """Replace the tag, keep trait and neighbor sum."""
        return self._replace(tag=Tag(tag))

    def with_trait(self, trait):
        return self._replace(trait=trait)

    def with_neighbor_sum(self, neighbor_sum):
        return self._replace(neighbor_sum=neighbor_sum)

    @property
    def is_transitional(self):
        return self.tag in TRANSITIONAL_TAGS


EMPTY_CELL = Cell()
