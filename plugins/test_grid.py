#!/usr/bin/env python3
"""
Tests for the cell record, the toroidal grid and neighbor accounting.
"""

import numpy as np
import pytest

from trait_life.cell import EMPTY_CELL, Cell, Tag
from trait_life.errors import (
    InvalidCellValue,
    InvalidCoordinate,
    InvalidDimension,
    InvalidSeedLength,
    NeighborSumOverflow,
)
from trait_life.grid import Grid
from trait_life.neighbors import (
    count_alive_neighbors,
    decrement_neighbors,
    increment_neighbors,
    verify_neighbor_sums,
)


def test_cell_replace_keeps_other_fields():
    cell = Cell(Tag.ALIVE, 5, 3)
    assert cell.with_tag(Tag.DYING) == Cell(Tag.DYING, 5, 3)
    assert cell.with_trait(7) == Cell(Tag.ALIVE, 7, 3)
    assert cell.with_neighbor_sum(0) == Cell(Tag.ALIVE, 5, 0)
    assert EMPTY_CELL == Cell(Tag.EMPTY, 0, 0)
    assert Cell(Tag.BORN).is_transitional
    assert not cell.is_transitional


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-3, 4), (2.5, 3), (True, 4)])
def test_bad_dimensions_rejected(width, height):
    with pytest.raises(InvalidDimension):
        Grid(width, height)


def test_new_grid_is_empty():
    grid = Grid(4, 3)
    assert grid.size == 12
    for y in range(3):
        for x in range(4):
            assert grid.get(x, y) == EMPTY_CELL


def test_get_set_roundtrip_and_bounds():
    grid = Grid(4, 3)
    grid.set(3, 2, Cell(Tag.ALIVE, 6, 2))
    assert grid.get(3, 2) == Cell(Tag.ALIVE, 6, 2)
    assert grid.tag_at(3, 2) == Tag.ALIVE
    assert grid.trait_at(3, 2) == 6
    assert grid.neighbor_sum_at(3, 2) == 2
    # Row-major layout
    assert grid.index(3, 2) == 2 * 4 + 3
    assert grid.coords(11) == (3, 2)

    for x, y in [(4, 0), (0, 3), (-1, 0), (0, -1)]:
        with pytest.raises(InvalidCoordinate):
            grid.get(x, y)
        with pytest.raises(InvalidCoordinate):
            grid.set(x, y, EMPTY_CELL)


def test_neighbors_wrap_in_fixed_order():
    grid = Grid(5, 4)
    assert grid.neighbors(0, 0) == [
        (4, 3), (4, 0), (4, 1),
        (0, 3), (0, 1),
        (1, 3), (1, 0), (1, 1),
    ]
    assert grid.neighbors(2, 1) == [
        (1, 0), (1, 1), (1, 2),
        (2, 0), (2, 2),
        (3, 0), (3, 1), (3, 2),
    ]


def test_fill_sets_every_cell():
    grid = Grid(3, 3)
    grid.fill(Cell(Tag.ALIVE, 2, 8))
    assert all(grid.get(x, y) == Cell(Tag.ALIVE, 2, 8) for x in range(3) for y in range(3))


@pytest.mark.parametrize("cell", [
    Cell(7, 0, 0),
    Cell(Tag.ALIVE, -1, 0),
    Cell(Tag.ALIVE, 9, 0),
    Cell(Tag.ALIVE, 300, 0),
    Cell(Tag.ALIVE, 0, 9),
    Cell(Tag.ALIVE, 3, -1),
])
def test_out_of_range_cell_rejected_before_any_write(cell):
    grid = Grid(3, 3)
    grid.set(1, 1, Cell(Tag.EMPTY, 4, 2))
    before = grid.copy()
    with pytest.raises(InvalidCellValue):
        grid.set(1, 1, cell)
    with pytest.raises(InvalidCellValue):
        grid.fill(cell)
    assert grid == before


def test_assign_founder_trait_touches_alive_cells_only():
    grid = Grid(3, 3)
    grid.initialize_from_bits([0, 1, 0,
                               0, 1, 0,
                               0, 1, 0])
    grid.assign_founder_trait(5)
    assert [grid.trait_at(1, y) for y in range(3)] == [5, 5, 5]
    assert grid.trait_at(0, 0) == 0
    assert int(grid.traits.sum()) == 15

    before = grid.copy()
    with pytest.raises(InvalidCellValue):
        grid.assign_founder_trait(9)
    assert grid == before


def test_initialize_from_bits_row_major():
    grid = Grid(3, 2)
    grid.initialize_from_bits([1, 0, 0,
                               0, 0, 1])
    assert grid.alive_cells() == [(0, 0), (2, 1)]
    assert grid.tag_at(1, 0) == Tag.EMPTY
    assert verify_neighbor_sums(grid) == []


def test_initialize_from_bits_resets_traits_and_rescans():
    rng = np.random.default_rng(7)
    grid = Grid(9, 7)
    grid.fill(Cell(Tag.EMPTY, 5, 4))
    grid.initialize_from_bits(rng.integers(0, 2, size=63))
    assert int(grid.traits.max()) == 0
    for y in range(7):
        for x in range(9):
            assert grid.neighbor_sum_at(x, y) == count_alive_neighbors(grid, x, y)


def test_initialize_from_bits_is_deterministic():
    bits = np.random.default_rng(3).integers(0, 2, size=8 * 6)
    a, b = Grid(8, 6), Grid(8, 6)
    b.fill(Cell(Tag.ALIVE, 8, 8))
    a.initialize_from_bits(bits)
    b.initialize_from_bits(list(bits))
    assert a == b


def test_wrong_seed_length_leaves_grid_untouched():
    grid = Grid(4, 4)
    grid.initialize_from_bits([1, 1, 0, 0] * 4)
    before = grid.copy()
    with pytest.raises(InvalidSeedLength) as info:
        grid.initialize_from_bits([1] * 15)
    assert info.value.expected == 16
    assert grid == before


def test_snapshot_is_read_only_copy():
    grid = Grid(3, 3)
    grid.initialize_from_bits([0, 1, 0, 0, 0, 0, 0, 0, 0])
    tags, traits, sums = grid.snapshot()
    assert tags.shape == (3, 3)
    assert tags[0, 1] == Tag.ALIVE
    assert sums[1, 0] == 1
    with pytest.raises(ValueError):
        tags[0, 0] = 1


def test_increment_then_decrement_neighbors():
    grid = Grid(5, 5)
    grid.set(2, 2, Cell(Tag.ALIVE, 4, 0))
    increment_neighbors(grid, 2, 2)
    for nx, ny in grid.neighbors(2, 2):
        assert grid.neighbor_sum_at(nx, ny) == 1
    # Tag and trait of the neighbors are untouched, the cell itself too
    assert grid.get(2, 2) == Cell(Tag.ALIVE, 4, 0)
    assert grid.count(Tag.ALIVE) == 1

    decrement_neighbors(grid, 2, 2)
    assert int(grid.sums.sum()) == 0


def test_neighbor_sum_overflow_is_rejected_without_writes():
    grid = Grid(3, 3)
    grid.fill(Cell(Tag.EMPTY, 0, 8))
    grid.set(0, 0, Cell(Tag.EMPTY, 0, 7))
    with pytest.raises(NeighborSumOverflow):
        increment_neighbors(grid, 1, 1)
    assert grid.neighbor_sum_at(0, 0) == 7
    assert grid.neighbor_sum_at(2, 2) == 8

    grid.fill(EMPTY_CELL)
    with pytest.raises(NeighborSumOverflow):
        decrement_neighbors(grid, 1, 1)
    assert int(grid.sums.sum()) == 0


def test_narrow_grid_counts_repeated_neighbors():
    # On a 2-wide grid x-1 and x+1 are the same column.
    grid = Grid(2, 4)
    grid.initialize_from_bits([1, 0,
                               0, 0,
                               0, 0,
                               0, 0])
    assert grid.neighbor_sum_at(1, 0) == 2
    assert grid.neighbor_sum_at(1, 1) == 2
    assert grid.neighbor_sum_at(0, 1) == 1
    assert verify_neighbor_sums(grid) == []


if __name__ == "__main__":
    raise SystemExit(pytest.main([__file__, "-q"]))
