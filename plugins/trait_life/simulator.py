"""
TraitLifeSimulator - Headless driver for the trait-life engine

Owns one grid, one StepEngine and the random stream they share. The viewer
and the command line both drive the simulation through this class; it has
no pygame dependency.

Usage:
    from trait_life.simulator import TraitLifeSimulator
    sim = TraitLifeSimulator("heritage")
    sim.run(100)
    print(sim.stats)
"""

import logging

import numpy as np

from .cell import EMPTY_CELL, MAX_TRAIT, Tag
from .editor import toggle
from .engine import StepEngine
from .grid import Grid
from .presets import get_preset, pattern_bits
from .seeding import digest_hex, rng_from_text, seed_bits

logger = logging.getLogger(__name__)


class TraitLifeSimulator:

    def __init__(self, preset_key="random", width=None, height=None, seed_text=None):
        """
        Args:
            preset_key: Key into PRESETS
            width, height: Override the preset's grid size
            seed_text: Override the preset's seed string
        """
        self._size_override = (width, height)
        self._seed_override = seed_text
        self.grid = None
        self.engine = None
        self.apply_preset(preset_key)

    def apply_preset(self, key):
        """Switch to a preset and rebuild the grid from it."""
        preset = get_preset(key)
        self.preset_key = key
        self.preset = preset
        width, height = self._size_override
        self.width = preset["width"] if width is None else width
        self.height = preset["height"] if height is None else height
        if self._seed_override is not None:
            self.seed_text = self._seed_override
        else:
            self.seed_text = preset.get("seed", "")
        logger.debug("Applying preset %r (%dx%d, seed=%r)",
                     key, self.width, self.height, self.seed_text)
        self.reset()

    def reseed(self, text):
        """Restart from a new seed string.

        Seed-string presets get a new starting population; pattern presets
        keep their pattern and only change the trait inheritance stream.
        """
        self.seed_text = text
        self._seed_override = text
        self.reset()

    def reset(self):
        """Rebuild the grid from the current seed string or pattern."""
        # Build into a fresh grid so a failure leaves the current one in place.
        grid = Grid(self.width, self.height)
        rng = rng_from_text(self.seed_text)
        if "pattern" in self.preset:
            bits = pattern_bits(self.preset["pattern"], self.width, self.height)
        else:
            bits = seed_bits(rng, self.width, self.height)
        grid.initialize_from_bits(bits)
        grid.assign_founder_trait(self.preset.get("trait", 0))

        self.grid = grid
        self.engine = StepEngine(rng)
        self.generation = 0
        self.settled = False
        logger.debug("Reset: %d alive cells", grid.count(Tag.ALIVE))

    def step(self):
        """Advance one generation. Returns True if any cell changed."""
        changed = self.engine.tick(self.grid)
        self.generation += 1
        if not changed and not self.settled:
            logger.debug("Grid settled at generation %d", self.generation)
        self.settled = not changed
        return changed

    def run(self, n):
        """Advance up to n generations, stopping once the grid is static.

        Returns the number of generations actually run.
        """
        for i in range(n):
            if self.settled:
                return i
            self.step()
        return n

    def toggle(self, x, y):
        toggled = toggle(self.grid, x, y)
        if toggled:
            self.settled = False
        return toggled

    def clear(self):
        self.grid.fill(EMPTY_CELL)
        self.generation = 0
        self.settled = True

    @property
    def digest_hex(self):
        return digest_hex(self.seed_text)

    @property
    def stats(self):
        """Return current grid statistics."""
        grid = self.grid
        alive = grid.tags == Tag.ALIVE
        alive_count = int(alive.sum())
        traits = grid.traits[alive]
        return {
            "generation": self.generation,
            "empty": grid.count(Tag.EMPTY),
            "born": grid.count(Tag.BORN),
            "alive": alive_count,
            "dying": grid.count(Tag.DYING),
            "alive_pct": alive_count / grid.size * 100,
            "mean_trait": float(traits.mean()) if alive_count else 0.0,
            "trait_histogram": np.bincount(traits, minlength=MAX_TRAIT + 1).tolist(),
            "settled": self.settled,
        }
