"""
Error taxonomy for the trait-life engine.

Every error derives from TraitLifeError and from the builtin exception
that best describes it, so callers can catch either.
"""


class TraitLifeError(Exception):
    """Base class for all engine errors."""


class InvalidDimension(TraitLifeError, ValueError):
    """Grid width or height is not a positive integer."""

    def __init__(self, width, height):
        super().__init__(f"Grid dimensions must be positive integers, got {width!r}x{height!r}")
        self.width = width
        self.height = height


class InvalidCoordinate(TraitLifeError, IndexError):
    """Coordinate outside [0, width) x [0, height)."""

    def __init__(self, x, y, width, height):
        super().__init__(f"Coordinate ({x}, {y}) outside {width}x{height} grid")
        self.x = x
        self.y = y


class InvalidSeedLength(TraitLifeError, ValueError):
    """Seed bit sequence does not hold exactly width*height values."""

    def __init__(self, got, expected):
        super().__init__(f"Expected {expected} seed bits, got {got}")
        self.got = got
        self.expected = expected


class NeighborSumOverflow(TraitLifeError, RuntimeError):
    """A neighbor-sum update would leave the [0, 8] range."""


class UnknownPreset(TraitLifeError, KeyError):
    """Preset name not found in PRESETS."""

    def __str__(self):
        return f"Unknown preset: {self.args[0]!r}"


class InvalidCellValue(TraitLifeError, ValueError):
    """Cell field outside its range (tag not a Tag, trait or sum outside [0, 8])."""
