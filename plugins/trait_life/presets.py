"""
Trait Life Presets

Each preset defines a grid size and a starting population, either a seed
string (hashed into random bits) or an explicit pattern of alive cells.
"trait" is the founder trait given to every initially alive cell.
"""

from .errors import UnknownPreset

DEFAULT_WIDTH = 30
DEFAULT_HEIGHT = 20

PRESETS = {
    "random": {
        "name": "Random",
        "description": "Seed-string soup, founders carry no trait",
        "width": DEFAULT_WIDTH, "height": DEFAULT_HEIGHT,
        "seed": "", "trait": 0,
    },
    "heritage": {
        "name": "Heritage",
        "description": "Seed-string soup with fully heritable founders",
        "width": DEFAULT_WIDTH, "height": DEFAULT_HEIGHT,
        "seed": "heritage", "trait": 8,
    },
    "mixed": {
        "name": "Mixed",
        "description": "Founders pass their trait on half the time",
        "width": 48, "height": 32,
        "seed": "mixed", "trait": 4,
    },
    "blinker": {
        "name": "Blinker",
        "description": "Period-2 oscillator",
        "width": 5, "height": 5,
        "pattern": [(1, 0), (1, 1), (1, 2)], "trait": 8,
    },
    "glider": {
        "name": "Glider",
        "description": "Diagonal spaceship wrapping around the torus",
        "width": 10, "height": 10,
        "pattern": [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)], "trait": 8,
    },
    "r_pentomino": {
        "name": "R-pentomino",
        "description": "Five cells, long chaotic growth",
        "width": DEFAULT_WIDTH, "height": DEFAULT_HEIGHT,
        "pattern": [(15, 9), (16, 9), (14, 10), (15, 10), (15, 11)], "trait": 6,
    },
    "block": {
        "name": "Block",
        "description": "Still life, nothing is ever born",
        "width": 6, "height": 6,
        "pattern": [(2, 2), (3, 2), (2, 3), (3, 3)], "trait": 8,
    },
}

PRESET_ORDER = ["random", "heritage", "mixed", "blinker", "glider", "r_pentomino", "block"]


def get_preset(name):
    """Get a preset by name. Raises UnknownPreset if not found."""
    try:
        return PRESETS[name]
    except KeyError:
        raise UnknownPreset(name) from None


def list_presets():
    """Return list of (key, name, description) in display order."""
    return [(k, PRESETS[k]["name"], PRESETS[k]["description"]) for k in PRESET_ORDER]


def pattern_bits(pattern, width, height):
    """Row-major alive bits for a list of (x, y) cells, wrapped onto the grid."""
    bits = [False] * (width * height)
    for x, y in pattern:
        bits[(y % height) * width + (x % width)] = True
    return bits
