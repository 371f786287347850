"""
Read-only renderings of a Grid: plain text for terminals and logs, RGB
arrays for the viewer and PNG snapshots. Nothing here mutates the grid.
"""

import numpy as np

from .cell import MAX_TRAIT, Tag

SYMBOLS = {
    Tag.EMPTY: ".",
    Tag.BORN: "+",
    Tag.ALIVE: "O",
    Tag.DYING: "x",
}

COLORS = {
    "empty": (18, 18, 24),
    "born": (60, 200, 90),
    "dying": (210, 60, 60),
    # ALIVE is interpolated between these by trait
    "alive_low": (40, 70, 160),
    "alive_high": (140, 220, 255),
}


def render_text(grid, show_traits=False, cursor=None):
    """One line per row, cells separated by spaces.

    With show_traits, ALIVE cells print their trait digit instead of "O".
    """
    tags, traits, _ = grid.snapshot()
    lines = []
    for y in range(grid.height):
        row = []
        for x in range(grid.width):
            if cursor == (x, y):
                row.append("@")
                continue
            tag = Tag(int(tags[y, x]))
            if show_traits and tag == Tag.ALIVE:
                row.append(str(int(traits[y, x])))
            else:
                row.append(SYMBOLS[tag])
        lines.append(" ".join(row))
    return "\n".join(lines)


def _alive_palette():
    low = np.array(COLORS["alive_low"], dtype=np.float32)
    high = np.array(COLORS["alive_high"], dtype=np.float32)
    t = np.linspace(0.0, 1.0, MAX_TRAIT + 1, dtype=np.float32)[:, None]
    return (low + (high - low) * t).astype(np.uint8)


ALIVE_PALETTE = _alive_palette()


def render_rgb(grid, scale=1):
    """(height*scale, width*scale, 3) uint8 image of the grid."""
    tags, traits, _ = grid.snapshot()
    rgb = np.empty(tags.shape + (3,), dtype=np.uint8)
    rgb[:] = COLORS["empty"]
    rgb[tags == Tag.BORN] = COLORS["born"]
    rgb[tags == Tag.DYING] = COLORS["dying"]
    alive = tags == Tag.ALIVE
    rgb[alive] = ALIVE_PALETTE[np.minimum(traits[alive], MAX_TRAIT)]
    if scale > 1:
        rgb = np.repeat(np.repeat(rgb, scale, axis=0), scale, axis=1)
    return rgb
