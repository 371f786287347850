"""
Trait Life - Entry Point

Usage:
    python -m trait_life [preset] [--seed TEXT] [--size WxH] [--steps N]
                         [--traits] [--snap FILE] [--list] [--verbose]

Examples:
    python -m trait_life
    python -m trait_life heritage --seed "hello world"
    python -m trait_life glider --steps 40
    python -m trait_life mixed --size 64x48 --steps 200 --traits
    python -m trait_life r_pentomino --steps 500 --snap rpent.png

Without --steps the interactive viewer opens. With --steps the simulation
runs headless and prints the final grid.

Use --list to see all available presets.
"""

import logging
import sys

from .errors import TraitLifeError
from .presets import PRESET_ORDER, list_presets


def headless(preset, width, height, seed_text, steps, show_traits, snap_path):
    """Run N generations without a window, print the grid, optionally save a PNG."""
    from .render import render_text
    from .simulator import TraitLifeSimulator

    sim = TraitLifeSimulator(preset, width=width, height=height, seed_text=seed_text)
    print(f"Preset: {preset}  |  {sim.grid.width}x{sim.grid.height}  |  seed: {sim.seed_text!r}")
    print(f"SHA-256: {sim.digest_hex}")

    ran = sim.run(steps)
    if sim.settled:
        print(f"Settled after {ran} generations")

    print()
    print(render_text(sim.grid, show_traits=show_traits))
    print()
    stats = sim.stats
    print(f"Generation {stats['generation']}: alive {stats['alive']} "
          f"({stats['alive_pct']:.1f}%), mean trait {stats['mean_trait']:.2f}")
    print("Trait histogram: " + " ".join(str(n) for n in stats["trait_histogram"]))

    if snap_path:
        from PIL import Image

        from .render import render_rgb

        scale = max(1, 512 // max(sim.grid.width, sim.grid.height))
        Image.fromarray(render_rgb(sim.grid, scale=scale)).save(snap_path)
        print(f"Saved: {snap_path}")


def _parse_size(text):
    parts = text.lower().split("x")
    return int(parts[0]), int(parts[1])


def main(argv=None):
    preset = "random"
    width = height = None
    seed_text = None
    steps = 0
    show_traits = False
    snap_path = None

    args = sys.argv[1:] if argv is None else list(argv)
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--seed" and i + 1 < len(args):
            seed_text = args[i + 1]
            i += 2
        elif arg == "--size" and i + 1 < len(args):
            try:
                width, height = _parse_size(args[i + 1])
            except (ValueError, IndexError):
                print(f"Bad --size {args[i + 1]!r}, expected WxH")
                return 2
            i += 2
        elif arg == "--steps" and i + 1 < len(args):
            try:
                steps = int(args[i + 1])
            except ValueError:
                print(f"Bad --steps {args[i + 1]!r}, expected an integer")
                return 2
            if steps < 0:
                print(f"Bad --steps {steps}, must not be negative")
                return 2
            i += 2
        elif arg == "--snap" and i + 1 < len(args):
            snap_path = args[i + 1]
            i += 2
        elif arg == "--traits":
            show_traits = True
            i += 1
        elif arg in ("--verbose", "-v"):
            logging.basicConfig(level=logging.DEBUG,
                                format="%(asctime)s %(name)s %(levelname)s %(message)s")
            i += 1
        elif arg == "--list":
            print("\nAvailable presets:\n")
            for key, name, desc in list_presets():
                print(f"  {key:14s} {name:14s} {desc}")
            print()
            return 0
        elif arg in ("--help", "-h"):
            print(__doc__)
            return 0
        elif arg in PRESET_ORDER:
            preset = arg
            i += 1
        else:
            print(f"Unknown argument: {arg}")
            print("Use --list to see available presets")
            return 2

    try:
        if steps > 0 or snap_path:
            headless(preset, width, height, seed_text, steps, show_traits, snap_path)
            return 0

        from .viewer import Viewer

        print("Starting Trait Life Viewer")
        print(f"  Preset: {preset}")
        viewer = Viewer(start_preset=preset, sim_width=width, sim_height=height,
                        seed_text=seed_text)
        viewer.run()
    except TraitLifeError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
