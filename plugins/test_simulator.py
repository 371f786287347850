#!/usr/bin/env python3
"""
Tests for seeding, presets, the headless simulator, rendering and the CLI.
"""

import numpy as np
import pytest

from trait_life.__main__ import main
from trait_life.cell import Tag
from trait_life.errors import UnknownPreset
from trait_life.neighbors import verify_neighbor_sums
from trait_life.presets import PRESET_ORDER, PRESETS, get_preset, list_presets, pattern_bits
from trait_life.render import render_rgb, render_text
from trait_life.seeding import digest_hex, rng_from_text, seed_bits, seed_value
from trait_life.simulator import TraitLifeSimulator


def test_digest_is_sha256():
    assert digest_hex("abc") == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad")
    # First four bytes of SHA-256("") read big-endian
    assert seed_value("") == 0xE3B0C442


def test_seed_bits_reproducible():
    a = seed_bits(rng_from_text("hello"), 30, 20)
    b = seed_bits(rng_from_text("hello"), 30, 20)
    c = seed_bits(rng_from_text("hello!"), 30, 20)
    assert a.shape == (600,)
    assert a.dtype == bool
    assert np.array_equal(a, b)
    assert not np.array_equal(a, c)


def test_presets_are_consistent():
    assert set(PRESET_ORDER) == set(PRESETS)
    assert [k for k, _, _ in list_presets()] == PRESET_ORDER
    for key in PRESET_ORDER:
        p = get_preset(key)
        assert ("seed" in p) != ("pattern" in p), key
        assert 0 <= p["trait"] <= 8
    with pytest.raises(UnknownPreset):
        get_preset("nope")


def test_pattern_bits_wrap():
    bits = pattern_bits([(0, 0), (5, 1)], 5, 2)
    assert bits == [True, False, False, False, False,
                    True, False, False, False, False]


def test_simulator_applies_preset():
    sim = TraitLifeSimulator("glider")
    assert (sim.grid.width, sim.grid.height) == (10, 10)
    assert sim.grid.count(Tag.ALIVE) == 5
    assert set(sim.grid.traits[sim.grid.tags == Tag.ALIVE]) == {8}

    sim = TraitLifeSimulator("glider", width=20, height=12)
    assert (sim.grid.width, sim.grid.height) == (20, 12)


def test_unknown_preset_raises():
    with pytest.raises(UnknownPreset):
        TraitLifeSimulator("not_a_preset")


def test_same_seed_same_run():
    a = TraitLifeSimulator("mixed", seed_text="abc")
    b = TraitLifeSimulator("mixed", seed_text="abc")
    a.run(25)
    b.run(25)
    assert a.grid == b.grid
    assert a.stats == b.stats

    c = TraitLifeSimulator("mixed", seed_text="abd")
    assert c.grid != TraitLifeSimulator("mixed", seed_text="abc").grid


def test_reseed_and_reset():
    sim = TraitLifeSimulator("random")
    start = sim.grid.copy()
    sim.run(5)
    sim.reset()
    assert sim.grid == start
    assert sim.generation == 0

    sim.reseed("other")
    assert sim.seed_text == "other"
    assert sim.digest_hex == digest_hex("other")
    assert sim.grid != start


def test_run_stops_when_settled():
    sim = TraitLifeSimulator("block")
    assert sim.run(10) == 1
    assert sim.settled
    assert sim.generation == 1

    sim.toggle(0, 0)
    assert not sim.settled
    assert verify_neighbor_sums(sim.grid) == []


def test_stats_track_traits():
    sim = TraitLifeSimulator("heritage")
    stats = sim.stats
    assert stats["generation"] == 0
    assert stats["alive"] + stats["empty"] == sim.grid.size
    assert stats["born"] == stats["dying"] == 0
    assert sum(stats["trait_histogram"]) == stats["alive"]
    assert stats["mean_trait"] == 8.0

    sim.run(10)
    stats = sim.stats
    assert sum(stats["trait_histogram"]) == stats["alive"]
    assert 0.0 <= stats["mean_trait"] <= 8.0


def test_clear():
    sim = TraitLifeSimulator("r_pentomino")
    sim.run(3)
    sim.clear()
    assert sim.stats["alive"] == 0
    assert sim.generation == 0
    assert int(sim.grid.sums.sum()) == 0


def test_render_text():
    sim = TraitLifeSimulator("blinker")
    lines = render_text(sim.grid).splitlines()
    assert lines[0] == ". O . . ."
    assert lines[3] == ". . . . ."
    assert render_text(sim.grid, cursor=(0, 0)).splitlines()[0] == "@ O . . ."
    assert render_text(sim.grid, show_traits=True).splitlines()[1] == ". 8 . . ."

    sim.engine.classify(sim.grid)
    assert render_text(sim.grid).splitlines()[1] == "+ O + . ."
    assert render_text(sim.grid).splitlines()[0] == ". x . . ."


def test_render_rgb_shape_and_colors():
    sim = TraitLifeSimulator("blinker")
    rgb = render_rgb(sim.grid, scale=3)
    assert rgb.shape == (15, 15, 3)
    assert rgb.dtype == np.uint8
    assert tuple(rgb[0, 0]) == (18, 18, 24)
    assert tuple(rgb[0, 3]) == (140, 220, 255)


def test_cli_headless(capsys):
    assert main(["glider", "--steps", "4", "--traits"]) == 0
    out = capsys.readouterr().out
    assert "Generation 4" in out
    assert "Preset: glider" in out


def test_cli_snap(tmp_path):
    path = tmp_path / "grid.png"
    assert main(["blinker", "--snap", str(path)]) == 0
    assert path.exists()


def test_cli_rejects_bad_input(capsys):
    assert main(["bogus"]) == 2
    assert main(["--size", "abc"]) == 2
    assert main(["--steps", "abc"]) == 2
    assert main(["--steps", "-1"]) == 2
    out = capsys.readouterr().out
    assert "Bad --steps 'abc'" in out
    assert "must not be negative" in out
    assert main(["--list"]) == 0
    assert "r_pentomino" in capsys.readouterr().out


def test_cli_reports_engine_errors(capsys):
    assert main(["random", "--size", "0x5", "--steps", "1"]) == 1
    assert "Grid dimensions" in capsys.readouterr().out


if __name__ == "__main__":
    raise SystemExit(pytest.main([__file__, "-q"]))
