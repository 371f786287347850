"""
Deterministic seeding from a user string.

The text is hashed with SHA-256 and the first four digest bytes, read
big-endian, seed a numpy Generator. That generator produces the initial
alive/empty bits and then keeps feeding trait inheritance, so one seed
string reproduces a whole run.
"""

import hashlib

import numpy as np


def digest(text):
    return hashlib.sha256(text.encode("utf-8")).digest()


def digest_hex(text):
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def seed_value(text):
    """32-bit seed taken from the first four digest bytes."""
    return int.from_bytes(digest(text)[:4], "big")


def rng_from_text(text):
    return np.random.default_rng(seed_value(text))


def seed_bits(rng, width, height):
    """One fair coin flip per cell, row-major."""
    return rng.integers(0, 2, size=width * height).astype(bool)
