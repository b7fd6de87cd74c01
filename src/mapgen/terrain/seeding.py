"""Seed resolution and the per-run offset stream."""

import secrets

import numpy as np

OFFSET_MIN = -100_000
OFFSET_MAX = 100_000

SEED_HASH = "fnv1a64"

_FNV_OFFSET_BASIS = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3
_MASK64 = 0xFFFFFFFFFFFFFFFF


def hash_seed(text: str) -> int:
    """Hash a string seed with 64-bit FNV-1a over its UTF-8 bytes."""
    acc = _FNV_OFFSET_BASIS
    for b in text.encode("utf-8"):
        acc ^= b
        acc = (acc * _FNV_PRIME) & _MASK64
    return acc


def resolve_seed(seed: int | str | None) -> int:
    """Turn a configured seed into the integer that seeds the run.

    Args:
        seed: Integer, string, or None for a fresh random seed.

    Returns:
        Non-negative 64-bit integer seed.
    """
    if seed is None:
        return secrets.randbits(63)
    if isinstance(seed, str):
        return hash_seed(seed)
    return seed & _MASK64


def make_rng(seed: int) -> np.random.Generator:
    """Create the random stream owned by a single generation run."""
    return np.random.default_rng(seed)


def draw_offset(rng: np.random.Generator) -> tuple[int, int]:
    """Draw one (x, y) offset in [OFFSET_MIN, OFFSET_MAX)."""
    x, y = rng.integers(OFFSET_MIN, OFFSET_MAX, size=2)
    return int(x), int(y)


def octave_offsets(rng: np.random.Generator, octaves: int) -> list[tuple[int, int]]:
    """Draw one offset per octave, in octave order.

    Anything else drawn from ``rng`` afterwards (the river offset) depends on
    this consuming exactly ``octaves`` pairs first.
    """
    return [draw_offset(rng) for _ in range(octaves)]
