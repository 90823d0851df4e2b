"""LCG shape randomizer"""
from typing import Optional

import pygame

# GCC's LCG constants
LCG_M = 0x80000000
LCG_A = 1103515245
LCG_C = 12345

SHAPE_COUNT = 7


def lcg_hash(seed: int) -> int:
    """Advance the LCG by one step. Call repeatedly to walk the sequence."""
    return (LCG_A * seed + LCG_C) % LCG_M


def scale(h: int) -> int:
    """Map a hash in [0, 2**31) to a shape index in [0, 6]."""
    return SHAPE_COUNT * h // LCG_M


def next_shape_index(seed: int) -> int:
    return scale(lcg_hash(seed))


def spawn_seed(obj_count: int, seed: Optional[int] = None) -> int:
    """Seed for the obj_count-th block.

    With no injected seed the clock stands in for it, so every game deals a
    different sequence; an injected seed makes the sequence reproducible.
    """
    if seed is None:
        seed = pygame.time.get_ticks()
    # offset so a zero seed still walks the sequence
    return ((seed & 0xFFFFFFFF) + 1) * (obj_count + 1)
