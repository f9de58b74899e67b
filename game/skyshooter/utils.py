"""
Utility functions for game mechanics
"""

from __future__ import annotations
import random
from typing import List, Optional, Sequence
import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def reflect_inward(x: float, half_extent: float, vx: float, width: float) -> float:
    """Horizontal velocity after touching a side wall.

    Points the drift back into the playfield instead of toggling it, so a body
    still touching the wall next tick is not bounced back out.
    """
    if x - half_extent <= 0:
        return abs(vx)
    if x + half_extent >= width:
        return -abs(vx)
    return vx


def nearest(bodies: Sequence, x: float, y: float, k: int) -> List:
    """The k bodies closest to (x, y), closest first"""
    return sorted(bodies, key=lambda b: (b.x - x) ** 2 + (b.y - y) ** 2)[:k]


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
