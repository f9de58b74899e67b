"""
Game entity dataclasses
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class Player:
    """Player ship, slides along the bottom edge"""
    x: float
    y: float
    radius: float = 20.0
    vx: float = 0.0
    cooldown: int = 0  # ticks until the next shot


@dataclass
class Bullet:
    """Bullet projectile entity, travels straight up"""
    x: float
    y: float
    radius: float = 4.0
    speed: float = 7.0  # px/tick
    alive: bool = True


@dataclass
class Enemy:
    """Descending enemy that drifts sideways and bounces off the walls"""
    x: float
    y: float
    radius: float
    vy: float
    vx: float = 0.0
    color: Tuple[int, int, int] = (255, 255, 255)
    alive: bool = True
