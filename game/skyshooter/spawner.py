"""
Enemy spawn policy
"""

import logging
import random

from .config import GameConfig
from .entities import Enemy

logger = logging.getLogger(__name__)


class Spawner:
    """
    Frame-counter driven spawn cadence plus randomized enemy attributes.

    ``rng`` is anything with ``uniform``, ``random`` and ``choice``; by
    default the ``random`` module itself, so ``seed_everything`` controls it.
    """

    def __init__(self, config: GameConfig, rng=None):
        self.config = config
        self.rng = rng if rng is not None else random

    def should_spawn(self, frame: int) -> bool:
        cfg = self.config
        # A zero delay puts the first enemy on the first tick
        if frame == max(1, cfg.first_spawn_delay):
            return True
        return frame > 0 and frame % cfg.spawn_rate == 0

    def make_enemy(self) -> Enemy:
        cfg = self.config
        radius = self.rng.uniform(cfg.enemy_radius_min, cfg.enemy_radius_max)
        enemy = Enemy(
            # Fully inside the playfield horizontally, just above the top edge
            x=self.rng.uniform(radius, cfg.width - radius),
            y=-radius,
            radius=radius,
            vy=self.rng.uniform(cfg.enemy_speed_min, cfg.enemy_speed_max),
            vx=(self.rng.random() - 0.5) * cfg.enemy_drift,
            color=self.rng.choice(cfg.enemy_colors),
        )
        logger.debug("Spawned enemy r=%.1f at x=%.1f", enemy.radius, enemy.x)
        return enemy
