"""
Game session - all mutable state of one game, owned in one place
"""

from typing import Optional

from .config import GameConfig
from .entities import Player
from .spawner import Spawner
from .store import EntityStore


class GameSession:
    """Player, entities, score and frame counter for one playfield"""

    def __init__(self, config: Optional[GameConfig] = None, rng=None):
        self.config = config or GameConfig()
        self.spawner = Spawner(self.config, rng)
        self.store = EntityStore()
        self.player = self._new_player()
        self.score = 0
        self.frame_counter = 0

    def _new_player(self) -> Player:
        cfg = self.config
        return Player(x=cfg.width * 0.5, y=cfg.player_y, radius=cfg.player_radius)

    def reset(self):
        """Back to an empty playfield with a centred player"""
        self.player = self._new_player()
        self.store.clear()
        self.score = 0
        self.frame_counter = 0
