"""
Game state controller - the Idle / Running / Over state machine.

The controller is the only writer of the game state. Hosts call ``tick()``
every frame regardless of state; outside Running it does nothing.
"""

import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

from .audio import SoundCues
from .config import GameConfig
from .entities import Bullet, Enemy, Player
from .input_sampler import InputSampler
from .session import GameSession
from .simulation import GameOverReason, TickResult, step

logger = logging.getLogger(__name__)


class GameState(Enum):
    IDLE = auto()     # Waiting for the first start
    RUNNING = auto()  # Simulation active
    OVER = auto()     # Frozen, waiting for a restart


@dataclass(frozen=True)
class FrameSnapshot:
    """Read-only copy of everything a renderer needs"""
    state: GameState
    score: int
    frame: int
    player: Player
    bullets: Tuple[Bullet, ...]
    enemies: Tuple[Enemy, ...]
    reason: Optional[GameOverReason] = None


class GameController:
    """
    Owns the session, the input sampler and the state flag.

    Usage:
        controller = GameController(GameConfig())
        controller.on_pointer_press()   # Idle -> Running
        while True:
            controller.tick()
            render(controller.snapshot())
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        sound: Optional[SoundCues] = None,
        rng=None,
    ):
        self.config = config or GameConfig()
        self.session = GameSession(self.config, rng)
        self.sampler = InputSampler()
        self.sound = sound or SoundCues()
        self.state = GameState.IDLE
        self.game_over_reason: Optional[GameOverReason] = None

    # ----------------------------
    # Transitions
    # ----------------------------

    def start(self) -> bool:
        if self.state == GameState.RUNNING:
            return False
        self.session.reset()
        self.sampler.clear()
        self.game_over_reason = None
        self.state = GameState.RUNNING
        logger.info("Game started")
        return True

    def restart(self) -> bool:
        if self.state != GameState.OVER:
            return False
        logger.info("Restarting game")
        return self.start()

    def set_game_over(self, reason: GameOverReason) -> bool:
        if self.state != GameState.RUNNING:
            return False
        self.state = GameState.OVER
        self.game_over_reason = reason
        self.sound.play_game_over_cue()
        logger.info("Game over: %s (score %d)", reason.value, self.session.score)
        return True

    def reset(self):
        """Return to Idle with an empty playfield"""
        self.session.reset()
        self.sampler.clear()
        self.game_over_reason = None
        self.state = GameState.IDLE

    # ----------------------------
    # Per-frame
    # ----------------------------

    def tick(self) -> Optional[TickResult]:
        if self.state != GameState.RUNNING:
            return None

        result = step(self.session, self.sampler.snapshot())

        if result.events["shot"]:
            self.sound.play_shoot_cue()
        if result.events["kill"]:
            self.sound.play_hit_cue()
        if result.game_over:
            self.set_game_over(result.reason)
        return result

    def snapshot(self) -> FrameSnapshot:
        store = self.session.store
        return FrameSnapshot(
            state=self.state,
            score=self.session.score,
            frame=self.session.frame_counter,
            player=dataclasses.replace(self.session.player),
            bullets=tuple(dataclasses.replace(b) for b in store.bullets),
            enemies=tuple(dataclasses.replace(e) for e in store.enemies),
            reason=self.game_over_reason,
        )

    # ----------------------------
    # Host input
    # ----------------------------

    def on_key_down(self, key: str):
        self.sampler.key_down(key)

    def on_key_up(self, key: str):
        self.sampler.key_up(key)

    def on_pointer_move(self, x: float):
        self.sampler.pointer_move(x)

    def on_pointer_press(self):
        if self.state == GameState.IDLE:
            self.start()
        elif self.state == GameState.OVER:
            self.restart()
        else:
            self.sampler.request_fire()
