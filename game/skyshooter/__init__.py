"""Sky shooter - arcade game core, arcade front end and RL environment"""

from .config import GameConfig
from .controller import FrameSnapshot, GameController, GameState
from .session import GameSession
from .simulation import GameOverReason, TickResult, step
from .shooter_env import ShooterEnv, run_random_episode

__all__ = [
    'GameConfig',
    'GameController',
    'GameState',
    'FrameSnapshot',
    'GameSession',
    'GameOverReason',
    'TickResult',
    'step',
    'ShooterEnv',
    'run_random_episode',
]
