"""
Game configuration
"""

from dataclasses import dataclass
from typing import Tuple

SHAPE_FAMILIES = ("circle", "rect")
SCORE_POLICIES = ("size", "fixed")

Color = Tuple[int, int, int]

# Pink, Yellow, Orchid, LightSalmon, LightBlue
ENEMY_COLORS: Tuple[Color, ...] = (
    (255, 105, 180),
    (255, 255, 0),
    (218, 112, 214),
    (255, 160, 122),
    (173, 216, 230),
)


@dataclass(frozen=True)
class GameConfig:
    """Fixed tuning constants for one game build"""

    # Playfield (y grows downward from the top-left corner)
    width: int = 800
    height: int = 600
    fps: int = 60

    # Player
    player_radius: float = 20.0
    player_speed: float = 5.0  # px/tick
    shoot_delay: int = 20  # ticks
    pointer_control: bool = True

    # Bullets
    bullet_radius: float = 4.0
    bullet_speed: float = 7.0

    # Enemies
    enemy_radius_min: float = 15.0
    enemy_radius_max: float = 25.0
    enemy_speed_min: float = 0.5
    enemy_speed_max: float = 1.5
    enemy_drift: float = 1.0  # drift drawn from [-drift/2, drift/2]
    spawn_rate: int = 180  # ticks between spawns
    first_spawn_delay: int = 30  # 0 spawns on the first tick
    enemy_colors: Tuple[Color, ...] = ENEMY_COLORS

    # Rules
    shape_family: str = "circle"
    score_policy: str = "size"
    points_per_kill: int = 1
    respawn_on_kill: bool = False

    # Cosmetic
    star_count: int = 100

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Playfield must be positive, got {self.width}x{self.height}")
        if self.player_radius <= 0 or 2 * self.player_radius > self.width:
            raise ValueError(f"player_radius {self.player_radius} does not fit the playfield")
        if self.player_y < 0:
            raise ValueError(f"height {self.height} is too small for player_radius {self.player_radius}")
        if self.shoot_delay < 0:
            raise ValueError("shoot_delay must be >= 0")
        if self.bullet_radius <= 0:
            raise ValueError("bullet_radius must be > 0")
        if self.bullet_speed <= 0:
            raise ValueError("bullet_speed must be > 0")
        if self.spawn_rate <= 0:
            raise ValueError("spawn_rate must be > 0")
        if self.first_spawn_delay < 0:
            raise ValueError("first_spawn_delay must be >= 0")
        if not 0 < self.enemy_radius_min <= self.enemy_radius_max:
            raise ValueError("Need 0 < enemy_radius_min <= enemy_radius_max")
        if 2 * self.enemy_radius_max > self.width:
            raise ValueError("enemy_radius_max does not fit the playfield")
        if not 0 <= self.enemy_speed_min <= self.enemy_speed_max:
            raise ValueError("Need 0 <= enemy_speed_min <= enemy_speed_max")
        if self.enemy_drift < 0:
            raise ValueError("enemy_drift must be >= 0")
        if not self.enemy_colors:
            raise ValueError("enemy_colors must not be empty")
        if self.shape_family not in SHAPE_FAMILIES:
            raise ValueError(f"Unknown shape_family: {self.shape_family}")
        if self.score_policy not in SCORE_POLICIES:
            raise ValueError(f"Unknown score_policy: {self.score_policy}")

    @property
    def player_y(self) -> float:
        return self.height - self.player_radius * 1.5
