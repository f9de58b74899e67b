"""
ShooterEnv - the sky shooter as a headless RL environment
---------------------------------------------------------
- Drives the same GameController the arcade window uses
- Gymnasium API
- 1 RL agent that slides along the bottom edge and shoots (with cooldown)
- Enemies descend; one reaching the bottom or the ship ends the episode
- Vector observation: ship state + top-K nearest enemies
- Discrete MultiDiscrete action space: [move(3), fire(2)]

Install:
    pip install gymnasium arcade numpy

Quick test:
    python -m game.skyshooter.shooter_env
"""

from __future__ import annotations

from typing import Optional, Dict, Any

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import GameConfig
from .controller import GameController, GameState
from .utils import clamp, nearest, seed_everything

DEFAULT_REWARDS = {
    "R_POINT": 0.05,   # per score point
    "R_KILL": 1.0,     # per enemy destroyed
    "R_SHOT": 0.02,    # cost per bullet fired
    "R_ALIVE": 0.001,  # per surviving tick
    "R_DEATH": 5.0,    # on game over
}


class ShooterEnv(gym.Env):
    """Sky shooter environment"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        max_steps: int = 3600,  # 60s at 60 FPS
        k_enemies: int = 5,
        reward_config: Optional[Dict[str, float]] = None,
        **game_kwargs,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.max_steps = max_steps
        self.k_enemies = k_enemies

        self.rewards = dict(DEFAULT_REWARDS)
        if reward_config:
            self.rewards.update({k: v for k, v in reward_config.items() if k.startswith("R_")})

        # Agents steer with keys; there is no pointer
        game_kwargs.setdefault("pointer_control", False)
        self.config = GameConfig(**game_kwargs)
        self.controller = GameController(self.config)

        # move: 0 stay, 1 left, 2 right
        # fire: 0/1
        self.action_space = spaces.MultiDiscrete([3, 2])

        # Ship: x(1) cooldown(1)
        # Each enemy: rel pos(2) vel(2)
        obs_dim = 2 + self.k_enemies * 4
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self._step_count = 0
        self._kills = 0
        self._shots = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        self._step_count = 0
        self._kills = 0
        self._shots = 0

        self.controller.reset()
        self.controller.start()

        return self._get_obs(), self._get_info()

    def step(self, action):
        move, fire = int(action[0]), int(action[1])
        self._apply_action(move, fire)

        result = self.controller.tick()
        events = result.events if result is not None else {}

        self._kills += events.get("kill", 0)
        self._shots += events.get("shot", 0)

        reward = self._compute_reward(events)

        terminated = self.controller.state == GameState.OVER
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, bool(terminated), bool(truncated), self._get_info()

    def _apply_action(self, move: int, fire: int):
        c = self.controller
        c.on_key_up("left")
        c.on_key_up("right")
        if move == 1:
            c.on_key_down("left")
        elif move == 2:
            c.on_key_down("right")

        if fire:
            c.on_key_down("space")
        else:
            c.on_key_up("space")

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        cfg = self.config
        session = self.controller.session
        player = session.player

        px = player.x / cfg.width
        cooldown = player.cooldown / max(1, cfg.shoot_delay)
        obs_parts = [clamp(px * 2 - 1, -1, 1), clamp(cooldown * 2 - 1, -1, 1)]

        max_speed = max(1e-6, cfg.enemy_speed_max, cfg.enemy_drift / 2)
        closest = nearest(session.store.enemies, player.x, player.y, self.k_enemies)
        for i in range(self.k_enemies):
            if i < len(closest):
                e = closest[i]
                obs_parts += [
                    clamp((e.x - player.x) / cfg.width, -1, 1),
                    clamp((e.y - player.y) / cfg.height, -1, 1),
                    clamp(e.vx / max_speed, -1, 1),
                    clamp(e.vy / max_speed, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self, events: Dict[str, int]) -> float:
        r = self.rewards
        reward = 0.0
        reward += r["R_POINT"] * events.get("points", 0)
        reward += r["R_KILL"] * events.get("kill", 0)
        reward -= r["R_SHOT"] * events.get("shot", 0)

        if self.controller.state == GameState.OVER:
            reward -= r["R_DEATH"]
        else:
            reward += r["R_ALIVE"]

        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        session = self.controller.session
        reason = self.controller.game_over_reason
        return {
            "score": session.score,
            "enemies_killed": self._kills,
            "shots_fired": self._shots,
            "num_enemies": len(session.store.enemies),
            "num_bullets": len(session.store.bullets),
            "frame": session.frame_counter,
            "game_over_reason": reason.value if reason is not None else None,
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from .renderer import ShooterWindow
            self._window = ShooterWindow(self.controller, "ShooterEnv - Arcade", interactive=False)

        self._window.on_draw()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True):
    """Run a random episode for testing"""
    env = ShooterEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=42)

    terminated = False
    truncated = False
    total = 0.0

    print("Running episode... close the window to exit early.")

    import time
    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

        if render and env._window:
            env._window.dispatch_events()
            env._window.flip()
            time.sleep(1 / 60)

    print(f"Random episode return: {total:.2f}  score: {info['score']}  "
          f"reason: {info['game_over_reason']}")

    env.close()


if __name__ == "__main__":
    run_random_episode(render=True)
