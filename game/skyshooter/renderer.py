"""
Arcade window: draws frame snapshots and feeds host input to the controller.
This is a THIN ADAPTER - no game logic here.
"""

import random
from typing import List, Tuple

import arcade

from .controller import FrameSnapshot, GameController, GameState

# Arcade key codes -> input sampler key names
KEY_NAMES = {
    arcade.key.LEFT: "left",
    arcade.key.A: "a",
    arcade.key.RIGHT: "right",
    arcade.key.D: "d",
    arcade.key.SPACE: "space",
}


class ShooterWindow(arcade.Window):
    """Arcade window for the sky shooter"""

    def __init__(self, controller: GameController, title: str = "Sky Shooter",
                 interactive: bool = True):
        cfg = controller.config
        super().__init__(cfg.width, cfg.height, title, update_rate=1 / cfg.fps)
        self.controller = controller
        # Non-interactive windows only draw; whoever owns the controller ticks it
        self.interactive = interactive

        # Colors
        self.BG = (0, 0, 32)
        self.PLAYER_C = (135, 206, 250)
        self.BULLET_C = (255, 255, 255)
        self.STAR_C = (255, 255, 255)
        self.TEXT_C = (255, 255, 255)
        self.OVER_C = (255, 165, 0)

        self.stars: List[Tuple[float, float, float]] = []
        self._make_stars()
        self._last_state = controller.state

    def _make_stars(self):
        cfg = self.controller.config
        self.stars = [
            (random.uniform(0, cfg.width), random.uniform(0, cfg.height), random.uniform(0, 1.5))
            for _ in range(cfg.star_count)
        ]

    def _sy(self, y: float) -> float:
        # Playfield is y-down, arcade is y-up
        return self.height - y

    # ----------------------------
    # Loop
    # ----------------------------

    def on_update(self, delta_time: float):
        if self.interactive:
            self.controller.tick()

    def on_draw(self):
        snap = self.controller.snapshot()
        if snap.state != self._last_state:
            if snap.state == GameState.RUNNING:
                self._make_stars()
            self._last_state = snap.state

        self.clear()
        arcade.draw_lrbt_rectangle_filled(0, self.width, 0, self.height, self.BG)
        for sx, sy, sr in self.stars:
            if sr > 0:
                arcade.draw_circle_filled(sx, self._sy(sy), sr, self.STAR_C)

        if snap.state != GameState.IDLE:
            self._draw_entities(snap)
            arcade.draw_text(f"Score: {snap.score}", 15, self.height - 30, self.TEXT_C, 18)

        if snap.state == GameState.IDLE:
            self._draw_title()
        elif snap.state == GameState.OVER:
            self._draw_game_over(snap)

    def _draw_entities(self, snap: FrameSnapshot):
        rect = self.controller.config.shape_family == "rect"
        p = snap.player
        if rect:
            arcade.draw_lrbt_rectangle_filled(
                p.x - p.radius, p.x + p.radius,
                self._sy(p.y + p.radius), self._sy(p.y - p.radius), self.PLAYER_C
            )
        else:
            # Upper half-disc
            arcade.draw_arc_filled(p.x, self._sy(p.y), p.radius * 2, p.radius * 2,
                                   self.PLAYER_C, 0, 180)

        for b in snap.bullets:
            self._draw_body(b.x, b.y, b.radius, self.BULLET_C, rect)
        for e in snap.enemies:
            self._draw_body(e.x, e.y, e.radius, e.color, rect)

    def _draw_body(self, x, y, r, color, rect: bool):
        if rect:
            arcade.draw_lrbt_rectangle_filled(x - r, x + r, self._sy(y + r), self._sy(y - r), color)
        else:
            arcade.draw_circle_filled(x, self._sy(y), r, color)

    def _draw_title(self):
        cx, cy = self.width / 2, self.height / 2
        arcade.draw_text("Click to start", cx, cy + 30, self.TEXT_C, 32, anchor_x="center")
        arcade.draw_text("Keyboard: ← → / A D to move, Space to fire",
                         cx, cy - 10, self.TEXT_C, 14, anchor_x="center")
        arcade.draw_text("Mouse: move to steer, click to fire",
                         cx, cy - 35, self.TEXT_C, 14, anchor_x="center")

    def _draw_game_over(self, snap: FrameSnapshot):
        cx, cy = self.width / 2, self.height / 2
        arcade.draw_text("Game over!", cx, cy + 40, self.OVER_C, 48, anchor_x="center")
        arcade.draw_text(f"Final score: {snap.score}", cx, cy - 10, self.TEXT_C, 24,
                         anchor_x="center")
        if snap.reason is not None:
            arcade.draw_text(snap.reason.value.capitalize(), cx, cy - 40, self.TEXT_C, 16,
                             anchor_x="center")
        arcade.draw_text("Click to restart", cx, cy - 70, self.TEXT_C, 18, anchor_x="center")

    # ----------------------------
    # Host input
    # ----------------------------

    def on_key_press(self, symbol: int, modifiers: int):
        if not self.interactive:
            return
        if symbol == arcade.key.ESCAPE:
            self.close()
            return
        name = KEY_NAMES.get(symbol)
        if name:
            self.controller.on_key_down(name)

    def on_key_release(self, symbol: int, modifiers: int):
        if not self.interactive:
            return
        name = KEY_NAMES.get(symbol)
        if name:
            self.controller.on_key_up(name)

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int):
        if self.interactive:
            self.controller.on_pointer_move(x)

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        if self.interactive:
            self.controller.on_pointer_press()
