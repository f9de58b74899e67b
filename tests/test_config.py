"""
Tests for GameConfig validation.
"""
import dataclasses

import pytest

from game.skyshooter.config import GameConfig


class TestGameConfig:

    def test_defaults_are_valid(self):
        cfg = GameConfig()
        assert cfg.spawn_rate == 180
        assert cfg.shoot_delay == 20
        assert cfg.player_y == cfg.height - cfg.player_radius * 1.5

    @pytest.mark.parametrize("kwargs", [
        {"width": 0},
        {"spawn_rate": 0},
        {"shoot_delay": -1},
        {"enemy_radius_min": 30, "enemy_radius_max": 20},
        {"enemy_speed_min": 2.0, "enemy_speed_max": 1.0},
        {"shape_family": "triangle"},
        {"score_policy": "random"},
        {"player_radius": 500},
        {"enemy_colors": ()},
        {"height": 20},
        {"bullet_speed": 0},
        {"bullet_speed": -7.0},
        {"bullet_radius": 0},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            GameConfig(**kwargs)

    def test_player_row_fits_smallest_valid_height(self):
        cfg = GameConfig(height=30, player_radius=20)
        assert cfg.player_y == 0

    def test_frozen(self):
        cfg = GameConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.width = 10
