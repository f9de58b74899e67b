"""
Tests for the small geometry helpers.
"""
from game.skyshooter.utils import clamp, nearest, reflect_inward

from conftest import make_enemy


class TestClamp:

    def test_inside_and_outside(self):
        assert clamp(5, 0, 10) == 5
        assert clamp(-1, 0, 10) == 0
        assert clamp(11, 0, 10) == 10


class TestReflectInward:

    def test_left_wall_points_right(self):
        assert reflect_inward(10, 20, -1.0, 800) == 1.0
        assert reflect_inward(10, 20, 1.0, 800) == 1.0

    def test_right_wall_points_left(self):
        assert reflect_inward(790, 20, 1.0, 800) == -1.0
        assert reflect_inward(790, 20, -1.0, 800) == -1.0

    def test_touching_counts(self):
        assert reflect_inward(20, 20, -0.5, 800) == 0.5
        assert reflect_inward(780, 20, 0.5, 800) == -0.5

    def test_clear_of_walls_unchanged(self):
        assert reflect_inward(400, 20, -0.3, 800) == -0.3


class TestNearest:

    def test_sorted_and_truncated(self):
        far = make_enemy(700, 100)
        near = make_enemy(410, 560)
        mid = make_enemy(300, 400)
        assert nearest([far, near, mid], 400, 570, 2) == [near, mid]

    def test_fewer_than_k(self):
        e = make_enemy(0, 0)
        assert nearest([e], 0, 0, 5) == [e]
