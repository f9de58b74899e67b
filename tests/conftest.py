"""
Shared fixtures. Sessions get a seeded ``random.Random`` so spawns are
reproducible inside a test.
"""
import random

import pytest

from game.skyshooter.config import GameConfig
from game.skyshooter.controller import GameController
from game.skyshooter.entities import Enemy
from game.skyshooter.session import GameSession


class RecordingCues:
    """Sound emitter that just remembers what it was asked to play."""

    def __init__(self):
        self.played = []

    def play_shoot_cue(self):
        self.played.append("shoot")

    def play_hit_cue(self):
        self.played.append("hit")

    def play_game_over_cue(self):
        self.played.append("game_over")


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def session(config):
    return GameSession(config, rng=random.Random(7))


@pytest.fixture
def cues():
    return RecordingCues()


@pytest.fixture
def controller(config, cues):
    return GameController(config, sound=cues, rng=random.Random(7))


def make_enemy(x, y, radius=20.0, vy=0.0, vx=0.0):
    return Enemy(x=x, y=y, radius=radius, vy=vy, vx=vx)
