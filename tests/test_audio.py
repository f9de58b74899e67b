"""
Tests for the sound cue boundary.
"""
import logging

import pytest

from game.skyshooter.audio import ArcadeSoundCues, SoundCues


class ExplodingCues(SoundCues):
    def __init__(self):
        self.attempts = []

    def _play(self, cue):
        self.attempts.append(cue)
        raise OSError("denied by host audio policy")


class TestSoundCues:

    def test_silent_cues_do_nothing(self):
        cues = SoundCues()
        cues.play_shoot_cue()
        cues.play_hit_cue()
        cues.play_game_over_cue()

    def test_failures_are_swallowed_and_logged(self, caplog):
        cues = ExplodingCues()
        with caplog.at_level(logging.WARNING, logger="game.skyshooter.audio"):
            cues.play_shoot_cue()
            cues.play_hit_cue()
            cues.play_game_over_cue()
        assert cues.attempts == ["shoot", "hit", "game_over"]
        assert len(caplog.records) == 3
        assert "denied by host audio policy" in caplog.records[0].getMessage()

    def test_arcade_cues_silent_when_loading_fails(self, monkeypatch, caplog):
        """A host without a working audio backend still gets a playable game"""
        arcade = pytest.importorskip("arcade")

        def refuse(path, *args, **kwargs):
            raise RuntimeError(f"no audio device for {path}")

        monkeypatch.setattr(arcade, "load_sound", refuse)
        with caplog.at_level(logging.WARNING, logger="game.skyshooter.audio"):
            cues = ArcadeSoundCues()
            cues.play_shoot_cue()
            cues.play_hit_cue()
            cues.play_game_over_cue()

        assert cues._sounds == {}
        messages = [r.getMessage() for r in caplog.records]
        assert len(messages) == 1
        assert "Audio unavailable" in messages[0]
        assert "no audio device" in messages[0]
