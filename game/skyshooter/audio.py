"""
Sound cues. Fire-and-forget: nothing raised while loading or playing a
sound ever reaches the simulation.
"""

import logging

logger = logging.getLogger(__name__)

# Built-in arcade resources
CUE_RESOURCES = {
    "shoot": ":resources:sounds/laser1.wav",
    "hit": ":resources:sounds/hit1.wav",
    "game_over": ":resources:sounds/gameover1.wav",
}


class SoundCues:
    """Silent cue emitter; subclasses override ``_play``"""

    def play_shoot_cue(self):
        self._emit("shoot")

    def play_hit_cue(self):
        self._emit("hit")

    def play_game_over_cue(self):
        self._emit("game_over")

    def _emit(self, cue: str):
        try:
            self._play(cue)
        except Exception as exc:
            logger.warning("Could not play %s cue: %s", cue, exc)

    def _play(self, cue: str):
        pass


class ArcadeSoundCues(SoundCues):
    """Plays arcade's bundled sound effects"""

    def __init__(self, volume: float = 0.3):
        self.volume = volume
        self._sounds = {}
        try:
            import arcade
            for cue, path in CUE_RESOURCES.items():
                self._sounds[cue] = arcade.load_sound(path)
        except Exception as exc:
            logger.warning("Audio unavailable, continuing without sound: %s", exc)
            self._sounds = {}

    def _play(self, cue: str):
        sound = self._sounds.get(cue)
        if sound is None:
            return
        sound.play(volume=self.volume)
