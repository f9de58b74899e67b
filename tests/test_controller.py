"""
GAME STATE CONTROLLER TESTS

Idle -> Running -> Over -> Running, the no-op transitions, and what the
controller does with each tick's result.
"""
import random

from game.skyshooter.config import GameConfig
from game.skyshooter.controller import GameController, GameState
from game.skyshooter.entities import Bullet
from game.skyshooter.simulation import GameOverReason

from conftest import RecordingCues, make_enemy


def end_by_escape(controller):
    controller.session.store.add_enemy(make_enemy(100, 619, vy=1.5))
    controller.tick()


class TestTransitions:

    def test_initial_state(self, controller):
        assert controller.state == GameState.IDLE
        assert controller.session.store.is_empty()
        assert controller.tick() is None

    def test_start(self, controller):
        assert controller.start()
        assert controller.state == GameState.RUNNING
        assert controller.session.score == 0
        assert controller.session.frame_counter == 0
        assert controller.session.store.is_empty()

    def test_start_while_running_is_noop(self, controller):
        controller.start()
        controller.tick()
        controller.session.score = 42
        assert not controller.start()
        assert controller.session.score == 42
        assert controller.session.frame_counter == 1

    def test_game_over_only_from_running(self, controller, cues):
        assert not controller.set_game_over(GameOverReason.PLAYER_COLLISION)
        assert controller.state == GameState.IDLE
        assert cues.played == []

    def test_game_over_idempotent(self, controller, cues):
        controller.start()
        assert controller.set_game_over(GameOverReason.PLAYER_COLLISION)
        assert not controller.set_game_over(GameOverReason.ENEMY_ESCAPED)
        assert controller.state == GameState.OVER
        assert controller.game_over_reason == GameOverReason.PLAYER_COLLISION
        assert cues.played == ["game_over"]

    def test_restart_requires_over(self, controller):
        assert not controller.restart()
        assert controller.state == GameState.IDLE
        controller.start()
        assert not controller.restart()
        assert controller.state == GameState.RUNNING

    def test_restart_resets_everything(self, controller):
        controller.start()
        controller.on_key_down("left")
        controller.on_pointer_move(10)
        for _ in range(40):
            controller.tick()
        controller.session.score = 99
        controller.session.store.add_bullet(Bullet(x=10, y=10))
        end_by_escape(controller)
        assert controller.state == GameState.OVER

        assert controller.restart()
        session = controller.session
        assert controller.state == GameState.RUNNING
        assert controller.game_over_reason is None
        assert session.score == 0
        assert session.frame_counter == 0
        assert session.store.is_empty()
        assert session.player.x == 400
        assert session.player.cooldown == 0
        assert not controller.sampler.is_pressed("left")
        assert controller.sampler.snapshot().pointer_x is None

    def test_reset_returns_to_idle_empty(self, controller):
        controller.start()
        for _ in range(40):
            controller.tick()
        controller.reset()
        assert controller.state == GameState.IDLE
        assert controller.session.store.is_empty()
        assert controller.tick() is None

    def test_zero_delay_spawns_on_first_tick(self, cues):
        controller = GameController(GameConfig(first_spawn_delay=0), sound=cues,
                                    rng=random.Random(1))
        controller.start()
        assert controller.session.store.is_empty()
        controller.tick()
        assert len(controller.session.store.enemies) == 1


class TestTicking:

    def test_escape_ends_game_exactly_once(self, controller, cues):
        controller.start()
        end_by_escape(controller)
        assert controller.state == GameState.OVER
        assert controller.game_over_reason == GameOverReason.ENEMY_ESCAPED
        assert cues.played.count("game_over") == 1

    def test_no_mutation_after_over(self, controller):
        controller.start()
        controller.session.store.add_enemy(make_enemy(300, 100, vy=1.0))
        controller.session.store.add_bullet(Bullet(x=600, y=300))
        end_by_escape(controller)

        before = controller.snapshot()
        controller.on_key_down("space")
        for _ in range(10):
            assert controller.tick() is None
        after = controller.snapshot()

        assert after == before
        assert controller.state == GameState.OVER

    def test_collision_scenario(self, controller):
        """Enemy straight above a centred ship reaches it within 3 ticks."""
        controller.start()
        controller.session.store.add_enemy(make_enemy(400, 515, vy=5))
        for _ in range(3):
            controller.tick()
        assert controller.state == GameState.OVER
        assert controller.game_over_reason == GameOverReason.PLAYER_COLLISION

    def test_cues_follow_events(self, controller, cues):
        controller.start()
        controller.session.store.add_enemy(make_enemy(400, 520))
        controller.on_pointer_press()  # fire
        controller.tick()  # shot spawns at y=550-7, 23 px under the enemy -> hit
        assert cues.played == ["shoot", "hit"]
        assert controller.session.score == 20


class TestFireRequests:

    def test_press_in_idle_starts_without_firing(self, controller):
        controller.on_pointer_press()
        assert controller.state == GameState.RUNNING
        controller.tick()
        assert controller.session.store.bullets == []

    def test_press_in_over_restarts(self, controller):
        controller.start()
        end_by_escape(controller)
        controller.on_pointer_press()
        assert controller.state == GameState.RUNNING

    def test_requests_inside_cooldown_are_dropped(self, controller):
        """Two clicks fewer than shoot_delay ticks apart make one bullet."""
        controller.start()
        controller.on_pointer_press()
        controller.tick()
        controller.on_pointer_press()
        controller.tick()
        assert not controller.sampler.fire_requested
        for _ in range(25):
            controller.tick()
        assert len(controller.session.store.bullets) == 1

    def test_request_after_cooldown_fires(self, controller):
        controller.start()
        controller.on_pointer_press()
        controller.tick()
        for _ in range(19):
            controller.tick()
        controller.on_pointer_press()
        controller.tick()
        assert len(controller.session.store.bullets) == 2


class TestSnapshot:

    def test_snapshot_is_a_copy(self, controller):
        controller.start()
        controller.session.store.add_enemy(make_enemy(300, 100))
        snap = controller.snapshot()
        snap.enemies[0].x = -1
        snap.player.x = -1
        assert controller.session.store.enemies[0].x == 300
        assert controller.session.player.x == 400

    def test_snapshot_fields(self, controller):
        controller.start()
        controller.tick()
        snap = controller.snapshot()
        assert snap.state == GameState.RUNNING
        assert snap.frame == 1
        assert snap.score == 0
        assert snap.reason is None


class TestSoundFailures:

    def test_broken_audio_does_not_change_outcome(self):
        from game.skyshooter.audio import SoundCues

        class BrokenCues(SoundCues):
            def _play(self, cue):
                raise RuntimeError("audio context unavailable")

        results = []
        for sound in (BrokenCues(), RecordingCues()):
            controller = GameController(GameConfig(), sound=sound, rng=random.Random(5))
            controller.start()
            controller.on_key_down("space")
            for _ in range(300):
                controller.tick()
            snap = controller.snapshot()
            results.append((snap.state, snap.score, snap.frame, len(snap.bullets), len(snap.enemies)))
        assert results[0] == results[1]
