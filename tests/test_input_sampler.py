"""
Tests for the input sampler and its per-tick snapshots.
"""
from game.skyshooter.input_sampler import InputSampler, InputSnapshot


class TestKeys:

    def test_key_down_and_up(self):
        sampler = InputSampler()
        sampler.key_down("left")
        assert sampler.is_pressed("left")
        assert sampler.snapshot().left

        sampler.key_up("left")
        assert not sampler.is_pressed("left")
        assert not sampler.snapshot().left

    def test_alias_keys(self):
        sampler = InputSampler()
        sampler.key_down("a")
        sampler.key_down("d")
        snap = sampler.snapshot()
        assert snap.left and snap.right

    def test_space_is_fire_held(self):
        sampler = InputSampler()
        sampler.key_down("space")
        assert sampler.snapshot().fire_held
        # Held keys persist across snapshots
        assert sampler.snapshot().fire_held

    def test_unknown_keys_ignored_by_snapshot_helpers(self):
        sampler = InputSampler()
        sampler.key_down("q")
        snap = sampler.snapshot()
        assert "q" in snap.pressed
        assert not (snap.left or snap.right or snap.fire_held)


class TestPointer:

    def test_no_pointer_until_moved(self):
        assert InputSampler().snapshot().pointer_x is None

    def test_last_move_wins_unclamped(self):
        sampler = InputSampler()
        sampler.pointer_move(10)
        sampler.pointer_move(-5000)
        assert sampler.snapshot().pointer_x == -5000


class TestFireRequest:

    def test_one_shot(self):
        """A request shows up in exactly one snapshot."""
        sampler = InputSampler()
        sampler.request_fire()
        assert sampler.fire_requested
        assert sampler.snapshot().fire_requested
        assert not sampler.fire_requested
        assert not sampler.snapshot().fire_requested

    def test_repeated_requests_collapse(self):
        sampler = InputSampler()
        sampler.request_fire()
        sampler.request_fire()
        assert sampler.snapshot().fire_requested
        assert not sampler.snapshot().fire_requested


class TestClear:

    def test_clear_resets_everything(self):
        sampler = InputSampler()
        sampler.key_down("right")
        sampler.pointer_move(100)
        sampler.request_fire()
        sampler.clear()
        assert sampler.snapshot() == InputSnapshot()
