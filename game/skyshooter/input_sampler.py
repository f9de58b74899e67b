"""
Input sampler - collects host input events between ticks and hands the
simulation one immutable snapshot per tick.
"""

import threading
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional

LEFT_KEYS = frozenset({"left", "a"})
RIGHT_KEYS = frozenset({"right", "d"})
FIRE_KEYS = frozenset({"space"})


@dataclass(frozen=True)
class InputSnapshot:
    """Input state as seen by one tick"""
    pressed: FrozenSet[str] = frozenset()
    pointer_x: Optional[float] = None
    fire_requested: bool = False

    @property
    def left(self) -> bool:
        return bool(self.pressed & LEFT_KEYS)

    @property
    def right(self) -> bool:
        return bool(self.pressed & RIGHT_KEYS)

    @property
    def fire_held(self) -> bool:
        return bool(self.pressed & FIRE_KEYS)


class InputSampler:
    """
    Written by input event handlers, read by the controller at tick
    boundaries. ``snapshot()`` copies under a lock and consumes the one-shot
    fire request, so a request never survives the tick that sampled it.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._keys: Dict[str, bool] = {}
        self._pointer_x: Optional[float] = None
        self._fire_requested = False

    def key_down(self, key: str):
        with self._lock:
            self._keys[key] = True

    def key_up(self, key: str):
        with self._lock:
            self._keys[key] = False

    def pointer_move(self, x: float):
        with self._lock:
            self._pointer_x = x

    def request_fire(self):
        with self._lock:
            self._fire_requested = True

    def is_pressed(self, key: str) -> bool:
        return self._keys.get(key, False)

    @property
    def fire_requested(self) -> bool:
        return self._fire_requested

    def clear(self):
        with self._lock:
            self._keys = {}
            self._pointer_x = None
            self._fire_requested = False

    def snapshot(self) -> InputSnapshot:
        with self._lock:
            snap = InputSnapshot(
                pressed=frozenset(k for k, down in self._keys.items() if down),
                pointer_x=self._pointer_x,
                fire_requested=self._fire_requested,
            )
            self._fire_requested = False
        return snap
