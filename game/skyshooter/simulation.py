"""
Simulation step - advances a running session by one tick.

The step never touches the game state flag. It reports what happened through
a :class:`TickResult` and the controller decides what to do with it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from .collision import bodies_overlap
from .entities import Bullet
from .input_sampler import InputSnapshot
from .session import GameSession
from .utils import clamp, reflect_inward


class GameOverReason(str, Enum):
    ENEMY_ESCAPED = "target escaped"
    PLAYER_COLLISION = "collided with obstacle"


def _new_events() -> Dict[str, int]:
    return {"shot": 0, "kill": 0, "spawn": 0, "points": 0}


@dataclass
class TickResult:
    """Continue (reason is None) or GameOver(reason), plus event counts"""
    reason: Optional[GameOverReason] = None
    events: Dict[str, int] = field(default_factory=_new_events)

    @property
    def game_over(self) -> bool:
        return self.reason is not None


def step(session: GameSession, snapshot: InputSnapshot) -> TickResult:
    result = TickResult()
    events = result.events

    _move_player(session, snapshot)
    _shoot(session, snapshot, events)
    _advance_bullets(session)

    session.frame_counter += 1
    if session.spawner.should_spawn(session.frame_counter):
        session.store.add_enemy(session.spawner.make_enemy())
        events["spawn"] += 1

    if _advance_enemies(session):
        result.reason = GameOverReason.ENEMY_ESCAPED
        return result

    _resolve_hits(session, events)

    if _player_hit(session):
        result.reason = GameOverReason.PLAYER_COLLISION
    return result


def _move_player(session: GameSession, snapshot: InputSnapshot):
    cfg = session.config
    player = session.player

    player.vx = 0.0
    if snapshot.left:
        player.vx = -cfg.player_speed
    if snapshot.right:
        player.vx = cfg.player_speed

    # Pointer, when known, wins over the keys and maps to the ship's centre
    if cfg.pointer_control and snapshot.pointer_x is not None:
        player.x = snapshot.pointer_x
    else:
        player.x += player.vx

    r = player.radius
    player.x = clamp(player.x, r, cfg.width - r)


def _shoot(session: GameSession, snapshot: InputSnapshot, events: Dict[str, int]):
    cfg = session.config
    player = session.player

    if player.cooldown > 0:
        player.cooldown -= 1
    if not (snapshot.fire_held or snapshot.fire_requested):
        return
    if player.cooldown > 0:
        return

    session.store.add_bullet(Bullet(
        x=player.x,
        y=player.y - player.radius,
        radius=cfg.bullet_radius,
        speed=cfg.bullet_speed,
    ))
    player.cooldown = cfg.shoot_delay
    events["shot"] += 1


def _advance_bullets(session: GameSession):
    for b in session.store.bullets:
        if not b.alive:
            continue
        b.y -= b.speed
        if b.y + b.radius < 0:
            b.alive = False
    session.store.compact()


def _advance_enemies(session: GameSession) -> bool:
    """Move enemies; True if one fell past the bottom edge"""
    cfg = session.config
    store = session.store

    for e in store.enemies:
        if not e.alive:
            continue
        e.y += e.vy
        e.x += e.vx

        e.vx = reflect_inward(e.x, e.radius, e.vx, cfg.width)

        if e.y - e.radius > cfg.height:
            e.alive = False
            store.compact()
            return True
    return False


def _points_for(session: GameSession, enemy) -> int:
    cfg = session.config
    if cfg.score_policy == "size":
        return math.ceil(enemy.radius)
    return cfg.points_per_kill


def _resolve_hits(session: GameSession, events: Dict[str, int]):
    cfg = session.config
    store = session.store

    for b in store.bullets:
        if not b.alive:
            continue
        for e in store.enemies:
            if not e.alive:
                continue
            if bodies_overlap(b, e, cfg.shape_family):
                # One bullet destroys at most one enemy
                b.alive = False
                e.alive = False
                points = _points_for(session, e)
                session.score += points
                events["points"] += points
                events["kill"] += 1
                break

    store.compact()

    if cfg.respawn_on_kill:
        for _ in range(events["kill"]):
            store.add_enemy(session.spawner.make_enemy())
            events["spawn"] += 1


def _player_hit(session: GameSession) -> bool:
    shape = session.config.shape_family
    return any(bodies_overlap(session.player, e, shape) for e in session.store.enemies)
