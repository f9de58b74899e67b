"""
Entity store - owns the live bullets and enemies.

Entities are never removed while a pass iterates over them: a pass marks
them dead through their ``alive`` flag and calls :meth:`EntityStore.compact`
once it is done.
"""

from typing import List

from .entities import Bullet, Enemy


class EntityStore:
    """Unordered collections of bullets and enemies"""

    def __init__(self):
        self.bullets: List[Bullet] = []
        self.enemies: List[Enemy] = []

    def add_bullet(self, bullet: Bullet) -> Bullet:
        self.bullets.append(bullet)
        return bullet

    def add_enemy(self, enemy: Enemy) -> Enemy:
        self.enemies.append(enemy)
        return enemy

    def live_bullets(self) -> List[Bullet]:
        return [b for b in self.bullets if b.alive]

    def live_enemies(self) -> List[Enemy]:
        return [e for e in self.enemies if e.alive]

    def compact(self):
        """Drop every entity marked dead"""
        self.bullets = [b for b in self.bullets if b.alive]
        self.enemies = [e for e in self.enemies if e.alive]

    def clear(self):
        self.bullets = []
        self.enemies = []

    def is_empty(self) -> bool:
        return not self.bullets and not self.enemies

    def __len__(self) -> int:
        return len(self.bullets) + len(self.enemies)
