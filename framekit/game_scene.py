"""The main play scene filled with enemies."""

from __future__ import annotations

import random
from typing import Any, Optional

from .collision import CollisionManager
from .entities import Enemy
from .enums import Layer
from .scene import Scene
from .vec2 import Vec2

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
ENEMY_COUNT = 100
ENEMY_SIZE = Vec2(100, 100)


class GameScene(Scene):
    """Spawns enemies at random whole-pixel positions across the screen."""

    def __init__(
        self,
        events: Any,
        collisions: Optional[CollisionManager] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(collisions)
        self.events = events
        self.rng = rng if rng is not None else random.Random()

    def init(self) -> None:
        for _ in range(ENEMY_COUNT):
            pos = Vec2(self.rng.randrange(SCREEN_WIDTH), self.rng.randrange(SCREEN_HEIGHT))
            self.add_object(Enemy(self.events, pos=pos, size=ENEMY_SIZE), Layer.ENEMY)