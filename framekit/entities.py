"""Concrete game objects: enemies and projectiles."""

from __future__ import annotations

import logging
from typing import Any, Optional

from .collider import Collider
from .components import GameObject
from .vec2 import Vec2

logger = logging.getLogger(__name__)

ENEMY_HP = 5
PLAYER_BULLET_NAME = "PlayerBullet"
ENEMY_NAME = "Enemy"

PROJECTILE_SPEED = 500.0
BULLET_TEXTURE_KEY = "Bullet"
BULLET_TEXTURE_PATH = "Texture\\Bullet.bmp"


class Enemy(GameObject):
    """A box with hit points that player bullets wear down."""

    def __init__(
        self,
        events: Any,
        pos: Optional[Vec2] = None,
        size: Optional[Vec2] = None,
        name: str = "",
    ) -> None:
        super().__init__(pos, size, name)
        self.events = events
        self.hp = ENEMY_HP
        self.add_component(Collider)

    def update(self) -> None:
        """Enemies stand still."""

    def render(self, canvas: Any) -> None:
        canvas.rect(self.pos, self.size)
        self.component_render(canvas)

    def enter_collision(self, other: Collider) -> None:
        """Lose a hit point per player bullet; queue deletion when none remain."""
        logger.debug("Enter")
        other_obj = other.owner
        if other_obj is not None and other_obj.name == PLAYER_BULLET_NAME:
            self.hp -= 1
            if self.hp <= 0:
                self.events.delete_object(self)


class Projectile(GameObject):
    """A bullet flying in a fixed direction until it leaves the top of the screen."""

    def __init__(
        self,
        resources: Any,
        events: Any,
        time_manager: Any,
        pos: Optional[Vec2] = None,
        size: Optional[Vec2] = None,
        name: str = "",
    ) -> None:
        super().__init__(pos, size, name)
        self.events = events
        self.time_manager = time_manager
        self.angle = 0.0
        self.direction = Vec2(1.0, 1.0)
        self.texture = resources.texture_load(BULLET_TEXTURE_KEY, BULLET_TEXTURE_PATH)
        collider = self.add_component(Collider)
        collider.size = Vec2(20.0, 20.0)

    def set_direction(self, direction: Vec2) -> None:
        """Set the flight direction, normalised to unit length."""
        self.direction = direction.normalized()

    def update(self) -> None:
        dt = self.time_manager.dt
        self.pos = Vec2(
            self.pos.x + self.direction.x * PROJECTILE_SPEED * dt,
            self.pos.y + self.direction.y * PROJECTILE_SPEED * dt,
        )
        if self.pos.y < -self.size.y:
            self.events.delete_object(self)

    def render(self, canvas: Any) -> None:
        width = self.texture.width
        height = self.texture.height
        dest = (int(self.pos.x - width // 2), int(self.pos.y - height // 2))
        canvas.blit_transparent(self.texture.surface, dest, (0, 0, width, height))
        self.component_render(canvas)

    def enter_collision(self, other: Collider) -> None:
        """Disappear on hitting an enemy."""
        other_obj = other.owner
        if other_obj is not None and other_obj.name == ENEMY_NAME:
            self.events.delete_object(self)