"""Axis-aligned box collider component."""

from __future__ import annotations

import itertools
from typing import Any

from .components import Component
from .enums import BrushType, PenType
from .vec2 import Vec2


class Collider(Component):
    """A box that follows its owner at an offset and relays collision callbacks."""

    _next_id = itertools.count()

    def __init__(self) -> None:
        super().__init__()
        self.id = next(Collider._next_id)
        self.size = Vec2(30.0, 30.0)
        self.offset = Vec2(0.0, 0.0)
        self.late_pos = Vec2(0.0, 0.0)
        self.show_debug = False

    def late_update(self) -> None:
        if self.owner is None:
            raise RuntimeError("collider is not attached to an object")
        self.late_pos = self.owner.pos + self.offset

    def render(self, canvas: Any) -> None:
        pen = PenType.RED if self.show_debug else PenType.GREEN
        with canvas.selected(pen=pen, brush=BrushType.HOLLOW):
            canvas.rect(self.late_pos, self.size)

    def enter_collision(self, other: Collider) -> None:
        self.show_debug = True
        self.owner.enter_collision(other)

    def stay_collision(self, other: Collider) -> None:
        self.owner.stay_collision(other)

    def exit_collision(self, other: Collider) -> None:
        self.show_debug = False
        self.owner.exit_collision(other)