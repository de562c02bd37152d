"""Layer-based collision detection between colliders in a scene."""

from __future__ import annotations

from typing import Any, Dict, Tuple

from .collider import Collider
from .enums import Layer
from .vec2 import rect_make


def is_collision(left: Collider, right: Collider) -> bool:
    """True when the integer boxes of two colliders overlap with a non-empty area."""
    l_left, l_top, l_right, l_bottom = rect_make(left.late_pos, left.size)
    r_left, r_top, r_right, r_bottom = rect_make(right.late_pos, right.size)
    return max(l_left, r_left) < min(l_right, r_right) and max(l_top, r_top) < min(
        l_bottom, r_bottom
    )


class CollisionManager:
    """Tracks which layer pairs collide and dispatches enter/stay/exit callbacks."""

    def __init__(self) -> None:
        self._matrix = [0] * int(Layer.END)
        self._info: Dict[Tuple[int, int], bool] = {}

    @staticmethod
    def _index(layer: Any) -> int:
        index = int(layer)
        if not 0 <= index < int(Layer.END):
            raise ValueError(f"layer out of range: {layer!r}")
        return index

    def check_layer(self, left: Layer, right: Layer) -> None:
        """Toggle collision checking between two layers."""
        row, col = sorted((self._index(left), self._index(right)))
        self._matrix[row] ^= 1 << col

    def is_checked(self, left: Layer, right: Layer) -> bool:
        row, col = sorted((self._index(left), self._index(right)))
        return bool(self._matrix[row] & (1 << col))

    def reset(self) -> None:
        """Clear every layer pair."""
        self._matrix = [0] * int(Layer.END)

    def update(self, scene: Any) -> None:
        """Check every enabled layer pair of ``scene`` for collisions."""
        end = int(Layer.END)
        for row in range(end):
            bits = self._matrix[row]
            if not bits:
                continue
            for col in range(row, end):
                if bits & (1 << col):
                    self._update_pair(scene, row, col)

    def _update_pair(self, scene: Any, left_layer: int, right_layer: int) -> None:
        left_objects = scene.layer_objects(left_layer)
        right_objects = scene.layer_objects(right_layer)
        for left_obj in left_objects:
            left = left_obj.get_component(Collider)
            if left is None:
                continue
            for right_obj in right_objects:
                right = right_obj.get_component(Collider)
                if right is None or left_obj is right_obj:
                    continue

                key = (left.id, right.id)
                was_touching = self._info.setdefault(key, False)
                either_dead = left_obj.is_dead or right_obj.is_dead

                if is_collision(left, right):
                    if was_touching:
                        if either_dead:
                            left.exit_collision(right)
                            right.exit_collision(left)
                            self._info[key] = False
                        else:
                            left.stay_collision(right)
                            right.stay_collision(left)
                    elif not either_dead:
                        left.enter_collision(right)
                        right.enter_collision(left)
                        self._info[key] = True
                elif was_touching:
                    left.exit_collision(right)
                    right.exit_collision(left)
                    self._info[key] = False