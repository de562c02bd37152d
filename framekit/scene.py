"""Scenes: layered collections of game objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

from .collision import CollisionManager
from .components import GameObject
from .enums import Layer


class Scene(ABC):
    """Holds game objects per layer and drives their update and render passes."""

    def __init__(self, collisions: Optional[CollisionManager] = None) -> None:
        self.collisions = collisions
        self._layers: List[List[GameObject]] = [[] for _ in range(int(Layer.END))]

    @abstractmethod
    def init(self) -> None:
        """Populate the scene."""

    def update(self) -> None:
        """Update every object that is still alive."""
        for layer in self._layers:
            for obj in layer:
                if not obj.is_dead:
                    obj.update()

    def late_update(self) -> None:
        for layer in self._layers:
            for obj in layer:
                obj.late_update()

    def render(self, canvas: Any) -> None:
        """Drop dead objects and render the rest, layer by layer."""
        for layer in self._layers:
            layer[:] = [obj for obj in layer if not obj.is_dead]
            for obj in layer:
                obj.render(canvas)

    def release(self) -> None:
        """Remove every object and clear the collision layer pairs."""
        for layer in self._layers:
            layer.clear()
        if self.collisions is not None:
            self.collisions.reset()

    def add_object(self, obj: GameObject, layer: Layer) -> None:
        self._layers[int(layer)].append(obj)

    def layer_objects(self, layer: Layer) -> Tuple[GameObject, ...]:
        return tuple(self._layers[int(layer)])