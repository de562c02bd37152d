"""Game objects and the components attached to them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

from .vec2 import Vec2


class Component(ABC):
    """A piece of behaviour owned by a game object."""

    def __init__(self) -> None:
        self.owner: Optional[GameObject] = None

    @abstractmethod
    def late_update(self) -> None:
        ...

    @abstractmethod
    def render(self, canvas: Any) -> None:
        ...


C = TypeVar("C", bound=Component)


class GameObject(ABC):
    """An object in a scene with a position, size, name and components."""

    def __init__(self, pos: Optional[Vec2] = None, size: Optional[Vec2] = None, name: str = "") -> None:
        self.pos = pos if pos is not None else Vec2()
        self.size = size if size is not None else Vec2()
        self.name = name
        self.is_dead = False
        self._components: List[Component] = []
        self._contacts: Dict[int, Tuple[Any, int]] = {}

    @property
    def components(self) -> Tuple[Component, ...]:
        return tuple(self._components)

    @property
    def contacts(self) -> Dict[Any, int]:
        """Colliders currently touching this object, with the frames they stayed."""
        return {other: frames for other, frames in self._contacts.values()}

    @abstractmethod
    def update(self) -> None:
        ...

    def late_update(self) -> None:
        for component in self._components:
            component.late_update()

    @abstractmethod
    def render(self, canvas: Any) -> None:
        ...

    def component_render(self, canvas: Any) -> None:
        for component in self._components:
            component.render(canvas)

    def add_component(self, component_type: Type[C]) -> C:
        """Create a component of the given type, attach it and return it."""
        component = component_type()
        component.owner = self
        self._components.append(component)
        return component

    def get_component(self, component_type: Type[C]) -> Optional[C]:
        """The first attached component that is an instance of the type."""
        return next((c for c in self._components if isinstance(c, component_type)), None)

    def enter_collision(self, other: Any) -> None:
        """Called when a collider of this object starts touching ``other``."""
        self._contacts[id(other)] = (other, 0)

    def stay_collision(self, other: Any) -> None:
        """Called every frame a collider of this object keeps touching ``other``."""
        _, frames = self._contacts.get(id(other), (other, 0))
        self._contacts[id(other)] = (other, frames + 1)

    def exit_collision(self, other: Any) -> None:
        """Called when a collider of this object stops touching ``other``."""
        self._contacts.pop(id(other), None)

    def mark_dead(self) -> None:
        self.is_dead = True