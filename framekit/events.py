"""Deferred object events executed between frames."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from .enums import EventType, Layer


@dataclass(eq=False)
class Event:
    """A queued event; two events are equal when kind and target object match."""

    kind: EventType
    obj: Any
    layer: Optional[Layer] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.kind == other.kind and self.obj is other.obj

    __hash__ = None  # type: ignore[assignment]


class EventManager:
    """Queues events during a frame and applies them at its end."""

    def __init__(self) -> None:
        self._events: List[Event] = []
        self._dead: List[Any] = []

    @property
    def pending(self) -> Tuple[Event, ...]:
        return tuple(self._events)

    @property
    def dead(self) -> Tuple[Any, ...]:
        """Objects marked dead by the last update, released on the next one."""
        return tuple(self._dead)

    def delete_object(self, obj: Any) -> None:
        """Queue ``obj`` for deletion; duplicates are ignored."""
        event = Event(EventType.DELETE_OBJECT, obj)
        if event not in self._events:
            self._events.append(event)

    def update(self) -> None:
        self._dead.clear()
        events, self._events = self._events, []
        for event in events:
            self._execute(event)

    def _execute(self, event: Event) -> None:
        if event.kind is EventType.DELETE_OBJECT:
            event.obj.mark_dead()
            self._dead.append(event.obj)