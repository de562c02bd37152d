"""Sprite-sheet animations and the animator component that plays them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .components import Component
from .vec2 import Vec2


@dataclass
class AnimFrame:
    """One frame: a slice of the texture, how long it shows, and a draw offset."""

    left_top: Vec2
    slice: Vec2
    duration: float
    offset: Vec2 = field(default_factory=Vec2)


class Animation:
    """A sequence of frames cut from one texture."""

    def __init__(
        self,
        name: str,
        texture: Any,
        frames: Iterable[AnimFrame],
        rotate: bool = False,
        animator: Optional[Animator] = None,
    ) -> None:
        self.name = name
        self.texture = texture
        self.frames: List[AnimFrame] = list(frames)
        self.rotate = rotate
        self.animator = animator
        self.current_frame = 0
        self.acc_time = 0.0

    @property
    def max_frame(self) -> int:
        return len(self.frames)

    def update(self, dt: float) -> None:
        """Advance by ``dt`` seconds; once no repeats remain, hold the last frame."""
        animator = self.animator
        if animator.repeat_count <= 0:
            self.current_frame = len(self.frames) - 1
            return
        self.acc_time += dt
        duration = self.frames[self.current_frame].duration
        if self.acc_time >= duration:
            self.acc_time -= duration
            self.current_frame += 1
            if self.current_frame >= len(self.frames):
                if not animator.repeat:
                    animator.repeat_count -= 1
                self.current_frame = 0
                self.acc_time = 0.0

    def render(self, canvas: Any) -> None:
        """Draw the current frame centred on the owner's position."""
        frame = self.frames[self.current_frame]
        pos = self.animator.owner.pos + frame.offset
        dest = (int(pos.x - frame.slice.x / 2), int(pos.y - frame.slice.y / 2))
        area = (
            int(frame.left_top.x),
            int(frame.left_top.y),
            int(frame.slice.x),
            int(frame.slice.y),
        )
        canvas.blit_transparent(self.texture.surface, dest, area)

    def set_frame_offset(self, index: int, offset: Vec2) -> None:
        self.frames[index].offset = offset


class Animator(Component):
    """Owns named animations and plays one of them at a time."""

    def __init__(self, time_manager: Any = None) -> None:
        super().__init__()
        self.time_manager = time_manager
        self._animations: Dict[str, Animation] = {}
        self.current: Optional[Animation] = None
        self.repeat = False
        self.repeat_count = 1

    def create_animation(
        self,
        name: str,
        texture: Any,
        left_top: Vec2,
        slice_size: Vec2,
        step: Vec2,
        frame_count: int,
        duration: float,
        rotate: bool = False,
    ) -> Animation:
        """Create an animation; an existing one of the same name is kept and returned."""
        existing = self.find_animation(name)
        if existing is not None:
            return existing
        frames = (
            AnimFrame(left_top + step * i, slice_size, duration)
            for i in range(frame_count)
        )
        animation = Animation(name, texture, frames, rotate, animator=self)
        self._animations[name] = animation
        return animation

    def find_animation(self, name: str) -> Optional[Animation]:
        return self._animations.get(name)

    def play_animation(self, name: str, repeat: bool, repeat_count: int = 1) -> None:
        animation = self.find_animation(name)
        if animation is None:
            raise KeyError(f"no animation named {name!r}")
        self.current = animation
        animation.current_frame = 0
        self.repeat = repeat
        self.repeat_count = repeat_count

    def stop_animation(self) -> None:
        self.current = None

    def late_update(self) -> None:
        if self.current is None:
            return
        if self.time_manager is None:
            raise RuntimeError("animator has no time manager")
        self.current.update(self.time_manager.dt)

    def render(self, canvas: Any) -> None:
        if self.current is not None:
            self.current.render(canvas)