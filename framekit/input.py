"""Keyboard and mouse state tracked frame by frame."""

from __future__ import annotations

from enum import Enum, auto
from typing import Collection, Optional, Tuple


class KeyType(Enum):
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    Q = auto()
    W = auto()
    E = auto()
    R = auto()
    T = auto()
    Y = auto()
    U = auto()
    I = auto()  # noqa: E741
    O = auto()  # noqa: E741
    P = auto()
    A = auto()
    S = auto()
    D = auto()
    F = auto()
    G = auto()
    H = auto()
    J = auto()
    K = auto()
    L = auto()
    Z = auto()
    X = auto()
    C = auto()
    V = auto()
    B = auto()
    N = auto()
    M = auto()
    CTRL = auto()
    LALT = auto()
    LSHIFT = auto()
    SPACE = auto()
    ENTER = auto()
    TAB = auto()
    ESC = auto()
    LBUTTON = auto()
    RBUTTON = auto()
    NUM_1 = auto()
    NUM_2 = auto()


class KeyState(Enum):
    NONE = auto()
    DOWN = auto()
    UP = auto()
    PRESS = auto()


class InputManager:
    """Turns the set of currently held keys into per-frame key transitions."""

    def __init__(self) -> None:
        self._states = {key: KeyState.NONE for key in KeyType}
        self._was_held = {key: False for key in KeyType}
        self.mouse_pos: Tuple[int, int] = (0, 0)

    def update(
        self,
        pressed: Collection[KeyType],
        focused: bool = True,
        mouse_pos: Optional[Tuple[float, float]] = None,
    ) -> None:
        """Record one frame; without focus every key is released silently."""
        if not focused:
            for key in KeyType:
                self._was_held[key] = False
                self._states[key] = KeyState.NONE
            return

        held_now = set(pressed)
        for key in KeyType:
            was_held = self._was_held[key]
            if key in held_now:
                self._states[key] = KeyState.PRESS if was_held else KeyState.DOWN
                self._was_held[key] = True
            else:
                self._states[key] = KeyState.UP if was_held else KeyState.NONE
                self._was_held[key] = False

        if mouse_pos is not None:
            x, y = mouse_pos
            self.mouse_pos = (int(x), int(y))

    def state(self, key: KeyType) -> KeyState:
        return self._states[key]

    def is_down(self, key: KeyType) -> bool:
        """True on the frame the key was first pressed."""
        return self._states[key] is KeyState.DOWN

    def is_up(self, key: KeyType) -> bool:
        """True on the frame the key was released."""
        return self._states[key] is KeyState.UP

    def is_held(self, key: KeyType) -> bool:
        """True while the key stays pressed after its first frame."""
        return self._states[key] is KeyState.PRESS