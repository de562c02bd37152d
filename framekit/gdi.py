"""Pens, brushes and a drawing canvas over a pygame surface."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import pygame

from .enums import BrushType, PenType
from .vec2 import Vec2, rect_make

Color = Tuple[int, int, int]

TRANSPARENT_KEY: Color = (255, 0, 255)


@dataclass(frozen=True)
class Pen:
    """An outline style; a pen without colour draws nothing."""

    color: Optional[Color]
    width: int = 1

    @property
    def visible(self) -> bool:
        return self.color is not None and self.width > 0


DEFAULT_PEN = Pen((0, 0, 0), 1)
DEFAULT_BRUSH: Optional[Color] = (255, 255, 255)


class Palette:
    """The fixed set of pens and brushes used for debug drawing."""

    def __init__(self) -> None:
        self._pens = {
            PenType.HOLLOW: Pen(None, 0),
            PenType.RED: Pen((255, 0, 0)),
            PenType.GREEN: Pen((0, 255, 0)),
            PenType.BLUE: Pen((0, 0, 255)),
            PenType.YELLOW: Pen((255, 255, 0)),
        }
        self._brushes = {
            BrushType.HOLLOW: None,
            BrushType.RED: (255, 167, 167),
            BrushType.GREEN: (134, 229, 134),
            BrushType.BLUE: (103, 153, 255),
            BrushType.YELLOW: (255, 187, 0),
        }

    def pen(self, kind: PenType) -> Pen:
        try:
            return self._pens[PenType(kind)]
        except (KeyError, ValueError):
            raise KeyError(f"no pen for {kind!r}") from None

    def brush(self, kind: BrushType) -> Optional[Color]:
        """The fill colour of a brush, or None for the hollow brush."""
        try:
            return self._brushes[BrushType(kind)]
        except (KeyError, ValueError):
            raise KeyError(f"no brush for {kind!r}") from None


class Canvas:
    """Draws shapes with a current pen and brush onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, palette: Optional[Palette] = None) -> None:
        self.surface = surface
        self.palette = palette if palette is not None else Palette()
        self.pen: Pen = DEFAULT_PEN
        self.brush: Optional[Color] = DEFAULT_BRUSH

    @contextmanager
    def selected(
        self, pen: Optional[PenType] = None, brush: Optional[BrushType] = None
    ) -> Iterator[Canvas]:
        """Select a pen and/or brush for the block, restoring the previous ones after."""
        saved = (self.pen, self.brush)
        if pen is not None:
            self.pen = self.palette.pen(pen)
        if brush is not None:
            self.brush = self.palette.brush(brush)
        try:
            yield self
        finally:
            self.pen, self.brush = saved

    def _area(self, pos: Vec2, size: Vec2) -> pygame.Rect:
        left, top, right, bottom = rect_make(pos, size)
        return pygame.Rect(left, top, right - left, bottom - top)

    def rect(self, pos: Vec2, size: Vec2) -> pygame.Rect:
        """Draw a rectangle centred on ``pos``."""
        area = self._area(pos, size)
        if self.brush is not None:
            pygame.draw.rect(self.surface, self.brush, area)
        if self.pen.visible:
            pygame.draw.rect(self.surface, self.pen.color, area, self.pen.width)
        return area

    def ellipse(self, pos: Vec2, size: Vec2) -> pygame.Rect:
        """Draw an ellipse centred on ``pos``."""
        area = self._area(pos, size)
        if self.brush is not None:
            pygame.draw.ellipse(self.surface, self.brush, area)
        if self.pen.visible:
            pygame.draw.ellipse(self.surface, self.pen.color, area, self.pen.width)
        return area

    def blit_transparent(self, image: pygame.Surface, dest, area) -> pygame.Rect:
        """Copy ``area`` of ``image`` to top-left ``dest``, skipping magenta pixels."""
        sprite = image.subsurface(pygame.Rect(area)).copy()
        sprite.set_colorkey(TRANSPARENT_KEY)
        x, y = dest
        return self.surface.blit(sprite, (int(x), int(y)))