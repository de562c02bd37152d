import pygame
import pytest

from framekit.enums import BrushType, PenType
from framekit.gdi import TRANSPARENT_KEY, Canvas, Palette
from framekit.vec2 import Vec2, rect_make

WHITE = (255, 255, 255)


def rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


@pytest.fixture
def canvas():
    surface = pygame.Surface((100, 100))
    surface.fill(WHITE)
    return Canvas(surface)


def test_palette_colours_from_source():
    palette = Palette()
    assert palette.pen(PenType.RED).color == (255, 0, 0)
    assert palette.pen(PenType.GREEN).color == (0, 255, 0)
    assert palette.brush(BrushType.BLUE) == (103, 153, 255)
    assert palette.brush(BrushType.HOLLOW) is None
    assert palette.pen(PenType.HOLLOW).visible is False


def test_palette_end_is_not_a_tool():
    palette = Palette()
    with pytest.raises(KeyError):
        palette.pen(PenType.END)
    with pytest.raises(KeyError):
        palette.brush(BrushType.END)


def test_selected_restores_previous_tools(canvas):
    pen, brush = canvas.pen, canvas.brush
    with canvas.selected(pen=PenType.RED, brush=BrushType.HOLLOW):
        assert canvas.pen == canvas.palette.pen(PenType.RED)
        assert canvas.brush is None
    assert (canvas.pen, canvas.brush) == (pen, brush)


def test_rect_fills_with_brush_and_outlines_with_pen(canvas):
    pos, size = Vec2(50, 50), Vec2(20, 20)
    with canvas.selected(pen=PenType.RED, brush=BrushType.BLUE):
        area = canvas.rect(pos, size)
    left, top, right, bottom = rect_make(pos, size)
    assert (area.left, area.top, area.right, area.bottom) == (left, top, right, bottom)
    assert rgb(canvas.surface, (50, 50)) == (103, 153, 255)
    assert rgb(canvas.surface, (left, 50)) == (255, 0, 0)


def test_hollow_brush_leaves_interior(canvas):
    with canvas.selected(pen=PenType.GREEN, brush=BrushType.HOLLOW):
        canvas.rect(Vec2(50, 50), Vec2(30, 30))
    left, _, _, _ = rect_make(Vec2(50, 50), Vec2(30, 30))
    assert rgb(canvas.surface, (50, 50)) == WHITE
    assert rgb(canvas.surface, (left, 50)) == (0, 255, 0)


def test_hollow_pen_draws_no_outline(canvas):
    with canvas.selected(pen=PenType.HOLLOW, brush=BrushType.YELLOW):
        canvas.rect(Vec2(50, 50), Vec2(30, 30))
    left, _, _, _ = rect_make(Vec2(50, 50), Vec2(30, 30))
    assert rgb(canvas.surface, (left, 50)) == (255, 187, 0)


def test_ellipse_fills_centre(canvas):
    with canvas.selected(brush=BrushType.GREEN):
        canvas.ellipse(Vec2(50, 50), Vec2(40, 20))
    assert rgb(canvas.surface, (50, 50)) == (134, 229, 134)
    assert rgb(canvas.surface, (31, 31)) == WHITE


def test_blit_transparent_skips_key_colour(canvas):
    image = pygame.Surface((4, 4))
    image.fill(TRANSPARENT_KEY)
    image.set_at((1, 1), (255, 0, 0))
    canvas.blit_transparent(image, Vec2(10, 10), (0, 0, 4, 4))
    assert rgb(canvas.surface, (10, 10)) == WHITE
    assert rgb(canvas.surface, (11, 11)) == (255, 0, 0)
    assert image.get_colorkey() is None


def test_blit_transparent_uses_source_area(canvas):
    image = pygame.Surface((4, 2))
    image.fill((0, 0, 255))
    image.fill((255, 0, 0), pygame.Rect(2, 0, 2, 2))
    canvas.blit_transparent(image, (0, 0), (2, 0, 2, 2))
    assert rgb(canvas.surface, (0, 0)) == (255, 0, 0)
    assert rgb(canvas.surface, (2, 0)) == WHITE