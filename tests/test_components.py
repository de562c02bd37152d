import pytest

from framekit.components import Component, GameObject
from framekit.vec2 import Vec2


class Recorder(Component):
    def __init__(self):
        super().__init__()
        self.calls = []

    def late_update(self):
        self.calls.append(("late", self.owner.pos))

    def render(self, canvas):
        self.calls.append(("render", canvas))


class SpecialRecorder(Recorder):
    pass


class Other(Component):
    def late_update(self):
        pass

    def render(self, canvas):
        pass


class Box(GameObject):
    def update(self):
        pass

    def render(self, canvas):
        self.component_render(canvas)


def test_abstract_classes_cannot_be_instantiated():
    with pytest.raises(TypeError):
        GameObject()
    with pytest.raises(TypeError):
        Component()


def test_defaults():
    box = Box()
    assert box.pos == Vec2(0, 0) and box.size == Vec2(0, 0)
    assert box.name == "" and box.is_dead is False


def test_add_component_sets_owner():
    box = Box(pos=Vec2(1, 2))
    rec = box.add_component(Recorder)
    assert rec.owner is box
    assert box.components == (rec,)


def test_get_component_returns_first_match_or_none():
    box = Box(pos=Vec2(3, 4))
    assert box.get_component(Recorder) is None
    other = box.add_component(Other)
    special = box.add_component(SpecialRecorder)
    box.add_component(Recorder)
    assert box.get_component(Recorder) is special
    assert box.get_component(Other) is other
    assert special.owner.pos == Vec2(3, 4)


def test_late_update_and_render_reach_components():
    box = Box(pos=Vec2(7, 8))
    rec = box.add_component(Recorder)
    box.late_update()
    marker = object()
    box.render(marker)
    assert rec.calls == [("late", Vec2(7, 8)), ("render", marker)]


def test_mark_dead():
    box = Box(pos=Vec2(1, 1))
    box.mark_dead()
    assert box.is_dead is True
    assert box.pos == Vec2(1, 1)