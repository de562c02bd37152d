from framekit.enums import EventType
from framekit.events import Event, EventManager


class Thing:
    def __init__(self):
        self.is_dead = False

    def mark_dead(self):
        self.is_dead = True


def test_event_equality_uses_identity_of_object():
    a, b = Thing(), Thing()
    assert Event(EventType.DELETE_OBJECT, a) == Event(EventType.DELETE_OBJECT, a)
    assert not Event(EventType.DELETE_OBJECT, a) == Event(EventType.DELETE_OBJECT, b)
    assert not Event(EventType.DELETE_OBJECT, a) == Event(EventType.CREATE_OBJECT, a)


def test_delete_object_is_deduplicated():
    em = EventManager()
    obj = Thing()
    em.delete_object(obj)
    em.delete_object(obj)
    assert len(em.pending) == 1


def test_update_marks_dead_and_releases_next_frame():
    em = EventManager()
    obj = Thing()
    em.delete_object(obj)
    assert obj.is_dead is False
    em.update()
    assert obj.is_dead is True
    assert em.dead == (obj,)
    assert em.pending == ()
    em.update()
    assert em.dead == ()


def test_multiple_objects_deleted_in_order():
    em = EventManager()
    first, second = Thing(), Thing()
    em.delete_object(first)
    em.delete_object(second)
    em.update()
    assert em.dead == (first, second)