"""Enumerations shared across the framework."""

from enum import IntEnum


class Layer(IntEnum):
    """Object layers; END is the number of layer slots."""

    DEFAULT = 0
    BACKGROUND = 1
    PLAYER = 2
    PROJECTILE = 3
    ENEMY = 4
    END = 30


class PenType(IntEnum):
    HOLLOW = 0
    RED = 1
    GREEN = 2
    BLUE = 3
    YELLOW = 4
    END = 5


class BrushType(IntEnum):
    HOLLOW = 0
    RED = 1
    GREEN = 2
    BLUE = 3
    YELLOW = 4
    END = 5


class EventType(IntEnum):
    CREATE_OBJECT = 0
    DELETE_OBJECT = 1
    SCENE_CHANGE = 2
    END = 3