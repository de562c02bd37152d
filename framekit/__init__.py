"""A small 2D game framework on pygame: scenes, game objects, components, collisions, animation, input, timing and resources."""

__version__ = "0.1.0"