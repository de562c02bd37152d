# framekit

A small 2D game framework built on pygame. It provides scenes that hold
game objects in layers, components attached to those objects, box
colliders with enter/stay/exit callbacks, sprite-sheet animation,
per-frame timing, keyboard state tracking, deferred object deletion, and
textures and sounds that are cached by key.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `framekit.vec2`: `Vec2`, an immutable 2D float vector supporting `+`,
  `-`, `*` (by a vector component-wise or by a number), `/` (component-wise,
  raising `ZeroDivisionError` on a zero component), `length()`,
  `length_squared()`, `normalized()` (a near-zero vector comes back
  unchanged), `dot()` and `cross()`. `rect_make(pos, size)` gives the integer
  `(left, top, right, bottom)` of a rectangle centred on `pos`.
- `framekit.enums`: `Layer` (30 layer slots, `Layer.END` being the count),
  `PenType`, `BrushType` and `EventType`.
- `framekit.gdi`: `Palette` holds the fixed pens and brushes; `Canvas` wraps
  a `pygame.Surface` and draws centred rectangles (`rect`) and ellipses
  (`ellipse`) with its current pen and brush, and copies part of an image
  with magenta `(255, 0, 255)` treated as transparent (`blit_transparent`).
  `with canvas.selected(pen=..., brush=...):` sets the pen and/or brush for
  the block and restores the previous ones afterwards.
- `framekit.timing`: `TimeManager` measures the time between `update()`
  calls (`dt`) and, once a second, the frame rate (`fps`). It takes an
  optional clock function and an optional `on_report(fps, dt)` callback.
- `framekit.input`: `KeyType`, `KeyState` and `InputManager`.
  `update(pressed, focused=True, mouse_pos=None)` takes the set of keys held
  this frame and produces `NONE`, `DOWN`, `PRESS` or `UP` for every key,
  queried with `state`, `is_down`, `is_held` and `is_up`. Without focus
  every key drops to `NONE`.
- `framekit.events`: `Event` and `EventManager`. `delete_object(obj)` queues
  an object (duplicates are ignored); `update()` marks queued objects dead
  and lists them in `dead` until the next update. `pending` shows the queue.
- `framekit.components`: `Component` and `GameObject`. A game object has
  `pos`, `size`, `name` and `is_dead`; `add_component(type)` creates,
  attaches and returns a component, `get_component(type)` finds the first
  one of that type. By default a game object records the colliders it is
  touching in `contacts`, with the number of frames each contact stayed.
- `framekit.collider`: `Collider`, a 30×30 box (changeable via `size` and
  `offset`) that follows its owner in `late_update`, draws itself green, or
  red while touching something, and passes collision callbacks to its owner.
- `framekit.collision`: `is_collision(left, right)` tests two colliders for
  overlap. `CollisionManager` toggles layer pairs with `check_layer`, reports
  them with `is_checked`, clears them with `reset`, and `update(scene)` calls
  `enter_collision`, `stay_collision` and `exit_collision` for every enabled
  pair. Dead objects do not start contacts, and a contact with an object
  that has died is ended.
- `framekit.scene`: `Scene`, abstract over `init()`. `update` updates living
  objects, `late_update` late-updates all of them, `render` drops dead
  objects and renders the rest in layer order, and `release` empties the
  scene and resets its collision manager if it was given one.
- `framekit.animation`: `AnimFrame`, `Animation` and `Animator`. An
  animator is a component built with a time manager;
  `create_animation(name, texture, left_top, slice_size, step, frame_count,
  duration, rotate=False)` cuts frames out of a texture, and
  `play_animation(name, repeat, repeat_count=1)` plays one, looping forever
  when `repeat` is true, otherwise `repeat_count` times before holding the
  last frame. Playing an unknown name raises `KeyError`.
- `framekit.resources`: `Texture`, `SoundChannel` and `ResourceManager`.
  The manager resolves paths under a resource directory (by default
  `Resource` in the current directory; backslash-separated relative paths
  are accepted), loads each texture and sound once per key, plays looping
  sounds on the `BGM` channel and others on `EFFECT`, and offers `stop`,
  `set_volume` and `pause` per channel. `release()` forgets everything and
  shuts down a mixer it started.
- `framekit.entities`: `Enemy`, a box with 5 hit points that loses one each
  time an object named `"PlayerBullet"` starts touching it and queues its
  own deletion at zero; `Projectile`, which loads the `Texture\Bullet.bmp`
  texture, flies at 500 pixels per second in a normalised direction, and
  queues its deletion when it leaves the top of the screen or hits an object
  named `"Enemy"`.
- `framekit.game_scene`: `GameScene(events, collisions=None, rng=None)`,
  whose `init()` places 100 enemies of size 100×100 at random whole-pixel
  positions on a 1280×720 screen.

## Example

```python
import pygame

from framekit.collider import Collider
from framekit.collision import CollisionManager
from framekit.components import GameObject
from framekit.entities import Enemy
from framekit.enums import Layer
from framekit.events import EventManager
from framekit.gdi import Canvas
from framekit.scene import Scene
from framekit.vec2 import Vec2


class Bullet(GameObject):
    def __init__(self, pos):
        super().__init__(pos=pos, size=Vec2(20.0, 20.0), name="PlayerBullet")
        self.add_component(Collider).size = Vec2(20.0, 20.0)

    def update(self):
        pass

    def render(self, canvas):
        self.component_render(canvas)


events = EventManager()
collisions = CollisionManager()
collisions.check_layer(Layer.PROJECTILE, Layer.ENEMY)


class Arena(Scene):
    def init(self):
        self.enemy = Enemy(events, pos=Vec2(640.0, 150.0), size=Vec2(100.0, 100.0))
        self.add_object(self.enemy, Layer.ENEMY)
        self.add_object(Bullet(Vec2(640.0, 150.0)), Layer.PROJECTILE)


scene = Arena(collisions)
scene.init()
canvas = Canvas(pygame.Surface((1280, 720)))

scene.update()
scene.late_update()
collisions.update(scene)
scene.render(canvas)
events.update()

print(scene.enemy.hp)  # 4
```

## What the package does not do

framekit is a set of building blocks, not a finished game. It opens no
window and has no main loop: you create the display, read pygame's key
and mouse state to feed `InputManager.update`, and call the update, collision,
render and event passes yourself each frame. There is no player object, no
title screen and no scene switching, and no command is installed.