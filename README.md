# marioengine

Pure-Python building blocks for a 2D side-scrolling game. None of them needs
a graphics library; bitmaps are whatever objects your own loader returns.

## Modules

- `marioengine.geometry`: `Rect`, `Point`, and the segment helpers
  `point_distance`, `on_segment`, `orientation` and `do_intersect`.
- `marioengine.bounding`: `BoundingBox`, `BoundingCircle` and `BoundingPolygon`,
  all subclasses of `BoundingArea`, with `intersects`, `contains` and `clone`.
  Any pair of shapes can be tested against each other.
- `marioengine.colors`: `make8`, `make16`, `make24`, `make32` pack 3-3-2, 5-6-5,
  8-8-8 and RGBA colours; `split_rgb8`, `split_rgb16`, `split_rgb24` and
  `split_rgba` unpack them; `invert_pixel` and `tint_pixel` work on an
  `(r, g, b, a)` tuple and keep its alpha.
- `marioengine.animations`: dataclasses describing animations:
  `MovingAnimation`, `FrameRangeAnimation`, `FrameListAnimation`,
  `MovingPathAnimation` (with `PathEntry`), `ScrollAnimation` (with
  `ScrollEntry`) and `TickAnimation`. A `reps` of 0 means "forever".
- `marioengine.animators`: `MovingAnimator` and `FrameRangeAnimator` drive
  animations over time and call `on_start`, `on_action` and `on_finish`.
  Every animator registers with an `AnimatorManager` (`default_manager` unless
  one is given), whose `progress` and `time_shift` act on all running animators.
  `sprite_move_action`, `frame_range_action` and
  `frame_range_action_decreasing_dy` are ready-made actions for any object with
  `move(dx, dy)` and `set_frame(i)`.
- `marioengine.films`: `AnimationFilm` (frame boxes plus a bitmap),
  `BitmapLoader` (loads each path once; reads the file's bytes unless you pass
  your own `load_bitmap`), and `AnimationFilmHolder`, which builds films from
  `FilmData` produced by a parser you supply (`load`) or one entry at a time
  (`load_entries`).
- `marioengine.motion`: `MotionQuantizer` splits a move into bounded steps and
  passes each to a mover that returns the step it allows; `GravityHandler`
  tracks whether a box is falling and fires `on_start_falling` /
  `on_stop_falling`.
- `marioengine.game`: `Game`, a loop of pluggable stages with pause and resume;
  `App`, an abstract frame that runs initialise, load, run and clear; and
  `FPSCalculator`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Bounding areas:

```python
from marioengine.bounding import BoundingBox, BoundingCircle

box = BoundingBox(0, 0, 10, 10)
circle = BoundingCircle(15, 5, 6)
print(box.intersects(circle))   # True
print(box.contains(11, 3))      # False
```

Colours:

```python
from marioengine.colors import make32, split_rgba

red = make32(255, 0, 0, 255)
print(hex(red))          # 0xff0000ff
print(split_rgba(red))   # (255, 0, 0, 255)
```

An animator:

```python
from marioengine.animations import MovingAnimation
from marioengine.animators import AnimatorManager, MovingAnimator

manager = AnimatorManager()
animator = MovingAnimator(manager)
steps = []
animator.on_action = lambda a, anim: steps.append((anim.dx, anim.dy))
animator.start(MovingAnimation("walk", reps=3, dx=2, dy=0, delay=10), 0)
manager.progress(35)
print(steps)                     # [(2, 0), (2, 0), (2, 0)]
print(animator.has_finished())   # True
```

Quantized motion:

```python
from marioengine.geometry import Rect
from marioengine.motion import MotionQuantizer

quantizer = MotionQuantizer(lambda r, dx, dy: (dx, dy)).set_range(2, 2)
print(quantizer.move(Rect(0, 0, 8, 8), 5, 0))   # (5, 0), taken as 2 + 2 + 1
```

A game loop:

```python
from marioengine.game import Game

frames = []
game = Game(
    render=lambda: frames.append("frame"),
    input=lambda: None,
    progress_animations=lambda: None,
    ai=lambda: None,
    physics=lambda: None,
    collision_checking=lambda: None,
    user_code=lambda: None,
    commit_destructions=lambda: None,
    done=lambda: len(frames) >= 3,
)
game.main_loop()
print(len(frames))   # 3
```

A stage the loop needs but that is not set raises `RuntimeError` instead of
being skipped. While `is_paused` is true only `render` and `input` run.

## What the package does not do

- It has no tile maps, no collision grid of solid tiles and no tile-triggered
  actions; motion filtering is left to the mover you give `MotionQuantizer`,
  and ground detection to the predicate you give `GravityHandler`.
- It has no sprite type, sprite list or collision registry; the animator
  actions work with any object that has `move` and `set_frame`.
- It does not open a window, draw, play sound or read the keyboard, and it
  installs no command. Rendering and input are the `Game` stages you provide.