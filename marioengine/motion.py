"""Quantized motion through a filtering mover, and gravity state tracking."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

from .geometry import Rect

__all__ = ["Mover", "MotionQuantizer", "GravityHandler"]

Mover = Callable[[Rect, int, int], "tuple[int, int]"]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class MotionQuantizer:
    """Splits a requested move into steps no larger than a range and hands each to a mover.

    The mover gets the box and a step and returns the step it allows.
    """

    def __init__(self, mover: Mover | None = None) -> None:
        self.horiz_max = 0
        self.vert_max = 0
        self.mover = mover
        self.used = False

    def set_range(self, h: int, v: int) -> MotionQuantizer:
        """Set the largest horizontal and vertical step and switch quantizing on."""
        if h < 0 or v < 0:
            raise ValueError("step range must not be negative")
        self.horiz_max = h
        self.vert_max = v
        self.used = True
        return self

    def move(self, r: Rect, dx: int, dy: int) -> tuple[int, int]:
        """Move r by (dx, dy) through the mover; returns the total motion allowed.

        When quantizing, r is advanced by each allowed step before the next one.
        """
        if self.mover is None:
            raise RuntimeError("no mover set")
        if not self.used:
            return self.mover(r, dx, dy)

        box = replace(r)
        total_x = total_y = 0
        while True:
            sign_x, sign_y = _sign(dx), _sign(dy)
            step_x = sign_x * min(self.horiz_max, sign_x * dx)
            step_y = sign_y * min(self.vert_max, sign_y * dy)
            step_x, step_y = self.mover(box, step_x, step_y)
            dx = dx - step_x if step_x else 0
            dy = dy - step_y if step_y else 0
            total_x += step_x
            total_y += step_y
            box = Rect(box.x + step_x, box.y + step_y, box.w, box.h)
            if not (dx or dy):
                return total_x, total_y


class GravityHandler:
    """Tracks whether an object subject to gravity is falling."""

    def __init__(self) -> None:
        self.gravity_addicted = False
        self.is_falling = False
        self.on_solid_ground: Callable[[Rect], bool] | None = None
        self.on_start_falling: Callable[[], None] | None = None
        self.on_stop_falling: Callable[[], None] | None = None

    def reset(self) -> None:
        self.is_falling = False

    def check(self, r: Rect) -> None:
        """Update the falling state for box r, firing start/stop callbacks on changes."""
        if not self.gravity_addicted:
            return
        if self.on_solid_ground is None:
            raise RuntimeError("no solid ground predicate set")
        if self.on_solid_ground(r):
            if self.is_falling:
                self.is_falling = False
                self._call(self.on_stop_falling, "stop falling")
        elif not self.is_falling:
            self.is_falling = True
            self._call(self.on_start_falling, "start falling")

    @staticmethod
    def _call(callback: Callable[[], None] | None, what: str) -> None:
        if callback is None:
            raise RuntimeError(f"no {what} callback set")
        callback()