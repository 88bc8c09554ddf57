"""Animators drive animations over time and report steps through callbacks."""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum
from typing import Protocol

from .animations import Animation, FrameRangeAnimation, MovingAnimation

__all__ = [
    "AnimatorState",
    "AnimatorManager",
    "Animator",
    "MovingAnimator",
    "FrameRangeAnimator",
    "default_manager",
    "sprite_move_action",
    "frame_range_action",
    "frame_range_action_decreasing_dy",
]

_UINT32 = 2**32
_MAX_DECREASING_DY = 4


class _MovableSprite(Protocol):
    def move(self, dx: int, dy: int) -> object: ...

    def set_frame(self, i: int) -> None: ...


class AnimatorState(Enum):
    FINISHED = 0
    RUNNING = 1
    STOPPED = 2


class AnimatorManager:
    """Keeps track of which animators are running and which are suspended."""

    def __init__(self) -> None:
        self._running: dict[Animator, None] = {}
        self._suspended: weakref.WeakSet[Animator] = weakref.WeakSet()

    @property
    def running(self) -> tuple[Animator, ...]:
        return tuple(self._running)

    @property
    def suspended(self) -> frozenset[Animator]:
        return frozenset(self._suspended)

    def register(self, animator: Animator) -> None:
        if not animator.has_finished():
            raise RuntimeError("cannot register a running animator")
        self._suspended.add(animator)

    def cancel(self, animator: Animator) -> None:
        if not animator.has_finished():
            raise RuntimeError("cannot cancel a running animator")
        self._suspended.discard(animator)

    def mark_as_running(self, animator: Animator) -> None:
        if animator.has_finished():
            raise RuntimeError("animator is not running")
        self._suspended.discard(animator)
        self._running[animator] = None

    def mark_as_suspended(self, animator: Animator) -> None:
        if not animator.has_finished():
            raise RuntimeError("animator is still running")
        self._running.pop(animator, None)
        self._suspended.add(animator)

    def progress(self, curr_time: int) -> None:
        """Advance every running animator to curr_time."""
        for animator in list(self._running):
            animator.progress(curr_time)

    def time_shift(self, dt: int) -> None:
        """Shift the time base of every running animator, e.g. after a pause."""
        for animator in list(self._running):
            animator.time_shift(dt)


default_manager = AnimatorManager()


class Animator(ABC):
    """Base animator; registers itself with a manager on creation."""

    def __init__(self, manager: AnimatorManager | None = None) -> None:
        self.manager = manager if manager is not None else default_manager
        self.last_time = 0
        self.state = AnimatorState.FINISHED
        self.on_start: Callable[[Animator], None] | None = None
        self.on_finish: Callable[[Animator], None] | None = None
        self.on_action: Callable[[Animator, Animation], None] | None = None
        self.manager.register(self)

    def has_finished(self) -> bool:
        return self.state is not AnimatorState.RUNNING

    def stop(self) -> None:
        self._finish(forced=True)

    def time_shift(self, offset: int) -> None:
        self.last_time += offset

    @abstractmethod
    def progress(self, curr_time: int) -> None:
        """Advance the animation up to curr_time."""

    def _finish(self, forced: bool = False) -> None:
        if not self.has_finished():
            self.state = AnimatorState.STOPPED if forced else AnimatorState.FINISHED
            self._notify_stopped()

    def _notify_started(self) -> None:
        self.manager.mark_as_running(self)
        if self.on_start is not None:
            self.on_start(self)

    def _notify_stopped(self) -> None:
        self.manager.mark_as_suspended(self)
        if self.on_finish is not None:
            self.on_finish(self)

    def _notify_action(self, anim: Animation) -> None:
        if self.on_action is not None:
            self.on_action(self, anim)


def _check_playable(anim: MovingAnimation) -> None:
    if anim.delay == 0 and anim.is_forever():
        raise ValueError("an endless animation needs a non-zero delay")


class MovingAnimator(Animator):
    """Fires one action per delay until the repetitions run out."""

    def __init__(self, manager: AnimatorManager | None = None) -> None:
        super().__init__(manager)
        self.anim: MovingAnimation | None = None
        self.curr_rep = 0

    def start(self, anim: MovingAnimation, t: int) -> None:
        _check_playable(anim)
        self.anim = anim
        self.last_time = t
        self.state = AnimatorState.RUNNING
        self.curr_rep = 0
        self._notify_started()

    def progress(self, curr_time: int) -> None:
        anim = self.anim
        if anim is None:
            raise RuntimeError("animator has not been started")
        while curr_time > self.last_time and curr_time - self.last_time >= anim.delay:
            self.last_time += anim.delay
            self._notify_action(anim)
            if not anim.is_forever():
                self.curr_rep += 1
                if self.curr_rep == anim.reps:
                    self.state = AnimatorState.FINISHED
                    self._notify_stopped()
                    return


class FrameRangeAnimator(Animator):
    """Steps through a frame range, wrapping to the start for each repetition."""

    def __init__(self, manager: AnimatorManager | None = None) -> None:
        super().__init__(manager)
        self.anim: FrameRangeAnimation | None = None
        self.curr_frame = 0
        self.curr_rep = 0

    def start(self, anim: FrameRangeAnimation, t: int) -> None:
        _check_playable(anim)
        self.anim = anim
        self.last_time = t
        self.state = AnimatorState.RUNNING
        self.curr_frame = anim.start
        self.curr_rep = 0
        self._notify_started()
        self._notify_action(anim)

    def progress(self, curr_time: int) -> None:
        anim = self.anim
        if anim is None:
            raise RuntimeError("animator has not been started")
        while curr_time > self.last_time and curr_time - self.last_time >= anim.delay:
            if self.curr_frame == anim.end:
                if not (anim.is_forever() or self.curr_rep < anim.reps):
                    raise RuntimeError("frame range animator ran past its repetitions")
                self.curr_frame = anim.start
            else:
                self.curr_frame += 1
            self.last_time += anim.delay
            self._notify_action(anim)

            if self.curr_frame == anim.end and not anim.is_forever():
                self.curr_rep += 1
                if self.curr_rep == anim.reps:
                    self.state = AnimatorState.FINISHED
                    self.curr_rep = 0
                    self._notify_stopped()
                    return


def sprite_move_action(sprite: _MovableSprite, anim: MovingAnimation) -> None:
    """Move the sprite by the animation's offset."""
    sprite.move(anim.dx, anim.dy)


def frame_range_action(
    sprite: _MovableSprite, animator: FrameRangeAnimator, anim: FrameRangeAnimation
) -> None:
    """Move the sprite (except on the very first frame) and show the current frame."""
    if animator.curr_frame != anim.start or animator.curr_rep:
        sprite.move(anim.dx, anim.dy)
    sprite.set_frame(animator.curr_frame)


def _to_int32(value: int) -> int:
    value %= _UINT32
    return value - _UINT32 if value >= _UINT32 // 2 else value


def frame_range_action_decreasing_dy(
    sprite: _MovableSprite, animator: FrameRangeAnimator, anim: FrameRangeAnimation
) -> None:
    """Like frame_range_action, but the vertical step grows with each eighth of the repetitions.

    Non-negative steps are increased by one and capped at 4.
    """
    if animator.curr_frame != anim.start or animator.curr_rep:
        div_reps = anim.reps // 8
        if div_reps == 0:
            raise ValueError("animation needs at least 8 repetitions")
        # repetition counters are unsigned 32-bit, so rep 0 wraps around
        growth = ((animator.curr_rep - 1) % _UINT32) // div_reps
        offset = _to_int32(anim.dy + growth)
        if offset >= 0:
            offset = min(offset + 1, _MAX_DECREASING_DY)
        sprite.move(anim.dx, offset)
    sprite.set_frame(animator.curr_frame)