"""Animation descriptions: timing, repetitions and per-step offsets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

__all__ = [
    "Animation",
    "MovingAnimation",
    "FrameRangeAnimation",
    "FrameListAnimation",
    "PathEntry",
    "MovingPathAnimation",
    "ScrollEntry",
    "ScrollAnimation",
    "TickAnimation",
]


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


@dataclass
class Animation(ABC):
    """Base of all animations; identified by its id."""

    id: str

    @abstractmethod
    def clone(self) -> Animation:
        """An independent copy of this animation."""


@dataclass
class MovingAnimation(Animation):
    """Moves by (dx, dy) every delay milliseconds, reps times (0 means forever)."""

    reps: int = 1
    dx: int = 0
    dy: int = 0
    delay: int = 0

    def __post_init__(self) -> None:
        _check_non_negative("reps", self.reps)
        _check_non_negative("delay", self.delay)

    def is_forever(self) -> bool:
        return self.reps == 0

    def set_forever(self) -> MovingAnimation:
        self.reps = 0
        return self

    def clone(self) -> MovingAnimation:
        return MovingAnimation(self.id, self.reps, self.dx, self.dy, self.delay)


@dataclass
class FrameRangeAnimation(MovingAnimation):
    """Steps through the frames start..end of a film while moving."""

    start: int = 0
    end: int = 0

    def clone(self) -> FrameRangeAnimation:
        return FrameRangeAnimation(
            self.id, self.reps, self.dx, self.dy, self.delay, self.start, self.end
        )


@dataclass
class FrameListAnimation(MovingAnimation):
    """Steps through an explicit list of frame numbers while moving."""

    frames: list[int] = field(default_factory=list)

    def clone(self) -> FrameListAnimation:
        return FrameListAnimation(
            self.id, self.reps, self.dx, self.dy, self.delay, list(self.frames)
        )


@dataclass
class PathEntry:
    """One step of a moving path: offset, frame shown and delay before it."""

    dx: int = 0
    dy: int = 0
    frame: int = 0
    delay: int = 0


@dataclass
class MovingPathAnimation(Animation):
    """Follows a list of path entries."""

    path: list[PathEntry] = field(default_factory=list)

    def clone(self) -> MovingPathAnimation:
        return MovingPathAnimation(
            self.id, [PathEntry(e.dx, e.dy, e.frame, e.delay) for e in self.path]
        )


@dataclass
class ScrollEntry:
    """One step of a scroll: offset and delay before it."""

    dx: int = 0
    dy: int = 0
    delay: int = 0


@dataclass
class ScrollAnimation(Animation):
    """Scrolls the view through a list of scroll entries."""

    scroll: list[ScrollEntry] = field(default_factory=list)

    def clone(self) -> ScrollAnimation:
        return ScrollAnimation(
            self.id, [ScrollEntry(e.dx, e.dy, e.delay) for e in self.scroll]
        )


@dataclass
class TickAnimation(Animation):
    """Fires every delay milliseconds, reps times (0 means forever).

    A non-discrete tick animation, used for custom timed actions, must run once.
    """

    delay: int = 0
    reps: int = 1
    is_discrete: bool = True

    def __post_init__(self) -> None:
        _check_non_negative("reps", self.reps)
        _check_non_negative("delay", self.delay)
        if not (self.is_discrete or self.reps == 1):
            raise ValueError("a non-discrete tick animation must have exactly one repetition")

    def is_forever(self) -> bool:
        return self.reps == 0

    def set_forever(self) -> TickAnimation:
        self.reps = 0
        return self

    def clone(self) -> TickAnimation:
        return TickAnimation(self.id, self.delay, self.reps, True)