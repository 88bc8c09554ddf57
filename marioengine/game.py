"""The game loop, the application frame around it and a frame rate counter."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

__all__ = ["Game", "App", "FPSCalculator"]

Action = Callable[[], None]
Pred = Callable[[], bool]

_SECOND_MS = 1000


def _invoke(action: Action | None, name: str) -> None:
    if action is None:
        raise RuntimeError(f"no {name} action set")
    action()


@dataclass
class Game:
    """A game loop made of pluggable stages; all stages must be set before running."""

    render: Action | None = None
    input: Action | None = None
    progress_animations: Action | None = None
    ai: Action | None = None
    physics: Action | None = None
    collision_checking: Action | None = None
    user_code: Action | None = None
    commit_destructions: Action | None = None
    done: Pred | None = None
    on_pause_resume: Action | None = None
    is_paused: bool = False
    pause_time: int = 0

    def pause(self, t: int) -> None:
        self.is_paused = True
        self.pause_time = t
        _invoke(self.on_pause_resume, "pause/resume")

    def resume(self) -> None:
        self.is_paused = False
        _invoke(self.on_pause_resume, "pause/resume")
        self.pause_time = 0

    def is_finished(self) -> bool:
        return self.done() if self.done is not None else False

    def main_loop(self) -> None:
        while not self.is_finished():
            self.main_loop_iteration()

    def main_loop_iteration(self) -> None:
        """Render and read input; while not paused also run the remaining stages."""
        _invoke(self.render, "render")
        _invoke(self.input, "input")
        if self.is_paused:
            return
        _invoke(self.progress_animations, "progress animations")
        _invoke(self.ai, "ai")
        _invoke(self.physics, "physics")
        _invoke(self.collision_checking, "collision checking")
        _invoke(self.user_code, "user code")
        _invoke(self.commit_destructions, "destructions")


class App(ABC):
    """An application running a game: initialise, load, run, clear."""

    def __init__(self, game: Game) -> None:
        self.game = game

    @abstractmethod
    def initialise(self) -> None: ...

    @abstractmethod
    def load(self) -> None: ...

    def run(self) -> None:
        self.game.main_loop()

    def run_iteration(self) -> None:
        self.game.main_loop_iteration()

    @abstractmethod
    def clear(self) -> None: ...

    def main(self) -> None:
        self.initialise()
        self.load()
        self.run()
        self.clear()


class FPSCalculator:
    """Counts frames and publishes the count once per second."""

    def __init__(self) -> None:
        self.fps = 0
        self._new_fps = 0
        self._timestamp = 0

    def calculate(self, now: int | None = None) -> None:
        """Record a frame at time now, in milliseconds (the wall clock by default)."""
        if now is None:
            now = int(time.time() * _SECOND_MS)
        if now - self._timestamp >= _SECOND_MS:
            self.fps = self._new_fps
            self._new_fps = 0
            self._timestamp = now
        else:
            self._new_fps += 1