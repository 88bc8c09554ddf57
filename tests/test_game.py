import pytest

from marioengine.game import App, FPSCalculator, Game

STAGES = [
    "render",
    "input",
    "progress_animations",
    "ai",
    "physics",
    "collision_checking",
    "user_code",
    "commit_destructions",
]


def _recording_game(calls):
    game = Game()
    for name in STAGES:
        setattr(game, name, lambda name=name: calls.append(name))
    game.on_pause_resume = lambda: calls.append("pause_resume")
    return game


def test_iteration_runs_stages_in_order():
    calls = []
    _recording_game(calls).main_loop_iteration()
    assert calls == STAGES


def test_paused_iteration_only_renders_and_reads_input():
    calls = []
    game = _recording_game(calls)
    game.pause(42)
    calls.clear()
    game.main_loop_iteration()
    assert calls == ["render", "input"]


def test_pause_and_resume():
    calls = []
    game = _recording_game(calls)
    game.pause(42)
    assert game.is_paused and game.pause_time == 42
    game.resume()
    assert not game.is_paused and game.pause_time == 0
    assert calls == ["pause_resume", "pause_resume"]


def test_missing_stage_raises():
    with pytest.raises(RuntimeError):
        Game().main_loop_iteration()


def test_pause_without_callback_raises():
    with pytest.raises(RuntimeError):
        Game().pause(1)


def test_is_finished_defaults_to_false():
    assert Game().is_finished() is False


def test_main_loop_stops_when_done():
    calls = []
    game = _recording_game(calls)
    game.done = lambda: calls.count("render") >= 3
    game.main_loop()
    assert calls.count("render") == 3
    assert calls.count("commit_destructions") == 3


class _RecordingApp(App):
    def __init__(self, game, calls):
        super().__init__(game)
        self.calls = calls

    def initialise(self):
        self.calls.append("initialise")

    def load(self):
        self.calls.append("load")

    def clear(self):
        self.calls.append("clear")


def test_app_main_order():
    calls = []
    game = _recording_game(calls)
    game.done = lambda: "render" in calls
    _RecordingApp(game, calls).main()
    assert calls == ["initialise", "load", *STAGES, "clear"]


def test_app_run_iteration():
    calls = []
    app = _RecordingApp(_recording_game(calls), calls)
    app.run_iteration()
    assert calls == STAGES


def test_app_is_abstract():
    with pytest.raises(TypeError):
        App(Game())


def test_fps_published_after_a_second():
    fps = FPSCalculator()
    fps.calculate(1000)
    for t in (1001, 1200, 1500):
        fps.calculate(t)
    assert fps.fps == 0
    fps.calculate(2000)
    assert fps.fps == 3


def test_fps_counter_restarts_each_second():
    fps = FPSCalculator()
    fps.calculate(1000)
    fps.calculate(1001)
    fps.calculate(2000)
    fps.calculate(3000)
    assert fps.fps == 0