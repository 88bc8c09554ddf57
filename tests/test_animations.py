import pytest

from marioengine.animations import (
    Animation,
    FrameListAnimation,
    FrameRangeAnimation,
    MovingAnimation,
    MovingPathAnimation,
    PathEntry,
    ScrollAnimation,
    ScrollEntry,
    TickAnimation,
)


def test_animation_is_abstract():
    with pytest.raises(TypeError):
        Animation("base")


def test_moving_animation_defaults_to_one_rep():
    anim = MovingAnimation("walk")
    assert anim.reps == 1
    assert not anim.is_forever()


def test_set_forever_returns_self_and_marks_forever():
    anim = MovingAnimation("walk", reps=5)
    assert anim.set_forever() is anim
    assert anim.is_forever()
    assert anim.reps == 0


def test_moving_clone_is_equal_and_independent():
    anim = MovingAnimation("walk", 3, 2, -1, 90)
    copy = anim.clone()
    assert copy == anim
    assert copy is not anim
    copy.dx = 7
    assert anim.dx == 2


def test_negative_reps_rejected():
    with pytest.raises(ValueError):
        MovingAnimation("walk", reps=-1)


def test_frame_range_clone_keeps_range_and_type():
    anim = FrameRangeAnimation("run", reps=2, dx=1, dy=0, delay=50, start=1, end=4)
    copy = anim.clone()
    assert isinstance(copy, FrameRangeAnimation)
    assert copy == anim
    assert (copy.start, copy.end) == (1, 4)


def test_frame_list_clone_copies_frames():
    anim = FrameListAnimation("blink", frames=[0, 2, 1])
    copy = anim.clone()
    copy.frames.append(3)
    assert anim.frames == [0, 2, 1]
    assert copy.frames == [0, 2, 1, 3]


def test_moving_path_clone_copies_entries():
    anim = MovingPathAnimation("jump", [PathEntry(1, -2, 0, 10), PathEntry(1, 2, 1, 10)])
    copy = anim.clone()
    assert copy == anim
    copy.path[0].dx = 9
    assert anim.path[0].dx == 1


def test_scroll_clone_copies_entries():
    anim = ScrollAnimation("pan", [ScrollEntry(4, 0, 16)])
    copy = anim.clone()
    assert copy == anim
    copy.scroll[0].delay = 1
    assert anim.scroll[0].delay == 16


def test_tick_defaults():
    anim = TickAnimation("tick")
    assert anim.reps == 1
    assert anim.is_discrete
    assert not anim.is_forever()


def test_tick_non_discrete_requires_single_rep():
    with pytest.raises(ValueError):
        TickAnimation("timer", delay=100, reps=3, is_discrete=False)


def test_tick_non_discrete_single_rep_allowed():
    anim = TickAnimation("timer", delay=100, reps=1, is_discrete=False)
    assert anim.is_discrete is False


def test_tick_clone_is_discrete():
    anim = TickAnimation("timer", delay=100, reps=1, is_discrete=False)
    copy = anim.clone()
    assert copy.is_discrete is True
    assert (copy.id, copy.delay, copy.reps) == ("timer", 100, 1)


def test_tick_set_forever():
    anim = TickAnimation("tick", delay=5, reps=4)
    assert anim.set_forever() is anim
    assert anim.is_forever()