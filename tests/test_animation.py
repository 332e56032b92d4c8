import pytest

from mazechase.animation import Animation


def make():
    return Animation(64, 32, 16, 16)


def test_default_play_list_covers_all_frames():
    anim = make()
    assert anim.frame_count == (64 // 16) * (32 // 16)
    assert anim.play_list == list(range(anim.frame_count))
    assert len(anim.frames) == anim.frame_count


def test_frame_positions_are_on_grid():
    anim = make()
    for x, y in anim.frames:
        assert x % 16 == 0 and y % 16 == 0
        assert 0 <= x < 64 and 0 <= y < 32
    assert len(set(anim.frames)) == len(anim.frames)


def test_default_reverse_plays_back():
    anim = make()
    anim.set_default_play_frames(reverse=True, loop=True)
    n = anim.frame_count
    assert anim.play_list[:n] == list(range(n))
    assert anim.play_list[n:] == list(range(n))[::-1]
    assert anim.loop


def test_range_ascending_reverse():
    anim = make()
    anim.set_play_range(2, 4, reverse=True)
    assert anim.play_list == [2, 3, 4, 3, 2]


def test_range_descending():
    anim = make()
    anim.set_play_range(5, 2)
    assert anim.play_list == [5, 4, 3, 2]


def test_range_descending_reverse_returns_to_start():
    anim = make()
    anim.set_play_range(5, 2, reverse=True)
    assert anim.play_list[0] == 5
    assert anim.play_list[-1] == 5
    assert min(anim.play_list) == 2


def test_range_single_frame_stops():
    anim = make()
    anim.start()
    anim.set_play_range(3, 3)
    assert anim.play_list == []
    assert not anim.playing


def test_explicit_frames():
    anim = make()
    anim.set_play_frames([7, 1, 3])
    anim.start()
    assert anim.frame_position() == anim.frames[7]


def test_update_without_loop_ends_on_last_frame():
    anim = make()
    anim.set_play_frames([0, 1, 2])
    anim.set_fps(4)
    anim.start()
    for _ in range(10):
        anim.frame_update(0.25)
    assert not anim.playing
    assert anim.frame_position() == anim.frames[2]


def test_update_with_loop_wraps():
    anim = make()
    anim.set_play_frames([0, 1, 2], loop=True)
    anim.set_fps(4)
    anim.start()
    for _ in range(3):
        anim.frame_update(0.25)
    assert anim.playing
    assert anim.frame_position() == anim.frames[0]


def test_update_waits_for_full_frame_time():
    anim = make()
    anim.set_fps(4)
    anim.start()
    anim.frame_update(0.125)
    assert anim.index == 0
    anim.frame_update(0.125)
    assert anim.index == 1


def test_pause_and_resume():
    anim = make()
    anim.set_fps(4)
    anim.start()
    anim.pause()
    anim.frame_update(0.25)
    assert anim.index == 0
    anim.resume()
    anim.frame_update(0.25)
    assert anim.index == 1


def test_not_started_does_not_advance():
    anim = make()
    anim.set_fps(4)
    anim.frame_update(1.0)
    assert anim.index == 0
    assert not anim.playing


def test_empty_play_list_has_no_position():
    anim = make()
    anim.set_play_range(1, 1)
    with pytest.raises(IndexError):
        anim.frame_position()