import pytest

from tilemerge.animation import Animation


def three_frames():
    return Animation(192, 64, 64, 64)


def test_grid_and_default_play_list():
    ani = Animation(320, 320, 64, 64)
    assert ani.frame_count == 25
    assert ani.play_list == tuple(range(25))
    assert not ani.is_playing


def test_frame_positions_row_major():
    ani = Animation(320, 320, 64, 64)
    ani.set_play_frames([0, 4, 5])
    assert ani.frame_position() == (0, 0)
    ani.start()
    ani.set_fps(1)
    ani.frame_update(1.0)
    assert ani.frame_position() == (4 * 64, 0)
    ani.frame_update(1.0)
    assert ani.frame_position() == (0, 64)


def test_default_reverse_without_loop_is_palindrome():
    ani = Animation(320, 320, 64, 64)
    ani.set_default_play_frames(reverse=True, loop=False)
    frames = list(ani.play_list)
    assert frames == frames[::-1]
    assert len(frames) == 2 * ani.frame_count - 1


def test_default_reverse_with_loop_omits_return_to_start():
    ani = Animation(320, 320, 64, 64)
    ani.set_default_play_frames(reverse=True, loop=True)
    frames = list(ani.play_list)
    assert frames[-1] != 0
    assert frames + [0] == (frames + [0])[::-1]
    assert ani.loop


def test_play_range_reverse_loop():
    ani = Animation(320, 320, 64, 64)
    ani.set_play_range(0, 3, True, True)
    assert ani.play_list == (0, 1, 2, 3, 2, 1)


def test_play_range_descending():
    ani = Animation(320, 320, 64, 64)
    ani.set_play_range(5, 2)
    frames = ani.play_list
    assert list(frames) == sorted(frames, reverse=True)
    assert set(frames) == {2, 3, 4, 5}


def test_play_range_descending_reverse_loop_returns_up():
    ani = Animation(320, 320, 64, 64)
    ani.set_play_range(5, 2, True, True)
    frames = list(ani.play_list)
    assert frames[:4] == sorted(frames[:4], reverse=True)
    assert frames[4:] == sorted(frames[4:])
    assert frames + [5] == (frames + [5])[::-1]


def test_play_range_equal_ends_clears_and_stops():
    ani = three_frames()
    ani.start()
    ani.set_play_range(1, 1)
    assert ani.play_list == ()
    assert not ani.is_playing
    assert ani.play_index == 0


def test_play_range_ascending_reverse_without_loop_is_empty():
    ani = Animation(320, 320, 64, 64)
    ani.set_play_range(0, 3, True, False)
    assert ani.play_list == ()


def test_explicit_frames_kept_in_order():
    ani = Animation(320, 320, 64, 64)
    order = [23, 10, 2, 6, 19, 1, 2, 3, 9, 10, 11, 21]
    ani.set_play_frames(order, True)
    assert ani.play_list == tuple(order)
    assert ani.loop


def test_non_loop_playback_stops_on_last_frame():
    ani = three_frames()
    ani.set_fps(1)
    ani.start()
    ani.frame_update(1.0)
    ani.frame_update(1.0)
    assert ani.play_index == 2 and ani.is_playing
    ani.frame_update(1.0)
    assert ani.play_index == 2
    assert not ani.is_playing


def test_loop_playback_wraps():
    ani = three_frames()
    ani.set_default_play_frames(loop=True)
    ani.set_fps(1)
    ani.start()
    for _ in range(3):
        ani.frame_update(1.0)
    assert ani.play_index == 0
    assert ani.is_playing


def test_short_elapsed_accumulates():
    ani = three_frames()
    ani.set_fps(2)
    ani.start()
    ani.frame_update(0.25)
    assert ani.play_index == 0
    ani.frame_update(0.25)
    assert ani.play_index == 1


def test_pause_and_resume():
    ani = three_frames()
    ani.set_fps(1)
    ani.start()
    ani.frame_update(1.0)
    ani.pause()
    ani.frame_update(1.0)
    assert ani.play_index == 1
    ani.resume()
    ani.frame_update(1.0)
    assert ani.play_index == 2


def test_stop_resets_index():
    ani = three_frames()
    ani.set_fps(1)
    ani.start()
    ani.frame_update(1.0)
    ani.stop()
    assert ani.play_index == 0
    assert not ani.is_playing


def test_invalid_fps_and_frame_size():
    ani = three_frames()
    with pytest.raises(ValueError):
        ani.set_fps(0)
    with pytest.raises(ValueError):
        Animation(64, 64, 0, 64)