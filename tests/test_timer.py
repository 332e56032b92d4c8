import pytest

from mazechase.timer import Timer


class FakeClock:
    def __init__(self, step):
        self.now = 0.0
        self.step = step
        self.calls = 0

    def __call__(self):
        value = self.now
        self.now += self.step
        self.calls += 1
        return value


def test_tick_measures_elapsed():
    clock = FakeClock(0.25)
    timer = Timer(clock)
    assert timer.tick() == pytest.approx(0.25)
    assert timer.elapsed_time == pytest.approx(0.25)


def test_world_time_accumulates():
    clock = FakeClock(0.25)
    timer = Timer(clock)
    for _ in range(3):
        timer.tick()
    assert timer.world_time == pytest.approx(3 * 0.25)


def test_frame_rate_updates_after_a_second():
    clock = FakeClock(0.25)
    timer = Timer(clock)
    for _ in range(4):
        timer.tick()
    assert timer.frame_rate == 0
    timer.tick()
    assert timer.frame_rate == 5


def test_lock_fps_waits_for_frame_time():
    clock = FakeClock(0.001)
    timer = Timer(clock)
    elapsed = timer.tick(10)
    assert elapsed >= 1.0 / 10
    assert clock.calls > 2


def test_lock_fps_does_not_wait_when_slow():
    clock = FakeClock(0.5)
    timer = Timer(clock)
    timer.tick(10)
    assert clock.calls == 2


def test_status_lines_plain():
    timer = Timer(FakeClock(0.25))
    lines = timer.status_lines()
    assert lines == [f"framePerSec (FPS) : {timer.frame_rate}"]


def test_status_lines_debug():
    timer = Timer(FakeClock(0.25))
    timer.tick()
    lines = timer.status_lines(debug=True)
    assert len(lines) == 3
    assert lines[1].startswith("worldTime : ")
    assert lines[2].startswith("elapsedTime : ")
    assert float(lines[2].split(" : ")[1]) == pytest.approx(timer.elapsed_time)