import math

from runner.constants import (
    BASE_OBSTACLE_INTERVAL,
    BASE_SPEED,
    MIN_OBSTACLE_INTERVAL,
)
from runner.progression import RunProgress, spawn_interval, spawn_interval_frames, speed


def test_speed_starts_at_base():
    assert speed(0) == BASE_SPEED


def test_speed_non_decreasing_and_concave():
    samples = [speed(d) for d in range(0, 20000, 250)]
    assert all(b >= a for a, b in zip(samples, samples[1:]))
    # Equal distance steps buy less speed later in the run
    early = speed(1000) - speed(0)
    late = speed(11000) - speed(10000)
    assert late < early


def test_spawn_interval_bounds():
    assert spawn_interval(0, BASE_OBSTACLE_INTERVAL, MIN_OBSTACLE_INTERVAL) == BASE_OBSTACLE_INTERVAL
    for d in (0, 1, 50, 500, 5000, 1e6, 1e12):
        assert spawn_interval(d, BASE_OBSTACLE_INTERVAL, MIN_OBSTACLE_INTERVAL) >= MIN_OBSTACLE_INTERVAL
    assert spawn_interval(1e12, BASE_OBSTACLE_INTERVAL, MIN_OBSTACLE_INTERVAL) == MIN_OBSTACLE_INTERVAL


def test_spawn_interval_frames_is_whole():
    frames = spawn_interval_frames(61.0, 120, 40)
    assert isinstance(frames, int)
    assert frames == math.floor(120 - 20 * math.log10(1 + 61.0 * 0.012))


def test_progress_advance_and_reset():
    p = RunProgress()
    p.advance()
    assert p.distance == BASE_SPEED / 10
    assert p.speed == speed(p.distance)
    before = p.distance
    p.tick()
    p.advance()
    assert p.distance > before
    assert p.frame == 1
    p.reset()
    assert (p.distance, p.speed, p.frame) == (0.0, BASE_SPEED, 0)
    assert p.speed_gain == 0
