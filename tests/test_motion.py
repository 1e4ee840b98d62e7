import math

from runner.constants import BASE_SPEED, OBSTACLE_SIZE, PICKUP_HOVER_AMOUNT
from runner.entities import AERIAL, COMMON, GROUNDED, Obstacle, Pickup
from runner.motion import (
    advance_obstacles,
    advance_pickups,
    move_obstacle,
    move_pickup,
    obstacle_hover_y,
    oscillation_y,
)
from runner.progression import RunProgress

GROUND_Y = 480


def make_obstacle(x=500.0, placement=GROUNDED, base_y=None, oscillates=False, phase=0.0):
    if base_y is None:
        base_y = GROUND_Y - OBSTACLE_SIZE / 2
    return Obstacle(
        x=x,
        y=base_y,
        variant="A",
        placement=placement,
        base_y=base_y,
        wobble_phase=0.3,
        oscillates=oscillates,
        oscillation_phase=phase,
    )


def test_grounded_obstacle_scrolls_at_live_speed():
    progress = RunProgress(distance=0.0, speed=BASE_SPEED, frame=10)
    o = make_obstacle()
    move_obstacle(o, progress, GROUND_Y)
    assert o.x == 500 - BASE_SPEED
    assert o.y == o.base_y
    progress.speed = 8.5
    move_obstacle(o, progress, GROUND_Y)
    assert o.x == 500 - BASE_SPEED - 8.5


def test_entities_share_speed():
    progress = RunProgress(speed=7.0, frame=3)
    a, b = make_obstacle(x=100), make_obstacle(x=300)
    k = Pickup(x=200, y=300, tier=COMMON, base_y=300)
    move_obstacle(a, progress, GROUND_Y)
    move_obstacle(b, progress, GROUND_Y)
    move_pickup(k, progress)
    assert (a.x, b.x, k.x) == (93, 293, 193)


def test_wobble_grows_with_speed():
    slow = RunProgress(speed=BASE_SPEED)
    fast = RunProgress(speed=BASE_SPEED + 3)
    slow_peak = fast_peak = 0.0
    for frame in range(400):
        slow.frame = fast.frame = frame
        o1, o2 = make_obstacle(), make_obstacle()
        move_obstacle(o1, slow, GROUND_Y)
        move_obstacle(o2, fast, GROUND_Y)
        slow_peak = max(slow_peak, abs(o1.rotation))
        fast_peak = max(fast_peak, abs(o2.rotation))
    assert slow_peak <= 0.1 + 1e-9
    assert fast_peak > slow_peak


def test_aerial_obstacle_hovers_near_spawn_height():
    base_y = 300.0
    progress = RunProgress()
    o = make_obstacle(placement=AERIAL, base_y=base_y)
    for frame in range(200):
        progress.frame = frame
        move_obstacle(o, progress, GROUND_Y)
        assert abs(o.y - base_y) <= 0.5 + 1e-9
        assert o.y == obstacle_hover_y(o, frame, 0.0)


def test_oscillation_overrides_hover():
    progress = RunProgress(frame=17)
    o = make_obstacle(placement=AERIAL, base_y=300.0, oscillates=True, phase=1.0)
    move_obstacle(o, progress, GROUND_Y)
    assert o.y == oscillation_y(o, 17, 0.0, GROUND_Y)
    assert o.y != obstacle_hover_y(o, 17, 0.0)


def test_oscillation_clamped_to_screen_and_ground():
    progress = RunProgress()
    high = make_obstacle(placement=AERIAL, base_y=20.0, oscillates=True)
    low = make_obstacle(base_y=GROUND_Y - OBSTACLE_SIZE / 2, oscillates=True)
    for frame in range(0, 400):
        progress.frame = frame
        move_obstacle(high, progress, GROUND_Y)
        move_obstacle(low, progress, GROUND_Y)
        for o in (high, low):
            assert o.y >= o.size / 2
            assert o.y <= GROUND_Y - o.size / 2


def test_pickup_hover_amplitude():
    progress = RunProgress()
    k = Pickup(x=600, y=350, tier=COMMON, base_y=350, hover_phase=math.pi / 3)
    for frame in range(300):
        progress.frame = frame
        move_pickup(k, progress)
        assert abs(k.y - 350) <= PICKUP_HOVER_AMOUNT + 1e-9
        assert k.y == k.base_y + k.hover


def test_offscreen_entities_retired():
    progress = RunProgress(speed=BASE_SPEED)
    leaving = make_obstacle(x=-2 * OBSTACLE_SIZE)
    staying = make_obstacle(x=400)
    also_staying = make_obstacle(x=10)
    obstacles = [leaving, staying, also_staying]
    retired = advance_obstacles(obstacles, progress, GROUND_Y)
    assert retired == 1
    assert leaving.alive is False
    assert sorted(o.x for o in obstacles) == [5, 395]

    gone = Pickup(x=-70, y=300, tier=COMMON, base_y=300)
    kept = Pickup(x=0, y=300, tier=COMMON, base_y=300)
    pickups = [gone, kept]
    assert advance_pickups(pickups, progress) == 1
    assert pickups == [kept]
