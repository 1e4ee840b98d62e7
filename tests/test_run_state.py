from runner.constants import (
    BASE_SPEED,
    GROUND_OFFSET,
    JUMP_FORCE,
    OBSTACLE_HITBOX_SCALE,
    PLAYER_X_OFFSET,
)
from runner.entities import GROUNDED, Obstacle, Pickup
from runner.high_score import MemoryHighScoreStore
from runner.rng_service import RNGService
from runner.run_state import RunState

WIDTH, HEIGHT = 800, 600


def make_run(best=0, seed=1):
    run = RunState(WIDTH, HEIGHT, rng=RNGService(seed), high_scores=MemoryHighScoreStore(best=best))
    return run


def obstacle_touching_player(run):
    """Grounded obstacle whose left edge sits exactly on the player's right edge."""
    size = 55
    y = run.ground_y - size / 2
    o = Obstacle(x=0, y=y, variant="B", placement=GROUNDED, base_y=y, size=size)
    half_w = o.width * OBSTACLE_HITBOX_SCALE / 2
    o.x = run.player.bounds().right + half_w
    return o


def test_idle_until_started():
    run = make_run()
    assert run.on_frame_tick() is None
    assert run.frame == 0
    assert run.distance == 0
    run.on_jump_press()
    assert run.started
    assert run.player.grounded


def test_tick_accumulates_distance():
    run = make_run()
    run.start()
    run.on_frame_tick()
    assert run.frame == 1
    assert run.distance == BASE_SPEED / 10
    run.on_frame_tick()
    assert run.distance > BASE_SPEED / 10
    assert run.speed >= BASE_SPEED


def test_zero_gap_obstacle_ends_run_next_frame():
    run = make_run()
    run.start()
    o = obstacle_touching_player(run)
    assert o.bounds().left == run.player.bounds().right
    run.obstacles.append(o)
    outcome = run.on_frame_tick()
    assert outcome is not None and outcome.terminal
    assert run.game_over


def test_terminal_freezes_physics_but_not_particles():
    run = make_run()
    run.start()
    run.obstacles.append(obstacle_touching_player(run))
    run.on_frame_tick()
    assert run.game_over
    frame, distance = run.frame, run.distance
    xs = [o.x for o in run.obstacles]
    live_before = len(run.particles.live)
    assert live_before > 0
    p = run.particles.live[0]
    y_before = p.y
    for _ in range(3):
        assert run.on_frame_tick() is None
    assert (run.frame, run.distance) == (frame, distance)
    assert [o.x for o in run.obstacles] == xs
    assert p.y != y_before


def test_new_high_score_recorded_at_crash():
    run = make_run(best=2)
    run.start()
    run.score = 4
    run.obstacles.append(obstacle_touching_player(run))
    run.on_frame_tick()
    assert run.high_score == 4
    assert run.high_scores.saved == [4]


def test_reset_after_crash():
    run = make_run()
    run.start()
    run.score = 7
    run.pickups.append(Pickup(x=700, y=100, tier="common", base_y=100))
    run.obstacles.append(obstacle_touching_player(run))
    run.on_frame_tick()
    assert run.game_over
    pooled = run.particles.capacity

    run.on_jump_press()  # press while game over restarts
    assert not run.game_over
    assert run.score == 0
    assert run.distance == 0
    assert run.frame == 0
    assert run.obstacles == []
    assert run.pickups == []
    assert run.particles.live == []
    assert run.particles.capacity == pooled
    assert run.player.grounded
    assert run.player.x == WIDTH * PLAYER_X_OFFSET
    assert run.player.y == HEIGHT * GROUND_OFFSET - run.player.size / 2


def test_jump_and_land():
    run = make_run()
    run.start()
    rest_y = run.player.y
    run.on_jump_press()
    assert not run.player.grounded
    assert run.player.vy == JUMP_FORCE
    run.on_frame_tick()
    assert run.player.y < rest_y
    for _ in range(120):
        run.player.update(run.ground_y)
    assert run.player.grounded
    assert run.player.y == rest_y
    assert run.player.vy == 0


def test_jump_ignored_while_airborne():
    run = make_run()
    run.start()
    run.on_jump_press()
    run.player.update(run.ground_y)
    vy = run.player.vy
    run.on_jump_press()
    assert run.player.vy == vy


def test_early_release_shortens_jump():
    def apex(release_after):
        run = make_run()
        run.start()
        run.on_jump_press()
        top = run.player.y
        for i in range(80):
            if i == release_after:
                run.on_jump_release()
            run.player.update(run.ground_y)
            top = min(top, run.player.y)
        return top

    held = apex(release_after=None)
    short = apex(release_after=3)
    assert short > held  # smaller y means higher


def test_release_damps_only_once():
    run = make_run()
    run.start()
    run.on_jump_press()
    run.player.update(run.ground_y)
    vy = run.player.vy
    run.on_jump_release()
    assert run.player.vy == vy * 0.5
    run.on_jump_release()
    assert run.player.vy == vy * 0.5


def test_resize_keeps_entities():
    run = make_run()
    run.start()
    o = Obstacle(x=500, y=100, variant="A", placement=GROUNDED, base_y=100)
    run.obstacles.append(o)
    obstacles = run.obstacles
    run.on_resize(1024, 400)
    assert run.obstacles is obstacles
    assert run.obstacles == [o]
    assert run.ground_y == 400 * GROUND_OFFSET
    assert run.player.x == 1024 * PLAYER_X_OFFSET
    assert run.player.y == run.ground_y - run.player.size / 2
    assert run.player.grounded


def test_restart_request_starts_fresh_run():
    run = make_run()
    run.on_restart_request()
    assert run.started
    run.on_frame_tick()
    run.on_restart_request()
    assert run.frame == 0


def test_long_run_respects_entity_invariants():
    run = make_run(seed=8)
    run.start()
    for _ in range(2000):
        if run.game_over:
            run.on_restart_request()
        if run.player.grounded:
            run.on_jump_press()
        run.on_frame_tick()
        for o in run.obstacles:
            assert o.y >= o.size / 2 - 1e-9
            assert o.y <= run.ground_y - o.size / 2 + 1e-9
        live = set(id(p) for p in run.particles.live)
        assert not live & set(id(p) for p in run.particles.pool)


def test_release_outside_active_run_leaves_player_untouched():
    run = make_run()
    before = (run.player.y, run.player.vy, run.player.grounded, run.player.jump_damped)
    run.on_jump_release()
    assert (run.player.y, run.player.vy, run.player.grounded, run.player.jump_damped) == before
