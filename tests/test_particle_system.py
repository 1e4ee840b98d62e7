from runner.particle_system import ParticleSystem
from runner.rng_service import RNGService


def make_system():
    return ParticleSystem(RNGService(7))


def burst(ps, count=15, lifetime=40):
    return ps.spawn_burst((100, 100), (10, 20, 30), count, lifetime, (-3, 3), (-5, 0), (3, 8))


def test_burst_retires_into_pool_after_lifetime():
    ps = make_system()
    burst(ps, count=15, lifetime=40)
    assert len(ps.live) == 15
    assert len(ps.pool) == 0
    for _ in range(39):
        ps.advance()
    assert len(ps.live) == 15
    ps.advance()
    assert len(ps.live) == 0
    assert len(ps.pool) == 15
    assert all(not p.active for p in ps.pool)


def test_pool_is_reused_and_capacity_conserved():
    ps = make_system()
    burst(ps, count=10, lifetime=5)
    for _ in range(5):
        ps.advance()
    assert ps.created == 10
    first_gen = set(id(p) for p in ps.pool)
    again = burst(ps, count=10, lifetime=5)
    assert ps.created == 10
    assert set(id(p) for p in again) == first_gen
    assert ps.pool == []
    burst(ps, count=4, lifetime=5)
    assert ps.created == 14
    assert ps.capacity == 14


def test_particle_never_in_both_sets():
    ps = make_system()
    burst(ps, count=6, lifetime=3)
    burst(ps, count=6, lifetime=6)
    for _ in range(7):
        ps.advance()
        live_ids = set(id(p) for p in ps.live)
        pool_ids = set(id(p) for p in ps.pool)
        assert not live_ids & pool_ids
        assert all(p.active for p in ps.live)


def test_alpha_fades_and_gravity_applies():
    ps = make_system()
    (p,) = burst(ps, count=1, lifetime=40)
    vy0, y0 = p.vy, p.y
    assert p.alpha == 255
    ps.advance()
    assert p.alpha == 255 * 39 / 40
    assert p.vy == vy0 + 0.1
    assert p.y == y0 + p.vy


def test_burst_velocity_within_range():
    ps = make_system()
    for p in burst(ps, count=50):
        assert -3 <= p.vx <= 3
        assert -5 <= p.vy <= 0
        assert 3 <= p.size <= 8


def test_clear_parks_live_particles():
    ps = make_system()
    burst(ps, count=8)
    ps.clear()
    assert ps.live == []
    assert len(ps.pool) == 8
    assert ps.capacity == 8


def test_zero_lifetime_burst_retires_after_one_frame():
    ps = make_system()
    burst(ps, count=3, lifetime=0)
    assert all(p.lifetime == 1 for p in ps.live)
    assert ps.advance() == 3
    assert len(ps.live) == 0
    assert len(ps.pool) == 3
