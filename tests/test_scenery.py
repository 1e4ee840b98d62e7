from runner.rng_service import RNGService
from runner.scenery import Scenery


def test_layer_counts_follow_width():
    sc = Scenery(900, 600, 480, rng=RNGService(1))
    assert len(sc.clouds) == 3
    assert len(sc.mountains) == 6
    assert len(sc.tiles) == 14
    sc.rebuild(300, 200, 160)
    assert len(sc.clouds) == 1
    assert len(sc.mountains) == 3
    assert len(sc.tiles) == 6


def test_ground_tiles_wrap():
    sc = Scenery(400, 300, 240, rng=RNGService(2))
    span = len(sc.tiles) * 80
    for _ in range(500):
        sc.update(7.0)
        for tile in sc.tiles:
            assert tile.x >= -tile.width
            assert tile.x < span


def test_clouds_drift_with_speed():
    sc = Scenery(1200, 600, 480, rng=RNGService(3))
    before = [c.x for c in sc.clouds]
    sc.update(10.0)
    after = [c.x for c in sc.clouds]
    assert all(a < b for a, b in zip(after, before))
