from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class PlayerSnapshot:
    x: float
    y: float
    vy: float
    size: float
    grounded: bool
    jump_animation: float


@dataclass(frozen=True)
class ObstacleSnapshot:
    x: float
    y: float
    variant: str
    placement: str
    size: float
    width: float
    rotation: float
    oscillates: bool


@dataclass(frozen=True)
class PickupSnapshot:
    x: float
    y: float
    tier: str
    width: float
    height: float
    hover: float
    rotation: float


@dataclass(frozen=True)
class ParticleSnapshot:
    x: float
    y: float
    size: float
    color: Tuple[int, int, int, int]


@dataclass(frozen=True)
class SceneryView:
    clouds: Tuple[Tuple[float, float, float, float], ...] = ()
    mountains: Tuple[Tuple[float, float, float], ...] = ()
    tiles: Tuple[Tuple[float, float], ...] = ()


@dataclass(frozen=True)
class RunSnapshot:
    frame: int
    width: int
    height: int
    ground_y: float
    started: bool
    game_over: bool
    score: int
    high_score: int
    distance: float
    speed: float
    player: PlayerSnapshot
    obstacles: List[ObstacleSnapshot] = field(default_factory=list)
    pickups: List[PickupSnapshot] = field(default_factory=list)
    particles: List[ParticleSnapshot] = field(default_factory=list)
    scenery: SceneryView = field(default_factory=SceneryView)


class SnapshotService:
    """Copies a RunState into immutable records for the host to draw."""

    @staticmethod
    def capture(run) -> RunSnapshot:
        p = run.player
        player = PlayerSnapshot(p.x, p.y, p.vy, p.size, p.grounded, p.jump_animation)
        obstacles = [
            ObstacleSnapshot(o.x, o.y, o.variant, o.placement, o.size, o.width, o.rotation, o.oscillates)
            for o in run.obstacles
        ]
        pickups = [PickupSnapshot(k.x, k.y, k.tier, k.width, k.height, k.hover, k.rotation) for k in run.pickups]
        particles = [
            ParticleSnapshot(q.x, q.y, q.size, tuple(int(c) for c in q.color))  # type: ignore[arg-type]
            for q in run.particles.live
        ]
        sc = run.scenery
        scenery = SceneryView(
            clouds=tuple((c.x, c.y, c.width, c.height) for c in sc.clouds),
            mountains=tuple((m.x, m.height, m.width) for m in sc.mountains),
            tiles=tuple((t.x, t.width) for t in sc.tiles),
        )
        return RunSnapshot(
            frame=run.frame,
            width=run.width,
            height=run.height,
            ground_y=run.ground_y,
            started=run.started,
            game_over=run.game_over,
            score=run.score,
            high_score=run.high_score,
            distance=run.distance,
            speed=run.speed,
            player=player,
            obstacles=obstacles,
            pickups=pickups,
            particles=particles,
            scenery=scenery,
        )


__all__ = [
    "ObstacleSnapshot",
    "ParticleSnapshot",
    "PickupSnapshot",
    "PlayerSnapshot",
    "RunSnapshot",
    "SceneryView",
    "SnapshotService",
]
