"""Pooled ParticleSystem.

Particles are purely visual: crash explosions and pickup sparkles. Bursts
arrive continuously during a run, so expired particles are parked in a pool
and reinitialised on the next burst instead of being reallocated.

Invariants:
* a particle is either in ``live`` (active) or in ``pool`` (inactive), never
  both;
* the pool only grows; ``clear()`` parks live particles rather than
  dropping them;
* ``live`` order carries no meaning (retirement swaps with the last slot).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from runner.constants import PARTICLE_GRAVITY
from runner.entities import swap_remove
from runner.rng_service import RNGService

Range = Tuple[float, float]


@dataclass
class Particle:
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    size: float = 0.0
    color: List[float] = field(default_factory=lambda: [0, 0, 0, 0])
    life: int = 0
    lifetime: int = 1
    active: bool = False

    @property
    def alpha(self) -> float:
        return self.color[3]


class ParticleSystem:
    def __init__(self, rng: RNGService | None = None):
        self.rng = rng or RNGService.get()
        self.live: List[Particle] = []
        self.pool: List[Particle] = []
        self.created = 0

    # --- Collection Protocol -------------------------------------------------
    def __len__(self) -> int:  # pragma: no cover - trivial
        return len(self.live)

    def __iter__(self):  # pragma: no cover - trivial
        return iter(self.live)

    @property
    def capacity(self) -> int:
        return len(self.live) + len(self.pool)

    # --- API -----------------------------------------------------------------
    def acquire(self) -> Particle:
        if self.pool:
            return self.pool.pop()
        self.created += 1
        return Particle()

    def spawn_burst(
        self,
        pos: Tuple[float, float],
        color: Sequence[int],
        count: int,
        lifetime: int,
        vx_range: Range,
        vy_range: Range,
        size_range: Range = (3, 8),
    ) -> List[Particle]:
        burst = []
        for _ in range(count):
            p = self.acquire()
            p.x, p.y = pos
            p.vx = self.rng.uniform(*vx_range)
            p.vy = self.rng.uniform(*vy_range)
            p.size = self.rng.uniform(*size_range)
            p.color = [color[0], color[1], color[2], 255]
            p.lifetime = max(1, lifetime)
            p.life = p.lifetime
            p.active = True
            self.live.append(p)
            burst.append(p)
        return burst

    def advance(self) -> int:
        """Step every live particle one frame. Returns how many retired."""
        retired = 0
        for i in range(len(self.live) - 1, -1, -1):
            p = self.live[i]
            p.vy += PARTICLE_GRAVITY
            p.x += p.vx
            p.y += p.vy
            p.life -= 1
            p.color[3] = max(0.0, min(255.0, 255 * p.life / p.lifetime))
            if p.life <= 0:
                p.active = False
                swap_remove(self.live, i)
                self.pool.append(p)
                retired += 1
        return retired

    def clear(self) -> None:
        for p in self.live:
            p.active = False
            self.pool.append(p)
        self.live.clear()


__all__ = ["Particle", "ParticleSystem"]
