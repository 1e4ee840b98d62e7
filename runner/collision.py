"""CollisionResolver.

Resolves the player against every live entity once per frame while the run
is active:

1. Obstacles, in live-list order. The first overlap ends the run: terminal
   flag, a crash burst in the player's colour, and a high score write when
   the score beats it. Remaining obstacles are not tested.
2. Pickups, only when no obstacle was hit. Every overlapping pickup is
   scored, gets a sparkle burst in its tier colour and is removed; several
   can be collected in the same frame.

Overlap uses open intervals, so boxes that only share an edge do not
collide.
"""

from __future__ import annotations

from dataclasses import dataclass

from runner.constants import (
    COLLECT_PARTICLES,
    COLLECT_SIZE_RANGE,
    COLLECT_VX_RANGE,
    COLLECT_VY_RANGE,
    COLOR_PICKUP_HIGHLIGHT,
    COLOR_PICKUP_RARE,
    COLOR_PLAYER,
    CRASH_LIFETIME,
    CRASH_PARTICLES,
    CRASH_SIZE_RANGE,
    CRASH_VX_RANGE,
    CRASH_VY_RANGE,
    PARTICLE_LIFETIME,
)
from runner.entities import Bounds, swap_remove
from runner.logger import get_logger

log = get_logger("collision")


def overlaps(a: Bounds, b: Bounds) -> bool:
    return a.left < b.right and a.right > b.left and a.top < b.bottom and a.bottom > b.top


@dataclass
class CollisionOutcome:
    terminal: bool = False
    collected: int = 0
    points: int = 0
    new_high_score: bool = False


class CollisionResolver:
    def __init__(self, particles, high_scores):
        self.particles = particles
        self.high_scores = high_scores

    def resolve(self, run) -> CollisionOutcome:
        """Test ``run.player`` against ``run.obstacles`` then ``run.pickups``.

        ``run`` must expose ``player``, ``obstacles``, ``pickups``, ``score``
        and ``game_over``; score and terminal flag are mutated in place.
        """
        outcome = CollisionOutcome()
        if run.game_over:
            return outcome
        player_box = run.player.bounds()

        for obstacle in run.obstacles:
            if overlaps(player_box, obstacle.bounds()):
                run.game_over = True
                outcome.terminal = True
                self.particles.spawn_burst(
                    (run.player.x, run.player.y),
                    COLOR_PLAYER,
                    CRASH_PARTICLES,
                    CRASH_LIFETIME,
                    CRASH_VX_RANGE,
                    CRASH_VY_RANGE,
                    CRASH_SIZE_RANGE,
                )
                if run.score > self.high_scores.best:
                    self.high_scores.submit(run.score)
                    outcome.new_high_score = True
                log.info("Run over", f"score={run.score}", f"best={self.high_scores.best}")
                return outcome

        for i in range(len(run.pickups) - 1, -1, -1):
            pickup = run.pickups[i]
            if overlaps(player_box, pickup.bounds()):
                run.score += pickup.value
                outcome.collected += 1
                outcome.points += pickup.value
                color = COLOR_PICKUP_RARE if pickup.is_rare else COLOR_PICKUP_HIGHLIGHT
                self.particles.spawn_burst(
                    (pickup.x, pickup.y),
                    color,
                    COLLECT_PARTICLES,
                    PARTICLE_LIFETIME,
                    COLLECT_VX_RANGE,
                    COLLECT_VY_RANGE,
                    COLLECT_SIZE_RANGE,
                )
                pickup.alive = False
                swap_remove(run.pickups, i)
        return outcome


__all__ = ["CollisionOutcome", "CollisionResolver", "overlaps"]
