"""SpawnScheduler.

Frame-driven cadence: a kind spawns on frames where ``frame % interval == 0``
with intervals taken from the progression curve at the current distance.
Rare pickups run on an interval five times the common one and pass a
stricter random gate on top.

Cadence itself is deterministic given ``frame`` and ``distance``; only the
per-entity choices (variant, placement, oscillation, phases, height) are
random, and all of them are rolled once at creation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from runner.constants import (
    AERIAL_CHANCE,
    AERIAL_CLEARANCE,
    BASE_OBSTACLE_INTERVAL,
    BASE_PICKUP_INTERVAL,
    COMMON_PICKUP_GATE,
    MIN_OBSTACLE_INTERVAL,
    MIN_PICKUP_INTERVAL,
    OBSTACLE_SIZE,
    PICKUP_HEIGHT,
    PICKUP_LOW_CHANCE,
    PICKUP_WIDTH,
    PLAYER_SIZE,
    RARE_PICKUP_GATE,
    RARE_PICKUP_INTERVAL_FACTOR,
    RARE_ROLL_CHANCE,
    TWO_PI,
    VERTICAL_MOVE_CHANCE,
    VERTICAL_MOVE_START_DISTANCE,
)
from runner.entities import AERIAL, COMMON, GROUNDED, RARE, Obstacle, Pickup
from runner.progression import spawn_interval_frames
from runner.rng_service import RNGService


@dataclass
class SpawnBatch:
    obstacle: Optional[Obstacle] = None
    pickup: Optional[Pickup] = None
    rare_pickup: Optional[Pickup] = None

    def pickups(self) -> Iterator[Pickup]:
        if self.pickup is not None:
            yield self.pickup
        if self.rare_pickup is not None:
            yield self.rare_pickup

    def __bool__(self) -> bool:
        return self.obstacle is not None or self.pickup is not None or self.rare_pickup is not None


def intervals(distance: float) -> Dict[str, int]:
    pickup = spawn_interval_frames(distance, BASE_PICKUP_INTERVAL, MIN_PICKUP_INTERVAL)
    return {
        "obstacle": spawn_interval_frames(distance, BASE_OBSTACLE_INTERVAL, MIN_OBSTACLE_INTERVAL),
        "pickup": pickup,
        "rare_pickup": pickup * RARE_PICKUP_INTERVAL_FACTOR,
    }


class SpawnScheduler:
    def __init__(self, rng: RNGService | None = None, player_size: float = PLAYER_SIZE):
        self.rng = rng or RNGService.get()
        self.player_size = player_size

    # --- Factories -----------------------------------------------------------
    def create_obstacle(self, distance: float, viewport_w: float, ground_y: float) -> Obstacle:
        rng = self.rng
        size = OBSTACLE_SIZE
        variant = "A" if rng.random() > 0.5 else "B"
        placement = AERIAL if rng.random() < AERIAL_CHANCE else GROUNDED
        if placement == GROUNDED:
            y = ground_y - size / 2
        else:
            # Leave room for the player to run underneath.
            y = ground_y - self.player_size * AERIAL_CLEARANCE - size / 2
            y = min(y, ground_y - size * 1.5)

        oscillates = False
        oscillation_phase = 0.0
        if distance > VERTICAL_MOVE_START_DISTANCE and rng.random() < VERTICAL_MOVE_CHANCE:
            oscillates = True
            oscillation_phase = rng.uniform(0, TWO_PI)

        return Obstacle(
            x=viewport_w + size,
            y=y,
            variant=variant,
            placement=placement,
            base_y=y,
            wobble_phase=rng.uniform(0, TWO_PI),
            oscillates=oscillates,
            oscillation_phase=oscillation_phase,
            size=size,
        )

    def create_pickup(self, viewport_w: float, ground_y: float, force_rare: bool = False) -> Pickup:
        rng = self.rng
        h = PICKUP_HEIGHT
        if rng.random() < PICKUP_LOW_CHANCE:
            y = ground_y - h * 1.5
        else:
            y = ground_y - h * 3.5
        y = max(y, h * 2)
        rare = force_rare or rng.random() < RARE_ROLL_CHANCE
        return Pickup(
            x=viewport_w + PICKUP_WIDTH,
            y=y,
            tier=RARE if rare else COMMON,
            base_y=y,
            hover_phase=rng.uniform(0, TWO_PI),
        )

    # --- Cadence -------------------------------------------------------------
    def step(self, frame: int, distance: float, viewport_w: float, ground_y: float) -> SpawnBatch:
        """Decide this frame's spawns; at most one entity per kind."""
        batch = SpawnBatch()
        due = intervals(distance)
        if frame % due["obstacle"] == 0:
            batch.obstacle = self.create_obstacle(distance, viewport_w, ground_y)
        if frame % due["pickup"] == 0 and self.rng.random() > COMMON_PICKUP_GATE:
            batch.pickup = self.create_pickup(viewport_w, ground_y)
        if frame % due["rare_pickup"] == 0 and self.rng.random() > RARE_PICKUP_GATE:
            batch.rare_pickup = self.create_pickup(viewport_w, ground_y, force_rare=True)
        return batch


__all__ = ["SpawnBatch", "SpawnScheduler", "intervals"]
