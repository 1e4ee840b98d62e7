"""Difficulty progression.

Pure functions mapping travelled distance to scroll speed and spawn
intervals, plus the ``RunProgress`` counters advanced once per frame.

Both curves share the same ``log10(1 + d * scale)`` shape: concave, slow to
grow and never plateauing. At distance 0 they return their base values
exactly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from runner.constants import (
    BASE_SPEED,
    DISTANCE_PER_SPEED,
    SPAWN_LOG_BASE,
    SPAWN_LOG_SCALE,
    SPEED_LOG_BASE,
    SPEED_LOG_SCALE,
)


def speed(distance: float) -> float:
    return BASE_SPEED + SPEED_LOG_BASE * math.log10(1 + distance * SPEED_LOG_SCALE)


def spawn_interval(distance: float, base_interval: float, min_interval: float) -> float:
    """Frames between spawns at ``distance``, floored at ``min_interval``."""
    reduction = SPAWN_LOG_BASE * math.log10(1 + distance * SPAWN_LOG_SCALE)
    return max(min_interval, base_interval - reduction)


def spawn_interval_frames(distance: float, base_interval: int, min_interval: int) -> int:
    return int(math.floor(spawn_interval(distance, base_interval, min_interval)))


@dataclass
class RunProgress:
    distance: float = 0.0
    speed: float = BASE_SPEED
    frame: int = 0

    def advance(self) -> None:
        """Accumulate distance at the current speed, then re-derive speed."""
        self.distance += self.speed * DISTANCE_PER_SPEED
        self.speed = speed(self.distance)

    def tick(self) -> None:
        self.frame += 1

    def reset(self) -> None:
        self.distance = 0.0
        self.speed = BASE_SPEED
        self.frame = 0

    @property
    def speed_gain(self) -> float:
        """Speed above the starting speed; motion amplitudes scale with it."""
        return self.speed - BASE_SPEED


__all__ = ["speed", "spawn_interval", "spawn_interval_frames", "RunProgress"]
