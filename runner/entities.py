"""Run entities: the player, obstacles and pickups.

Obstacles and pickups are plain tagged records; their per-frame movement
lives in ``runner.motion`` as free functions so the records carry no
behaviour beyond their collision bounds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, TypeVar

from runner.constants import (
    GRAVITY,
    JUMP_FORCE,
    OBSTACLE_HITBOX_SCALE,
    OBSTACLE_OFFSCREEN_MARGIN,
    OBSTACLE_SIZE,
    OBSTACLE_WIDTH_FACTOR,
    PICKUP_HEIGHT,
    PICKUP_VALUES,
    PICKUP_WIDTH,
    PLAYER_HITBOX_H,
    PLAYER_HITBOX_W,
    PLAYER_SIZE,
    VARIABLE_JUMP_DAMPING,
)

GROUNDED = "grounded"
AERIAL = "aerial"
COMMON = "common"
RARE = "rare"
VARIANTS = ("A", "B")


@dataclass(frozen=True)
class Bounds:
    left: float
    right: float
    top: float
    bottom: float

    @classmethod
    def centered(cls, x: float, y: float, w: float, h: float) -> "Bounds":
        return cls(x - w / 2, x + w / 2, y - h / 2, y + h / 2)


@dataclass
class Player:
    x: float
    y: float
    vy: float = 0.0
    size: float = PLAYER_SIZE
    grounded: bool = True
    jump_animation: float = 0.0
    jump_damped: bool = False

    @classmethod
    def spawn(cls, x: float, ground_y: float) -> "Player":
        return cls(x=x, y=ground_y - PLAYER_SIZE / 2)

    def jump(self) -> bool:
        """Leave the ground. Returns False when already airborne."""
        if not self.grounded:
            return False
        self.vy = JUMP_FORCE
        self.grounded = False
        self.jump_damped = False
        return True

    def release_jump(self) -> bool:
        """Shorten a rising jump once; returns True when damping was applied."""
        if self.grounded or self.jump_damped or self.vy >= 0:
            return False
        self.vy *= VARIABLE_JUMP_DAMPING
        self.jump_damped = True
        return True

    def update(self, ground_y: float) -> None:
        self.vy += GRAVITY
        self.y += self.vy
        rest_y = ground_y - self.size / 2
        if self.y >= rest_y:
            self.y = rest_y
            self.vy = 0.0
            if not self.grounded:
                self.grounded = True
                self.jump_animation = 0.0
        else:
            self.grounded = False
            self.jump_animation += 0.1

    def clamp_to_ground(self, ground_y: float) -> None:
        rest_y = ground_y - self.size / 2
        if self.y > rest_y:
            self.y = rest_y
            self.vy = 0.0
            self.grounded = True

    def bounds(self) -> Bounds:
        return Bounds.centered(self.x, self.y, self.size * PLAYER_HITBOX_W, self.size * PLAYER_HITBOX_H)


@dataclass
class Obstacle:
    x: float
    y: float
    variant: str
    placement: str
    base_y: float
    wobble_phase: float = 0.0
    oscillates: bool = False
    oscillation_phase: float = 0.0
    size: float = OBSTACLE_SIZE
    rotation: float = 0.0
    alive: bool = True
    kind: str = field(default="obstacle", init=False)

    @property
    def width(self) -> float:
        return self.size * OBSTACLE_WIDTH_FACTOR[self.variant]

    @property
    def image_key(self) -> str:
        return f"obstacle/{self.variant}"

    def bounds(self) -> Bounds:
        return Bounds.centered(
            self.x,
            self.y,
            self.width * OBSTACLE_HITBOX_SCALE,
            self.size * OBSTACLE_HITBOX_SCALE,
        )

    def is_off_screen(self) -> bool:
        return self.x < -self.size * OBSTACLE_OFFSCREEN_MARGIN


@dataclass
class Pickup:
    x: float
    y: float
    tier: str
    base_y: float
    hover_phase: float = 0.0
    width: float = PICKUP_WIDTH
    height: float = PICKUP_HEIGHT
    hover: float = 0.0
    rotation: float = 0.0
    alive: bool = True
    kind: str = field(default="pickup", init=False)

    @property
    def value(self) -> int:
        return PICKUP_VALUES[self.tier]

    @property
    def is_rare(self) -> bool:
        return self.tier == RARE

    def bounds(self) -> Bounds:
        return Bounds.centered(self.x, self.y, self.width, self.height)

    def is_off_screen(self) -> bool:
        return self.x < -self.width


T = TypeVar("T")


def swap_remove(items: List[T], index: int) -> T:
    """Remove ``items[index]`` in O(1) by moving the last element into its slot.

    Order of the remaining items is not preserved.
    """
    last = items.pop()
    if index < len(items):
        removed = items[index]
        items[index] = last
        return removed
    return last


__all__ = [
    "AERIAL",
    "Bounds",
    "COMMON",
    "GROUNDED",
    "Obstacle",
    "Pickup",
    "Player",
    "RARE",
    "VARIANTS",
    "swap_remove",
]
