"""Procedural entity motion.

Every entity scrolls left at the live run speed, so all of them accelerate
together as distance grows. On top of that each entity gets sine-driven
offsets keyed on the run frame and a phase rolled at creation:

* wobble    - small rotation, faster and wider as speed rises
* hover     - small vertical bob (pickups, aerial obstacles)
* oscillate - large vertical swing for flagged obstacles, clamped between
              the screen top and the ground; overrides hover
"""

from __future__ import annotations

import math
from typing import List

from runner.constants import (
    OBSTACLE_HOVER_AMOUNT,
    OBSTACLE_HOVER_AMOUNT_GAIN,
    OBSTACLE_HOVER_SPEED,
    OBSTACLE_HOVER_SPEED_GAIN,
    OSCILLATION_SPEED_GAIN,
    PICKUP_HOVER_AMOUNT,
    PICKUP_HOVER_SPEED,
    PICKUP_HOVER_SPEED_GAIN,
    PICKUP_TILT_AMOUNT,
    PICKUP_TILT_SPEED,
    PICKUP_TILT_SPEED_GAIN,
    VERTICAL_MOVE_RANGE,
    VERTICAL_MOVE_SPEED,
    WOBBLE_AMOUNT,
    WOBBLE_AMOUNT_GAIN,
    WOBBLE_SPEED,
    WOBBLE_SPEED_GAIN,
)
from runner.entities import AERIAL, Obstacle, Pickup, swap_remove
from runner.progression import RunProgress


def wobble(frame: int, phase: float, gain: float) -> float:
    speed = WOBBLE_SPEED + gain * WOBBLE_SPEED_GAIN
    amount = WOBBLE_AMOUNT + gain * WOBBLE_AMOUNT_GAIN
    return math.sin(frame * speed + phase) * amount


def oscillation_y(obstacle: Obstacle, frame: int, gain: float, ground_y: float) -> float:
    speed = VERTICAL_MOVE_SPEED + gain * OSCILLATION_SPEED_GAIN
    offset = math.sin(frame * speed + obstacle.oscillation_phase) * VERTICAL_MOVE_RANGE / 2
    y = obstacle.base_y + offset
    half = obstacle.size / 2
    # Top edge stays on screen, bottom edge stays above the ground.
    y = max(y, half)
    return min(y, ground_y - half)


def obstacle_hover_y(obstacle: Obstacle, frame: int, gain: float) -> float:
    speed = OBSTACLE_HOVER_SPEED + gain * OBSTACLE_HOVER_SPEED_GAIN
    amount = OBSTACLE_HOVER_AMOUNT + gain * OBSTACLE_HOVER_AMOUNT_GAIN
    return obstacle.base_y + math.sin(frame * speed + obstacle.wobble_phase + math.pi / 2) * amount


def move_obstacle(obstacle: Obstacle, progress: RunProgress, ground_y: float) -> None:
    frame = progress.frame
    gain = progress.speed_gain
    obstacle.x -= progress.speed
    obstacle.rotation = wobble(frame, obstacle.wobble_phase, gain)
    if obstacle.oscillates:
        obstacle.y = oscillation_y(obstacle, frame, gain, ground_y)
    elif obstacle.placement == AERIAL:
        obstacle.y = obstacle_hover_y(obstacle, frame, gain)
    else:
        obstacle.y = obstacle.base_y


def move_pickup(pickup: Pickup, progress: RunProgress) -> None:
    frame = progress.frame
    gain = progress.speed_gain
    pickup.x -= progress.speed
    hover_speed = PICKUP_HOVER_SPEED + gain * PICKUP_HOVER_SPEED_GAIN
    pickup.hover = math.sin(frame * hover_speed + pickup.hover_phase) * PICKUP_HOVER_AMOUNT
    tilt_speed = PICKUP_TILT_SPEED + gain * PICKUP_TILT_SPEED_GAIN
    pickup.rotation = math.sin(frame * tilt_speed + pickup.x * 0.01) * PICKUP_TILT_AMOUNT
    pickup.y = pickup.base_y + pickup.hover


def advance_obstacles(obstacles: List[Obstacle], progress: RunProgress, ground_y: float) -> int:
    """Move every obstacle and retire the ones past the left edge.

    Returns the number of obstacles retired.
    """
    retired = 0
    for i in range(len(obstacles) - 1, -1, -1):
        obstacle = obstacles[i]
        move_obstacle(obstacle, progress, ground_y)
        if obstacle.is_off_screen():
            obstacle.alive = False
            swap_remove(obstacles, i)
            retired += 1
    return retired


def advance_pickups(pickups: List[Pickup], progress: RunProgress) -> int:
    retired = 0
    for i in range(len(pickups) - 1, -1, -1):
        pickup = pickups[i]
        move_pickup(pickup, progress)
        if pickup.is_off_screen():
            pickup.alive = False
            swap_remove(pickups, i)
            retired += 1
    return retired


__all__ = [
    "advance_obstacles",
    "advance_pickups",
    "move_obstacle",
    "move_pickup",
    "obstacle_hover_y",
    "oscillation_y",
    "wobble",
]
