"""Background scenery: clouds, mountains and ground tiles.

Purely decorative parallax layers. They scroll only while a run is active
and are rebuilt whenever the viewport is resized; gameplay entities never
depend on them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List

from runner.constants import (
    BASE_SPEED,
    CLOUD_SPACING,
    GROUND_TILE_WIDTH,
    MOUNTAIN_PARALLAX,
    MOUNTAIN_SPACING,
)
from runner.rng_service import RNGService


@dataclass
class Cloud:
    x: float
    y: float
    width: float
    height: float
    speed: float


@dataclass
class Mountain:
    x: float
    height: float
    width: float


@dataclass
class GroundTile:
    x: float
    width: float = GROUND_TILE_WIDTH


@dataclass
class Scenery:
    width: int
    height: int
    ground_y: float
    rng: RNGService = field(default_factory=RNGService.get)
    clouds: List[Cloud] = field(default_factory=list)
    mountains: List[Mountain] = field(default_factory=list)
    tiles: List[GroundTile] = field(default_factory=list)

    def __post_init__(self):
        self.rebuild(self.width, self.height, self.ground_y)

    def rebuild(self, width: int, height: int, ground_y: float) -> None:
        self.width, self.height, self.ground_y = width, height, ground_y
        rng = self.rng
        self.clouds = [
            Cloud(
                x=rng.uniform(0, width),
                y=rng.uniform(height * 0.1, height * 0.4),
                width=rng.uniform(80, 200),
                height=rng.uniform(40, 80),
                speed=rng.uniform(0.1, 0.3),
            )
            for _ in range(width // CLOUD_SPACING)
        ]
        count = width // MOUNTAIN_SPACING + 2
        self.mountains = [
            Mountain(
                x=i * (width / (count - 1)) + rng.uniform(-50, 50),
                height=rng.uniform(height * 0.2, height * 0.35),
                width=rng.uniform(200, 400),
            )
            for i in range(count)
        ]
        tile_count = math.ceil(width / GROUND_TILE_WIDTH) + 2
        self.tiles = [GroundTile(x=i * GROUND_TILE_WIDTH) for i in range(tile_count)]

    def update(self, speed: float) -> None:
        rng = self.rng
        for cloud in self.clouds:
            cloud.x -= cloud.speed * (speed / BASE_SPEED)
            if cloud.x < -cloud.width:
                cloud.x = self.width + cloud.width
                cloud.y = rng.uniform(self.height * 0.1, self.height * 0.4)

        for mountain in self.mountains:
            mountain.x -= speed * MOUNTAIN_PARALLAX
            if mountain.x < -mountain.width:
                mountain.x = self.width + rng.uniform(50, 150)
                mountain.height = rng.uniform(self.height * 0.2, self.height * 0.35)
                mountain.width = rng.uniform(200, 400)

        for tile in self.tiles:
            tile.x -= speed
        rightmost = max((t.x for t in self.tiles), default=0)
        for tile in self.tiles:
            if tile.x < -tile.width:
                tile.x = rightmost + tile.width
                rightmost = tile.x


__all__ = ["Cloud", "GroundTile", "Mountain", "Scenery"]
