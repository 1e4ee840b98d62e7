"""RunState: the single owner of everything that changes during a run.

The host drives it through a handful of callbacks:

    on_frame_tick()        advance one fixed-timestep frame
    on_jump_press()        start / jump / restart depending on phase
    on_jump_release()      variable jump height
    on_resize(w, h)        new viewport; entity lists are left untouched
    on_restart_request()   start a fresh run immediately
    snapshot()             read-only view for drawing

Frame order: player physics, entity motion and retirement, particles,
spawning, progression, scenery, collisions. A terminal collision freezes
player, entities and progression; particles keep animating so the crash
burst plays out.
"""

from __future__ import annotations

from typing import List

from runner.collision import CollisionOutcome, CollisionResolver
from runner.constants import DEFAULT_VIEWPORT, GROUND_OFFSET, PLAYER_X_OFFSET
from runner.entities import Obstacle, Pickup, Player
from runner.high_score import HighScoreStore
from runner.logger import get_logger
from runner.motion import advance_obstacles, advance_pickups
from runner.particle_system import ParticleSystem
from runner.progression import RunProgress
from runner.rng_service import RNGService
from runner.scenery import Scenery
from runner.snapshot import RunSnapshot, SnapshotService
from runner.spawn_scheduler import SpawnScheduler

log = get_logger("run")


class RunState:
    def __init__(
        self,
        width: int = DEFAULT_VIEWPORT[0],
        height: int = DEFAULT_VIEWPORT[1],
        rng: RNGService | None = None,
        high_scores: HighScoreStore | None = None,
    ):
        self.rng = rng or RNGService.get()
        self.high_scores = high_scores if high_scores is not None else HighScoreStore()
        self.high_scores.load()

        self.width = width
        self.height = height
        self.ground_y = height * GROUND_OFFSET

        self.progress = RunProgress()
        self.particles = ParticleSystem(self.rng)
        self.scheduler = SpawnScheduler(self.rng)
        self.collisions = CollisionResolver(self.particles, self.high_scores)
        # Scenery rolls from its own generator so resizing never shifts
        # the gameplay random sequence.
        self.scenery = Scenery(width, height, self.ground_y, rng=RNGService())

        self.obstacles: List[Obstacle] = []
        self.pickups: List[Pickup] = []
        self.score = 0
        self.started = False
        self.game_over = False
        self.last_outcome: CollisionOutcome | None = None
        self.player = self._new_player()

    # --- Lifecycle -----------------------------------------------------------
    def _new_player(self) -> Player:
        return Player.spawn(self.width * PLAYER_X_OFFSET, self.ground_y)

    def reset(self) -> None:
        self.score = 0
        self.progress.reset()
        self.obstacles.clear()
        self.pickups.clear()
        self.particles.clear()
        self.player = self._new_player()
        self.game_over = False
        self.last_outcome = None
        log.debug("Run reset")

    def start(self) -> None:
        self.reset()
        self.started = True
        log.info("Run started", f"best={self.high_score}")

    @property
    def high_score(self) -> int:
        return self.high_scores.best

    @property
    def distance(self) -> float:
        return self.progress.distance

    @property
    def speed(self) -> float:
        return self.progress.speed

    @property
    def frame(self) -> int:
        return self.progress.frame

    @property
    def active(self) -> bool:
        return self.started and not self.game_over

    # --- Simulation ----------------------------------------------------------
    def advance(self) -> CollisionOutcome | None:
        """Run one frame. Returns the collision outcome while a run is active."""
        if not self.started:
            return None
        if self.game_over:
            self.particles.advance()
            return None

        progress = self.progress
        progress.tick()
        self.player.update(self.ground_y)
        advance_obstacles(self.obstacles, progress, self.ground_y)
        advance_pickups(self.pickups, progress)
        self.particles.advance()

        batch = self.scheduler.step(progress.frame, progress.distance, self.width, self.ground_y)
        if batch.obstacle is not None:
            self.obstacles.append(batch.obstacle)
        self.pickups.extend(batch.pickups())

        progress.advance()
        self.scenery.update(progress.speed)

        self.last_outcome = self.collisions.resolve(self)
        return self.last_outcome

    # --- Host callbacks ------------------------------------------------------
    def on_frame_tick(self) -> CollisionOutcome | None:
        return self.advance()

    def on_jump_press(self) -> None:
        if not self.started:
            self.start()
        elif self.game_over:
            self.start()
        else:
            self.player.jump()

    def on_jump_release(self) -> None:
        if self.active:
            self.player.release_jump()

    def on_restart_request(self) -> None:
        self.start()

    def on_resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.ground_y = height * GROUND_OFFSET
        self.scenery.rebuild(width, height, self.ground_y)
        self.player.x = width * PLAYER_X_OFFSET
        self.player.clamp_to_ground(self.ground_y)
        log.debug("Viewport resized", width, height)

    def snapshot(self) -> RunSnapshot:
        return SnapshotService.capture(self)


__all__ = ["RunState"]
