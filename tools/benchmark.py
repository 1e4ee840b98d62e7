#!/usr/bin/env python3
"""
Headless simulation benchmark for Joist Runner.

Usage:
    python3 tools/benchmark.py [frames] [seed]

Drives a RunState without a window using a simple auto-jump policy
(jump whenever an obstacle is close) and prints per-frame cost plus pool
and entity statistics. Crashed runs are restarted immediately.
"""

import os
import statistics
import sys
import time

# Ensure we can import the runner package from root
current_dir = os.path.dirname(os.path.abspath(__file__))
root_dir = os.path.dirname(current_dir)
sys.path.insert(0, root_dir)

from runner.high_score import MemoryHighScoreStore  # noqa: E402
from runner.logger import set_level  # noqa: E402
from runner.rng_service import RNGService  # noqa: E402
from runner.run_state import RunState  # noqa: E402

JUMP_LOOKAHEAD = 140


def should_jump(run: RunState) -> bool:
    px = run.player.x
    for o in run.obstacles:
        if o.placement == "grounded" and 0 < o.x - px < JUMP_LOOKAHEAD:
            return True
    return False


def simulate(frames: int, seed: int) -> dict:
    run = RunState(rng=RNGService(seed), high_scores=MemoryHighScoreStore())
    run.start()
    frame_ms = []
    live_entities = []
    live_particles = []
    runs = 1
    best_distance = 0.0

    for _ in range(frames):
        if run.game_over:
            best_distance = max(best_distance, run.distance)
            run.on_restart_request()
            runs += 1
        if run.player.grounded and should_jump(run):
            run.on_jump_press()
        elif not run.player.grounded and run.player.vy > 0:
            run.on_jump_release()

        start = time.perf_counter()
        run.on_frame_tick()
        frame_ms.append((time.perf_counter() - start) * 1000.0)
        live_entities.append(len(run.obstacles) + len(run.pickups))
        live_particles.append(len(run.particles.live))

    best_distance = max(best_distance, run.distance)
    return {
        "frames": frames,
        "runs": runs,
        "best_distance": best_distance,
        "high_score": run.high_score,
        "avg_ms": statistics.mean(frame_ms),
        "p95_ms": sorted(frame_ms)[int(len(frame_ms) * 0.95) - 1],
        "avg_entities": statistics.mean(live_entities),
        "max_particles": max(live_particles),
        "pool_capacity": run.particles.capacity,
        "particles_created": run.particles.created,
    }


def main():
    frames = int(sys.argv[1]) if len(sys.argv) > 1 else 20000
    seed = int(sys.argv[2]) if len(sys.argv) > 2 else 1
    set_level("WARN", "collision")
    report = simulate(frames, seed)

    print("\n" + "=" * 40)
    print(" SIMULATION REPORT ")
    print("=" * 40)
    print(f"Frames:            {report['frames']}")
    print(f"Runs:              {report['runs']}")
    print(f"Best distance:     {report['best_distance']:.0f} m")
    print(f"Best score:        {report['high_score']}")
    print("-" * 40)
    print(f"Avg frame cost:    {report['avg_ms']:.4f} ms")
    print(f"95th percentile:   {report['p95_ms']:.4f} ms")
    print(f"Avg live entities: {report['avg_entities']:.1f}")
    print(f"Peak particles:    {report['max_particles']}")
    print(f"Pool capacity:     {report['pool_capacity']} (created {report['particles_created']})")
    print("=" * 40 + "\n")


if __name__ == "__main__":
    main()
