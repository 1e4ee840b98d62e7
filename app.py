"""Application entry point.

Opens the pygame window, routes input to the RunState host callbacks and
renders one snapshot per fixed-timestep frame.
"""

from __future__ import annotations

import os

import pygame

from runner.input_router import InputRouter, dispatch
from runner.logger import get_logger
from runner.renderer import Renderer
from runner.run_state import RunState
from runner.settings import get_settings

log = get_logger("app")

ASSET_DIR = "assets"
IMAGE_PATHS = {
    "player": "player.png",
    "obstacle/A": "obstacle_a.png",
    "obstacle/B": "obstacle_b.png",
}


def load_images(base: str = ASSET_DIR):
    """Load image handles by logical name; missing files map to None."""
    images = {}
    for name, filename in IMAGE_PATHS.items():
        path = os.path.join(base, filename)
        try:
            images[name] = pygame.image.load(path).convert_alpha()
        except (pygame.error, FileNotFoundError) as e:
            log.warn("Image unavailable, drawing shapes instead", name, e)
            images[name] = None
    return images


def main():
    pygame.init()
    settings = get_settings()
    if settings.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode(settings.window_size, pygame.RESIZABLE)
    pygame.display.set_caption("Joist Runner")
    clock = pygame.time.Clock()

    width, height = screen.get_size()
    run = RunState(width, height)
    renderer = Renderer(load_images())
    router = InputRouter(settings.key_bindings)

    running = True
    while running:
        events = pygame.event.get()
        for e in events:
            if e.type == pygame.VIDEORESIZE:
                run.on_resize(e.w, e.h)
                if not settings.fullscreen:
                    settings.window_size = (e.w, e.h)
        running = dispatch(router.process(events), run)

        clock.tick(settings.fps)
        run.on_frame_tick()
        current_surface = pygame.display.get_surface()
        if current_surface is not None and current_surface != screen:
            screen = current_surface
        renderer.render(run.snapshot(), screen)
        pygame.display.flip()

    settings.save_settings()
    log.info("Shutting down", f"best={run.high_score}")
    pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    main()
