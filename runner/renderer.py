"""Frame renderer.

Draws a ``RunSnapshot`` with pygame primitives and the optional image
handles. It never touches a RunState directly, so the simulation can run
without a display.

Layer order (bottom -> top):
1. Sky, mountains, clouds, ground
2. Pickups
3. Player
4. Obstacles
5. Particles (alpha layer)
6. HUD, then the start or game-over overlay

``capture_sequence`` records the executed layers for tests instead of
sampling pixels.
"""

from __future__ import annotations

import math
from typing import Dict, List, Optional

import pygame

from runner.constants import (
    COLOR_CLOUD,
    COLOR_GROUND,
    COLOR_GROUND_STROKE,
    COLOR_MOUNTAIN,
    COLOR_OBSTACLE,
    COLOR_PICKUP,
    COLOR_PICKUP_RARE,
    COLOR_PLAYER,
    COLOR_PLAYER_GLOW,
    COLOR_SKY,
    COLOR_SNOW,
    COLOR_UI_BACKGROUND,
    COLOR_UI_TEXT,
    PARTICLE_MIN_VISIBLE_ALPHA,
)
from runner.snapshot import RunSnapshot


class Renderer:
    def __init__(self, images: Optional[Dict[str, Optional[pygame.Surface]]] = None) -> None:
        self.images = images or {}
        self._fonts: Dict[int, pygame.font.Font] = {}
        self._overlay: Optional[pygame.Surface] = None
        self._scaled: Dict[tuple, pygame.Surface] = {}
        self._ticks = 0

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def _image(self, key: str, w: float, h: float) -> Optional[pygame.Surface]:
        img = self.images.get(key)
        if img is None:
            return None
        cache_key = (key, int(w), int(h))
        scaled = self._scaled.get(cache_key)
        if scaled is None:
            scaled = pygame.transform.smoothscale(img, (max(1, int(w)), max(1, int(h))))
            self._scaled[cache_key] = scaled
        return scaled

    def _alpha_layer(self, target: pygame.Surface) -> pygame.Surface:
        if self._overlay is None or self._overlay.get_size() != target.get_size():
            self._overlay = pygame.Surface(target.get_size(), pygame.SRCALPHA)
        self._overlay.fill((0, 0, 0, 0))
        return self._overlay

    # --- Entry point ---------------------------------------------------------
    def render(self, snap: RunSnapshot, target: pygame.Surface, capture_sequence: Optional[List[str]] = None) -> None:
        seq = capture_sequence
        self._ticks += 1
        self._draw_background(snap, target)
        if seq is not None:
            seq.append("background")
        if snap.started:
            self._draw_pickups(snap, target)
            self._draw_player(snap, target)
            self._draw_obstacles(snap, target)
            self._draw_particles(snap, target)
            if seq is not None:
                seq.extend(["pickups", "player", "obstacles", "particles"])
            if not snap.game_over:
                self._draw_hud(snap, target)
                if seq is not None:
                    seq.append("hud")
            else:
                self._draw_game_over(snap, target)
                if seq is not None:
                    seq.append("game_over")
        else:
            self._draw_start(snap, target)
            if seq is not None:
                seq.append("start")

    # --- Layers --------------------------------------------------------------
    def _draw_background(self, snap: RunSnapshot, target: pygame.Surface) -> None:
        target.fill(COLOR_SKY)
        gy = snap.ground_y
        for x, height, width in snap.scenery.mountains:
            peak = (x + width / 2, gy - height)
            pygame.draw.polygon(target, COLOR_MOUNTAIN, [(x, gy), peak, (x + width, gy)])
            cap = height / 5
            pygame.draw.polygon(
                target,
                COLOR_SNOW,
                [(peak[0] - width / 10, peak[1] + cap), peak, (peak[0] + width / 10, peak[1] + cap)],
            )
        layer = self._alpha_layer(target)
        for x, y, w, h in snap.scenery.clouds:
            pygame.draw.ellipse(layer, COLOR_CLOUD, pygame.Rect(x - w / 2, y - h / 2, w, h))
            pygame.draw.ellipse(layer, COLOR_CLOUD, pygame.Rect(x - w * 0.5, y - h * 0.45, w * 0.6, h * 0.7))
            pygame.draw.ellipse(layer, COLOR_CLOUD, pygame.Rect(x - w * 0.15, y - h * 0.4, w * 0.7, h * 0.6))
        target.blit(layer, (0, 0))
        pygame.draw.rect(target, COLOR_GROUND, pygame.Rect(0, gy, snap.width, snap.height - gy))
        for x, width in snap.scenery.tiles:
            pygame.draw.line(target, COLOR_GROUND_STROKE, (x, gy), (x + width, gy))

    def _draw_pickups(self, snap: RunSnapshot, target: pygame.Surface) -> None:
        for k in snap.pickups:
            color = COLOR_PICKUP_RARE if k.tier == "rare" else COLOR_PICKUP
            left, top = k.x - k.width / 2, k.y - k.height / 2
            pygame.draw.rect(target, color, pygame.Rect(left, top, k.width, 5))
            pygame.draw.rect(target, color, pygame.Rect(left, top + k.height - 5, k.width, 5))
            segments = 5
            seg_w = k.width / segments
            for i in range(segments):
                x1, x2 = left + seg_w * i, left + seg_w * (i + 1)
                if i % 2 == 0:
                    pygame.draw.line(target, color, (x1, top + k.height - 5), (x2, top + 5), 2)
                else:
                    pygame.draw.line(target, color, (x1, top + 5), (x2, top + k.height - 5), 2)

    def _draw_player(self, snap: RunSnapshot, target: pygame.Surface) -> None:
        p = snap.player
        size = p.size * 1.1
        img = self._image("player", size, size)
        if img is not None:
            angle = 0.0 if p.grounded else math.degrees(math.sin(p.jump_animation) * 0.2)
            rotated = pygame.transform.rotate(img, -angle)
            target.blit(rotated, rotated.get_rect(center=(p.x, p.y)))
        else:
            color = COLOR_PLAYER if p.grounded else COLOR_PLAYER_GLOW
            pygame.draw.circle(target, color, (int(p.x), int(p.y)), int(p.size / 2))

    def _draw_obstacles(self, snap: RunSnapshot, target: pygame.Surface) -> None:
        for o in snap.obstacles:
            img = self._image(f"obstacle/{o.variant}", o.size * 1.2, o.size)
            if img is not None:
                rotated = pygame.transform.rotate(img, -math.degrees(o.rotation))
                target.blit(rotated, rotated.get_rect(center=(o.x, o.y)))
            else:
                rect = pygame.Rect(0, 0, o.width, o.size)
                rect.center = (int(o.x), int(o.y))
                pygame.draw.rect(target, COLOR_OBSTACLE[o.variant], rect)

    def _draw_particles(self, snap: RunSnapshot, target: pygame.Surface) -> None:
        layer = self._alpha_layer(target)
        for q in snap.particles:
            if q.color[3] > PARTICLE_MIN_VISIBLE_ALPHA:
                pygame.draw.circle(layer, q.color, (int(q.x), int(q.y)), max(1, int(q.size / 2)))
        target.blit(layer, (0, 0))

    def _draw_hud(self, snap: RunSnapshot, target: pygame.Surface) -> None:
        layer = self._alpha_layer(target)
        pygame.draw.rect(layer, COLOR_UI_BACKGROUND, pygame.Rect(0, 0, snap.width, 50))
        target.blit(layer, (0, 0))
        font = self._font(32)
        score = font.render(f"Joists: {snap.score}", True, COLOR_UI_TEXT)
        target.blit(score, score.get_rect(midleft=(20, 25)))
        dist = font.render(f"Distance: {int(snap.distance)}m", True, COLOR_UI_TEXT)
        target.blit(dist, dist.get_rect(center=(snap.width / 2, 25)))
        best = font.render(f"Best: {snap.high_score}", True, COLOR_UI_TEXT)
        target.blit(best, best.get_rect(midright=(snap.width - 20, 25)))

    def _dim(self, target: pygame.Surface, alpha: int) -> None:
        layer = self._alpha_layer(target)
        layer.fill((0, 0, 0, alpha))
        target.blit(layer, (0, 0))

    def _draw_start(self, snap: RunSnapshot, target: pygame.Surface) -> None:
        self._dim(target, 150)
        title = self._font(min(84, snap.width // 8)).render("JOIST RUNNER", True, COLOR_PLAYER)
        target.blit(title, title.get_rect(center=(snap.width / 2, snap.height / 3)))
        hint = self._font(min(32, snap.width // 20)).render("Tap or press SPACE to start", True, COLOR_UI_TEXT)
        target.blit(hint, hint.get_rect(center=(snap.width / 2, snap.height * 0.65)))
        if snap.high_score > 0:
            best = self._font(28).render(f"High Score: {snap.high_score}", True, COLOR_UI_TEXT)
            target.blit(best, best.get_rect(center=(snap.width / 2, snap.height * 0.75)))

    def _draw_game_over(self, snap: RunSnapshot, target: pygame.Surface) -> None:
        self._dim(target, 180)
        big = self._font(min(84, snap.width // 8))
        body = self._font(min(32, snap.width // 20))
        title = big.render("GAME OVER", True, COLOR_UI_TEXT)
        target.blit(title, title.get_rect(center=(snap.width / 2, snap.height / 3)))
        lines = [f"Joists: {snap.score}", f"Distance: {int(snap.distance)}m"]
        for i, text in enumerate(lines):
            surf = body.render(text, True, COLOR_UI_TEXT)
            target.blit(surf, surf.get_rect(center=(snap.width / 2, snap.height / 2 - 20 + i * 30)))
        if snap.score >= snap.high_score and snap.score > 0:
            msg = self._font(min(52, snap.width // 15)).render("NEW HIGH SCORE!", True, COLOR_PLAYER)
        else:
            msg = body.render(f"Best: {snap.high_score}", True, COLOR_UI_TEXT)
        target.blit(msg, msg.get_rect(center=(snap.width / 2, snap.height / 2 + 60)))
        if self._ticks % 60 < 30:
            hint = body.render("Tap or press SPACE to restart", True, COLOR_UI_TEXT)
            target.blit(hint, hint.get_rect(center=(snap.width / 2, snap.height * 0.75)))


__all__ = ["Renderer"]
