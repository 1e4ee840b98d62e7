"""Gameplay and tuning constants.

Centralizes numeric tuning values so progression curves, spawn cadence and
motion parameters can be adjusted in one place. Distances are in meters,
speeds in pixels per frame, durations in frames.
"""

import math

# Layout
GROUND_OFFSET = 0.8  # ground line as a fraction of viewport height
PLAYER_X_OFFSET = 0.15  # player x as a fraction of viewport width
DEFAULT_VIEWPORT = (1280, 720)

# Entity sizes
PLAYER_SIZE = 60
OBSTACLE_SIZE = 55
OBSTACLE_WIDTH_FACTOR = {"A": 1.1, "B": 1.0}
PICKUP_WIDTH = 70
PICKUP_HEIGHT = 35

# Collision boxes (fraction of visual size)
PLAYER_HITBOX_W = 0.6
PLAYER_HITBOX_H = 0.9
OBSTACLE_HITBOX_SCALE = 0.9

# Player physics
GRAVITY = 0.6  # acceleration per frame (positive down)
JUMP_FORCE = -13  # initial Y velocity for a jump
VARIABLE_JUMP_DAMPING = 0.5  # upward velocity multiplier on early release

# Progression
BASE_SPEED = 5.0
SPEED_LOG_BASE = 3.0
SPEED_LOG_SCALE = 0.015
SPAWN_LOG_BASE = 20
SPAWN_LOG_SCALE = 0.012
DISTANCE_PER_SPEED = 0.1  # meters gained per frame = speed * this

# Spawn cadence (frames)
BASE_OBSTACLE_INTERVAL = 120
MIN_OBSTACLE_INTERVAL = 40
BASE_PICKUP_INTERVAL = 160
MIN_PICKUP_INTERVAL = 60
RARE_PICKUP_INTERVAL_FACTOR = 5
COMMON_PICKUP_GATE = 0.3  # spawn only when random() > this
RARE_PICKUP_GATE = 0.6
RARE_ROLL_CHANCE = 0.15  # chance a scheduled common pickup rolls rare
AERIAL_CHANCE = 0.3
PICKUP_LOW_CHANCE = 0.4  # chance a pickup spawns near the ground

# Vertical oscillation
VERTICAL_MOVE_START_DISTANCE = 1000
VERTICAL_MOVE_CHANCE = 0.35
VERTICAL_MOVE_RANGE = PLAYER_SIZE * 1.8
VERTICAL_MOVE_SPEED = 0.04
AERIAL_CLEARANCE = 1.1  # gap under aerial obstacles, in player sizes

# Motion
WOBBLE_SPEED = 0.05
WOBBLE_SPEED_GAIN = 0.005
WOBBLE_AMOUNT = 0.1
WOBBLE_AMOUNT_GAIN = 0.01
OBSTACLE_HOVER_SPEED = 0.1
OBSTACLE_HOVER_SPEED_GAIN = 0.008
OBSTACLE_HOVER_AMOUNT = 0.5
OBSTACLE_HOVER_AMOUNT_GAIN = 0.1
OSCILLATION_SPEED_GAIN = 0.001
PICKUP_HOVER_SPEED = 0.1
PICKUP_HOVER_SPEED_GAIN = 0.005
PICKUP_HOVER_AMOUNT = 3
PICKUP_TILT_SPEED = 0.03
PICKUP_TILT_SPEED_GAIN = 0.002
PICKUP_TILT_AMOUNT = 0.05
OBSTACLE_OFFSCREEN_MARGIN = 2  # in obstacle sizes
TWO_PI = math.pi * 2

# Scoring
PICKUP_VALUES = {"common": 1, "rare": 5}

# Particles
PARTICLE_GRAVITY = 0.1
PARTICLE_LIFETIME = 40
PARTICLE_MIN_VISIBLE_ALPHA = 5
COLLECT_PARTICLES = 15
COLLECT_VX_RANGE = (-3, 3)
COLLECT_VY_RANGE = (-5, 0)
COLLECT_SIZE_RANGE = (3, 8)
CRASH_PARTICLES = 30
CRASH_LIFETIME = int(PARTICLE_LIFETIME * 1.5)
CRASH_VX_RANGE = (-5, 5)
CRASH_VY_RANGE = (-8, 2)
CRASH_SIZE_RANGE = (5, 15)

# Colors (RGB)
COLOR_PLAYER = (0, 125, 65)
COLOR_PLAYER_GLOW = (40, 180, 100)
COLOR_OBSTACLE = {"A": (255, 180, 0), "B": (30, 120, 220)}
COLOR_PICKUP = (180, 180, 180)
COLOR_PICKUP_HIGHLIGHT = (220, 220, 220)
COLOR_PICKUP_RARE = (255, 215, 0)
COLOR_GROUND = (80, 65, 45)
COLOR_GROUND_STROKE = (60, 45, 35)
COLOR_SKY = (135, 206, 250)
COLOR_CLOUD = (255, 255, 255, 200)
COLOR_MOUNTAIN = (110, 90, 70)
COLOR_SNOW = (240, 240, 250)
COLOR_UI_BACKGROUND = (0, 0, 0, 180)
COLOR_UI_TEXT = (255, 255, 255)

# Scenery
CLOUD_SPACING = 300
MOUNTAIN_SPACING = 200
GROUND_TILE_WIDTH = 80
MOUNTAIN_PARALLAX = 0.2

__all__ = [name for name in globals().keys() if name.isupper()]
