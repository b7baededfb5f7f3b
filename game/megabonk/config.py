"""
Tuning knobs and visual constants for Mega Bonk
"""

# Gameplay / world parameters, passed straight to World(**GAME_CONFIG)
GAME_CONFIG = {
    "width": 640,            # room size in world units
    "height": 480,
    "player_speed": 110.0,   # units per second
    "player_radius": 10.0,
    "enemy_speed": 70.0,
    "enemy_radius": 9.0,
    "enemy_hp": 3,
    "detection_radius": 140.0,
    "bonk_damage": 3,        # single bonk defeats an enemy
    "bonk_duration_ms": 180.0,
    "bonk_arc_deg": 80.0,
    "bonk_reach": 34.0,
    "loot_radius": 6.0,
    "loot_lifetime_ms": 6000.0,
    "loot_jitter": 6.0,
}

# Logical resolution of the visible surface; the window is an integer multiple
SCREEN_WIDTH = 320
SCREEN_HEIGHT = 180
DEFAULT_SCALE = 3

ENEMY_START_POSITIONS = [
    (140.0, 140.0),
    (420.0, 320.0),
    (260.0, 200.0),
]

# (x, y, width, height) in world units
FLOOR_PATCHES = [
    (80.0, 80.0, 200.0, 140.0),
    (300.0, 120.0, 220.0, 100.0),
    (160.0, 260.0, 260.0, 120.0),
]

COLORS = {
    "floor": (29, 35, 51),
    "tile": (38, 45, 64),
    "bounds": (58, 63, 90),
    "player": (103, 255, 143),
    "enemy": (255, 98, 98),
    "loot": (255, 217, 102),
    "bonk": (255, 255, 255, 89),  # 0.35 alpha
    "hud": (242, 245, 255),
    "hud_bonk": (255, 239, 153),
}

LOOT_MIN_ALPHA = 0.2

# Normalized key name -> action
KEY_BINDINGS = {
    "up": ("w", "arrowup"),
    "down": ("s", "arrowdown"),
    "left": ("a", "arrowleft"),
    "right": ("d", "arrowright"),
    "attack": ("j",),
}

# ==============================================================================
# ENVIRONMENT
# ==============================================================================

ENV_CONFIG = {
    "dt": 1 / 30,
    "max_steps": 1800,  # 60 seconds at 30 FPS
    "k_enemies": 3,
    "m_orbs": 3,
    "max_enemies": 6,
    "enemy_spawn_interval": 2.0,  # seconds; None disables respawn
    "min_spawn_distance": 160.0,
}

REWARD_CONFIG = {
    "R_KILL": 1.0,     # enemy defeated
    "R_LOOT": 2.0,     # orb picked up
    "R_HIT": 0.1,      # any bonk contact
    "R_EXPIRED": 0.2,  # penalty for letting an orb fade out
    "R_TIME": 0.001,
}
