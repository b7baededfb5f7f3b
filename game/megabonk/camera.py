"""
View math shared by the window and the tests (no arcade import here)
"""

from __future__ import annotations

import math
from typing import Tuple

from .config import LOOT_MIN_ALPHA
from .entities import LootOrb
from .utils import clamp


def camera_offset(world, screen_w: float, screen_h: float) -> Tuple[float, float]:
    """Offset that puts the player at the center of the screen"""
    return screen_w / 2 - world.player.x, screen_h / 2 - world.player.y


def world_to_screen(x: float, y: float, offset: Tuple[float, float], screen_h: float) -> Tuple[float, float]:
    """World space is y-down, arcade draws y-up"""
    ox, oy = offset
    return round(x + ox), screen_h - round(y + oy)


def loot_alpha(world, orb: LootOrb, now_ms: float, min_alpha: float = LOOT_MIN_ALPHA) -> float:
    """Opacity fades with remaining lifetime but never below ``min_alpha``"""
    return clamp(max(min_alpha, world.remaining_life(orb, now_ms)), 0.0, 1.0)


def bonk_arc_angles(world) -> Tuple[float, float]:
    """(start, end) of the swing arc in degrees, counter-clockwise in y-up space"""
    # Flipping y negates the angle
    angle = -math.degrees(math.atan2(world.bonk.dir_y, world.bonk.dir_x))
    half = world.bonk_arc_deg / 2
    return angle - half, angle + half


def hud_lines(world):
    """Text rows of the heads-up overlay, top to bottom"""
    return [
        "Mega Bonk",
        f"Loot: {world.player.loot}",
        f"Enemies: {len(world.enemies)}",
    ]
