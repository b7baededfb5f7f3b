"""
Game entity dataclasses
"""

from dataclasses import dataclass, field
from typing import Set


@dataclass
class Player:
    """Player avatar"""
    x: float
    y: float
    radius: float = 10.0
    facing_x: float = 1.0
    facing_y: float = 0.0
    loot: int = 0


@dataclass
class Enemy:
    """Enemy that chases the player once it is close enough"""
    id: int
    x: float
    y: float
    radius: float = 9.0
    hp: int = 3


@dataclass
class LootOrb:
    """Pickup dropped by a defeated enemy"""
    x: float
    y: float
    radius: float = 6.0
    expires_at: float = 0.0  # ms, same clock as World.update


@dataclass
class BonkState:
    """Melee swing state; one per world"""
    active: bool = False
    timer_ms: float = 0.0
    dir_x: float = 1.0
    dir_y: float = 0.0
    hit_ids: Set[int] = field(default_factory=set)


@dataclass(frozen=True)
class FloorPatch:
    """Decorative floor rectangle, no collision"""
    x: float
    y: float
    width: float
    height: float
