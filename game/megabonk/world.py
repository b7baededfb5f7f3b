"""
World - the whole game state and its per-frame update
-----------------------------------------------------
- Player moves with the polled input and stays inside the room
- Enemies chase the player once inside the detection radius
- Bonk: a short arc-shaped melee swing, each enemy hit at most once per swing
- Defeated enemies drop loot orbs that fade out after a fixed lifetime

Nothing in here draws or reads the keyboard; input arrives as a FrameInput
and the renderer only reads the public attributes.
"""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence, Tuple

from .config import GAME_CONFIG, ENEMY_START_POSITIONS, FLOOR_PATCHES
from .controls import FrameInput, IDLE
from .entities import Player, Enemy, LootOrb, BonkState, FloorPatch
from .utils import clamp, normalize, circle_collide, rand_range


class World:
    """Explicit world state, mutated only by ``update``"""

    def __init__(
        self,
        width: float = GAME_CONFIG["width"],
        height: float = GAME_CONFIG["height"],
        player_speed: float = GAME_CONFIG["player_speed"],
        player_radius: float = GAME_CONFIG["player_radius"],
        enemy_speed: float = GAME_CONFIG["enemy_speed"],
        enemy_radius: float = GAME_CONFIG["enemy_radius"],
        enemy_hp: int = GAME_CONFIG["enemy_hp"],
        detection_radius: float = GAME_CONFIG["detection_radius"],
        bonk_damage: int = GAME_CONFIG["bonk_damage"],
        bonk_duration_ms: float = GAME_CONFIG["bonk_duration_ms"],
        bonk_arc_deg: float = GAME_CONFIG["bonk_arc_deg"],
        bonk_reach: float = GAME_CONFIG["bonk_reach"],
        loot_radius: float = GAME_CONFIG["loot_radius"],
        loot_lifetime_ms: float = GAME_CONFIG["loot_lifetime_ms"],
        loot_jitter: float = GAME_CONFIG["loot_jitter"],
        enemy_positions: Optional[Sequence[Tuple[float, float]]] = None,
        floor_patches: Optional[Sequence[Tuple[float, float, float, float]]] = None,
    ):
        if min(width, height) < 2 * max(player_radius, enemy_radius):
            raise ValueError(f"Room {width}x{height} is smaller than an entity")
        if player_speed < 0 or enemy_speed < 0:
            raise ValueError("Speeds must be non-negative")
        if bonk_duration_ms <= 0 or loot_lifetime_ms <= 0:
            raise ValueError("Bonk duration and loot lifetime must be positive")
        if not 0 < bonk_arc_deg <= 360:
            raise ValueError(f"Bonk arc must be in (0, 360], got {bonk_arc_deg}")

        # Room
        self.width = width
        self.height = height

        # Gameplay config
        self.player_speed = player_speed
        self.enemy_speed = enemy_speed
        self.enemy_radius = enemy_radius
        self.enemy_hp = enemy_hp
        self.detection_radius = detection_radius
        self.bonk_damage = bonk_damage
        self.bonk_duration_ms = bonk_duration_ms
        self.bonk_arc_deg = bonk_arc_deg
        self.bonk_reach = bonk_reach
        self.loot_radius = loot_radius
        self.loot_lifetime_ms = loot_lifetime_ms
        self.loot_jitter = loot_jitter

        # cos(half arc) is compared against a normalized dot product
        self.cos_half_arc = math.cos(math.radians(bonk_arc_deg) / 2)

        # World state
        self.player = Player(x=width * 0.5, y=height * 0.5, radius=player_radius)
        self.enemies: List[Enemy] = []
        self.loot_orbs: List[LootOrb] = []
        self.bonk = BonkState()
        self.floor_patches = [
            FloorPatch(*patch)
            for patch in (FLOOR_PATCHES if floor_patches is None else floor_patches)
        ]
        self._next_enemy_id = 1

        positions = ENEMY_START_POSITIONS if enemy_positions is None else enemy_positions
        for x, y in positions:
            self.spawn_enemy(x, y)

    # ----------------------------
    # Frame update
    # ----------------------------

    def update(self, dt: float, now_ms: float, frame_input: FrameInput = IDLE) -> Dict[str, int]:
        """Advance the world by ``dt`` seconds; ``now_ms`` is the frame timestamp.

        Returns counts of what happened this frame.
        """
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")

        events = {"hit": 0, "kill": 0, "loot": 0, "expired": 0}

        self._update_player(dt, frame_input)
        self._update_bonk(dt)
        if frame_input.attack:
            self.start_bonk()
        self._update_enemies(dt)
        self._handle_bonk_hits(now_ms, events)
        self._update_loot(now_ms, events)

        return events

    def _update_player(self, dt: float, frame_input: FrameInput):
        p = self.player
        mx, my = normalize(frame_input.move_x, frame_input.move_y)
        if mx != 0.0 or my != 0.0:
            p.facing_x, p.facing_y = mx, my

        p.x += mx * self.player_speed * dt
        p.y += my * self.player_speed * dt

        # Room bounds instead of real collision
        p.x, p.y = self._clamp_to_room(p.x, p.y, p.radius)

    def _update_bonk(self, dt: float):
        if not self.bonk.active:
            return
        self.bonk.timer_ms -= dt * 1000.0
        if self.bonk.timer_ms <= 0:
            self.bonk.active = False
            self.bonk.timer_ms = 0.0
            self.bonk.hit_ids.clear()

    def start_bonk(self) -> bool:
        """Begin a swing in the facing direction; ignored mid-swing"""
        if self.bonk.active:
            return False

        dx, dy = normalize(self.player.facing_x, self.player.facing_y)
        if dx == 0.0 and dy == 0.0:
            dx, dy = 1.0, 0.0

        self.bonk.active = True
        self.bonk.timer_ms = self.bonk_duration_ms
        self.bonk.dir_x = dx
        self.bonk.dir_y = dy
        self.bonk.hit_ids.clear()
        return True

    def _update_enemies(self, dt: float):
        px, py = self.player.x, self.player.y

        for e in self.enemies:
            dx = px - e.x
            dy = py - e.y
            dist = math.hypot(dx, dy)

            if dist < self.detection_radius:
                # Zero distance divides by 1 and leaves the enemy in place
                step = self.enemy_speed * dt / (dist or 1.0)
                e.x += dx * step
                e.y += dy * step

            e.x, e.y = self._clamp_to_room(e.x, e.y, e.radius)

    def in_bonk_arc(self, e: Enemy) -> bool:
        """Whether ``e`` lies inside the current swing's reach and arc"""
        dx = e.x - self.player.x
        dy = e.y - self.player.y
        dist = math.hypot(dx, dy)
        if dist > self.bonk_reach + e.radius:
            return False
        dot = (dx * self.bonk.dir_x + dy * self.bonk.dir_y) / (dist or 1.0)
        return dot >= self.cos_half_arc

    def _handle_bonk_hits(self, now_ms: float, events: Dict[str, int]):
        if not self.bonk.active:
            return

        # Reverse order so removal keeps the remaining indices valid
        for i in range(len(self.enemies) - 1, -1, -1):
            e = self.enemies[i]
            if e.id in self.bonk.hit_ids:
                continue
            if not self.in_bonk_arc(e):
                continue

            self.bonk.hit_ids.add(e.id)
            e.hp -= self.bonk_damage
            events["hit"] += 1
            if e.hp <= 0:
                self.spawn_loot(e.x, e.y, now_ms)
                del self.enemies[i]
                events["kill"] += 1

    def _update_loot(self, now_ms: float, events: Dict[str, int]):
        p = self.player
        for i in range(len(self.loot_orbs) - 1, -1, -1):
            orb = self.loot_orbs[i]

            if now_ms > orb.expires_at:
                del self.loot_orbs[i]
                events["expired"] += 1
                continue

            if circle_collide(orb.x, orb.y, orb.radius, p.x, p.y, p.radius):
                del self.loot_orbs[i]
                p.loot += 1
                events["loot"] += 1

    # ----------------------------
    # Spawning
    # ----------------------------

    def spawn_enemy(self, x: float, y: float) -> Enemy:
        enemy = Enemy(
            id=self._next_enemy_id,
            x=x,
            y=y,
            radius=self.enemy_radius,
            hp=self.enemy_hp,
        )
        self._next_enemy_id += 1
        self.enemies.append(enemy)
        return enemy

    def spawn_loot(self, x: float, y: float, now_ms: float) -> LootOrb:
        j = self.loot_jitter
        orb = LootOrb(
            x=x + rand_range(-j, j),
            y=y + rand_range(-j, j),
            radius=self.loot_radius,
            expires_at=now_ms + self.loot_lifetime_ms,
        )
        self.loot_orbs.append(orb)
        return orb

    # ----------------------------
    # Helpers
    # ----------------------------

    def _clamp_to_room(self, x: float, y: float, r: float) -> Tuple[float, float]:
        return clamp(x, r, self.width - r), clamp(y, r, self.height - r)

    def remaining_life(self, orb: LootOrb, now_ms: float) -> float:
        """Fraction of an orb's lifetime still left, in [0, 1]"""
        return clamp((orb.expires_at - now_ms) / self.loot_lifetime_ms, 0.0, 1.0)
