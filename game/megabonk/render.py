"""
Arcade window: owns the frame loop for interactive play and paints the world.

arcade calls on_update then on_draw once per frame; only on_update touches the
world, on_draw just reads it.
"""

from __future__ import annotations

from typing import Optional

import arcade

from .camera import camera_offset, world_to_screen, loot_alpha, bonk_arc_angles, hud_lines
from .config import SCREEN_WIDTH, SCREEN_HEIGHT, DEFAULT_SCALE, COLORS
from .controls import InputState
from .world import World

KEY_NAMES = {
    arcade.key.UP: "arrowup",
    arcade.key.DOWN: "arrowdown",
    arcade.key.LEFT: "arrowleft",
    arcade.key.RIGHT: "arrowright",
    arcade.key.ESCAPE: "escape",
}


def key_name(symbol: int) -> Optional[str]:
    """Normalized name for an arcade key symbol"""
    if symbol in KEY_NAMES:
        return KEY_NAMES[symbol]
    # pyglet letter symbols are the lower-case ASCII codes
    if arcade.key.A <= symbol <= arcade.key.Z:
        return chr(symbol)
    return None


class BonkWindow(arcade.Window):
    """Arcade window for playing / watching Mega Bonk"""

    def __init__(
        self,
        world: World,
        scale: int = DEFAULT_SCALE,
        input_state: Optional[InputState] = None,
        interactive: bool = True,
    ):
        super().__init__(SCREEN_WIDTH * scale, SCREEN_HEIGHT * scale, "Mega Bonk")
        self.world = world
        self.pixel_scale = scale
        self.input = input_state if input_state is not None else InputState()
        self.interactive = interactive
        # ms since the window opened; drives dt and loot expiry
        self.now_ms = 0.0
        self.background_color = COLORS["floor"]

    # ----------------------------
    # Input
    # ----------------------------

    def on_key_press(self, symbol: int, modifiers: int):
        name = key_name(symbol)
        if name == "escape":
            # A window driven by BonkEnv is closed by env.close()
            if self.interactive:
                self.close()
            return
        if name is not None:
            self.input.press(name)

    def on_key_release(self, symbol: int, modifiers: int):
        name = key_name(symbol)
        if name is not None:
            self.input.release(name)

    # ----------------------------
    # Frame loop
    # ----------------------------

    def on_update(self, delta_time: float):
        if not self.interactive:
            return
        self.now_ms += delta_time * 1000.0
        self.world.update(delta_time, self.now_ms, self.input.sample())

    def on_draw(self):
        """Draw the current game state"""
        self.clear()
        world = self.world
        offset = camera_offset(world, SCREEN_WIDTH, SCREEN_HEIGHT)

        self._draw_map(offset)
        self._draw_loot(offset)

        for e in world.enemies:
            self._circle(e.x, e.y, e.radius, COLORS["enemy"], offset)

        self._draw_player(offset)
        self._draw_hud()

    def _draw_map(self, offset):
        s = self.pixel_scale
        for patch in self.world.floor_patches:
            left, top = world_to_screen(patch.x, patch.y, offset, SCREEN_HEIGHT)
            arcade.draw_lrbt_rectangle_filled(
                left * s, (left + patch.width) * s,
                (top - patch.height) * s, top * s,
                COLORS["tile"],
            )

        # Room outline for orientation
        left, top = world_to_screen(0, 0, offset, SCREEN_HEIGHT)
        arcade.draw_lrbt_rectangle_outline(
            left * s, (left + self.world.width) * s,
            (top - self.world.height) * s, top * s,
            COLORS["bounds"], 2 * s,
        )

    def _draw_loot(self, offset):
        r, g, b = COLORS["loot"]
        for orb in self.world.loot_orbs:
            alpha = int(255 * loot_alpha(self.world, orb, self.now_ms))
            self._circle(orb.x, orb.y, orb.radius, (r, g, b, alpha), offset)

    def _draw_player(self, offset):
        world = self.world
        p = world.player
        if world.bonk.active:
            s = self.pixel_scale
            cx, cy = world_to_screen(p.x, p.y, offset, SCREEN_HEIGHT)
            start, end = bonk_arc_angles(world)
            diameter = 2 * world.bonk_reach * s
            arcade.draw_arc_outline(
                cx * s, cy * s, diameter, diameter,
                COLORS["bonk"], start, end, 4 * s,
            )
        self._circle(p.x, p.y, p.radius, COLORS["player"], offset)

    def _draw_hud(self):
        s = self.pixel_scale
        x0 = 8 * s
        top = self.height - 6 * s
        for i, line in enumerate(hud_lines(self.world)):
            arcade.draw_text(line, x0, top - i * 12 * s, COLORS["hud"], 8 * s, anchor_y="top")
        if self.world.bonk.active:
            arcade.draw_text("BONK!", self.width - 60 * s, top, COLORS["hud_bonk"], 8 * s, anchor_y="top")

    def _circle(self, x, y, radius, color, offset):
        s = self.pixel_scale
        sx, sy = world_to_screen(x, y, offset, SCREEN_HEIGHT)
        arcade.draw_circle_filled(sx * s, sy * s, radius * s, color)


def play(scale: int = DEFAULT_SCALE, world: Optional[World] = None):
    """Open the window and run until it is closed"""
    window = BonkWindow(world if world is not None else World(), scale=scale)
    arcade.run()
    return window.world
