import math

from game.megabonk.camera import camera_offset, world_to_screen, loot_alpha, bonk_arc_angles, hud_lines
from game.megabonk.config import SCREEN_WIDTH, SCREEN_HEIGHT, GAME_CONFIG
from game.megabonk.controls import FrameInput
from game.megabonk.world import World


def test_camera_centers_player(empty_world):
    offset = camera_offset(empty_world, SCREEN_WIDTH, SCREEN_HEIGHT)
    assert offset == (160 - 320, 90 - 240)

    p = empty_world.player
    sx, sy = world_to_screen(p.x, p.y, offset, SCREEN_HEIGHT)
    assert (sx, sy) == (SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2)


def test_world_to_screen_flips_y(empty_world):
    offset = camera_offset(empty_world, SCREEN_WIDTH, SCREEN_HEIGHT)
    p = empty_world.player
    # 10 units further down in the world is 10 pixels lower on screen
    _, below = world_to_screen(p.x, p.y + 10, offset, SCREEN_HEIGHT)
    assert below == SCREEN_HEIGHT / 2 - 10


def test_camera_follows_player(empty_world):
    before = camera_offset(empty_world, SCREEN_WIDTH, SCREEN_HEIGHT)
    empty_world.update(0.5, 0.0, FrameInput(move_x=1.0))
    after = camera_offset(empty_world, SCREEN_WIDTH, SCREEN_HEIGHT)
    assert after[0] < before[0]
    assert after[1] == before[1]


def test_loot_alpha_fades_with_floor(empty_world):
    lifetime = GAME_CONFIG["loot_lifetime_ms"]
    orb = empty_world.spawn_loot(50, 50, 0.0)

    assert loot_alpha(empty_world, orb, 0.0) == 1.0
    assert math.isclose(loot_alpha(empty_world, orb, lifetime * 0.4), 0.6)
    assert loot_alpha(empty_world, orb, lifetime * 0.95) == 0.2
    assert loot_alpha(empty_world, orb, lifetime * 3) == 0.2


def test_bonk_arc_spans_direction(empty_world):
    half = GAME_CONFIG["bonk_arc_deg"] / 2

    empty_world.start_bonk()
    start, end = bonk_arc_angles(empty_world)
    assert math.isclose(start, -half) and math.isclose(end, half)

    # Facing down in world space is -90 degrees once y points up
    empty_world.bonk.dir_x, empty_world.bonk.dir_y = 0.0, 1.0
    start, end = bonk_arc_angles(empty_world)
    assert math.isclose(start, -90 - half) and math.isclose(end, -90 + half)


def test_hud_lines_report_counts():
    world = World()
    world.player.loot = 4
    assert hud_lines(world) == ["Mega Bonk", "Loot: 4", "Enemies: 3"]
