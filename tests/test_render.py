import os

import pytest

os.environ.setdefault("ARCADE_HEADLESS", "1")
arcade = pytest.importorskip("arcade")

from game.megabonk.bonk_env import BonkEnv  # noqa: E402
from game.megabonk.config import SCREEN_WIDTH, SCREEN_HEIGHT  # noqa: E402
from game.megabonk.render import BonkWindow, key_name  # noqa: E402
from game.megabonk.world import World  # noqa: E402


@pytest.fixture
def window():
    win = BonkWindow(World(), scale=2)
    yield win
    win.close()


def test_key_names():
    assert key_name(arcade.key.J) == "j"
    assert key_name(arcade.key.W) == "w"
    assert key_name(arcade.key.UP) == "arrowup"
    assert key_name(arcade.key.ESCAPE) == "escape"
    assert key_name(arcade.key.SPACE) is None


def test_window_size_follows_pixel_scale(window):
    assert window.pixel_scale == 2
    assert (window.width, window.height) == (SCREEN_WIDTH * 2, SCREEN_HEIGHT * 2)


def test_key_press_update_and_draw(window):
    window.on_key_press(arcade.key.J, 0)
    window.on_key_press(arcade.key.D, 0)
    window.on_update(1 / 60)

    assert window.world.bonk.active
    assert window.world.player.x > 320
    assert window.now_ms > 0

    window.on_key_release(arcade.key.D, 0)
    window.world.spawn_loot(300, 240, window.now_ms)
    window.on_draw()


def test_non_interactive_window_ignores_update_and_escape():
    win = BonkWindow(World(), interactive=False)
    try:
        win.on_key_press(arcade.key.J, 0)
        win.on_update(1 / 60)
        assert not win.world.bonk.active
        assert win.now_ms == 0.0

        win.on_key_press(arcade.key.ESCAPE, 0)
        win.on_draw()
    finally:
        win.close()


def test_env_human_render_steps():
    env = BonkEnv(render_mode="human", max_steps=5)
    env.reset(seed=0)
    try:
        for _ in range(5):
            *_, truncated, info = env.step([2, 1, 1])
        assert truncated
        assert env._window is not None
        assert env._window.world is env.world
        assert env._window.now_ms == env.now_ms
    finally:
        env.close()
    assert env._window is None
