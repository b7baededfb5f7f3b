"""
BonkEnv - Mega Bonk as a Gymnasium environment
----------------------------------------------
- Same World as interactive play, stepped with a fixed dt
- Action space MultiDiscrete([3, 3, 2]): move x (-1/0/1), move y, attack
- Vector observation: player state + top-K nearest enemies + top-M nearest orbs
- Optional timed enemy respawn with a cap and a minimum distance from the player

Quick test:
    python -m game.megabonk.play --random-episode
"""

from __future__ import annotations

import random
import time
from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import GAME_CONFIG, ENV_CONFIG, REWARD_CONFIG
from .controls import FrameInput
from .utils import clamp, seed_everything, distance
from .world import World


class BonkEnv(gym.Env):
    """Headless (or watched) Mega Bonk"""

    metadata = {"render_modes": ["human"], "render_fps": 30}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        dt: float = ENV_CONFIG["dt"],
        max_steps: int = ENV_CONFIG["max_steps"],
        k_enemies: int = ENV_CONFIG["k_enemies"],
        m_orbs: int = ENV_CONFIG["m_orbs"],
        max_enemies: int = ENV_CONFIG["max_enemies"],
        enemy_spawn_interval: Optional[float] = ENV_CONFIG["enemy_spawn_interval"],
        min_spawn_distance: float = ENV_CONFIG["min_spawn_distance"],
        reward_config: Optional[Dict[str, float]] = None,
        world_config: Optional[Dict[str, Any]] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode: {render_mode}"
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")
        self.render_mode = render_mode

        self.dt = dt
        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.m_orbs = m_orbs
        self.max_enemies = max_enemies
        self.enemy_spawn_interval = enemy_spawn_interval
        self.min_spawn_distance = min_spawn_distance
        self.rewards = dict(REWARD_CONFIG if reward_config is None else reward_config)
        self.world_config = dict(GAME_CONFIG if world_config is None else world_config)

        # move x, move y: 0 -> -1, 1 -> 0, 2 -> +1; attack: 0/1
        self.action_space = spaces.MultiDiscrete([3, 3, 2])

        # Player: pos(2) facing(2) bonk active(1) bonk timer(1)
        # Each enemy: rel pos(2); each orb: rel pos(2) life left(1)
        obs_dim = 6 + self.k_enemies * 2 + self.m_orbs * 3
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None

        self.world: World = None  # type: ignore
        self.now_ms = 0.0
        self._step_count = 0
        self._spawn_timer = 0.0
        self._kills = 0
        self._events: Dict[str, int] = {}

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        self.world = World(**self.world_config)
        self.now_ms = 0.0
        self._step_count = 0
        self._spawn_timer = 0.0
        self._kills = 0
        self._events = {}

        return self._get_obs(), self._get_info()

    def step(self, action):
        move_x, move_y, attack = int(action[0]) - 1, int(action[1]) - 1, bool(action[2])

        self.now_ms += self.dt * 1000.0
        frame = FrameInput(move_x=float(move_x), move_y=float(move_y), attack=attack)
        self._events = self.world.update(self.dt, self.now_ms, frame)
        self._kills += self._events["kill"]

        self._spawn_logic()

        reward = self._compute_reward()

        self._step_count += 1
        terminated = (
            self.enemy_spawn_interval is None
            and not self.world.enemies
            and not self.world.loot_orbs
        )
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    # ----------------------------
    # Spawning
    # ----------------------------

    def _spawn_logic(self):
        if self.enemy_spawn_interval is None:
            return
        self._spawn_timer += self.dt
        if self._spawn_timer >= self.enemy_spawn_interval:
            self._spawn_timer = 0.0
            if len(self.world.enemies) < self.max_enemies:
                self._spawn_enemy()

    def _spawn_enemy(self):
        """Spawn on a random point far enough from the player; gives up after a few tries"""
        w = self.world
        r = w.enemy_radius
        for _ in range(10):
            x = random.uniform(r, w.width - r)
            y = random.uniform(r, w.height - r)
            if distance(x, y, w.player.x, w.player.y) >= self.min_spawn_distance:
                return w.spawn_enemy(x, y)
        return None

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        w = self.world
        p = w.player

        obs_parts = [
            (p.x / w.width) * 2 - 1, (p.y / w.height) * 2 - 1,  # map to [-1,1]
            p.facing_x, p.facing_y,
            1.0 if w.bonk.active else -1.0,
            clamp(w.bonk.timer_ms / w.bonk_duration_ms, 0, 1) * 2 - 1,
        ]

        def rel(x, y):
            return [clamp((x - p.x) / w.width, -1, 1), clamp((y - p.y) / w.height, -1, 1)]

        enemies_sorted = sorted(w.enemies, key=lambda e: distance(e.x, e.y, p.x, p.y))
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                obs_parts += rel(enemies_sorted[i].x, enemies_sorted[i].y)
            else:
                obs_parts += [0.0, 0.0]

        orbs_sorted = sorted(w.loot_orbs, key=lambda o: distance(o.x, o.y, p.x, p.y))
        for i in range(self.m_orbs):
            if i < len(orbs_sorted):
                orb = orbs_sorted[i]
                obs_parts += rel(orb.x, orb.y) + [w.remaining_life(orb, self.now_ms) * 2 - 1]
            else:
                obs_parts += [0.0, 0.0, -1.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self) -> float:
        r = self.rewards
        reward = 0.0
        reward += r["R_KILL"] * self._events.get("kill", 0)
        reward += r["R_LOOT"] * self._events.get("loot", 0)
        reward += r["R_HIT"] * self._events.get("hit", 0)
        reward -= r["R_EXPIRED"] * self._events.get("expired", 0)
        reward -= r["R_TIME"]
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "loot": self.world.player.loot,
            "kills": self._kills,
            "num_enemies": len(self.world.enemies),
            "num_orbs": len(self.world.loot_orbs),
            "bonk_active": self.world.bonk.active,
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from .render import BonkWindow
            self._window = BonkWindow(self.world, interactive=False)

        # The env owns the clock; the window only paints
        self._window.world = self.world
        self._window.now_ms = self.now_ms
        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


def run_random_episode(render: bool = True, seed: Optional[int] = 42, max_steps: Optional[int] = None):
    """Run a random-policy episode and print a summary"""
    kwargs = {} if max_steps is None else {"max_steps": max_steps}
    env = BonkEnv(render_mode="human" if render else None, **kwargs)
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0

    print("Running random episode...")
    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward
        if render:
            time.sleep(env.dt)

    print(f"Random episode return: {total:.3f}")
    print(f"  steps: {info['step']}  kills: {info['kills']}  loot: {info['loot']}")

    env.close()
    return total, info
