"""Mega Bonk - top-down arcade bonk-'em-up"""

from .world import World
from .controls import InputState, FrameInput
from .bonk_env import BonkEnv, run_random_episode

__all__ = ['World', 'InputState', 'FrameInput', 'BonkEnv', 'run_random_episode']
