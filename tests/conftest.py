import sys
from pathlib import Path

import pytest

# Ensure the repo root is on sys.path so 'game' imports without installing
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from game.megabonk.world import World  # noqa: E402


@pytest.fixture
def empty_world():
    """Room with the player in the middle and nobody else"""
    return World(enemy_positions=[])
