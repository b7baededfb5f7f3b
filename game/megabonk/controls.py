"""
Polled keyboard state.

Key events only flip entries in a name -> pressed map; the game samples the
map once per frame through ``InputState.sample()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from .config import KEY_BINDINGS
from .utils import normalize


@dataclass(frozen=True)
class FrameInput:
    """What the player wants to do this frame"""
    move_x: float = 0.0
    move_y: float = 0.0
    attack: bool = False


IDLE = FrameInput()


class InputState:
    """Key-state map plus an edge-triggered attack request"""

    def __init__(self, bindings: Optional[Dict[str, Tuple[str, ...]]] = None):
        self.bindings = bindings if bindings is not None else KEY_BINDINGS
        self.keys: Dict[str, bool] = {}
        self._attack_requested = False

    def press(self, key: str):
        key = key.lower()
        was_down = self.keys.get(key, False)
        self.keys[key] = True
        # Auto-repeat arrives as another press while the key is still held
        if not was_down and key in self.bindings["attack"]:
            self._attack_requested = True

    def release(self, key: str):
        self.keys[key.lower()] = False

    def is_down(self, action: str) -> bool:
        return self._any(self.bindings[action])

    def _any(self, names: Iterable[str]) -> bool:
        return any(self.keys.get(name, False) for name in names)

    def movement_intent(self) -> Tuple[float, float]:
        mx, my = 0.0, 0.0
        if self.is_down("up"):
            my -= 1.0
        if self.is_down("down"):
            my += 1.0
        if self.is_down("left"):
            mx -= 1.0
        if self.is_down("right"):
            mx += 1.0
        return normalize(mx, my)

    @property
    def attack_requested(self) -> bool:
        return self._attack_requested

    def sample(self) -> FrameInput:
        """Snapshot the current intent and consume the attack edge"""
        mx, my = self.movement_intent()
        attack = self._attack_requested
        self._attack_requested = False
        return FrameInput(move_x=mx, move_y=my, attack=attack)

    def reset(self):
        self.keys.clear()
        self._attack_requested = False
