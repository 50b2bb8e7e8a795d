"""Polled keyboard state for the simulation."""

from __future__ import annotations

from typing import Iterable, Set, Tuple

UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
FIRE = "fire"
RESET = "reset"


class InputState:
    """Set of logical key codes currently held down."""

    def __init__(self, held: Iterable[str] = ()) -> None:
        self._held: Set[str] = set(held)

    def press(self, code: str) -> None:
        self._held.add(code)

    def release(self, code: str) -> None:
        self._held.discard(code)

    def clear(self) -> None:
        self._held.clear()

    def pressed(self, code: str) -> bool:
        return code in self._held

    def direction(self) -> Tuple[int, int]:
        """Return the raw (dx, dy) axis vector from the movement keys."""

        dx = 0
        dy = 0
        if self.pressed(UP):
            dy -= 1
        if self.pressed(DOWN):
            dy += 1
        if self.pressed(LEFT):
            dx -= 1
        if self.pressed(RIGHT):
            dx += 1
        return dx, dy

    def __repr__(self) -> str:
        return f"InputState({sorted(self._held)!r})"


__all__ = [
    "DOWN",
    "FIRE",
    "InputState",
    "LEFT",
    "RESET",
    "RIGHT",
    "UP",
]
