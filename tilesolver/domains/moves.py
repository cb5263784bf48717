from __future__ import annotations
from enum import Enum
from typing import Tuple

Delta = Tuple[int, int]


class OutOfBounds(IndexError):
    """Raised when a move would pull a tile from outside the grid."""


class Move(Enum):
    """Direction a numbered tile slides into the blank.

    The delta points from the blank to the tile that moves, so the blank
    itself travels the opposite way (UP means the tile below slides up).
    """
    UP = (1, 0)
    DOWN = (-1, 0)
    LEFT = (0, 1)
    RIGHT = (0, -1)

    @property
    def delta(self) -> Delta:
        return self.value

    @property
    def inverse(self) -> "Move":
        return _INVERSE[self]

    @classmethod
    def parse(cls, text: str) -> "Move":
        try:
            return cls[text.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown move {text!r}") from None

    def __str__(self) -> str:
        return self.name


_INVERSE = {
    Move.UP: Move.DOWN,
    Move.DOWN: Move.UP,
    Move.LEFT: Move.RIGHT,
    Move.RIGHT: Move.LEFT,
}

# Order in which the solver expands children
EXPANSION_ORDER = (Move.LEFT, Move.RIGHT, Move.UP, Move.DOWN)
