from __future__ import annotations
from typing import Optional
import random

from tilesolver.domains.grid import Grid
from tilesolver.domains.moves import EXPANSION_ORDER


class NPuzzle:
    """Instance tools for the N×N sliding-tile puzzle (N*N is the blank)."""
    def __init__(self, n: int):
        self.GOAL: Grid = Grid.goal(n)  # raises InvalidGrid for n < 2
        self.N = n
        self.size = n * n

    # ---------- Instance generation ----------
    def scramble(self, times: Optional[int] = None, seed: Optional[int] = None) -> Grid:
        """Random walk of legal moves from GOAL; defaults to N**4 moves."""
        if times is None:
            times = self.size * self.size
        rng = random.Random(seed)
        g = self.GOAL
        for _ in range(times):
            cand = [m for m in EXPANSION_ORDER if g.can_move(m)]
            g = g.apply(rng.choice(cand))
        return g

    def is_solvable(self, g: Grid) -> bool:
        """Solvability rules:
           - N odd: inversions must be even
           - N even: (inversions + blank_row_from_bottom) must be ODD
             (row count is 1-based from the bottom)
        """
        arr = [x for x in g.cells if x != self.size]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        if self.N % 2 == 1:
            return (inv % 2) == 0
        blank_row_from_bottom = self.N - g.blank_row
        return ((inv + blank_row_from_bottom) % 2) == 1

    def make_unsolvable_variant(self, g: Grid) -> Grid:
        """Swap the first two non-blank tiles, flipping permutation parity."""
        lst = list(g.cells)
        i = next(k for k, v in enumerate(lst) if v != self.size)
        j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != self.size)
        lst[i], lst[j] = lst[j], lst[i]
        return Grid.from_cells(self.N, lst)
