from __future__ import annotations
from typing import Callable, List, Optional

from tilesolver.domains.grid import Grid
from tilesolver.domains.moves import Move


class SearchState:
    """Search node: a grid, the move that produced it and a link to its parent.

    Identity is the tile arrangement only, so states reached along different
    paths collapse in the visited set. Nodes order by heuristic cost.
    """
    __slots__ = ("grid", "move", "previous", "cost", "depth")

    def __init__(self, grid: Grid, move: Optional[Move] = None,
                 previous: Optional["SearchState"] = None, cost: int = 0):
        self.grid = grid
        self.move = move
        self.previous = previous
        self.cost = cost
        self.depth = 0 if previous is None else previous.depth + 1

    @classmethod
    def root(cls, grid: Grid, hfun: Callable[[Grid], int]) -> "SearchState":
        return cls(grid, cost=hfun(grid))

    def child(self, move: Move, hfun: Callable[[Grid], int]) -> "SearchState":
        g2 = self.grid.apply(move)
        return SearchState(g2, move, self, hfun(g2))

    def is_goal(self) -> bool:
        return self.grid.is_goal()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchState):
            return NotImplemented
        return self.grid.cells == other.grid.cells

    def __hash__(self) -> int:
        return hash(self.grid.cells)

    def __lt__(self, other: "SearchState") -> bool:
        return self.cost < other.cost

    def __repr__(self) -> str:
        return f"SearchState(cost={self.cost}, depth={self.depth}, move={self.move}, cells={self.grid.cells})"


def reconstruct_moves(node: Optional[SearchState]) -> List[Move]:
    moves: List[Move] = []
    while node is not None and node.previous is not None:
        moves.append(node.move)  # type: ignore[arg-type]
        node = node.previous
    moves.reverse()
    return moves
