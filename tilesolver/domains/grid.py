from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Set, Tuple

from tilesolver.domains.moves import EXPANSION_ORDER, Move, OutOfBounds

Cells = Tuple[int, ...]  # row-major, N*N is the blank


class InvalidGrid(ValueError):
    """Raised when a board does not hold each of 1..N*N exactly once."""


@dataclass(frozen=True)
class Grid:
    """Immutable N×N snapshot of the puzzle.

    Tiles are stored row-major; the blank is the largest id (N*N) so the
    solved board reads 1..N*N in order.
    """
    n: int
    cells: Cells
    blank_row: int
    blank_col: int

    # ---------- Construction ----------
    @classmethod
    def from_cells(cls, n: int, cells: Iterable[int]) -> "Grid":
        cells = tuple(int(v) for v in cells)
        if n < 2:
            raise InvalidGrid(f"grid size must be at least 2, got {n}")
        size = n * n
        if len(cells) != size:
            raise InvalidGrid(f"expected {size} tiles for a {n}x{n} grid, got {len(cells)}")
        if sorted(cells) != list(range(1, size + 1)):
            raise InvalidGrid(f"tiles must be a permutation of 1..{size}: {cells}")
        r, c = divmod(cells.index(size), n)
        return cls(n, cells, r, c)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        n = len(rows)
        if any(len(row) != n for row in rows):
            raise InvalidGrid("grid must be square")
        return cls.from_cells(n, (v for row in rows for v in row))

    @classmethod
    def from_ui_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        """Build from a board where 0 marks the blank."""
        n = len(rows)
        blank = n * n
        return cls.from_rows([[blank if v == 0 else v for v in row] for row in rows])

    @classmethod
    def goal(cls, n: int) -> "Grid":
        return cls.from_cells(n, range(1, n * n + 1))

    # ---------- Views ----------
    @property
    def blank(self) -> int:
        return self.n * self.n

    def rows(self) -> List[List[int]]:
        n = self.n
        return [list(self.cells[r * n:(r + 1) * n]) for r in range(n)]

    def to_ui_rows(self) -> List[List[int]]:
        return [[0 if v == self.blank else v for v in row] for row in self.rows()]

    def is_goal(self) -> bool:
        return all(v == i + 1 for i, v in enumerate(self.cells))

    def __str__(self) -> str:
        width = len(str(self.blank - 1))
        lines = []
        for row in self.rows():
            lines.append(" ".join(".".rjust(width) if v == self.blank else str(v).rjust(width)
                                  for v in row))
        return "\n".join(lines)

    # ---------- Dynamics ----------
    def can_move(self, move: Move) -> bool:
        dr, dc = move.delta
        r, c = self.blank_row + dr, self.blank_col + dc
        return 0 <= r < self.n and 0 <= c < self.n

    def legal_moves(self) -> Set[Move]:
        return {m for m in EXPANSION_ORDER if self.can_move(m)}

    def apply(self, move: Move) -> "Grid":
        if not self.can_move(move):
            raise OutOfBounds(
                f"{move} from blank at ({self.blank_row}, {self.blank_col}) leaves a {self.n}x{self.n} grid"
            )
        dr, dc = move.delta
        r, c = self.blank_row + dr, self.blank_col + dc
        z = self.blank_row * self.n + self.blank_col
        j = r * self.n + c
        lst = list(self.cells)
        lst[z], lst[j] = lst[j], lst[z]
        return Grid(self.n, tuple(lst), r, c)


def legal_moves(grid: Grid) -> Set[Move]:
    return grid.legal_moves()


def apply(grid: Grid, move: Move) -> Grid:
    return grid.apply(move)


def replay(grid: Grid, moves: Iterable[Move]) -> Grid:
    """Apply moves in order and return the final snapshot."""
    for m in moves:
        grid = grid.apply(m)
    return grid
