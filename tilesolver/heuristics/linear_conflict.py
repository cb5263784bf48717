from tilesolver.domains.grid import Grid
from tilesolver.heuristics.manhattan import manhattan


def linear_conflict(g: Grid) -> int:
    """Manhattan + 2 per pair of linearly-conflicting tiles (rows & cols)."""
    m = manhattan(g)
    n = g.n
    blank = g.blank
    s = g.cells
    # Row conflicts
    for r in range(n):
        goal_cols = [(t - 1) % n for t in s[r * n:(r + 1) * n]
                     if t != blank and (t - 1) // n == r]
        for i in range(len(goal_cols)):
            for j in range(i + 1, len(goal_cols)):
                if goal_cols[i] > goal_cols[j]:
                    m += 2
    # Column conflicts
    for c in range(n):
        goal_rows = [(t - 1) // n for t in s[c::n]
                     if t != blank and (t - 1) % n == c]
        for i in range(len(goal_rows)):
            for j in range(i + 1, len(goal_rows)):
                if goal_rows[i] > goal_rows[j]:
                    m += 2
    return m
