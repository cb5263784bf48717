from tilesolver.domains.grid import Grid


def manhattan(g: Grid) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    n = g.n
    blank = g.blank
    dist = 0
    for idx, tile in enumerate(g.cells):
        if tile == blank:
            continue
        r, c = divmod(idx, n)
        gr, gc = divmod(tile - 1, n)
        dist += abs(r - gr) + abs(c - gc)
    return dist
