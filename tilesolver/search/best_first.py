from __future__ import annotations
from typing import Callable, Dict, List, Optional, Set, Tuple
import heapq
import itertools
import logging
from time import perf_counter

from tilesolver.domains.grid import Grid
from tilesolver.domains.moves import EXPANSION_ORDER
from tilesolver.heuristics.linear_conflict import linear_conflict
from tilesolver.heuristics.manhattan import manhattan
from tilesolver.search.node import SearchState, reconstruct_moves

logger = logging.getLogger(__name__)

OK = "ok"
UNSOLVABLE = "unsolvable"
TIMEOUT = "timeout"
CANCELLED = "cancelled"

HEURISTICS: Dict[str, Callable[[Grid], int]] = {
    "manhattan": manhattan,
    "linear_conflict": linear_conflict,
}

TIE_BREAKS = ("fifo", "lifo")

# Progress is logged every this many expansions at DEBUG level
_LOG_EVERY = 10000

_ALIASES = {"m": "manhattan", "linear": "linear_conflict", "lc": "linear_conflict"}


def choose_hfun(name: str) -> Callable[[Grid], int]:
    """Look up a heuristic by name or short alias (m, lc)."""
    n = name.lower()
    n = _ALIASES.get(n, n)
    if n in HEURISTICS:
        return HEURISTICS[n]
    raise ValueError(f"unknown heuristic {name!r}")


def solve(
    start: Grid,
    hfun: Callable[[Grid], int] = manhattan,
    tie_break: str = "fifo",
    optimal: bool = False,
    timeout_sec: Optional[float] = None,
    should_stop: Optional[Callable[[], bool]] = None,
):
    """
    Best-first search from `start` to the solved board.

    The frontier is ranked by heuristic cost alone (greedy best-first), so the
    returned moves reach the goal but are not necessarily the fewest. With
    optimal=True the rank is depth + cost instead (A*).

    tie_break: "fifo" pops the earlier-pushed of two equal ranks, "lifo" the
    later one.

    timeout_sec / should_stop are checked before every pop; hitting either ends
    the search with termination "timeout" / "cancelled".
    """
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"tie_break must be one of {TIE_BREAKS}, got {tie_break!r}")
    t0 = perf_counter()
    counter = itertools.count()
    algorithm = "A*" if optimal else "GBFS"

    def priority(node: SearchState) -> Tuple[int, int]:
        rank = node.cost + node.depth if optimal else node.cost
        ctr = next(counter)
        return (rank, ctr if tie_break == "fifo" else -ctr)

    root = SearchState.root(start, hfun)
    open_heap: List[Tuple[Tuple[int, int], SearchState]] = [(priority(root), root)]
    closed: Set[SearchState] = set()

    expanded = 0
    generated = 0
    duplicates = 0
    peak_open = 1
    peak_closed = 0

    def result(termination: str, node: Optional[SearchState] = None):
        moves = reconstruct_moves(node) if node is not None else None
        return {
            "moves": moves,
            "g": len(moves) if moves is not None else None,
            "node": node,
            "expanded": expanded,
            "generated": generated,
            "duplicates": duplicates,
            "peak_open": peak_open,
            "peak_closed": peak_closed,
            "time": perf_counter() - t0,
            "algorithm": algorithm,
            "heuristic": getattr(hfun, "__name__", str(hfun)),
            "tie_break": tie_break,
            "termination": termination,
        }

    logger.debug("%s start: n=%d h0=%d", algorithm, start.n, root.cost)

    while open_heap:
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            logger.info("%s timed out after %.3fs (%d expanded)", algorithm, timeout_sec, expanded)
            return result(TIMEOUT)
        if should_stop is not None and should_stop():
            logger.info("%s cancelled (%d expanded)", algorithm, expanded)
            return result(CANCELLED)

        peak_open = max(peak_open, len(open_heap))
        _, node = heapq.heappop(open_heap)
        if node in closed:
            duplicates += 1
            continue
        closed.add(node)
        peak_closed = max(peak_closed, len(closed))

        if node.is_goal():
            res = result(OK, node)
            logger.info("%s solved in %d moves (%d expanded, %.3fs)",
                        algorithm, res["g"], expanded, res["time"])
            return res

        expanded += 1
        if expanded % _LOG_EVERY == 0:
            logger.debug("%s expanded=%d open=%d closed=%d best_h=%d",
                         algorithm, expanded, len(open_heap), len(closed), node.cost)

        for move in EXPANSION_ORDER:
            if not node.grid.can_move(move):
                continue
            child = node.child(move, hfun)
            generated += 1
            heapq.heappush(open_heap, (priority(child), child))

    logger.info("%s exhausted the frontier: unsolvable (%d expanded)", algorithm, expanded)
    return result(UNSOLVABLE)
