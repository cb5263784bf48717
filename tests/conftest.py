"""Shared fixtures for tilesolver tests."""

import logging

import pytest

from tilesolver.domains.grid import Grid
from tilesolver.domains.puzzlen import NPuzzle


@pytest.fixture
def goal_2x2():
    return Grid.from_rows([[1, 2], [3, 4]])


@pytest.fixture
def goal_3x3():
    return Grid.goal(3)


@pytest.fixture
def p8():
    return NPuzzle(3)


@pytest.fixture
def unsolvable_3x3():
    """Goal with tiles 1 and 2 swapped: odd parity, unreachable."""
    return Grid.from_rows([[2, 1, 3], [4, 5, 6], [7, 8, 9]])


@pytest.fixture
def reset_package_logger():
    """Close handlers the CLIs attach so log files are released after each test."""
    yield
    logger = logging.getLogger("tilesolver")
    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
