import random

import pytest

from ghosts.ghost import Ghost
from maze.board import Board, Direction
from maze.units import Player

# ======================================================================
# FIXTURES (Ambiente Simulado para os Testes)
# ======================================================================


@pytest.fixture
def mini_board():
    """
    5x5 maze around a single pillar.
    0 = open floor
    3 = wall
    """
    return Board.from_matrix([
        [3, 3, 3, 3, 3],
        [3, 0, 0, 0, 3],
        [3, 0, 3, 0, 3],
        [3, 0, 0, 0, 3],
        [3, 3, 3, 3, 3],
    ])


@pytest.fixture
def split_matrix():
    """Two regions separated by a wall: the right column is sealed off."""
    return [
        [3, 3, 3, 3, 3, 3, 3],
        [3, 0, 0, 0, 3, 0, 3],
        [3, 0, 3, 0, 3, 0, 3],
        [3, 0, 0, 0, 3, 0, 3],
        [3, 3, 3, 3, 3, 3, 3],
    ]


@pytest.fixture
def split_board(split_matrix):
    return Board.from_matrix(split_matrix)


@pytest.fixture
def open_board():
    return Board.open(10, 10)


@pytest.fixture
def place():
    """Put a unit on ``board`` at (x, y)."""
    def _place(board, unit, x, y):
        unit.occupy(board.square_at(x, y))
        return unit
    return _place


@pytest.fixture
def make_player(place):
    def _make(board, x, y, facing=Direction.EAST):
        return place(board, Player(facing), x, y)
    return _make


@pytest.fixture
def make_ghost(place):
    def _make(board, kind, x, y, home=None, seed=0, observers=()):
        ghost = Ghost(kind, home=home, rng=random.Random(seed), observers=observers)
        return place(board, ghost, x, y)
    return _make
