"""
Pursuit targeting, one pure function per ghost variant
======================================================
Each strategy answers "which square is this ghost heading for?" given the
ghost and the player it located. ``None`` means there is no usable target
this tick (e.g. the walk ahead of the player fell off the board) and the
ghost falls back to a random legal move.

- Blinky, direct chase: the player's square.
- Pinky, ambush: four squares ahead of the player along its facing.
- Inky, flank: take the square two ahead of the player, then replay the
  route Blinky would take to it once more from there.
- Clyde, shy: chase from afar, retreat to his corner when within eight.

Walks ahead of the player always use the board's own edges in one fixed
direction. Facing north gets no special case: any asymmetry between the
four directions comes from the maze topology alone.
"""

from typing import Callable, Dict, Iterable, Optional

from ghosts.config import INKY_SQUARES_AHEAD, SHYNESS, SQUARES_AHEAD
from maze.board import Board, Direction, Square
from maze.units import Kind, Unit
from navigation.locator import find_nearest
from navigation.pathfinding import shortest_path

Strategy = Callable[[Unit, Unit], Optional[Square]]


def walk(square: Optional[Square], directions: Iterable[Direction]) -> Optional[Square]:
    """Follow ``directions`` edge by edge; None as soon as an edge is missing."""
    for d in directions:
        if square is None:
            return None
        square = square.neighbor(d)
    return square


def ahead_of(unit: Unit, steps: int) -> Optional[Square]:
    return walk(unit.square, [unit.direction] * steps)


def chase_target(ghost, player) -> Optional[Square]:
    return player.square


def ambush_target(ghost, player) -> Optional[Square]:
    return ahead_of(player, SQUARES_AHEAD)


def flank_target(ghost, player) -> Optional[Square]:
    pivot = ahead_of(player, INKY_SQUARES_AHEAD)
    if pivot is None:
        return None
    blinky = find_nearest(Kind.BLINKY, ghost.square)
    if blinky is None:
        return None
    route = shortest_path(blinky.square, pivot)
    if route is None:
        return None
    return walk(pivot, route)


def shy_target(ghost, player) -> Optional[Square]:
    path = shortest_path(ghost.square, player.square, ghost)
    if path is not None and len(path) <= SHYNESS:
        return ghost.home
    return player.square


STRATEGIES: Dict[Kind, Strategy] = {
    Kind.BLINKY: chase_target,
    Kind.PINKY: ambush_target,
    Kind.INKY: flank_target,
    Kind.CLYDE: shy_target,
}

# Cantos de patrulha como frações (x, y) do tabuleiro
HOME_CORNERS = {
    Kind.BLINKY: (1, 0),
    Kind.PINKY: (0, 0),
    Kind.INKY: (1, 1),
    Kind.CLYDE: (0, 1),
}


def home_corner(board: Board, kind: Kind) -> Optional[Square]:
    fx, fy = HOME_CORNERS[kind]
    return board.nearest_open_square(fx * (board.width - 1), fy * (board.height - 1))
