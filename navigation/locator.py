from typing import List, Optional

from aima3.search import Problem, breadth_first_search

from maze.board import Direction, Square
from maze.units import Kind, Unit


def find_unit(kind: Kind, square: Square) -> Optional[Unit]:
    for unit in square.board.units_at(square):
        if unit.kind is kind:
            return unit
    return None


class NearestUnitProblem(Problem):
    """Goal: any open square holding a unit of ``kind``."""

    def __init__(self, initial: Square, kind: Kind):
        super().__init__(initial)
        self.board = initial.board
        self.kind = kind

    def actions(self, state: Square) -> List[Direction]:
        return [d for d in Direction
                if self.board.is_traversable(self.board.neighbor(state, d), None)]

    def result(self, state: Square, action: Direction) -> Square:
        return self.board.neighbor(state, action)

    def goal_test(self, state: Square) -> bool:
        return find_unit(self.kind, state) is not None


def find_nearest(kind: Kind, from_square: Optional[Square]) -> Optional[Unit]:
    """
    Breadth-first search from ``from_square`` for the first unit of ``kind``.
    The result is minimal in graph distance (walls are never
    crossed); None when no open path reaches a unit of that kind.
    """
    if from_square is None:
        return None
    node = breadth_first_search(NearestUnitProblem(from_square, kind))
    if node is None:
        return None
    return find_unit(kind, node.state)
