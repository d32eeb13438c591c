"""
Shortest-path engine
====================
The maze is searched as a formal AIMA problem:

- **states** are Squares,
- ``actions(s)`` lists the Directions whose neighbour exists and is
  accessible to the travelling unit,
- ``result(s, a)`` is the neighbour in that direction,
- every edge costs 1, so breadth-first search is optimal.

The search is deterministic: actions are always tried in ``Direction``
order, and no randomness lives here.
"""

from typing import List, Optional

from aima3.search import Problem, breadth_first_search

from maze.board import Direction, Square


# ======================================================================
#  ESPECIFICAÇÃO DO PROBLEMA (Grafo de Squares)
# ======================================================================
class NavigationProblem(Problem):
    """
    Subclasse de Problem do AIMA.
    The board graph is read through its own contract (neighbor and
    is_traversable), never through raw grid coordinates.
    """
    def __init__(self, initial: Square, goal: Square, traveller=None):
        super().__init__(initial, goal)
        self.board = initial.board
        self.traveller = traveller  # None = qualquer casa que não seja parede

    def actions(self, state: Square) -> List[Direction]:
        possible = []
        for d in Direction:
            if self.board.is_traversable(self.board.neighbor(state, d), self.traveller):
                possible.append(d)
        return possible

    def result(self, state: Square, action: Direction) -> Square:
        return self.board.neighbor(state, action)

    def goal_test(self, state: Square) -> bool:
        return state is self.goal


def shortest_path(start: Optional[Square], destination: Optional[Square],
                  traveller=None) -> Optional[List[Direction]]:
    """
    Shortest route from ``start`` to ``destination`` for ``traveller``.

    Returns [] when start is the destination and None when the
    destination is missing or cannot be reached.
    """
    if start is None or destination is None:
        return None
    node = breadth_first_search(NavigationProblem(start, destination, traveller))
    if node is None:
        return None
    return node.solution()
