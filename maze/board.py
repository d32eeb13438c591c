"""
Maze board graph
================
A fixed grid of Squares linked to their neighbours in the four compass
directions. The topology is built once (Board.from_matrix) and never
changes afterwards; occupancy is a separate, mutable overlay kept on each
Square.

Tile codes follow the classic integer level matrix:
    0 = empty floor, 1 = pellet, 2 = power pellet,
    3 and up = walls, except 9 = ghost-house gate (ghosts only)
"""

from enum import Enum
from typing import Dict, List, Optional

EMPTY, PELLET, POWER, WALL, GATE = 0, 1, 2, 3, 9


class Direction(Enum):
    NORTH = (0, -1)
    SOUTH = (0, 1)
    WEST = (-1, 0)
    EAST = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
    Direction.EAST: Direction.WEST,
}


# ══════════════════════════════════════════════════════════════════════════════
#  Square
# ══════════════════════════════════════════════════════════════════════════════
class Square:
    __slots__ = ("x", "y", "tile", "occupants", "board", "_neighbors")

    def __init__(self, x: int, y: int, tile: int = EMPTY):
        self.x = x
        self.y = y
        self.tile = tile
        self.occupants: list = []
        self.board: Optional["Board"] = None
        self._neighbors: Dict[Direction, Optional["Square"]] = {d: None for d in Direction}

    @property
    def is_wall(self) -> bool:
        return self.tile >= WALL and self.tile != GATE

    @property
    def is_gate(self) -> bool:
        return self.tile == GATE

    def neighbor(self, direction: Direction) -> Optional["Square"]:
        return self._neighbors[direction]

    def _link(self, direction: Direction, other: Optional["Square"]):
        self._neighbors[direction] = other

    def accessible_to(self, unit) -> bool:
        """Walls block everyone, the gate lets ghosts through only.

        ``unit=None`` asks whether the square is open at all.
        """
        if self.is_wall:
            return False
        if self.is_gate:
            return unit is None or getattr(unit, "is_ghost", False)
        return True

    def __repr__(self):
        return f"Square({self.x}, {self.y})"


# ══════════════════════════════════════════════════════════════════════════════
#  Board
# ══════════════════════════════════════════════════════════════════════════════
class Board:
    def __init__(self, grid: List[List[Square]], tunnels: bool = False):
        if not grid or not grid[0]:
            raise ValueError("Board needs at least one square")
        self._grid = grid
        self.height = len(grid)
        self.width = len(grid[0])
        self.tunnels = tunnels
        self._link_squares()

    @classmethod
    def from_matrix(cls, matrix: List[List[int]], tunnels: bool = False) -> "Board":
        """Build a board from rows of tile codes (matrix[y][x])."""
        width = len(matrix[0]) if matrix else 0
        if any(len(row) != width for row in matrix):
            raise ValueError("Every row of the level matrix must have the same length")
        grid = [[Square(x, y, tile) for x, tile in enumerate(row)] for y, row in enumerate(matrix)]
        return cls(grid, tunnels=tunnels)

    @classmethod
    def open(cls, width: int, height: int) -> "Board":
        return cls.from_matrix([[EMPTY] * width for _ in range(height)])

    def _link_squares(self):
        for row in self._grid:
            for sq in row:
                sq.board = self
                for d in Direction:
                    nx, ny = sq.x + d.dx, sq.y + d.dy
                    if self.in_bounds(nx, ny):
                        sq._link(d, self._grid[ny][nx])

        # Túnel: liga as bordas leste/oeste de uma linha aberta nos dois lados
        if self.tunnels and self.width > 1:
            for row in self._grid:
                west, east = row[0], row[-1]
                if not west.is_wall and not east.is_wall:
                    west._link(Direction.WEST, east)
                    east._link(Direction.EAST, west)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def square_at(self, x: int, y: int) -> Square:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} board")
        return self._grid[y][x]

    def squares(self):
        for row in self._grid:
            yield from row

    # ── Contract consumed by the navigation core ─────────────────────────────
    def neighbor(self, square: Square, direction: Direction) -> Optional[Square]:
        return square.neighbor(direction)

    def is_traversable(self, square: Optional[Square], unit) -> bool:
        return square is not None and square.accessible_to(unit)

    def units_at(self, square: Square) -> list:
        return list(square.occupants)

    # ── Movement ─────────────────────────────────────────────────────────────
    def move(self, unit, direction: Direction) -> bool:
        """Face ``direction`` and step into the neighbour if it is legal."""
        unit.direction = direction
        if unit.square is None:
            return False
        destination = self.neighbor(unit.square, direction)
        if not self.is_traversable(destination, unit):
            return False
        unit.occupy(destination)
        return True

    def nearest_open_square(self, x: int, y: int) -> Optional[Square]:
        """Floor square (no wall, no gate) closest to (x, y), ties in row-major order."""
        best, best_dist = None, None
        for sq in self.squares():
            if sq.is_wall or sq.is_gate:
                continue
            dist = abs(sq.x - x) + abs(sq.y - y)
            if best_dist is None or dist < best_dist:
                best, best_dist = sq, dist
        return best
