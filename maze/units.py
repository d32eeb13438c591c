from enum import Enum
from typing import Optional

from maze.board import Direction, Square


class Kind(Enum):
    """What a unit is, as seen by the unit locator."""
    PLAYER = "player"
    BLINKY = "blinky"
    PINKY = "pinky"
    INKY = "inky"
    CLYDE = "clyde"


class Unit:
    """Anything standing on a square: it has a position and a facing."""

    kind: Kind
    is_ghost = False

    def __init__(self, direction: Direction = Direction.EAST):
        self.square: Optional[Square] = None
        self.direction = direction

    def occupy(self, square: Square):
        self.leave()
        self.square = square
        square.occupants.append(self)

    def leave(self):
        if self.square is not None and self in self.square.occupants:
            self.square.occupants.remove(self)
        self.square = None


class Player(Unit):
    kind = Kind.PLAYER

    def __repr__(self):
        pos = (self.square.x, self.square.y) if self.square else None
        return f"Player(at={pos}, facing={self.direction.name})"
