import random
from typing import Callable, Iterable, List, Optional

from ghosts.config import MOVE_INTERVALS
from ghosts.modes import GhostMode
from ghosts.observers import Decision, Outcome, log_decision
from ghosts.strategies import STRATEGIES
from maze.board import Direction, Square
from maze.units import Kind, Unit
from navigation.locator import find_nearest
from navigation.pathfinding import shortest_path

Observer = Callable[[Decision], None]


# ══════════════════════════════════════════════════════════════════════════════
#  Ghost
# ══════════════════════════════════════════════════════════════════════════════
class Ghost(Unit):
    """
    A ghost agent. The variant (``kind``) only selects the targeting rule;
    the decision pipeline in ``next_move`` is shared by all four:

    0. right after a scatter/chase switch -> keep the reversed facing;
    1. scatter -> head for the home corner, frightened -> wander;
    2. chase -> locate the nearest player (none: random legal move);
    3. compute the variant's target square;
    4. shortest path from here to the target;
    5. first step of that path, or a random legal move if there is none.
    """

    is_ghost = True

    def __init__(self, kind: Kind, home: Optional[Square] = None,
                 direction: Direction = Direction.WEST,
                 rng: Optional[random.Random] = None,
                 observers: Optional[Iterable[Observer]] = None):
        if kind not in STRATEGIES:
            raise ValueError(f"{kind} is not a ghost variant")
        super().__init__(direction)
        self.kind = kind
        self.home = home
        self.mode = GhostMode.CHASE
        self.reversing = False
        self.rng = rng or random.Random()
        self.observers: List[Observer] = list(observers) if observers is not None else [log_decision]
        self._base_interval, self._variation = MOVE_INTERVALS[kind]

    def get_interval(self) -> int:
        return self._base_interval + self.rng.randrange(self._variation)

    def legal_directions(self) -> List[Direction]:
        if self.square is None:
            return []
        board = self.square.board
        return [d for d in Direction
                if board.is_traversable(board.neighbor(self.square, d), self)]

    def random_move(self) -> Direction:
        legal = self.legal_directions()
        if not legal:
            # Encurralado: o agendador decide o que fazer
            return self.direction
        return self.rng.choice(legal)

    def reverse(self):
        """Turn around; the next decision takes the new facing if it is legal."""
        self.direction = self.direction.opposite
        self.reversing = True

    def next_move(self) -> Direction:
        if self.reversing:
            self.reversing = False
            if self.direction in self.legal_directions():
                return self._decide(Outcome.REVERSED, self.direction)

        if self.mode is GhostMode.FRIGHTENED:
            return self._decide(Outcome.FRIGHTENED)

        if self.mode is GhostMode.SCATTER:
            target = self.home
        else:
            player = find_nearest(Kind.PLAYER, self.square)
            if player is None:
                return self._decide(Outcome.NO_PLAYER)
            target = STRATEGIES[self.kind](self, player)

        if target is None:
            return self._decide(Outcome.NO_TARGET)

        path = shortest_path(self.square, target, self)
        if path:
            return self._decide(Outcome.PATH_FOUND, path[0], target, path)
        return self._decide(Outcome.NO_PATH, target=target, path=path)

    def _decide(self, outcome: Outcome, direction: Optional[Direction] = None,
                target: Optional[Square] = None,
                path: Optional[List[Direction]] = None) -> Direction:
        if direction is None:
            direction = self.random_move()
        decision = Decision(self, self.mode, outcome, direction, target, path)
        for observer in self.observers:
            observer(decision)
        return direction

    def __repr__(self):
        pos = (self.square.x, self.square.y) if self.square else None
        return f"Ghost({self.kind.name}, at={pos}, mode={self.mode.name})"
