"""Decision records handed to ghost observers, and the default logging observer."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from maze.board import Direction, Square

logger = logging.getLogger(__name__)


class Outcome(Enum):
    PATH_FOUND = "path_found"
    NO_PLAYER = "no_player"
    NO_TARGET = "no_target"
    NO_PATH = "no_path"
    FRIGHTENED = "frightened"
    REVERSED = "reversed"


@dataclass(frozen=True)
class Decision:
    """What a ghost decided on one call to ``next_move``."""
    ghost: object
    mode: object
    outcome: Outcome
    direction: Direction
    target: Optional[Square] = None
    path: Optional[List[Direction]] = None

    @property
    def random(self) -> bool:
        return self.outcome not in (Outcome.PATH_FOUND, Outcome.REVERSED)


def log_decision(decision: Decision) -> None:
    name = decision.ghost.kind.name.capitalize()
    if decision.outcome is Outcome.NO_PLAYER:
        logger.debug("%s: No player found, will move around randomly.", name)
    elif decision.outcome is Outcome.REVERSED:
        logger.debug("%s: Mode changed, turning around.", name)
    elif decision.outcome is Outcome.FRIGHTENED:
        logger.debug("%s: Frightened, will move around randomly.", name)
    elif decision.outcome is Outcome.NO_TARGET:
        logger.debug("%s: Player found, but the target is off the board.", name)
    elif decision.outcome is Outcome.NO_PATH:
        logger.debug("%s: Calculated destination %s, could not find a path to it, "
                     "will move around randomly.", name, decision.target)
    else:
        logger.debug("%s: Found path to destination %s (%d steps).",
                     name, decision.target, len(decision.path))
    logger.debug("%s: Moving %s", name, decision.direction.name)
