"""
Movement scheduler
==================
Drives every ghost from one logical clock (milliseconds). Each ghost moves
on its own cadence given by ``get_interval()``.

A tick has two phases: first every due ghost decides against the same,
untouched board; only then are the moves applied. One ghost's move can
therefore never change another ghost's search in the same tick.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from ghosts.ghost import Ghost
from ghosts.modes import GhostMode, ModeController
from maze.board import Board, Direction

logger = logging.getLogger(__name__)

Move = Tuple[Ghost, Direction, bool]


class MovementScheduler:
    def __init__(self, board: Board, ghosts: Iterable[Ghost] = (),
                 modes: Optional[ModeController] = None):
        self.board = board
        self.modes = modes
        self.now = 0.0
        self._due: Dict[Ghost, float] = {}
        for ghost in ghosts:
            self.add(ghost)

    @property
    def ghosts(self) -> List[Ghost]:
        return list(self._due)

    def add(self, ghost: Ghost):
        self._due[ghost] = self.now + ghost.get_interval()

    def remove(self, ghost: Ghost):
        self._due.pop(ghost, None)

    def advance(self, dt: float) -> List[Move]:
        self.now += dt
        if self.modes is not None:
            self._update_modes(dt)

        due = [g for g, t in self._due.items() if t <= self.now]

        # 1) decisão: o tabuleiro é só leitura aqui
        decisions = [(ghost, ghost.next_move()) for ghost in due]

        # 2) aplicação
        moves = []
        for ghost, direction in decisions:
            moved = self.board.move(ghost, direction)
            if not moved:
                logger.debug("%r could not move %s, skipping this tick", ghost, direction.name)
            moves.append((ghost, direction, moved))
            self._due[ghost] = self.now + ghost.get_interval()
        return moves

    def _update_modes(self, dt: float):
        mode, switched = self.modes.update(dt)
        for ghost in self._due:
            if switched and mode is not GhostMode.FRIGHTENED:
                ghost.reverse()
            ghost.mode = mode
        if switched:
            logger.info("Ghosts switched to %s", mode.name)
