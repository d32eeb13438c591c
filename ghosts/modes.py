from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from ghosts.config import FRIGHT_DURATION, PHASE_SCHEDULE


class GhostMode(Enum):
    SCATTER = "SCATTER"        # patrol: head for the home corner
    CHASE = "CHASE"            # pursuit: variant-specific target
    FRIGHTENED = "FRIGHTENED"  # wander randomly


class ModeController:
    """Game-wide scatter/chase timer with a frightened override."""

    def __init__(self, schedule: List[Tuple[str, float]] = None) -> None:
        self._schedule = [(GhostMode(name), dur) for name, dur in (schedule or PHASE_SCHEDULE)]
        self._idx = 0
        self._phase = self._schedule[0][0]
        self._phase_elapsed = 0.0
        self._fright_left = 0.0

    @property
    def phase(self) -> GhostMode:
        return self._phase

    @property
    def mode(self) -> GhostMode:
        return GhostMode.FRIGHTENED if self._fright_left > 0 else self._phase

    def update(self, dt: float) -> Tuple[GhostMode, bool]:
        """Advance by ``dt`` ms; returns (active mode, phase switched)."""
        phase_switched = False

        if self._fright_left > 0:
            self._fright_left = max(0.0, self._fright_left - dt)

        # o cronograma continua andando durante o frightened
        self._phase_elapsed += dt
        _, cur_dur = self._schedule[self._idx]
        while self._phase_elapsed >= cur_dur and self._idx < len(self._schedule) - 1:
            self._phase_elapsed -= cur_dur
            self._idx += 1
            self._phase, cur_dur = self._schedule[self._idx]
            phase_switched = True

        return self.mode, phase_switched

    def trigger_frightened(self, duration: float = FRIGHT_DURATION) -> None:
        self._fright_left = duration

    def clear_frightened(self) -> None:
        self._fright_left = 0.0
