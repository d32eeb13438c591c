"""
Ghost movement simulation
=========================
Runs the ghost AI headless on a text level: the player wanders the maze,
the four ghosts are driven by the MovementScheduler, and every decision
is logged. The loop is paced by pygame's clock, no window is opened.

    python main.py --seconds 20 --log-level DEBUG
"""

import argparse
import logging
import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
import pygame

from ghosts.config import FPS, PLAYER_INTERVAL
from ghosts.modes import ModeController
from ghosts.scheduler import MovementScheduler
from maze.board import Direction
from maze.level_loader import DEFAULT_LEVEL, build_level, load_level_txt, parse_level

logger = logging.getLogger("simulation")


# ======================================================================
#  JOGADOR AUTOMÁTICO
# ======================================================================
class WanderingPlayer:
    """Keeps its facing while it can, turns at random when blocked."""

    def __init__(self, board, player, rng):
        self.board = board
        self.player = player
        self.rng = rng
        self.elapsed = 0.0

    def update(self, dt):
        self.elapsed += dt
        while self.elapsed >= PLAYER_INTERVAL:
            self.elapsed -= PLAYER_INTERVAL
            self.step()

    def step(self):
        facing = self.player.direction
        if self.board.move(self.player, facing):
            return
        options = [d for d in Direction
                   if self.board.is_traversable(self.player.square.neighbor(d), self.player)]
        if options:
            self.board.move(self.player, self.rng.choice(options))


# ======================================================================
#  LOOP DA SIMULAÇÃO
# ======================================================================
class SimulationLoop:
    def __init__(self, level, seed=None, fps=FPS):
        self.rng = random.Random(seed)
        self.level = level
        self.fps = fps
        self.walker = WanderingPlayer(level.board, level.player, self.rng)
        self.scheduler = MovementScheduler(level.board, level.ghosts, ModeController())

    def caught_by(self):
        for ghost in self.level.ghosts:
            if ghost.square is self.level.player.square:
                return ghost
        return None

    def run(self, seconds):
        pygame.init()
        clock = pygame.time.Clock()
        elapsed = 0.0
        try:
            while elapsed < seconds * 1000:
                dt = clock.tick(self.fps)
                elapsed += dt
                self.walker.update(dt)
                for ghost, direction, moved in self.scheduler.advance(dt):
                    if moved:
                        logger.info("%s moved %s to (%d, %d)", ghost.kind.name, direction.name,
                                    ghost.square.x, ghost.square.y)
                ghost = self.caught_by()
                if ghost is not None:
                    logger.info("%s caught the player after %.1fs", ghost.kind.name, elapsed / 1000)
                    return ghost
        finally:
            pygame.quit()
        logger.info("Player survived %.1fs", elapsed / 1000)
        return None


def main(argv=None):
    parser = argparse.ArgumentParser(description="Headless Pac-Man ghost movement simulation")
    parser.add_argument("--level", help="text level file (default: built-in maze)")
    parser.add_argument("--seconds", type=float, default=30.0)
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    data = load_level_txt(args.level) if args.level else parse_level(DEFAULT_LEVEL)
    rng = random.Random(args.seed)
    level = build_level(data, rng=rng)
    SimulationLoop(level, seed=args.seed, fps=args.fps).run(args.seconds)


if __name__ == "__main__":
    print("=" * 50)
    print(" Fantasmas Pac-Man (simulação sem janela)")
    print("=" * 50)
    main()
