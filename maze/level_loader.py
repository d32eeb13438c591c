"""
Text levels
===========
    #  wall          .  pellet        o  power pellet
    =  ghost gate    P  player        (space) empty floor
    B, K, I, C       Blinky, Pinky (K), Inky, Clyde spawns

Every row is padded with spaces to the widest row. Rows starting and
ending on floor become tunnels.
"""

import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ghosts.ghost import Ghost
from ghosts.strategies import home_corner
from maze.board import EMPTY, GATE, PELLET, POWER, WALL, Board, Direction
from maze.units import Kind, Player

XY = Tuple[int, int]

TILES = {"#": WALL, ".": PELLET, "o": POWER, "=": GATE, " ": EMPTY}
GHOST_SPAWNS = {"B": Kind.BLINKY, "K": Kind.PINKY, "I": Kind.INKY, "C": Kind.CLYDE}

DEFAULT_LEVEL = """\
#####################
#B........#........K#
#.###.###.#.###.###.#
#o###.###.#.###.###o#
#...................#
#.###.#.#####.#.###.#
#.....#...#...#.....#
#####.###.#.###.#####
#####.#.......#.#####
#####.#.##=##.#.#####
 .......#I C#....... 
#####.#.#####.#.#####
#####.#.......#.#####
#####.#.#####.#.#####
#.........#.........#
#.###.###.#.###.###.#
#o..#.....P.....#..o#
###.#.#.#####.#.#.###
#.....#...#...#.....#
#.#######.#.#######.#
#...................#
#####################
"""


@dataclass
class LevelData:
    matrix: List[List[int]]
    player_spawn: XY
    ghost_spawns: Dict[Kind, XY] = field(default_factory=dict)


def parse_level(text: str) -> LevelData:
    lines = text.splitlines()
    # Só as linhas em branco das pontas; as do meio são corredores vazios
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise ValueError("Empty level")

    cols = max(len(line) for line in lines)
    matrix: List[List[int]] = []
    player_spawn: Optional[XY] = None
    ghost_spawns: Dict[Kind, XY] = {}

    for y, line in enumerate(lines):
        row = []
        for x, ch in enumerate(line.ljust(cols)):
            if ch == "P":
                player_spawn = (x, y)
                row.append(EMPTY)
            elif ch in GHOST_SPAWNS:
                ghost_spawns[GHOST_SPAWNS[ch]] = (x, y)
                row.append(EMPTY)
            elif ch in TILES:
                row.append(TILES[ch])
            else:
                raise ValueError(f"Unknown level character {ch!r} at ({x}, {y})")
        matrix.append(row)

    if player_spawn is None:
        raise ValueError("Level must contain a 'P' (player spawn).")

    return LevelData(matrix=matrix, player_spawn=player_spawn, ghost_spawns=ghost_spawns)


def load_level_txt(path: str) -> LevelData:
    return parse_level(Path(path).read_text(encoding="utf-8"))


@dataclass
class Level:
    board: Board
    player: Player
    ghosts: list


def build_level(data: LevelData, rng: Optional[random.Random] = None,
                tunnels: bool = True) -> Level:
    """Board with the player and every ghost spawn placed on it."""
    rng = rng or random.Random()
    board = Board.from_matrix(data.matrix, tunnels=tunnels)

    player = Player(Direction.WEST)
    player.occupy(board.square_at(*data.player_spawn))

    ghosts = []
    for kind, (x, y) in data.ghost_spawns.items():
        ghost = Ghost(kind, home=home_corner(board, kind), rng=random.Random(rng.random()))
        ghost.occupy(board.square_at(x, y))
        ghosts.append(ghost)
    return Level(board=board, player=player, ghosts=ghosts)
