from maze.units import Kind

# Intervalos de movimento em milissegundos: (base, variação)
MOVE_INTERVALS = {
    Kind.BLINKY: (250, 50),
    Kind.PINKY: (125, 50),
    Kind.INKY: (250, 50),
    Kind.CLYDE: (250, 50),
}

PLAYER_INTERVAL = 200

SQUARES_AHEAD = 4        # Pinky
INKY_SQUARES_AHEAD = 2   # Inky, pivô antes de espelhar o Blinky
SHYNESS = 8              # Clyde foge quando está a 8 casas ou menos

# (modo, duração em ms); a última fase dura para sempre
PHASE_SCHEDULE = [
    ("SCATTER", 7000),
    ("CHASE", 20000),
    ("SCATTER", 7000),
    ("CHASE", 20000),
    ("SCATTER", 5000),
    ("CHASE", 20000),
    ("SCATTER", 5000),
    ("CHASE", float("inf")),
]

FRIGHT_DURATION = 6000

FPS = 60
