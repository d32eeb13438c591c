import logging
import random

import pytest

from ghosts.ghost import Ghost
from ghosts.modes import GhostMode
from ghosts.observers import Outcome, log_decision
from maze.board import Board, Direction
from maze.units import Kind


@pytest.fixture
def decisions():
    return []


def test_cenario_completo_pinky(make_player, make_ghost, decisions):
    """10x10 open grid: player (2,2) facing SOUTH, Pinky at (2,8)."""
    board = Board.open(10, 10)
    make_player(board, 2, 2, Direction.SOUTH)
    pinky = make_ghost(board, Kind.PINKY, 2, 8, observers=[decisions.append])

    assert pinky.next_move() is Direction.NORTH

    decision = decisions[-1]
    assert decision.outcome is Outcome.PATH_FOUND
    assert decision.target is board.square_at(2, 6)
    assert decision.path == [Direction.NORTH, Direction.NORTH]
    assert not decision.random


def test_blinky_vai_ao_jogador(mini_board, make_player, make_ghost):
    make_player(mini_board, 3, 3)
    blinky = make_ghost(mini_board, Kind.BLINKY, 1, 1)
    assert blinky.next_move() is Direction.SOUTH


@pytest.mark.parametrize("seed", range(20))
def test_sem_jogador_move_para_direcao_legal(mini_board, make_ghost, decisions, seed):
    ghost = make_ghost(mini_board, Kind.BLINKY, 1, 1, seed=seed, observers=[decisions.append])
    assert ghost.next_move() in {Direction.EAST, Direction.SOUTH}
    assert decisions[-1].outcome is Outcome.NO_PLAYER


def test_jogador_isolado_cai_no_aleatorio(split_board, make_player, make_ghost, decisions):
    make_player(split_board, 5, 2)
    ghost = make_ghost(split_board, Kind.PINKY, 1, 1, observers=[decisions.append])
    assert ghost.next_move() in ghost.legal_directions()
    assert decisions[-1].outcome is Outcome.NO_PLAYER


def test_alvo_fora_do_tabuleiro(open_board, make_player, make_ghost, decisions):
    make_player(open_board, 8, 5, Direction.EAST)
    pinky = make_ghost(open_board, Kind.PINKY, 2, 8, observers=[decisions.append])
    assert pinky.next_move() in pinky.legal_directions()
    assert decisions[-1].outcome is Outcome.NO_TARGET


def test_alvo_inalcancavel(make_player, make_ghost, decisions):
    matrix = [[0] * 10 for _ in range(10)]
    matrix[5][6] = 3
    board = Board.from_matrix(matrix)
    make_player(board, 2, 5, Direction.EAST)
    pinky = make_ghost(board, Kind.PINKY, 2, 8, observers=[decisions.append])

    assert pinky.next_move() in pinky.legal_directions()
    assert decisions[-1].outcome is Outcome.NO_PATH
    assert decisions[-1].target is board.square_at(6, 5)
    assert decisions[-1].random


def test_ja_no_alvo_cai_no_aleatorio(open_board, make_player, make_ghost, decisions):
    make_player(open_board, 4, 4)
    blinky = make_ghost(open_board, Kind.BLINKY, 4, 4, observers=[decisions.append])
    assert blinky.next_move() in blinky.legal_directions()
    assert decisions[-1].outcome is Outcome.NO_PATH
    assert decisions[-1].path == []


def test_encurralado_mantem_a_direcao(make_ghost):
    board = Board.open(1, 1)
    ghost = make_ghost(board, Kind.CLYDE, 0, 0)
    ghost.direction = Direction.SOUTH
    assert ghost.legal_directions() == []
    assert ghost.next_move() is Direction.SOUTH


def test_patrulha_vai_para_o_canto(open_board, make_ghost):
    """Scatter ignores the player entirely, even when there is none."""
    ghost = make_ghost(open_board, Kind.PINKY, 0, 3, home=open_board.square_at(0, 0))
    ghost.mode = GhostMode.SCATTER
    assert ghost.next_move() is Direction.NORTH


def test_patrulha_sem_canto(open_board, make_player, make_ghost, decisions):
    make_player(open_board, 5, 5)
    ghost = make_ghost(open_board, Kind.PINKY, 0, 3, observers=[decisions.append])
    ghost.mode = GhostMode.SCATTER
    ghost.next_move()
    assert decisions[-1].outcome is Outcome.NO_TARGET


def test_assustado_anda_aleatorio(mini_board, make_player, make_ghost, decisions):
    make_player(mini_board, 3, 3)
    ghost = make_ghost(mini_board, Kind.BLINKY, 1, 1, observers=[decisions.append])
    ghost.mode = GhostMode.FRIGHTENED
    assert ghost.next_move() in {Direction.EAST, Direction.SOUTH}
    assert decisions[-1].outcome is Outcome.FRIGHTENED


def test_inversao_vale_para_o_proximo_passo(open_board, make_player, make_ghost, decisions):
    """Reversed facing wins once, even against the path, then pathing resumes."""
    make_player(open_board, 5, 0)
    blinky = make_ghost(open_board, Kind.BLINKY, 5, 5, observers=[decisions.append])
    blinky.direction = Direction.NORTH

    blinky.reverse()

    assert blinky.next_move() is Direction.SOUTH
    assert decisions[-1].outcome is Outcome.REVERSED
    assert not decisions[-1].random
    assert blinky.next_move() is Direction.NORTH
    assert decisions[-1].outcome is Outcome.PATH_FOUND


def test_inversao_bloqueada_segue_o_caminho(mini_board, make_player, make_ghost, decisions):
    make_player(mini_board, 3, 3)
    blinky = make_ghost(mini_board, Kind.BLINKY, 1, 1, observers=[decisions.append])
    blinky.direction = Direction.EAST

    blinky.reverse()  # oeste é parede

    assert blinky.next_move() is Direction.SOUTH
    assert decisions[-1].outcome is Outcome.PATH_FOUND
    assert not blinky.reversing


def test_fantasma_nao_entra_em_parede(mini_board, make_ghost):
    ghost = make_ghost(mini_board, Kind.INKY, 2, 1)
    assert set(ghost.legal_directions()) == {Direction.WEST, Direction.EAST}


def test_sem_casa_nao_tem_direcoes():
    assert Ghost(Kind.BLINKY, observers=[]).legal_directions() == []


def test_variante_invalida():
    with pytest.raises(ValueError):
        Ghost(Kind.PLAYER)


# ======================================================================
# INTERVALO DE MOVIMENTO
# ======================================================================

@pytest.mark.parametrize("kind, base", [
    (Kind.BLINKY, 250), (Kind.PINKY, 125), (Kind.INKY, 250), (Kind.CLYDE, 250),
])
def test_intervalo_com_variacao(kind, base):
    ghost = Ghost(kind, rng=random.Random(1), observers=[])
    samples = [ghost.get_interval() for _ in range(200)]
    assert all(base <= s < base + 50 for s in samples)
    assert len(set(samples)) > 1


def test_intervalo_reproduzivel_com_semente():
    a = Ghost(Kind.PINKY, rng=random.Random(42), observers=[])
    b = Ghost(Kind.PINKY, rng=random.Random(42), observers=[])
    assert [a.get_interval() for _ in range(10)] == [b.get_interval() for _ in range(10)]


# ======================================================================
# OBSERVADORES
# ======================================================================

def test_observador_padrao_registra_no_log(make_player, caplog):
    board = Board.open(10, 10)
    make_player(board, 2, 2, Direction.SOUTH)
    pinky = Ghost(Kind.PINKY, rng=random.Random(0))
    pinky.occupy(board.square_at(2, 8))
    assert pinky.observers == [log_decision]

    with caplog.at_level(logging.DEBUG, logger="ghosts.observers"):
        pinky.next_move()

    assert "Found path to destination" in caplog.text
    assert "Moving NORTH" in caplog.text


def test_log_sem_jogador(mini_board, make_ghost, caplog):
    ghost = make_ghost(mini_board, Kind.BLINKY, 1, 1, observers=[log_decision])
    with caplog.at_level(logging.DEBUG, logger="ghosts.observers"):
        ghost.next_move()
    assert "No player found, will move around randomly." in caplog.text
