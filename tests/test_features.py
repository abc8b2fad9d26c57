import numpy as np

from reversi.core import Color, apply_move, initialize_game_state
from reversi.features import AUX_VECTOR_SIZE, BOARD_CHANNELS, build_board_tensor, state_to_numpy


def test_state_to_numpy_initial_board():
    state = initialize_game_state()
    board, aux = state_to_numpy(state)

    assert board.shape == (BOARD_CHANNELS, 8, 8)
    assert aux.shape == (AUX_VECTOR_SIZE,)
    # Every cell is empty
    assert board[2].sum() == 64
    assert board[:2].sum() == 0
    assert aux[0] == 1.0
    assert aux[1] == 1.0


def test_board_tensor_is_relative_to_mover():
    state = initialize_game_state()
    state = apply_move(state, Color.DARK, 3, 3)
    board = build_board_tensor(state)

    # Light to move: the dark stone shows up in the opponent plane
    assert board[1, 3, 3] == 1.0
    assert board[0].sum() == 0
    assert board[2].sum() == 63


def test_aux_vector_after_opening():
    state = initialize_game_state()
    for mover, x, y in ((Color.DARK, 4, 3), (Color.LIGHT, 3, 3), (Color.DARK, 3, 4), (Color.LIGHT, 4, 4)):
        state = apply_move(state, mover, x, y)

    _, aux = state_to_numpy(state)

    assert aux[0] == 1.0
    assert aux[1] == 0.0
    assert np.isclose(aux[2], 4 / 64)
