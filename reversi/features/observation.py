from __future__ import annotations

from typing import Tuple

import numpy as np

from reversi.core import ACTION_SPACE_SIZE, BOARD_SIZE, GameState, is_opening_phase
from reversi.core.state import EMPTY, Color

BOARD_CHANNELS = 3  # mover stones, opponent stones, empty cells
AUX_VECTOR_SIZE = 3  # dark-to-move flag, opening-phase flag, progress


def build_board_tensor(state: GameState) -> np.ndarray:
    """Return board tensor with shape (3, 8, 8) channel-first, indexed [channel, x, y]."""
    tensor = np.zeros((BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE), dtype=np.float32)
    mover = int(state.current_player)
    tensor[0] = state.board == mover
    tensor[1] = state.board == int(state.current_player.opponent)
    tensor[2] = state.board == EMPTY
    return tensor


def build_aux_vector(state: GameState) -> np.ndarray:
    aux = np.zeros((AUX_VECTOR_SIZE,), dtype=np.float32)
    aux[0] = 1.0 if state.current_player == Color.DARK else 0.0
    aux[1] = 1.0 if is_opening_phase(state) else 0.0
    aux[2] = state.move_count / ACTION_SPACE_SIZE
    return aux


def state_to_numpy(state: GameState) -> Tuple[np.ndarray, np.ndarray]:
    return build_board_tensor(state), build_aux_vector(state)
