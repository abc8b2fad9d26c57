"""Feature extraction helpers for external consumers of the engine."""

from .observation import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    build_aux_vector,
    build_board_tensor,
    state_to_numpy,
)

__all__ = [
    "AUX_VECTOR_SIZE",
    "BOARD_CHANNELS",
    "build_board_tensor",
    "build_aux_vector",
    "state_to_numpy",
]
