"""Core game logic for the Reversi engine."""

from .state import Color, GameState, MoveRecord, Position
from .errors import (
    CellOccupiedError,
    InvalidOpeningCellError,
    MoveError,
    MoveErrorKind,
    NoCaptureError,
    OutOfBoundsError,
    WrongTurnError,
)
from .rules import (
    ACTION_SPACE_SIZE,
    BOARD_SIZE,
    CENTRE_CELLS,
    DIRECTIONS,
    OPENING_MOVES,
    apply_move,
    check_move,
    collect_captures,
    decode_move,
    encode_move,
    enumerate_legal_moves,
    in_bounds,
    initialize_game_state,
    is_legal_move,
    is_opening_phase,
    scan_direction,
)

__all__ = [
    "Color",
    "GameState",
    "MoveRecord",
    "Position",
    "MoveError",
    "MoveErrorKind",
    "WrongTurnError",
    "OutOfBoundsError",
    "InvalidOpeningCellError",
    "CellOccupiedError",
    "NoCaptureError",
    "ACTION_SPACE_SIZE",
    "BOARD_SIZE",
    "CENTRE_CELLS",
    "DIRECTIONS",
    "OPENING_MOVES",
    "apply_move",
    "check_move",
    "collect_captures",
    "decode_move",
    "encode_move",
    "enumerate_legal_moves",
    "in_bounds",
    "initialize_game_state",
    "is_legal_move",
    "is_opening_phase",
    "scan_direction",
]
