"""Reversi rules engine package."""

from . import core, env, evaluation, features
from .core import (
    BOARD_SIZE,
    CellOccupiedError,
    Color,
    GameState,
    InvalidOpeningCellError,
    MoveError,
    MoveErrorKind,
    MoveRecord,
    NoCaptureError,
    OutOfBoundsError,
    WrongTurnError,
)
from .engine import GameEngine
from .env import ReversiEnv
from .evaluation import MatchConfig, MatchResult, RandomPolicy, play_random_games
from .features import build_aux_vector, build_board_tensor, state_to_numpy

__all__ = [
    "core",
    "env",
    "evaluation",
    "features",
    "BOARD_SIZE",
    "Color",
    "GameState",
    "MoveRecord",
    "MoveError",
    "MoveErrorKind",
    "WrongTurnError",
    "OutOfBoundsError",
    "InvalidOpeningCellError",
    "CellOccupiedError",
    "NoCaptureError",
    "GameEngine",
    "ReversiEnv",
    "MatchConfig",
    "MatchResult",
    "RandomPolicy",
    "play_random_games",
    "build_board_tensor",
    "build_aux_vector",
    "state_to_numpy",
]
