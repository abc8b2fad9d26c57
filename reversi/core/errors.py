from __future__ import annotations

from enum import Enum

from .state import Color


class MoveErrorKind(Enum):
    WRONG_TURN = "wrong_turn"
    OUT_OF_BOUNDS = "out_of_bounds"
    INVALID_OPENING_CELL = "invalid_opening_cell"
    CELL_OCCUPIED = "cell_occupied"
    NO_CAPTURE = "no_capture"


class MoveError(ValueError):
    """Rejection of an illegal move. The game state is never modified."""

    kind: MoveErrorKind

    def __init__(self, mover: Color, x: int, y: int, message: str) -> None:
        super().__init__(message)
        self.mover = mover
        self.x = x
        self.y = y


class WrongTurnError(MoveError):
    kind = MoveErrorKind.WRONG_TURN


class OutOfBoundsError(MoveError):
    kind = MoveErrorKind.OUT_OF_BOUNDS


class InvalidOpeningCellError(MoveError):
    kind = MoveErrorKind.INVALID_OPENING_CELL


class CellOccupiedError(MoveError):
    kind = MoveErrorKind.CELL_OCCUPIED


class NoCaptureError(MoveError):
    kind = MoveErrorKind.NO_CAPTURE
