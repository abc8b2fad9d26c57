from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from .errors import (
    CellOccupiedError,
    InvalidOpeningCellError,
    MoveError,
    NoCaptureError,
    OutOfBoundsError,
    WrongTurnError,
)
from .state import EMPTY, Color, GameState, MoveRecord, Position

BOARD_SIZE = 8
OPENING_MOVES = 4
CENTRE_INDICES: Tuple[int, int] = (BOARD_SIZE // 2 - 1, BOARD_SIZE // 2)
CENTRE_CELLS: Tuple[Position, ...] = tuple((x, y) for x in CENTRE_INDICES for y in CENTRE_INDICES)
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, -1),  # N
    (0, 1),  # S
    (1, 0),  # E
    (-1, 0),  # W
    (1, -1),  # NE
    (-1, -1),  # NW
    (1, 1),  # SE
    (-1, 1),  # SW
)
ACTION_SPACE_SIZE = BOARD_SIZE * BOARD_SIZE


def encode_move(x: int, y: int) -> int:
    if not in_bounds(x, y):
        raise ValueError(f"Cell ({x}, {y}) is off the board.")
    return y * BOARD_SIZE + x


def decode_move(index: int) -> Position:
    if not 0 <= index < ACTION_SPACE_SIZE:
        raise ValueError("Move index out of range.")
    return index % BOARD_SIZE, index // BOARD_SIZE


def initialize_game_state() -> GameState:
    board = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    stone_counts = np.zeros(2, dtype=np.int16)
    return GameState(
        board=board,
        stone_counts=stone_counts,
        current_player=Color.DARK,
        move_count=0,
    )


def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def is_opening_phase(state: GameState) -> bool:
    return state.move_count < OPENING_MOVES


def scan_direction(board: np.ndarray, x: int, y: int, dx: int, dy: int, color: Color) -> List[Position]:
    """Return the opponent run bracketed by ``color`` walking from (x, y) along (dx, dy).

    The origin itself is not part of the run. An empty list means the walk hit
    the edge, an empty cell, or an own piece with nothing in between.
    """
    opponent = int(color.opponent)
    run: List[Position] = []
    cx, cy = x + dx, y + dy
    while in_bounds(cx, cy) and board[cx, cy] == opponent:
        run.append((cx, cy))
        cx += dx
        cy += dy
    if run and in_bounds(cx, cy) and board[cx, cy] == int(color):
        return run
    return []


def collect_captures(board: np.ndarray, x: int, y: int, color: Color) -> List[Position]:
    captures: List[Position] = []
    for dx, dy in DIRECTIONS:
        captures.extend(scan_direction(board, x, y, dx, dy, color))
    return captures


def check_move(state: GameState, mover: Color, x: int, y: int) -> Optional[MoveError]:
    """Validate a move without applying it; return the rejection or ``None``."""
    if mover != state.current_player:
        return WrongTurnError(mover, x, y, f"It is {state.current_player.name}'s turn, not {mover.name}'s.")
    if not in_bounds(x, y):
        return OutOfBoundsError(mover, x, y, f"Cell ({x}, {y}) is off the board.")

    if is_opening_phase(state):
        if (x, y) not in CENTRE_CELLS:
            return InvalidOpeningCellError(
                mover, x, y, f"The first {OPENING_MOVES} pieces must be placed in the centre."
            )
        if state.board[x, y] != EMPTY:
            return CellOccupiedError(mover, x, y, f"Cell ({x}, {y}) is already occupied.")
        return None

    if state.board[x, y] != EMPTY:
        return CellOccupiedError(mover, x, y, f"Cell ({x}, {y}) is already occupied.")
    if not collect_captures(state.board, x, y, mover):
        return NoCaptureError(mover, x, y, f"Placing at ({x}, {y}) does not capture any opponent piece.")
    return None


def apply_move(state: GameState, mover: Color, x: int, y: int, *, in_place: bool = False) -> GameState:
    error = check_move(state, mover, x, y)
    if error is not None:
        raise error

    target = state if in_place else state.copy()

    captured: List[Position] = []
    if not is_opening_phase(target):
        captured = collect_captures(target.board, x, y, mover)

    target.board[x, y] = int(mover)
    for cx, cy in captured:
        target.board[cx, cy] = int(mover)

    target.move_count += 1
    target.stone_counts[int(mover) - 1] += len(captured) + 1
    target.stone_counts[int(mover.opponent) - 1] -= len(captured)
    target.last_move = MoveRecord(mover=mover, x=x, y=y, flipped=tuple(captured))
    target.current_player = mover.opponent
    return target


def is_legal_move(state: GameState, x: int, y: int) -> bool:
    return check_move(state, state.current_player, x, y) is None


def enumerate_legal_moves(state: GameState) -> List[Position]:
    legal: List[Position] = []
    for y in range(BOARD_SIZE):
        for x in range(BOARD_SIZE):
            if is_legal_move(state, x, y):
                legal.append((x, y))
    return legal
