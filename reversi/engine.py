"""Stateful game engine wrapping the functional rules in :mod:`reversi.core`."""

from __future__ import annotations

import logging
import threading
from typing import List, Optional, Tuple

import numpy as np

from reversi.core import (
    Color,
    GameState,
    MoveError,
    MoveRecord,
    Position,
    apply_move,
    enumerate_legal_moves,
    in_bounds,
    initialize_game_state,
    is_legal_move,
    is_opening_phase,
)

logger = logging.getLogger(__name__)


class GameEngine:
    """Owns the board, turn and stone counters of one game.

    Every public call holds a single re-entrant lock, so an engine may be
    shared between threads. A move is computed on a copy of the state and
    swapped in only once it has been fully applied; readers never see a
    half-flipped board.
    """

    def __init__(self, state: Optional[GameState] = None) -> None:
        self._lock = threading.RLock()
        self._state = state.copy() if state is not None else initialize_game_state()
        self._history: List[MoveRecord] = []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell_at(self, x: int, y: int) -> Optional[Color]:
        """Return the colour at (x, y), or ``None`` for an empty cell.

        Raises ``IndexError`` for coordinates off the board.
        """
        if not in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is off the board.")
        with self._lock:
            return self._state.cell(x, y)

    def next_to_move(self) -> Color:
        with self._lock:
            return self._state.current_player

    def stone_count(self, color: Color) -> int:
        with self._lock:
            return self._state.stone_count(color)

    @property
    def dark_stones(self) -> int:
        return self.stone_count(Color.DARK)

    @property
    def light_stones(self) -> int:
        return self.stone_count(Color.LIGHT)

    @property
    def move_count(self) -> int:
        with self._lock:
            return self._state.move_count

    @property
    def is_opening_phase(self) -> bool:
        with self._lock:
            return is_opening_phase(self._state)

    @property
    def last_move(self) -> Optional[MoveRecord]:
        with self._lock:
            return self._state.last_move

    @property
    def history(self) -> Tuple[MoveRecord, ...]:
        with self._lock:
            return tuple(self._history)

    def legal_moves(self) -> List[Position]:
        with self._lock:
            return enumerate_legal_moves(self._state)

    def is_legal(self, x: int, y: int) -> bool:
        with self._lock:
            return is_legal_move(self._state, x, y)

    def board(self) -> np.ndarray:
        with self._lock:
            return self._state.board.copy()

    def snapshot(self) -> GameState:
        with self._lock:
            return self._state.copy()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def apply_move(self, mover: Color, x: int, y: int) -> MoveRecord:
        """Place a piece of ``mover`` at (x, y).

        Raises a :class:`~reversi.core.MoveError` subclass if the move is
        illegal; the engine is left untouched in that case.
        """
        with self._lock:
            try:
                next_state = apply_move(self._state, mover, x, y)
            except MoveError as exc:
                logger.info("Rejected %s at (%d, %d): %s", mover.name, x, y, exc.kind.value)
                raise
            self._state = next_state
            record = next_state.last_move
            self._history.append(record)
            logger.debug(
                "Move %d: %s at (%d, %d) flipped %d (dark=%d, light=%d)",
                next_state.move_count,
                mover.name,
                x,
                y,
                record.captured,
                next_state.stone_count(Color.DARK),
                next_state.stone_count(Color.LIGHT),
            )
            return record

    def reset(self) -> None:
        with self._lock:
            self._state = initialize_game_state()
            self._history.clear()

    def __repr__(self) -> str:
        with self._lock:
            return f"GameEngine({self._state!r})"
