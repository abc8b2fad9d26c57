from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

BoardArray = NDArray[np.int8]

EMPTY = 0


class Color(IntEnum):
    DARK = 1
    LIGHT = 2

    @property
    def opponent(self) -> "Color":
        return Color.LIGHT if self is Color.DARK else Color.DARK


# Convenient tuple aliases used across modules
Position = Tuple[int, int]


@dataclass(frozen=True)
class MoveRecord:
    mover: Color
    x: int
    y: int
    flipped: Tuple[Position, ...] = field(default_factory=tuple)

    @property
    def captured(self) -> int:
        return len(self.flipped)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass
class GameState:
    board: BoardArray  # shape (8, 8), dtype=np.int8, indexed [x, y], values 0 (empty) or a Color
    stone_counts: np.ndarray  # shape (2,), dtype=np.int16, indexed by color - 1
    current_player: Color = Color.DARK
    move_count: int = 0
    last_move: Optional[MoveRecord] = None

    def copy(self) -> "GameState":
        return GameState(
            board=self.board.copy(),
            stone_counts=self.stone_counts.copy(),
            current_player=self.current_player,
            move_count=self.move_count,
            last_move=self.last_move,
        )

    def cell(self, x: int, y: int) -> Optional[Color]:
        value = int(self.board[x, y])
        if value == EMPTY:
            return None
        return Color(value)

    def stone_count(self, color: Color) -> int:
        return int(self.stone_counts[int(color) - 1])

    @property
    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.board))

    def render(self) -> str:
        symbols = {0: ".", 1: "X", 2: "O"}
        size = self.board.shape[0]
        rows = []
        for y in range(size):
            rows.append("".join(symbols[int(self.board[x, y])] for x in range(size)))
        return "\n".join(rows)

    def __repr__(self) -> str:
        return (
            f"GameState(current={self.current_player.name}, moves={self.move_count}, "
            f"dark={self.stone_count(Color.DARK)}, light={self.stone_count(Color.LIGHT)})\n"
            f"{self.render()}"
        )
