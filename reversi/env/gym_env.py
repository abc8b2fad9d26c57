from __future__ import annotations

import logging
from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from reversi.core import ACTION_SPACE_SIZE, BOARD_SIZE, decode_move, encode_move
from reversi.engine import GameEngine
from reversi.features import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    build_aux_vector,
    build_board_tensor,
)

logger = logging.getLogger(__name__)


class ReversiEnv(gym.Env):
    """Two-player environment where each step is played by the colour to move.

    The engine has no pass rule, so an episode terminates as soon as the side
    to move has no legal placement. Rewards are always zero; final stone
    counts are reported in ``info``.
    """

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        board_shape = (BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE)
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0.0, high=1.0, shape=board_shape, dtype=np.float32),
                "aux": spaces.Box(low=0.0, high=1.0, shape=(AUX_VECTOR_SIZE,), dtype=np.float32),
            }
        )
        self.action_space = spaces.Discrete(ACTION_SPACE_SIZE)

        self._engine = GameEngine()

    @property
    def engine(self) -> GameEngine:
        return self._engine

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        self._engine.reset()
        logger.debug("Environment reset")
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        if self._enforce_legal and not self.legal_action_mask()[action_index]:
            raise ValueError("Illegal action provided and enforce_legal_actions=True.")

        x, y = decode_move(int(action_index))
        self._engine.apply_move(self._engine.next_to_move(), x, y)

        observation = self._build_observation()
        info = self._build_info()
        terminated = not info["legal_action_mask"].any()
        truncated = False
        return observation, 0.0, terminated, truncated, info

    def legal_action_mask(self) -> np.ndarray:
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        for x, y in self._engine.legal_moves():
            mask[encode_move(x, y)] = 1
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self._engine.snapshot().render()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> Dict[str, np.ndarray]:
        state = self._engine.snapshot()
        return {"board": build_board_tensor(state), "aux": build_aux_vector(state)}

    def _build_info(self) -> Dict[str, np.ndarray]:
        return {
            "legal_action_mask": self.legal_action_mask(),
            "stone_counts": self._engine.snapshot().stone_counts.copy(),
        }
