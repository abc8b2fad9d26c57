from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import numpy as np

from reversi.core import Color, GameState
from reversi.env import ReversiEnv

logger = logging.getLogger(__name__)


class Policy:
    """Policy interface producing action probabilities over legal moves."""

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        raise NotImplementedError


class RandomPolicy(Policy):
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        logits = legal_mask.astype(np.float64)
        if logits.sum() == 0:
            return logits
        probs = logits / logits.sum()
        return probs.astype(np.float32, copy=True)


@dataclass
class MatchConfig:
    episodes: int = 10
    seed: Optional[int] = None
    max_moves: Optional[int] = None


@dataclass
class MatchResult:
    games_played: int
    average_length: float
    dark_stones: List[int] = field(default_factory=list)
    light_stones: List[int] = field(default_factory=list)
    board_full: int = 0


def play_random_games(
    config: MatchConfig,
    *,
    policy_dark: Optional[Policy] = None,
    policy_light: Optional[Policy] = None,
    env_factory: Optional[Callable[[], ReversiEnv]] = None,
) -> MatchResult:
    """Play ``config.episodes`` games and report the final stone counts of each.

    A game stops when the side to move has no legal placement, or after
    ``config.max_moves`` moves if set.
    """
    env_factory = env_factory or ReversiEnv
    rng = np.random.default_rng(config.seed)
    policy_dark = policy_dark or RandomPolicy(rng)
    policy_light = policy_light or RandomPolicy(rng)

    dark_stones: List[int] = []
    light_stones: List[int] = []
    board_full = 0
    total_moves = 0

    for episode in range(config.episodes):
        env = env_factory()
        _, info = env.reset(seed=None if config.seed is None else config.seed + episode)
        terminated = not info["legal_action_mask"].any()
        moves = 0

        while not terminated:
            if config.max_moves is not None and moves >= config.max_moves:
                break
            state = env.engine.snapshot()
            legal_mask = info["legal_action_mask"]
            policy = policy_dark if state.current_player == Color.DARK else policy_light
            probs = policy.act(state, legal_mask).astype(np.float64)
            if probs.sum() <= 0:
                probs = legal_mask.astype(np.float64)
            probs = probs / probs.sum()
            action_index = int(rng.choice(len(probs), p=probs))
            _, _, terminated, truncated, info = env.step(action_index)
            moves += 1
            if truncated:
                terminated = True

        engine = env.engine
        dark_stones.append(engine.dark_stones)
        light_stones.append(engine.light_stones)
        if engine.dark_stones + engine.light_stones == engine.board().size:
            board_full += 1
        total_moves += moves
        logger.debug(
            "Game %d finished after %d moves (dark=%d, light=%d)",
            episode,
            moves,
            engine.dark_stones,
            engine.light_stones,
        )

    return MatchResult(
        games_played=config.episodes,
        average_length=total_moves / max(1, config.episodes),
        dark_stones=dark_stones,
        light_stones=light_stones,
        board_full=board_full,
    )
