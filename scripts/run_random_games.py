#!/usr/bin/env python3
"""Play random-vs-random games through the engine and print a JSON summary."""

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, Optional, Sequence

import yaml

from reversi.evaluation import MatchConfig, play_random_games


def load_yaml_config(path_str: Optional[str]) -> Dict:
    if not path_str:
        return {}
    path = Path(path_str)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def build_match_config(args: argparse.Namespace, cfg: Dict) -> MatchConfig:
    episodes = args.episodes if args.episodes is not None else cfg.get("episodes", 10)
    seed = args.seed if args.seed is not None else cfg.get("seed")
    max_moves = args.max_moves if args.max_moves is not None else cfg.get("max_moves")
    return MatchConfig(episodes=episodes, seed=seed, max_moves=max_moves)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", type=str, default="configs/random_games.yaml")
    parser.add_argument("--episodes", type=int)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--max-moves", type=int)
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> Dict:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = load_yaml_config(args.config)
    config = build_match_config(args, cfg)
    result = play_random_games(config)
    summary = {
        "games_played": result.games_played,
        "average_length": result.average_length,
        "board_full": result.board_full,
        "dark_stones": result.dark_stones,
        "light_stones": result.light_stones,
    }
    print(json.dumps(summary, indent=2))
    return summary


if __name__ == "__main__":
    main()
