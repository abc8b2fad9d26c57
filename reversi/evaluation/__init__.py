"""Game-playing harness for exercising the engine."""

from .match import MatchConfig, MatchResult, Policy, RandomPolicy, play_random_games

__all__ = ["MatchConfig", "MatchResult", "Policy", "RandomPolicy", "play_random_games"]
