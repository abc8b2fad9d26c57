"""Gymnasium environment around the game engine."""

from .gym_env import ReversiEnv

__all__ = ["ReversiEnv"]
