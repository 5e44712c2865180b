# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 board engine, with a game session and best-score storage.
"""

from .config import GameConfig
from .core import Direction, MoveOutcome
from .envs import GameSession, GameStatus

__all__ = ["GameConfig", "Direction", "MoveOutcome", "GameSession", "GameStatus"]
