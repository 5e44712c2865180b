# -*- coding: utf-8 -*-
"""
Game session for 2048.

This module provides the `GameSession` class, which owns the board, score and best score of one game and drives its
lifecycle (`GameStatus`).
"""

from .session import GameSession, GameStatus

__all__ = ["GameSession", "GameStatus"]
