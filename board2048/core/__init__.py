# -*- coding: utf-8 -*-
"""
Board engine for the 2048 game.

It includes functions for merging lines, sliding and moving the board, spawning random tiles,
listing empty cells and detecting the end of a game, together with the move directions and
legal-move helpers.
"""

from .gameboard import (
    TILE_SPAWN_PROBS,
    EmptyCells,
    MoveOutcome,
    empty_cells,
    fill_cells,
    has_won,
    is_game_over,
    merge_line,
    move,
    new_board,
    slide_and_merge,
    spawn_random_tile,
)
from .gamemove import Direction, illegal_actions, legal_actions, legal_actions_mask, parse_direction

__all__ = [
    "TILE_SPAWN_PROBS",
    "Direction",
    "EmptyCells",
    "MoveOutcome",
    "parse_direction",
    "legal_actions",
    "legal_actions_mask",
    "illegal_actions",
    "merge_line",
    "slide_and_merge",
    "move",
    "empty_cells",
    "spawn_random_tile",
    "fill_cells",
    "new_board",
    "is_game_over",
    "has_won",
]
