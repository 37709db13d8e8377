# -*- coding: utf-8 -*-
"""
Board simulation engine for the 4096 game.

It includes the line reducer, the direction transforms, the move engine, the tile spawner,
and the terminal and win checks. All functions are pure: boards go in, new boards come out.
"""

from .gameboard import (
    BOARD_SIZE,
    TILE_SPAWN_PROBS,
    Direction,
    InvalidBoardError,
    MoveResult,
    apply_move,
    as_board,
    fill_board,
    has_won,
    max_tile,
    merge_line,
    new_board,
    orient,
    restore,
    slide_and_merge,
    spawn_outcomes,
    spawn_tile,
)
from .gamemove import can_slide_left, has_any_move, illegal_directions, legal_directions

__all__ = [
    "BOARD_SIZE",
    "TILE_SPAWN_PROBS",
    "Direction",
    "InvalidBoardError",
    "MoveResult",
    "apply_move",
    "as_board",
    "can_slide_left",
    "fill_board",
    "has_any_move",
    "has_won",
    "illegal_directions",
    "legal_directions",
    "max_tile",
    "merge_line",
    "new_board",
    "orient",
    "restore",
    "slide_and_merge",
    "spawn_outcomes",
    "spawn_tile",
]
