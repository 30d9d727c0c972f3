"""
Console front end for Minesweeper.

Provides the text renderer, move parser and game loop.
"""
from .renderer import render_board
from .parser import Action, Move, InvalidMoveError, parse_move, prompt_move
from .loop import (
    DEFAULT_FIELD_SIZE,
    DEFAULT_MINES,
    play,
    prompt_mine_count,
    main,
)

__all__ = [
    "render_board",
    "Action",
    "Move",
    "InvalidMoveError",
    "parse_move",
    "prompt_move",
    "DEFAULT_FIELD_SIZE",
    "DEFAULT_MINES",
    "play",
    "prompt_mine_count",
    "main",
]
