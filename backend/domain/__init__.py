"""
Domain entities for the snake engine.

This module contains the core game entities: the engine, its state
snapshot and the board renderer. None of them perform I/O.
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, Direction
from .errors import InvalidConfiguration, GameOverError
from .snake import Cell, Snake
from .game_state import GameState, GameStatus
from .renderer import BoardRenderer, render_board, render_length
from .engine import SnakeEngine

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'Direction',
    'InvalidConfiguration', 'GameOverError',
    'Cell', 'Snake',
    'GameState', 'GameStatus',
    'BoardRenderer', 'render_board', 'render_length',
    'SnakeEngine',
]
