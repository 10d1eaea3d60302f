"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import VALID_MOVES, Direction
from domain.game_state import GameState
from domain.snake import Cell
from .base import Player


def safe_moves(game_state: GameState) -> List[Direction]:
    """
    Directions that neither leave the board nor hit the snake.

    The tail counts as an obstacle because collisions are checked before
    the body follows the head. Reversing is left out since the engine would
    turn it into the last direction anyway.
    """
    head = Cell(*game_state.head)
    body = set(game_state.snake_positions)
    reverse = game_state.last_direction.opposite

    moves: List[Direction] = []
    for move in sorted(VALID_MOVES, key=lambda d: d.value):
        if move is reverse:
            continue
        new_cell = head.shifted(move.offset)
        if not new_cell.in_bounds(game_state.width, game_state.height):
            continue
        if new_cell in body:
            continue
        moves.append(move)
    return moves


class RandomPlayer(Player):
    """
    A random AI that picks a valid direction that avoids walls and self-collisions.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, game_state: GameState) -> Direction:
        valid_moves = safe_moves(game_state)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES, key=lambda d: d.value))

        return self.rng.choice(valid_moves)
