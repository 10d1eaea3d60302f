"""
Greedy player implementation - heads straight for the food.
"""

from domain.constants import Direction
from domain.game_state import GameState
from domain.snake import Cell
from .random_player import RandomPlayer, safe_moves


class GreedyPlayer(RandomPlayer):
    """
    Picks the safe move that brings the head closest to the food
    (Manhattan distance). Ties go to the first direction in UP, DOWN,
    LEFT, RIGHT order. Falls back to a random move when nothing is safe.
    """

    name = "greedy"

    def get_move(self, game_state: GameState) -> Direction:
        valid_moves = safe_moves(game_state)
        if not valid_moves or game_state.food is None:
            return super().get_move(game_state)

        head = Cell(*game_state.head)
        fx, fy = game_state.food

        def distance(move: Direction) -> int:
            nx, ny = head.shifted(move.offset)
            return abs(nx - fx) + abs(ny - fy)

        order = list(Direction)
        return min(valid_moves, key=lambda m: (distance(m), order.index(m)))
