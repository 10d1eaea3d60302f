"""
Base player interface for the simulation driver.
"""

from domain.constants import Direction
from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player is responsible for returning a move given the current
    game state.
    """

    name = "player"

    def get_move(self, game_state: GameState) -> Direction:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of Direction.UP, DOWN, LEFT, RIGHT
        """
        raise NotImplementedError
