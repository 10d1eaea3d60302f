"""
Player implementations for the simulation driver.

This module contains the player abstraction and the implementations
that pick the snake's next move from a game state snapshot.
"""

from .base import Player
from .random_player import RandomPlayer, safe_moves
from .greedy_player import GreedyPlayer
from .variant_registry import get_player_class, list_players, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'RandomPlayer',
    'GreedyPlayer',
    'safe_moves',
    'get_player_class',
    'list_players',
    'AVAILABLE_PLAYERS',
]
