"""
Registry for player implementations.

Maps player keys (e.g., 'random', 'greedy') to player classes. To add a
player, create a module with a Player subclass, import it here and add an
entry to PLAYER_CLASSES.
"""

from typing import Dict, List, Optional, Type

from .base import Player
from .greedy_player import GreedyPlayer
from .random_player import RandomPlayer


PLAYER_CLASSES: Dict[str, Type[Player]] = {
    "random": RandomPlayer,
    "greedy": GreedyPlayer,
}

DEFAULT_PLAYER = "greedy"

# Canonical list of available player keys (for CLI choices)
AVAILABLE_PLAYERS = list(PLAYER_CLASSES.keys())


def get_player_class(player_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        player_key: One of 'random', 'greedy'. If None or empty, returns the default.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If player_key is not recognized.
    """
    if not player_key or player_key.strip() == "":
        player_key = DEFAULT_PLAYER

    player_key = player_key.strip().lower()

    if player_key not in PLAYER_CLASSES:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(
            f"Unknown player '{player_key}'. Available players: {available}"
        )

    return PLAYER_CLASSES[player_key]


def list_players() -> List[Dict[str, str]]:
    """
    Return metadata about all available players.

    Returns:
        List of dicts with 'key' and 'description' for each player.
    """
    return [
        {"key": "random", "description": "Random safe move each round"},
        {"key": "greedy", "description": "Safe move closest to the food"},
    ]
