"""
GameState entity - a snapshot of the game at a point in time.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .constants import Direction
from .renderer import render_board


class GameStatus(str, Enum):
    """Outcome of a move. WIN and LOSS end the game."""

    CONTINUE = "continue"
    WIN = "win"
    LOSS = "loss"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.CONTINUE


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        round_number: number of moves played so far
        snake_positions: list of (x, y) from head to tail
        food: (x, y) of the food, or None once the board is full
        score: current score
        remaining_food: food still needed to win
        width, height: board dimensions
        last_direction: last accepted direction
        status: status returned by the latest move
        death_reason: 'wall' or 'self' after a loss
    """

    def __init__(
        self,
        round_number: int,
        snake_positions: List[Tuple[int, int]],
        food: Optional[Tuple[int, int]],
        score: int,
        remaining_food: int,
        width: int,
        height: int,
        last_direction: Direction,
        status: GameStatus = GameStatus.CONTINUE,
        death_reason: Optional[str] = None,
    ):
        self.round_number = round_number
        self.snake_positions = snake_positions
        self.food = food
        self.score = score
        self.remaining_food = remaining_food
        self.width = width
        self.height = height
        self.last_direction = last_direction
        self.status = status
        self.death_reason = death_reason

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake_positions[0]

    def print_board(self) -> str:
        """Returns the same text the engine renders for this state."""
        return render_board(self.width, self.height, self.snake_positions, self.food)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation, tuples become lists."""
        return {
            "round_number": self.round_number,
            "snake_positions": [list(p) for p in self.snake_positions],
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "remaining_food": self.remaining_food,
            "width": self.width,
            "height": self.height,
            "last_direction": self.last_direction.value,
            "status": self.status.value,
            "death_reason": self.death_reason,
        }

    def __repr__(self):
        return (
            f"<GameState round={self.round_number}, food={self.food}, "
            f"length={len(self.snake_positions)}, score={self.score}, "
            f"status={self.status.value}>"
        )
