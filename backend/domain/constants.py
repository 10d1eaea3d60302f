"""
Game constants for the snake engine.
"""

from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """
    Movement directions.

    x is the row axis of the rendered board and y the column axis, so UP and
    DOWN move along x while LEFT and RIGHT move along y.
    """

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def offset(self) -> Tuple[int, int]:
        return OFFSETS[self]

    @property
    def opposite(self) -> "Direction":
        return OPPOSITES[self]

    @classmethod
    def parse(cls, raw) -> "Direction":
        """Accept a Direction or its (case-insensitive) name."""
        if isinstance(raw, Direction):
            return raw
        name = str(raw).strip().upper()
        try:
            return cls(name)
        except ValueError:
            raise ValueError(
                f"Invalid direction {raw!r}. Expected one of: "
                f"{', '.join(d.value for d in cls)}"
            ) from None


UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OFFSETS = {
    UP: (-1, 0),
    DOWN: (1, 0),
    LEFT: (0, -1),
    RIGHT: (0, 1),
}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

DEFAULT_DIRECTION = LEFT

# Board settings
MIN_BOARD_SIZE = 9

# Numeric ranges: coordinates and food counts fit in one byte, the score in
# two. The score range must exceed the largest reachable score.
COORD_MAX = 0xFF
SCORE_MAX = 0xFFFF
assert SCORE_MAX > COORD_MAX * COORD_MAX, "score range must exceed the largest board"

# Number of random draws before food placement falls back to picking
# among the free cells directly
FOOD_PLACEMENT_ATTEMPTS = 1000

# Render glyphs, two characters per cell
BORDER = "▒▒"
SNAKE_HEAD = "██"
SNAKE_BODY = "██"
FOOD = "● "
EMPTY = "  "
