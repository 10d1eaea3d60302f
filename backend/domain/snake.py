"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, NamedTuple, Optional, Tuple


class Cell(NamedTuple):
    """A position on the grid. x is the row, y the column."""

    x: int
    y: int

    def shifted(self, offset: Tuple[int, int]) -> "Cell":
        return Cell(self.x + offset[0], self.y + offset[1])

    def in_bounds(self, width: int, height: int) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of Cells from head at index 0 to tail at the end
        alive: whether this snake is still alive
        death_reason: 'wall' or 'self'
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]):
        self.positions = deque(Cell(*p) for p in positions)
        self.alive = True
        self.death_reason: Optional[str] = None

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Cell:
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, cell) -> bool:
        return cell in self.positions

    def occurrences(self, cell: Cell) -> int:
        """Count the segments sitting on ``cell``."""
        return sum(1 for p in self.positions if p == cell)

    def move_head(self, cell: Cell) -> Cell:
        """Put the head on ``cell`` in place and return where it was."""
        previous = self.positions[0]
        self.positions[0] = cell
        return previous

    def follow(self, previous_head: Cell) -> Cell:
        """
        Shift every non-head segment onto the cell its predecessor held
        before the head moved.

        Returns the cell vacated by the tail.
        """
        hold = previous_head
        for i in range(1, len(self.positions)):
            self.positions[i], hold = hold, self.positions[i]
        return hold

    def grow(self, cell: Cell) -> None:
        self.positions.append(cell)

    def kill(self, reason: str) -> None:
        self.alive = False
        self.death_reason = reason
