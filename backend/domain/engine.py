"""
SnakeEngine - single-player snake simulation.

The engine owns the board, the snake, the food and the score counters.
Callers drive it one move at a time and read the rendered board between
moves:

    engine = SnakeEngine(width=20, height=20, food_target=10)
    status = engine.move(Direction.UP)
    print(engine.render())

The engine performs no I/O and keeps no reference to its caller.
"""

import logging
import random
from typing import Optional, Tuple, Union

from .constants import (
    COORD_MAX,
    DEFAULT_DIRECTION,
    FOOD_PLACEMENT_ATTEMPTS,
    MIN_BOARD_SIZE,
    SCORE_MAX,
    Direction,
)
from .errors import GameOverError, InvalidConfiguration
from .game_state import GameState, GameStatus
from .renderer import BoardRenderer
from .snake import Cell, Snake

logger = logging.getLogger(__name__)


class SnakeEngine:
    """
    Manages:
      - Board (width, height), fixed for the engine's lifetime
      - The snake, head first
      - A single food cell, never on the snake
      - Score and the food still needed to win
      - The cached board text

    Engines cannot be copied.
    """

    def __init__(
        self,
        width: int,
        height: int,
        food_target: int,
        initial_score: int = 0,
        rng: Optional[random.Random] = None,
    ):
        if width < MIN_BOARD_SIZE or height < MIN_BOARD_SIZE:
            raise InvalidConfiguration(
                f"Board size too small: {width}x{height} "
                f"(minimum {MIN_BOARD_SIZE}x{MIN_BOARD_SIZE})"
            )
        if width > COORD_MAX or height > COORD_MAX:
            raise InvalidConfiguration(
                f"Board size too large: {width}x{height} (maximum {COORD_MAX})"
            )
        if food_target <= 0:
            raise InvalidConfiguration(f"Food target must be at least 1, got {food_target}")
        if food_target > COORD_MAX:
            raise InvalidConfiguration(
                f"Food target too large: {food_target} (maximum {COORD_MAX})"
            )
        if initial_score < 0:
            raise InvalidConfiguration(f"Initial score cannot be negative, got {initial_score}")
        if initial_score + food_target > SCORE_MAX:
            raise InvalidConfiguration(
                f"Initial score {initial_score} plus food target {food_target} "
                f"exceeds the score limit {SCORE_MAX}"
            )

        self._width = width
        self._height = height
        self._remaining_food = food_target
        self._score = initial_score
        self._rng = rng if rng is not None else random.Random()

        self._snake = Snake([
            (width // 2, height // 2),
            (width // 2, height // 2 + 1),
        ])
        self._food: Optional[Cell] = None
        self._last_direction = DEFAULT_DIRECTION
        self._status = GameStatus.CONTINUE
        self._round_number = 0

        self._place_food()
        self._renderer = BoardRenderer(width, height)
        self._renderer.render(self._snake.positions, self._food)

        logger.debug(
            "Created %dx%d engine: snake=%s food=%s target=%d score=%d",
            width, height, list(self._snake.positions), self._food,
            food_target, initial_score,
        )

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    # -- accessors -------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def snake(self) -> Tuple[Cell, ...]:
        return tuple(self._snake.positions)

    @property
    def head(self) -> Cell:
        return self._snake.head

    @property
    def food(self) -> Optional[Cell]:
        return self._food

    @property
    def last_direction(self) -> Direction:
        return self._last_direction

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status.is_terminal

    @property
    def round_number(self) -> int:
        return self._round_number

    @property
    def death_reason(self) -> Optional[str]:
        return self._snake.death_reason

    def current_score(self) -> int:
        return self._score

    def remaining_food(self) -> int:
        return self._remaining_food

    def render(self) -> str:
        """Return the board text as of the latest move."""
        return self._renderer.text

    def snapshot(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            round_number=self._round_number,
            snake_positions=[tuple(p) for p in self._snake.positions],
            food=tuple(self._food) if self._food is not None else None,
            score=self._score,
            remaining_food=self._remaining_food,
            width=self._width,
            height=self._height,
            last_direction=self._last_direction,
            status=self._status,
            death_reason=self._snake.death_reason,
        )

    # -- rules -----------------------------------------------------------

    def move(self, direction: Union[Direction, str]) -> GameStatus:
        """
        Advance the snake one cell.

        A request for the exact opposite of the last accepted direction is
        replaced by the last accepted direction, so the snake cannot turn
        back through its own neck.

        Returns:
            GameStatus.CONTINUE, GameStatus.WIN or GameStatus.LOSS.

        Raises:
            GameOverError: if a previous move already ended the game.
            ValueError: if ``direction`` is not a known direction.
        """
        if self._status.is_terminal:
            raise GameOverError(f"Game is already over ({self._status.value})")

        direction = Direction.parse(direction)
        if direction is self._last_direction.opposite:
            direction = self._last_direction

        self._round_number += 1
        candidate = self._snake.head.shifted(direction.offset)

        # Out of bounds: nothing on the board changes, so the cached text
        # is still current
        if not candidate.in_bounds(self._width, self._height):
            self._snake.kill("wall")
            return self._finish(GameStatus.LOSS)

        status = self._advance(candidate, direction)
        self._renderer.render(self._snake.positions, self._food)
        return status

    def _advance(self, candidate: Cell, direction: Direction) -> GameStatus:
        previous_head = self._snake.move_head(candidate)

        # The tail has not moved yet, so running into it counts
        if self._snake.occurrences(candidate) > 1:
            self._snake.kill("self")
            return self._finish(GameStatus.LOSS)

        vacated = self._snake.follow(previous_head)

        if candidate == self._food:
            self._snake.grow(vacated)
            self._score += 1

            if len(self._snake) >= self._width * self._height:
                self._food = None
                self._remaining_food -= 1
                logger.debug("Snake fills the board at round %d", self._round_number)
                return self._finish(GameStatus.WIN)

            self._place_food()
            self._remaining_food -= 1
            if self._remaining_food == 0:
                return self._finish(GameStatus.WIN)

        self._last_direction = direction
        return GameStatus.CONTINUE

    def _finish(self, status: GameStatus) -> GameStatus:
        self._status = status
        logger.debug(
            "Game over at round %d: %s (reason=%s, score=%d, remaining_food=%d)",
            self._round_number, status.value, self._snake.death_reason,
            self._score, self._remaining_food,
        )
        return status

    def _place_food(self) -> None:
        """
        Put the food on a random cell not occupied by the snake.

        Draws uniformly over the whole board and retries on collision. After
        FOOD_PLACEMENT_ATTEMPTS misses it picks uniformly among the free
        cells instead, so placement always terminates.
        """
        occupied = set(self._snake.positions)
        if len(occupied) >= self._width * self._height:
            raise RuntimeError("No free cell left for food")

        for _ in range(FOOD_PLACEMENT_ATTEMPTS):
            cell = Cell(
                self._rng.randint(0, self._width - 1),
                self._rng.randint(0, self._height - 1),
            )
            if cell not in occupied:
                self._food = cell
                return

        free = [
            Cell(x, y)
            for x in range(self._width)
            for y in range(self._height)
            if (x, y) not in occupied
        ]
        self._food = self._rng.choice(free)
        logger.debug("Food placed from free-cell list after %d misses", FOOD_PLACEMENT_ATTEMPTS)
