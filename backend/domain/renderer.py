"""
Text rendering of the board.

Every cell is drawn as two characters so the board stays aligned in a
fixed-width terminal. The playable area is framed by one ring of border
glyphs and every row ends with a newline, which makes the length of the
text a function of the board size alone (see ``render_length``).

Rows of the text follow the x axis and columns the y axis.
"""

import logging
from typing import Iterable, List, Optional, Set, Tuple

from .constants import BORDER, EMPTY, FOOD, SNAKE_BODY, SNAKE_HEAD

logger = logging.getLogger(__name__)


def render_length(width: int, height: int) -> int:
    """Number of characters in the rendering of a ``width`` x ``height`` board."""
    return ((width + 2) * (height + 2)) * 2 + width + 2


def _glyph(cell: Tuple[int, int], head, body: Set, food) -> str:
    if cell == head:
        return SNAKE_HEAD
    if cell in body:
        return SNAKE_BODY
    if cell == food:
        return FOOD
    return EMPTY


def render_board(
    width: int,
    height: int,
    snake_positions: Iterable[Tuple[int, int]],
    food: Optional[Tuple[int, int]],
) -> str:
    """
    Build the board text from scratch.

    Slower than ``BoardRenderer`` but stateless; the two always produce the
    same text for the same state.
    """
    positions = [tuple(p) for p in snake_positions]
    head = positions[0] if positions else None
    body = set(positions)
    food = tuple(food) if food is not None else None

    border_row = BORDER * (height + 2) + "\n"
    lines = [border_row]
    for x in range(width):
        cells = "".join(_glyph((x, y), head, body, food) for y in range(height))
        lines.append(f"{BORDER}{cells}{BORDER}\n")
    lines.append(border_row)
    return "".join(lines)


class BoardRenderer:
    """
    Keeps a token buffer of the board between moves.

    The first render writes the border, the newlines and every cell. Later
    renders rewrite only the interior cells; the border never changes for
    the lifetime of the board.

    Each token is either a two-character glyph or a newline. Every row,
    border rows included, is ``height + 3`` tokens long.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.length = render_length(width, height)
        self._row_tokens = height + 3
        self._buffer: List[str] = []
        self._is_first_render = True
        self._text = ""

    @property
    def text(self) -> str:
        return self._text

    def _cell_index(self, x: int, y: int) -> int:
        return (x + 1) * self._row_tokens + 1 + y

    def _draw_border(self) -> None:
        self._buffer = []
        for x in range(self.width + 2):
            if x == 0 or x == self.width + 1:
                self._buffer.extend([BORDER] * (self.height + 2))
            else:
                self._buffer.append(BORDER)
                self._buffer.extend([EMPTY] * self.height)
                self._buffer.append(BORDER)
            self._buffer.append("\n")

    def render(
        self,
        snake_positions: Iterable[Tuple[int, int]],
        food: Optional[Tuple[int, int]],
    ) -> str:
        if self._is_first_render:
            self._draw_border()
            self._is_first_render = False
            logger.debug("Drew %dx%d board border", self.width, self.height)

        positions = [tuple(p) for p in snake_positions]
        head = positions[0] if positions else None
        body = set(positions)
        food = tuple(food) if food is not None else None

        for x in range(self.width):
            base = self._cell_index(x, 0)
            for y in range(self.height):
                self._buffer[base + y] = _glyph((x, y), head, body, food)

        self._text = "".join(self._buffer)
        if len(self._text) != self.length:
            raise AssertionError(
                f"rendered {len(self._text)} characters, expected {self.length}"
            )
        return self._text
