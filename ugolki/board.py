"""The playing field: cell contents, square colours, labels and the selection marker."""

from __future__ import annotations

from dataclasses import dataclass

Colour = tuple[int, int, int]

WHITE: Colour = (255, 255, 255)
BLACK: Colour = (0, 0, 0)
RED: Colour = (255, 0, 0)
GREEN: Colour = (0, 255, 0)
BLUE: Colour = (0, 0, 255)
YELLOW: Colour = (255, 255, 0)
MAGENTA: Colour = (255, 0, 255)

SIZE_RECT = 80.0
BOARD_X0 = 50.0
BOARD_Y0 = 50.0
BOARD_CELLS = 8

EMPTY = 255
"""Cell value of an unoccupied square."""

FRAME_THICKNESS = 3
MARKER_THICKNESS = 5
LABEL_SIZE = 30


@dataclass
class Square:
    """One coloured square of the board, in screen coordinates."""

    left: float
    top: float
    size: float
    fill: Colour


@dataclass(frozen=True)
class Label:
    """A coordinate letter or digit drawn beside the board."""

    text: str
    left: float
    top: float
    colour: Colour = RED
    size: int = LABEL_SIZE


@dataclass(frozen=True)
class Marker:
    """An outlined square highlighting one cell."""

    left: float
    top: float
    size: float
    colour: Colour
    thickness: int = MARKER_THICKNESS


@dataclass(frozen=True)
class Frame:
    """The outline around the whole board."""

    left: float
    top: float
    width: float
    height: float
    colour: Colour = RED
    thickness: int = FRAME_THICKNESS


def _cell_origin(x: int, y: int) -> tuple[float, float]:
    return x * SIZE_RECT + BOARD_X0, y * SIZE_RECT + BOARD_Y0


def cell_at(px: float, py: float) -> tuple[int, int] | None:
    """Return the (column, row) under a screen point, or None when off the board."""
    if not (BOARD_X0 <= px and BOARD_Y0 <= py):
        return None
    x = int((px - BOARD_X0) / SIZE_RECT)
    y = int((py - BOARD_Y0) / SIZE_RECT)
    if x >= BOARD_CELLS or y >= BOARD_CELLS:
        return None
    return x, y


class Board:
    """An 8x8 board.

    ``state[x][y]`` holds the number of the figure on that cell, or
    :data:`EMPTY`.  A selected cell holds its value negated.
    """

    def __init__(self, light: Colour = WHITE, dark: Colour = BLACK) -> None:
        self.state: list[list[int]] = []
        self.squares: list[Square] = []
        self.labels: list[Label] = []
        self.marker: Marker | None = None
        self.frame = Frame(BOARD_X0, BOARD_Y0, SIZE_RECT * BOARD_CELLS, SIZE_RECT * BOARD_CELLS)
        self.load(light, dark)

    def load(self, light: Colour = WHITE, dark: Colour = BLACK) -> None:
        """Empty every cell, repaint the squares and lay out the labels."""
        self.state = [[EMPTY] * BOARD_CELLS for _ in range(BOARD_CELLS)]
        self.paint_squares(light, dark)
        letters = "abcdefgh"
        digits = "87654321"
        self.labels = [
            Label(ch, BOARD_X0 + SIZE_RECT / 2 + i * SIZE_RECT, 10)
            for i, ch in enumerate(letters)
        ] + [
            Label(ch, 10, SIZE_RECT + i * SIZE_RECT)
            for i, ch in enumerate(digits)
        ]

    def paint_squares(self, light: Colour, dark: Colour) -> None:
        """Colour the squares in a chequered pattern, light in the top-left corner."""
        self.squares = []
        for row in range(BOARD_CELLS):
            for col in range(BOARD_CELLS):
                left, top = _cell_origin(col, row)
                fill = light if (row + col) % 2 == 0 else dark
                self.squares.append(Square(left, top, SIZE_RECT, fill))

    def square(self, x: int, y: int) -> Square:
        """Return the square drawn for cell (x, y)."""
        return self.squares[x + y * BOARD_CELLS]

    def clear_selected(self) -> None:
        """Undo any selection and hide the marker."""
        for column in self.state:
            for y, value in enumerate(column):
                if value < 0:
                    column[y] = -value
        self.marker = None

    def select(self, x: int, y: int, colour: Colour) -> bool:
        """Select the cell if it holds a white figure; return whether it did."""
        if self.state[x][y] < 9:
            return False
        self.clear_selected()
        self.state[x][y] = -self.state[x][y]
        self.mark(x, y, colour)
        return True

    def mark(self, x: int, y: int, colour: Colour) -> None:
        """Outline cell (x, y) in the given colour."""
        left, top = _cell_origin(x, y)
        self.marker = Marker(left, top, SIZE_RECT, colour)