"""A single playing piece."""

from __future__ import annotations

from dataclasses import dataclass

from ugolki.board import BOARD_X0, BOARD_Y0, SIZE_RECT

SPRITE_SCALE = 0.5


@dataclass
class Figure:
    """A piece: ``player`` is True for white and False for black."""

    player: bool
    number: int
    x: int = 0
    y: int = 0
    count_steps: int = 0
    stopped: bool = False

    @property
    def pos(self) -> tuple[int, int]:
        return self.x, self.y

    def place(self, x: int, y: int) -> None:
        """Put the figure on cell (x, y)."""
        self.x = x
        self.y = y

    def screen_position(self) -> tuple[float, float]:
        """Top-left screen point of the figure's sprite."""
        return (
            BOARD_X0 + self.x * SIZE_RECT + SIZE_RECT / 8,
            BOARD_Y0 + self.y * SIZE_RECT + SIZE_RECT / 8,
        )

    @property
    def image_name(self) -> str:
        """File name of the sprite for this figure."""
        side = "w" if self.player else "b"
        kind = "bishop" if self.stopped else "pawn"
        return f"{side}_{kind}.png"