"""Interactive window: mouse handling and drawing of the game."""

from __future__ import annotations

import argparse
import logging
from functools import lru_cache
from pathlib import Path

import pygame

from ugolki.board import BLACK, BLUE, MAGENTA, SIZE_RECT, WHITE, cell_at
from ugolki.figure import SPRITE_SCALE, Figure
from ugolki.game import Game, Step

log = logging.getLogger(__name__)

WINDOW_SIZE = (750, 750)
TITLE = "TestGame"
TEXTURES = Path("Textures")
FRAME_RATE = 60

_LEFT_BUTTON = 1
_RIGHT_BUTTON = 3

_WHITE_PIECE = (230, 230, 230)
_BLACK_PIECE = (30, 30, 30)
_STOPPED_MARK = (200, 0, 0)


class Session:
    """Turns mouse clicks on the window into game actions."""

    def __init__(self, game: Game) -> None:
        self.game = game
        self.trace_start: tuple[int, int] | None = None

    def left_click(self, px: float, py: float) -> bool:
        """Select or move a white figure; return True when a move was made."""
        cell = cell_at(px, py)
        if cell is None:
            return False
        self.trace_start = None
        x, y = cell
        log.info("X=%d Y=%d State=%d", x, y, abs(self.game.board.state[x][y]))
        if not self.game.check_go_player(x, y):
            return False
        self.game.move_figure(self.game.selected_fig, x, y)
        self.game.pc_go()
        return True

    def right_click(self, px: float, py: float) -> list[Step]:
        """Pick the start of a route, or its end; the second click returns the route found."""
        cell = cell_at(px, py)
        if cell is None:
            return []
        board = self.game.board
        if self.trace_start is None:
            board.clear_selected()
            board.paint_squares(WHITE, BLUE)
            self.trace_start = cell
            board.mark(*cell, MAGENTA)
            return []
        start, self.trace_start = self.trace_start, None
        route = self.game.trace(*start, *cell)
        board.paint_squares(WHITE, BLUE)
        self.game.mark_trace(route)
        return route


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    font = pygame.font.Font(None, size)
    font.set_bold(True)
    return font


@lru_cache(maxsize=None)
def _sprite(name: str) -> pygame.Surface | None:
    try:
        image = pygame.image.load(str(TEXTURES / name))
    except (pygame.error, OSError):
        return None
    width, height = image.get_size()
    return pygame.transform.scale(
        image, (int(width * SPRITE_SCALE), int(height * SPRITE_SCALE))
    )


def _rect(left: float, top: float, width: float, height: float) -> pygame.Rect:
    return pygame.Rect(int(left), int(top), int(width), int(height))


def _draw_figure(surface: pygame.Surface, figure: Figure) -> None:
    left, top = figure.screen_position()
    image = _sprite(figure.image_name)
    if image is not None:
        surface.blit(image, (int(left), int(top)))
        return
    radius = int(SIZE_RECT * 3 / 8)
    centre = (int(left) + radius, int(top) + radius)
    pygame.draw.circle(surface, _WHITE_PIECE if figure.player else _BLACK_PIECE, centre, radius)
    pygame.draw.circle(surface, BLACK, centre, radius, 2)
    if figure.stopped:
        pygame.draw.circle(surface, _STOPPED_MARK, centre, radius // 3)


def render(surface: pygame.Surface, game: Game) -> None:
    """Draw the board, its labels, the selection marker and every figure."""
    board = game.board
    surface.fill(WHITE)

    frame = board.frame
    frame_rect = _rect(frame.left, frame.top, frame.width, frame.height)
    pygame.draw.rect(surface, WHITE, frame_rect)
    pygame.draw.rect(
        surface,
        frame.colour,
        frame_rect.inflate(2 * frame.thickness, 2 * frame.thickness),
        frame.thickness,
    )

    for square in board.squares:
        pygame.draw.rect(surface, square.fill, _rect(square.left, square.top, square.size, square.size))

    for label in board.labels:
        text = _font(label.size).render(label.text, True, label.colour)
        surface.blit(text, (int(label.left), int(label.top)))

    marker = board.marker
    if marker is not None:
        outline = _rect(marker.left, marker.top, marker.size, marker.size)
        pygame.draw.rect(
            surface,
            marker.colour,
            outline.inflate(2 * marker.thickness, 2 * marker.thickness),
            marker.thickness,
        )

    for figure in game.figures:
        _draw_figure(surface, figure)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="ugolki",
        description="Corners: move the white figures with the left button, "
        "trace routes with the right button.",
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    pygame.init()
    try:
        surface = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        session = Session(Game(WHITE, BLUE))
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == _LEFT_BUTTON:
                        session.left_click(*event.pos)
                    elif event.button == _RIGHT_BUTTON:
                        session.right_click(*event.pos)
            render(surface, session.game)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        _font.cache_clear()
        _sprite.cache_clear()
        pygame.quit()
    return 0