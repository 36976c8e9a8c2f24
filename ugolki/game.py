"""Game state: eighteen figures on a board, the player's moves and the computer's replies."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass

from ugolki.board import (
    BLUE,
    BOARD_CELLS,
    EMPTY,
    GREEN,
    RED,
    WHITE,
    YELLOW,
    Board,
    Colour,
)
from ugolki.figure import Figure

log = logging.getLogger(__name__)

ZONE_SIZE = 3
WHITE_ZONE = (5, 5)
"""Top-left cell of the corner where the white figures start."""
BLACK_ZONE = (0, 0)
"""Top-left cell of the corner where the black figures start."""

FIGURES_PER_SIDE = ZONE_SIZE * ZONE_SIZE
FIGURE_COUNT = 2 * FIGURES_PER_SIDE

STRATEGY_GREEDY = 0
STRATEGY_ROUTES = 1

_FAR = 1000


@dataclass(frozen=True)
class Step:
    """One move of a route, from (x1, y1) to (x2, y2); ``step`` counts from the start at 0."""

    x1: int
    y1: int
    x2: int
    y2: int
    step: int


def _on_board(x: int, y: int) -> bool:
    return 0 <= x < BOARD_CELLS and 0 <= y < BOARD_CELLS


class Game:
    """Nine black figures (numbers 0-8) against nine white ones (9-17)."""

    def __init__(self, light: Colour = WHITE, dark: Colour = BLUE) -> None:
        self.board = Board(light, dark)
        self.selected_fig = 0
        self.strategy = STRATEGY_ROUTES
        self._treks: list[list[Step]] = [[] for _ in range(FIGURES_PER_SIDE)]
        self._pc_fig = 0
        self._pc_horizontal = True

        black: list[Figure] = []
        white: list[Figure] = []
        for i in range(FIGURES_PER_SIDE):
            col, row = i % ZONE_SIZE, i // ZONE_SIZE
            b = Figure(player=False, number=i)
            b.place(BLACK_ZONE[0] + col, BLACK_ZONE[1] + row)
            self.board.state[b.x][b.y] = i
            black.append(b)

            w = Figure(player=True, number=i + FIGURES_PER_SIDE)
            w.place(WHITE_ZONE[0] + col, WHITE_ZONE[1] + row)
            self.board.state[w.x][w.y] = i + FIGURES_PER_SIDE
            white.append(w)
        self.figures: list[Figure] = black + white

    def _is_empty(self, x: int, y: int) -> bool:
        return abs(self.board.state[x][y]) == EMPTY

    def move_figure(self, fig: int, x: int, y: int) -> None:
        """Move figure ``fig`` to cell (x, y) without checking the move."""
        figure = self.figures[fig]
        self.board.state[x][y] = figure.number
        self.board.state[figure.x][figure.y] = EMPTY
        figure.place(x, y)
        figure.count_steps += 1

    def check_go_player(self, x: int, y: int) -> bool:
        """Handle a click on (x, y); return True when the selected white figure may move there."""
        fig = abs(self.board.state[x][y])
        if FIGURES_PER_SIDE <= fig < FIGURE_COUNT:
            self.board.select(x, y, GREEN)
            self.selected_fig = fig
            return False
        self.board.select(x, y, RED)
        if FIGURES_PER_SIDE <= self.selected_fig < FIGURE_COUNT:
            return self.figures[self.selected_fig].player and self.can_move(
                self.selected_fig, x, y
            )
        return False

    def pc_go(self) -> None:
        """Make one black move, alternating horizontal and vertical tries over the figures."""
        for _ in range(2 * FIGURES_PER_SIDE + 1):
            figure = self.figures[self._pc_fig]
            if figure.stopped:
                continue
            if self._pc_horizontal:
                target = (figure.x + 1, figure.y)
            else:
                target = (figure.x, figure.y + 1)
            if self.can_move(self._pc_fig, *target):
                self.move_figure(self._pc_fig, *target)
                self._advance_pc_fig()
                return
            self._advance_pc_fig()
            self._pc_horizontal = not self._pc_horizontal
            log.debug("horizontal=%s", self._pc_horizontal)

    def _advance_pc_fig(self) -> None:
        self._pc_fig = (self._pc_fig + 1) % FIGURES_PER_SIDE

    def pc_go_strategic(self) -> None:
        """Make one black move chosen by the current strategy."""
        if self.strategy == STRATEGY_GREEDY:
            self._greedy_move()
        else:
            self._route_move()

    def _greedy_move(self) -> None:
        best: tuple[int, int, int] | None = None
        best_distance = _FAR
        best_count = _FAR
        for i, column in enumerate(self.board.state):
            for j, value in enumerate(column):
                if not 0 <= value < FIGURES_PER_SIDE:
                    continue
                fig = value
                figure = self.figures[fig]
                if figure.stopped:
                    continue
                for nx, ny in ((i, j + 1), (i + 1, j)):
                    distance = (7 - nx) ** 2 + (7 - ny) ** 2
                    if (
                        self.can_move(fig, nx, ny)
                        and best_distance >= distance
                        and best_count >= figure.count_steps
                    ):
                        best_distance = distance
                        best_count = figure.count_steps
                        best = (fig, nx, ny)
        if best is None:
            self.strategy = STRATEGY_ROUTES
            return
        fig, x, y = best
        self.move_figure(fig, x, y)
        log.debug("greedy move fig=%d x=%d y=%d", fig, x, y)

    def _route_move(self) -> None:
        scores = [0] * FIGURES_PER_SIDE
        for fig in reversed(range(FIGURES_PER_SIDE)):
            figure = self.figures[fig]
            if figure.stopped:
                continue
            trek = self._treks[fig]
            if trek and (figure.x, figure.y) != (trek[-1].x1, trek[-1].y1):
                trek = []
            if not trek:
                trek = self.new_trace(fig)
            self._treks[fig] = trek
            if not trek:
                continue
            nxt = trek[-1]
            scores[fig] = sum(
                nxt.x2 * nxt.y2 if i == fig else self.figures[i].x * self.figures[i].y
                for i in range(FIGURES_PER_SIDE)
            )

        useful = -1
        best = 0
        for fig in reversed(range(FIGURES_PER_SIDE)):
            if scores[fig] > best:
                nxt = self._treks[fig][-1]
                if self.can_move(fig, nxt.x2, nxt.y2):
                    best = scores[fig]
                    useful = fig
        log.debug("scores=%s useful=%d", scores, useful)

        if useful != -1:
            nxt = self._treks[useful].pop()
            self.move_figure(useful, nxt.x2, nxt.y2)
            log.debug("route move fig=%d x=%d y=%d", useful, nxt.x2, nxt.y2)

    def can_move(self, fig: int, x: int, y: int) -> bool:
        """Whether figure ``fig`` may step to the neighbouring empty cell (x, y)."""
        if not _on_board(x, y):
            return False
        figure = self.figures[fig]
        dx = abs(figure.x - x)
        dy = abs(figure.y - y)
        if not self._is_empty(x, y) or dx + dy != 1:
            return False
        if fig >= FIGURES_PER_SIDE:
            return True
        # A black figure may not pass beyond its own place in the target corner.
        n = figure.number
        if dy == 1:
            return y <= WHITE_ZONE[1] + n // ZONE_SIZE
        return x <= WHITE_ZONE[0] + n % ZONE_SIZE

    def trace(self, x1: int, y1: int, x2: int, y2: int) -> list[Step]:
        """Find a route over empty cells from (x1, y1) to (x2, y2).

        The route is returned last step first: ``[0]`` ends on the target and
        ``[-1]`` leaves the start.  An empty list means there is no route.
        """
        queue: deque[Step] = deque()
        ways: list[Step] = []
        earliest: dict[tuple[int, int], int] = {}

        x, y, step = x1, y1, 0
        while (x, y) != (x2, y2):
            for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
                if not _on_board(nx, ny) or not self._is_empty(nx, ny):
                    continue
                seen = earliest.get((nx, ny))
                if seen is not None and step > seen:
                    continue
                queue.appendleft(Step(x, y, nx, ny, step))
            if not queue:
                break
            taken = queue.pop()
            x, y, step = taken.x2, taken.y2, taken.step + 1
            ways.append(taken)
            origin = (taken.x1, taken.y1)
            if origin not in earliest or taken.step < earliest[origin]:
                earliest[origin] = taken.step

        if not ways:
            return []

        last = ways[-1]
        route = [last]
        step, x, y = last.step, last.x1, last.y1
        for way in reversed(ways):
            if way.step == step - 1 and (way.x2, way.y2) == (x, y):
                step, x, y = way.step, way.x1, way.y1
                route.append(way)

        if (route[0].x2, route[0].y2) != (x2, y2):
            return []
        log.debug("trace %d,%d -> %d,%d: %s", x1, y1, x2, y2, route)
        return route

    def new_trace(self, fig: int) -> list[Step]:
        """The shortest route for black figure ``fig`` to a free cell of the white corner."""
        figure = self.figures[fig]
        routes: list[list[Step]] = [[] for _ in range(FIGURES_PER_SIDE)]
        for k in range(FIGURES_PER_SIDE):
            tx = 7 - k % ZONE_SIZE
            ty = 7 - k // ZONE_SIZE
            if self._is_empty(tx, ty):
                routes[k] = self.trace(figure.x, figure.y, tx, ty)

        shortest = _FAR
        chosen = 0
        for k, route in enumerate(routes):
            if route and shortest >= route[0].step:
                shortest = route[0].step
                chosen = k
        return routes[chosen]

    def calculate_new_ways(self) -> int:
        """Recompute routes for every black figure still in play; return how many were found."""
        count = 0
        for fig in reversed(range(FIGURES_PER_SIDE)):
            if self.figures[fig].stopped:
                continue
            self._treks[fig] = self.new_trace(fig)
            if self._treks[fig]:
                log.debug("new route for %d", fig)
                count += 1
        return count

    def mark_trace(self, trace: list[Step]) -> None:
        """Paint every cell of a route yellow."""
        if not trace:
            return
        for way in trace:
            self.board.square(way.x1, way.y1).fill = YELLOW
        end = trace[0]
        self.board.square(end.x2, end.y2).fill = YELLOW