import pytest

from ugolki.board import EMPTY, GREEN, RED, YELLOW
from ugolki.game import STRATEGY_GREEDY, STRATEGY_ROUTES, Game, Step


@pytest.fixture
def game():
    return Game()


def _positions(game):
    return [f.pos for f in game.figures]


def _assert_connected(route, start, end):
    assert (route[0].x2, route[0].y2) == end
    assert (route[-1].x1, route[-1].y1) == start
    for later, earlier in zip(route, route[1:]):
        assert (earlier.x2, earlier.y2) == (later.x1, later.y1)
        assert earlier.step == later.step - 1
        assert abs(later.x1 - later.x2) + abs(later.y1 - later.y2) == 1
    assert route[-1].step == 0


def test_initial_layout(game):
    assert game.board.state[0][0] == 0
    assert game.board.state[2][2] == 8
    assert game.board.state[5][5] == 9
    assert game.board.state[7][7] == 17
    assert all(not f.player for f in game.figures[:9])
    assert all(f.player for f in game.figures[9:])
    for f in game.figures:
        assert game.board.state[f.x][f.y] == f.number
    empty = sum(v == EMPTY for col in game.board.state for v in col)
    assert empty == 64 - 18


def test_can_move_black_into_free_cell(game):
    assert game.can_move(2, 3, 0) is True
    assert game.can_move(8, 2, 3) is True


def test_can_move_rejects_occupied_diagonal_and_outside(game):
    assert game.can_move(0, 1, 0) is False
    assert game.can_move(8, 3, 3) is False
    assert game.can_move(0, -1, 0) is False
    assert game.can_move(17, 8, 7) is False


def test_can_move_limits_black_in_target_corner(game):
    game.move_figure(0, 5, 3)
    assert game.can_move(0, 6, 3) is False
    assert game.can_move(0, 4, 3) is True
    game.move_figure(2, 6, 3)
    assert game.can_move(2, 7, 3) is True


def test_can_move_white_any_direction(game):
    assert game.can_move(9, 4, 5) is True
    assert game.can_move(9, 5, 4) is True


def test_move_figure_updates_board(game):
    game.move_figure(8, 3, 2)
    assert game.figures[8].pos == (3, 2)
    assert game.board.state[3][2] == 8
    assert game.board.state[2][2] == EMPTY
    assert game.figures[8].count_steps == 1


def test_check_go_player_select_then_move(game):
    assert game.check_go_player(5, 5) is False
    assert game.selected_fig == 9
    assert game.board.state[5][5] == -9
    assert game.board.marker.colour == GREEN
    assert game.check_go_player(4, 5) is True
    assert game.board.marker.colour == RED


def test_check_go_player_far_cell(game):
    game.check_go_player(5, 5)
    assert game.check_go_player(0, 7) is False


def test_check_go_player_without_selection(game):
    assert game.check_go_player(3, 3) is False


def test_trace_finds_shortest_route(game):
    route = game.trace(2, 2, 4, 4)
    _assert_connected(route, (2, 2), (4, 4))
    assert len(route) == abs(4 - 2) + abs(4 - 2)


def test_trace_boxed_in_returns_empty(game):
    assert game.trace(0, 0, 4, 4) == []


def test_trace_same_cell_returns_empty(game):
    assert game.trace(3, 3, 3, 3) == []


def test_trace_unreachable_target(game):
    assert game.trace(2, 2, 7, 7) == []


def test_new_trace_all_targets_taken(game):
    assert game.new_trace(8) == []


def test_new_trace_to_freed_cell(game):
    game.move_figure(9, 4, 0)
    route = game.new_trace(8)
    _assert_connected(route, (2, 2), (5, 5))
    assert len(route) == abs(5 - 2) + abs(5 - 2)


def test_calculate_new_ways(game):
    assert game.calculate_new_ways() == 0
    game.move_figure(9, 4, 0)
    assert game.calculate_new_ways() == 5


def test_pc_go_moves_first_free_figure(game):
    game.pc_go()
    assert game.figures[2].pos == (3, 0)
    assert game.board.state[3][0] == 2


def test_pc_go_all_stopped_does_nothing(game):
    for f in game.figures[:9]:
        f.stopped = True
    before = _positions(game)
    game.pc_go()
    assert _positions(game) == before


def test_pc_go_strategic_no_route_no_move(game):
    before = _positions(game)
    game.pc_go_strategic()
    assert _positions(game) == before


def test_pc_go_strategic_moves_one_black_step(game):
    game.move_figure(9, 4, 0)
    before = _positions(game)
    game.pc_go_strategic()
    after = _positions(game)
    changed = [i for i, (a, b) in enumerate(zip(before, after)) if a != b]
    assert len(changed) == 1
    fig = changed[0]
    assert fig < 9
    (ax, ay), (bx, by) = before[fig], after[fig]
    assert abs(ax - bx) + abs(ay - by) == 1
    assert game.board.state[bx][by] == fig


def test_greedy_strategy_moves_toward_corner(game):
    game.strategy = STRATEGY_GREEDY
    before = _positions(game)
    game.pc_go_strategic()
    after = _positions(game)
    changed = [i for i, (a, b) in enumerate(zip(before, after)) if a != b]
    assert len(changed) == 1
    fig = changed[0]
    dx = after[fig][0] - before[fig][0]
    dy = after[fig][1] - before[fig][1]
    assert (dx, dy) in {(1, 0), (0, 1)}
    assert game.strategy == STRATEGY_GREEDY


def test_greedy_strategy_without_moves_switches(game):
    game.strategy = STRATEGY_GREEDY
    for f in game.figures[:9]:
        f.stopped = True
    before = _positions(game)
    game.pc_go_strategic()
    assert _positions(game) == before
    assert game.strategy == STRATEGY_ROUTES


def test_mark_trace_paints_route(game):
    route = game.trace(2, 2, 4, 4)
    game.mark_trace(route)
    cells = {(s.x1, s.y1) for s in route} | {(route[0].x2, route[0].y2)}
    for x, y in cells:
        assert game.board.square(x, y).fill == YELLOW
    assert game.board.square(0, 7).fill != YELLOW


def test_step_is_immutable():
    step = Step(1, 2, 1, 3, 0)
    with pytest.raises(AttributeError):
        step.x1 = 5
    assert (step.x1, step.y1, step.x2, step.y2, step.step) == (1, 2, 1, 3, 0)