import pytest

from tictactoe.game_logic import (
    DRAW, EMPTY, IN_PROGRESS, WIN, WIN_LINES, GameEngine, Outcome, evaluate,
)

DRAW_MOVES = [0, 1, 2, 4, 3, 5, 7, 6, 8]  # X O X / X O O / O X X


def snapshot(engine):
    return list(engine.board), engine.turn, dict(engine.scores)


@pytest.mark.parametrize("line", WIN_LINES)
@pytest.mark.parametrize("mark", ["X", "O"])
def test_each_line_wins(line, mark):
    board = [EMPTY] * 9
    for i in line:
        board[i] = mark
    assert evaluate(board) == Outcome(WIN, mark, line)


def test_win_with_other_cells_filled():
    # O on the middle column, X scattered elsewhere
    board = ['X', 'O', 'X',
             '',  'O', 'X',
             'X', 'O', '']
    result = evaluate(board)
    assert result.status == WIN
    assert result.mark == 'O'
    assert result.line == (1, 4, 7)


def test_rows_checked_before_columns_and_diagonals():
    # top row and left column both complete: the row wins
    board = ['X', 'X', 'X',
             'X', 'O', 'O',
             'X', 'O', 'O']
    assert evaluate(board).line == (0, 1, 2)


def test_main_diagonal_before_anti_diagonal():
    board = ['X', 'O', 'X',
             'O', 'X', 'O',
             'X', 'O', 'X']
    assert evaluate(board).line == (0, 4, 8)


def test_no_false_positive():
    board = ['X', 'O', 'X',
             '',  'O', '',
             '',  'X', '']
    result = evaluate(board)
    assert result.status == IN_PROGRESS
    assert result.mark is None
    assert result.line == ()
    assert not result.is_over
    assert evaluate([EMPTY] * 9).status == IN_PROGRESS


def test_full_board_without_line_is_draw():
    board = ['X', 'O', 'X',
             'X', 'O', 'O',
             'O', 'X', 'X']
    result = evaluate(board)
    assert result == Outcome(DRAW)
    assert result.is_over


def test_evaluate_does_not_touch_board():
    board = ['X', 'X', 'X', 'O', 'O', '', '', '', '']
    before = list(board)
    evaluate(board)
    assert board == before


def test_initial_state(engine):
    assert engine.board == [EMPTY] * 9
    assert engine.turn == 'X'
    assert engine.scores == {'X': 0, 'O': 0}
    assert engine.outcome.status == IN_PROGRESS
    assert engine.winner is None


def test_engines_are_independent():
    a, b = GameEngine(), GameEngine()
    a.apply_move(4)
    assert b.board == [EMPTY] * 9
    assert b.turn == 'X'


def test_turn_alternates(engine):
    # no line is completed by the first six of these
    for n, pos in enumerate([0, 1, 2, 4, 3, 5], start=1):
        assert engine.apply_move(pos)
        assert engine.turn == ('X' if n % 2 == 0 else 'O')
    assert engine.board[:6] == ['X', 'O', 'X', 'X', 'O', 'O']


def test_occupied_cell_rejected(engine):
    engine.apply_move(4)
    before = snapshot(engine)
    assert engine.apply_move(4) is False
    assert snapshot(engine) == before


@pytest.mark.parametrize("position", [-1, 9, 100, True, 1.0, "3", None])
def test_invalid_position_rejected(engine, position):
    before = snapshot(engine)
    assert engine.apply_move(position) is False
    assert snapshot(engine) == before


def test_win_scores_exactly_once(engine, play):
    assert play(engine, [0, 3, 1, 4, 2]) == 5
    assert engine.outcome == Outcome(WIN, 'X', (0, 1, 2))
    assert engine.winner == 'X'
    assert engine.scores == {'X': 1, 'O': 0}

    before = snapshot(engine)
    for pos in (5, 6, 7, 8, 0):
        assert engine.apply_move(pos) is False
    assert snapshot(engine) == before
    # re-reading the outcome never rescores
    engine.outcome
    assert engine.scores == {'X': 1, 'O': 0}


def test_o_win_scores_o(engine, play):
    play(engine, [0, 3, 1, 4, 8, 5])
    assert engine.outcome == Outcome(WIN, 'O', (3, 4, 5))
    assert engine.scores == {'X': 0, 'O': 1}


def test_draw_scenario(engine, play):
    assert play(engine, DRAW_MOVES) == 9
    assert engine.board == ['X', 'O', 'X',
                            'X', 'O', 'O',
                            'O', 'X', 'X']
    assert engine.outcome.status == DRAW
    assert engine.winner is None
    assert engine.scores == {'X': 0, 'O': 0}


def test_new_round_keeps_score_loser_starts(engine, play):
    play(engine, [0, 3, 1, 4, 2])
    engine.new_round()
    assert engine.board == [EMPTY] * 9
    assert engine.scores == {'X': 1, 'O': 0}
    assert engine.turn == 'O'
    assert engine.outcome.status == IN_PROGRESS

    # O opens and wins the top row: X lost, so X starts next
    assert play(engine, [0, 3, 1, 4, 2]) == 5
    assert engine.winner == 'O'
    assert engine.scores == {'X': 1, 'O': 1}
    engine.new_round()
    assert engine.turn == 'X'


def test_new_round_after_draw_gives_o_first_move(engine, play):
    play(engine, DRAW_MOVES)
    engine.new_round()
    assert engine.turn == 'O'
    assert engine.scores == {'X': 0, 'O': 0}


def test_new_round_mid_game(engine, play):
    play(engine, [4, 0])
    engine.new_round()
    assert engine.board == [EMPTY] * 9
    assert engine.turn == 'O'


def test_full_reset(engine, play):
    play(engine, [0, 3, 1, 4, 2])
    engine.new_round()
    play(engine, [0, 3, 1])
    engine.full_reset()
    assert engine.board == [EMPTY] * 9
    assert engine.turn == 'X'
    assert engine.scores == {'X': 0, 'O': 0}
    assert engine.outcome.status == IN_PROGRESS


def test_is_cell_empty(engine):
    engine.apply_move(2)
    assert engine.is_cell_empty(0)
    assert not engine.is_cell_empty(2)
    assert not engine.is_cell_empty(9)
    assert not engine.is_cell_empty(-1)


def test_outcome_is_immutable_value():
    import dataclasses
    result = evaluate(['X', 'X', 'X', 'O', 'O', '', '', '', ''])
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.mark = 'O'
    assert result == Outcome(WIN, 'X', (0, 1, 2))
    assert len({result, Outcome(WIN, 'X', (0, 1, 2))}) == 1
