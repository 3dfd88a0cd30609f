import logging
from dataclasses import dataclass
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

EMPTY = ''
MARKS = ('X', 'O')
BOARD_CELLS = 9

# rows, cols, then main and anti diagonal (checked in this order)
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

IN_PROGRESS = "in_progress"
WIN = "win"
DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    derived round status: in progress, win (mark + line) or draw
    """
    status: str
    mark: Optional[str] = None   # winning mark, only for WIN
    line: Tuple[int, ...] = ()   # winning indices, only for WIN

    @property
    def is_over(self):
        return self.status != IN_PROGRESS


def evaluate(board):
    """
    first fully-marked line wins; full board with no line is a draw
    """
    for line in WIN_LINES:
        a, b, c = line
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return Outcome(WIN, board[a], line)
    if all(cell != EMPTY for cell in board):
        return Outcome(DRAW)
    return Outcome(IN_PROGRESS)


def other_mark(mark):
    return 'O' if mark == 'X' else 'X'


class GameEngine:
    """
    tic-tac-toe rules, turn and score state for two local players
    """
    def __init__(self):
        """
        empty board, X to move, zeroed scores
        """
        self.board = [EMPTY] * BOARD_CELLS   # row-major, index = row*3 + col
        self.turn = 'X'                      # mark placed by the next move
        self.scores = {mark: 0 for mark in MARKS}

    @property
    def outcome(self):
        return evaluate(self.board)

    @property
    def winner(self):
        result = self.outcome
        return result.mark if result.status == WIN else None

    def is_cell_empty(self, position):
        """
        true if position is on the board and unmarked
        """
        return _valid_position(position) and self.board[position] == EMPTY

    def apply_move(self, position):
        """
        place the current mark at position

        Returns True if the move was accepted. Occupied cells, positions
        off the board and moves after the round is decided are ignored
        and leave the engine untouched.
        """
        if not self.is_cell_empty(position) or self.outcome.is_over:
            logger.debug("rejected move %r by %s", position, self.turn)
            return False
        mark = self.turn
        self.board[position] = mark
        self.turn = other_mark(mark)
        logger.debug("%s played %d", mark, position)

        result = self.outcome
        if result.status == WIN:
            self.scores[result.mark] += 1
            logger.info("%s wins on line %s (score X=%d O=%d)", result.mark,
                        list(result.line), self.scores['X'], self.scores['O'])
        elif result.status == DRAW:
            logger.info("round drawn")
        return True

    def new_round(self):
        """
        clear the board, keep scores; the loser of the last round starts
        """
        # a draw (or unfinished round) counts as "X did not lose", so O starts
        self.turn = 'X' if self.winner == 'O' else 'O'
        self.board = [EMPTY] * BOARD_CELLS
        logger.info("new round, %s to move", self.turn)

    def full_reset(self):
        # back to fresh state, scores included
        self.board = [EMPTY] * BOARD_CELLS
        self.turn = 'X'
        self.scores = {mark: 0 for mark in MARKS}
        logger.info("full reset")


def _valid_position(position):
    # bool is an int subclass but never a board index
    return isinstance(position, int) and not isinstance(position, bool) \
           and 0 <= position < BOARD_CELLS
