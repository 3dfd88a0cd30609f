import os

import pytest

# no display on CI; must be set before the first QApplication
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from tictactoe.game_logic import GameEngine


@pytest.fixture
def engine():
    return GameEngine()


@pytest.fixture
def play():
    def _play(engine, moves):
        # apply moves in order, return how many were accepted
        return sum(1 for m in moves if engine.apply_move(m))
    return _play


@pytest.fixture
def qapp():
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
