import logging

from ..game_logic import GameEngine, WIN, DRAW
from ..ui.board_widget import BoardWidget
from ..ui.status import status_text, score_text

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window: scoreboard, board, status line and round controls
    """
    def __init__(self, engine=None):
        """
        init engine, ui widgets, signals
        """
        super().__init__()
        self.engine = engine if engine is not None else GameEngine()
        self.board_widget = BoardWidget(self.engine, parent=self)
        self._setup_ui()
        self.refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic Tac Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QLabel { color: #eee; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_header()              # title + scores
        self.main_layout.addWidget(self.header_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + buttons
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        round_action = QAction("New Round", self)
        round_action.triggered.connect(self.new_round)
        reset_action = QAction("Reset All", self)
        reset_action.triggered.connect(self.full_reset)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (round_action, reset_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_header(self):
        # title on the left, X/O tallies on the right
        self.header_widget = QWidget()
        hl = QHBoxLayout(self.header_widget)
        title = QLabel("Tic Tac Toe")
        f = QFont(); f.setPointSize(16); f.setBold(True); title.setFont(f)
        self.score_x_label = QLabel("")
        self.score_x_label.setStyleSheet("color: #8acaff; font-weight: bold;")
        self.score_o_label = QLabel("")
        self.score_o_label.setStyleSheet("color: #ff8a8a; font-weight: bold;")
        for w in (title, None, self.score_x_label, self.score_o_label):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)

    def _create_bottom_controls(self):
        # status label + round/reset buttons
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.new_round_button = QPushButton("New Round")
        self.new_round_button.setAccessibleName("Reset board")
        self.new_round_button.clicked.connect(self.new_round)
        self.reset_button = QPushButton("Reset All")
        self.reset_button.setAccessibleName("Reset scores and board")
        self.reset_button.clicked.connect(self.full_reset)
        for w in (self.message_label, None, self.new_round_button, self.reset_button):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)

    def _update_message(self, text, is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:  style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def refresh(self):
        """
        pull everything shown on screen from the engine
        """
        status = self.engine.outcome.status
        self._update_message(status_text(self.engine),
                             is_success=status in (WIN, DRAW),
                             is_turn=status not in (WIN, DRAW))
        self.score_x_label.setText(score_text(self.engine, 'X'))
        self.score_o_label.setText(score_text(self.engine, 'O'))
        self.board_widget.update()

    @Slot(int)
    def _on_cell_clicked(self, index):
        if self.engine.apply_move(index):
            self.refresh()

    @Slot()
    def new_round(self):
        # clear board, scores stay
        logger.debug("new round requested from ui")
        self.engine.new_round()
        self.refresh()

    @Slot()
    def full_reset(self):
        # board, turn and scores back to start
        logger.debug("full reset requested from ui")
        self.engine.full_reset()
        self.refresh()
