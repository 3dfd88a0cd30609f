import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
BASE_COLOR = QColor(35, 35, 35)
BUTTON_COLOR = QColor(66, 66, 66)
ACCENT_COLOR = QColor(42, 130, 218)
PLACEHOLDER_TEXT_COLOR = QColor(160, 160, 160)
DISABLED_COLOR = QColor(127, 127, 127)

# role -> color for the active/inactive groups
DARK_PALETTE = {
    QPalette.Window: WINDOW_COLOR,
    QPalette.WindowText: Qt.white,
    QPalette.Base: BASE_COLOR,
    QPalette.AlternateBase: WINDOW_COLOR,
    QPalette.ToolTipBase: Qt.white,
    QPalette.ToolTipText: Qt.black,
    QPalette.Text: Qt.white,
    QPalette.Button: BUTTON_COLOR,
    QPalette.ButtonText: Qt.white,
    QPalette.BrightText: Qt.red,
    QPalette.Link: ACCENT_COLOR,
    QPalette.Highlight: ACCENT_COLOR,
    QPalette.HighlightedText: Qt.white,
    QPalette.PlaceholderText: PLACEHOLDER_TEXT_COLOR,
}
# greyed out text for disabled buttons (finished board, etc.)
DISABLED_ROLES = (QPalette.Text, QPalette.ButtonText, QPalette.WindowText)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the dark theme palette built from the constants above.
    """
    palette = QPalette()
    for role, color in DARK_PALETTE.items():
        palette.setColor(role, color)
    for role in DISABLED_ROLES:
        palette.setColor(QPalette.Disabled, role, DISABLED_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# COMMAND LINE
# -----------------------------------------------------------------------------

def parse_args(argv):
    """
    Split our own flags from the rest, which are handed to Qt untouched.
    """
    p = argparse.ArgumentParser(description="Two-player local Tic Tac Toe")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return p.parse_known_args(argv)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    argv = sys.argv if argv is None else argv
    ns, qt_args = parse_args(argv[1:])
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = QApplication(argv[:1] + qt_args)
    app.setStyle('Fusion')
    apply_default_palette(app)

    window = TicTacToeWindow()
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
