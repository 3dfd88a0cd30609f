from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

BOARD_SIZE = 3  # cells per side

BACKGROUND_COLOR = QColor("#333")
GRID_COLOR = QColor("#555")
HIGHLIGHT_COLOR = QColor(42, 130, 218, 90)
X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits board index 0-8 on click

    def __init__(self, engine, parent=None):
        super().__init__(parent)
        self.engine = engine  # read-only view of game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square play area centred in the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_at(self, x, y):
        """
        map widget coords to a board index, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / BOARD_SIZE
        col = min(int((x - ox) // cell), BOARD_SIZE - 1)
        row = min(int((y - oy) // cell), BOARD_SIZE - 1)
        return row * BOARD_SIZE + col

    def paintEvent(self, event):
        """
        draw grid, winning line highlight and X/O marks
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._geometry()
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            cell_size = side / BOARD_SIZE

            for index in self.engine.outcome.line:
                r, c = divmod(index, BOARD_SIZE)
                painter.fillRect(QRectF(ox + c*cell_size, oy + r*cell_size,
                                        cell_size, cell_size), HIGHLIGHT_COLOR)

            painter.setPen(QPen(GRID_COLOR, 2))
            for i in range(1, BOARD_SIZE):
                x = ox + i*cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy + side))
                y = oy + i*cell_size
                painter.drawLine(int(ox), int(y), int(ox + side), int(y))

            for index, sym in enumerate(self.engine.board):
                if not sym: continue
                r, c = divmod(index, BOARD_SIZE)
                cx = ox + c*cell_size + cell_size/2
                cy = oy + r*cell_size + cell_size/2
                rad = cell_size/2 * 0.7
                if sym == 'X':
                    painter.setPen(QPen(X_COLOR, 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(O_COLOR, 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: ignore finished rounds and taken cells, else emit
        """
        if self.engine.outcome.is_over:
            return
        pos = event.position()
        index = self.cell_at(pos.x(), pos.y())
        if index is None or not self.engine.is_cell_empty(index):
            return
        self.cell_clicked.emit(index)  # notify main window
