"""Grid tile graphics items for the pathfinding visualization."""

from PySide6.QtGui import QBrush, QColor, QPen
from PySide6.QtWidgets import QGraphicsRectItem
from PySide6.QtCore import Qt

from ..domain.types import CellState


class GridTile(QGraphicsRectItem):
    """Graphics item representing a single grid cell."""

    # Color scheme for the cell states
    COLORS = {
        CellState.EMPTY: QColor(255, 255, 255),    # White
        CellState.WALL: QColor(31, 41, 55),        # Dark gray
        CellState.START: QColor(34, 197, 94),      # Green
        CellState.END: QColor(239, 68, 68),        # Red
        CellState.PATH: QColor(96, 165, 250),      # Blue
        CellState.VISITED: QColor(219, 234, 254),  # Pale blue
    }

    def __init__(self, row: int, col: int, size: float, state: CellState = CellState.EMPTY):
        super().__init__(0, 0, size, size)
        self.row = row
        self.col = col
        self.size = size
        self.state = state

        self.setPos(col * size, row * size)
        self.setAcceptHoverEvents(True)
        self.update_appearance()

    def set_state(self, state: CellState):
        """Change the displayed state, repainting only on change."""
        if state is not self.state:
            self.state = state
            self.update_appearance()

    def update_appearance(self):
        """Update the tile appearance based on cell state."""
        self.setBrush(QBrush(self.COLORS[self.state]))

        if self.state is CellState.WALL:
            self.setPen(QPen(Qt.black, 1))
        else:
            self.setPen(QPen(QColor(243, 244, 246), 1))

    def hoverEnterEvent(self, event):
        """Highlight empty tiles on hover."""
        if self.state is CellState.EMPTY:
            self.setBrush(QBrush(QColor(243, 244, 246)))
        super().hoverEnterEvent(event)

    def hoverLeaveEvent(self, event):
        self.update_appearance()
        super().hoverLeaveEvent(event)
