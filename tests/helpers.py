from PySide6.QtCore import QEventLoop, QTimer

from pathfinder.domain.grid import GridModel
from pathfinder.domain.types import CellState


def wait_for(signal, timeout_ms=5000):
    """Spin an event loop until signal fires; return its arguments or None on timeout."""
    loop = QEventLoop()
    received = []

    def _on_signal(*args):
        received.append(args)
        loop.quit()

    signal.connect(_on_signal)
    QTimer.singleShot(timeout_ms, loop.quit)
    loop.exec()
    signal.disconnect(_on_signal)
    return received[0] if received else None


def make_grid(size, start=None, end=None, walls=()):
    grid = GridModel(size)
    for wall in walls:
        grid.paint(wall, CellState.WALL)
    if start is not None:
        grid.paint(start, CellState.START)
    if end is not None:
        grid.paint(end, CellState.END)
    return grid


def enclose(coord, size):
    """Wall coordinates surrounding coord on all four sides, clipped to the grid."""
    row, col = coord
    around = [(row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)]
    return [(r, c) for r, c in around if 0 <= r < size and 0 <= c < size]
