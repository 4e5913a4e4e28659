import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from tests.helpers import make_grid


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def gap_grid():
    """5x5 grid with a wall down column 2 except a gap at (2, 2)."""
    walls = [(row, 2) for row in range(5) if row != 2]
    return make_grid(5, start=(0, 0), end=(0, 4), walls=walls)
