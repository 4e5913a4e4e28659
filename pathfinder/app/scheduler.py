"""Timed reveal of search steps onto the grid."""

import logging
from typing import Iterator, Optional

from PySide6.QtCore import QObject, QTimer, Signal

from ..domain.grid import GridModel
from ..domain.types import SearchStep

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_MS = 50
MIN_INTERVAL_MS = 10
MAX_INTERVAL_MS = 200


class CancellationToken:
    """Flag checked by the scheduler at every suspension boundary."""

    def __init__(self):
        self._cancelled = False

    def cancel(self):
        """Request cancellation."""
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


def apply_step(grid: GridModel, step: SearchStep):
    """Write one step onto the grid: visited cells first, then the path."""
    grid.mark_visited(step.visited)
    if step.path:
        grid.mark_path(step.path)


class VisualizationScheduler(QObject):
    """
    Paces a stream of search steps onto a grid.

    Each step is applied, then the scheduler waits ``interval_ms`` on a
    single-shot timer before pulling the next one from the iterator. The
    search itself runs eagerly inside each pull; only the reveal is throttled.

    Signals:
        step_applied: Emitted after a step has been written to the grid
        finished: Emitted with the iterator's return value when it is exhausted
        cancelled: Emitted when the token was cancelled before the next step
        failed: Emitted with a message when pulling a step raised
    """

    step_applied = Signal(object)  # SearchStep
    finished = Signal(object)  # SearchResult
    cancelled = Signal()
    failed = Signal(str)

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_timer_tick)

        self._steps: Optional[Iterator[SearchStep]] = None
        self._grid: Optional[GridModel] = None
        self._token: Optional[CancellationToken] = None
        self._interval = DEFAULT_INTERVAL_MS
        self.steps_applied = 0

    @property
    def is_active(self) -> bool:
        """Whether a reveal is in progress."""
        return self._steps is not None

    @property
    def interval(self) -> int:
        return self._interval

    def start(self, steps: Iterator[SearchStep], grid: GridModel,
              interval_ms: int = DEFAULT_INTERVAL_MS,
              token: Optional[CancellationToken] = None) -> CancellationToken:
        """
        Begin revealing steps onto grid.

        The first step is pulled on the next event loop iteration.

        Returns:
            The cancellation token governing this reveal
        """
        if self.is_active:
            raise RuntimeError("A reveal is already in progress")

        self._steps = steps
        self._grid = grid
        self._interval = max(0, int(interval_ms))
        self._token = token or CancellationToken()
        self.steps_applied = 0

        self._timer.start(0)
        return self._token

    def stop(self):
        """Cancel the current reveal without applying further steps."""
        if not self.is_active:
            return
        self._token.cancel()
        if self._timer.isActive():
            self._timer.stop()
            self._on_timer_tick()

    def _on_timer_tick(self):
        """Called on each timer tick: apply the next step or wrap up."""
        if not self.is_active:
            return

        if self._token.cancelled:
            logger.info("Reveal cancelled after %d steps", self.steps_applied)
            self._release()
            self.cancelled.emit()
            return

        try:
            step = next(self._steps)
        except StopIteration as stop:
            self._release()
            self.finished.emit(stop.value)
            return
        except Exception as e:
            logger.exception("Search step failed")
            self._release()
            self.failed.emit(str(e))
            return

        apply_step(self._grid, step)
        self.steps_applied += 1
        self.step_applied.emit(step)

        self._timer.start(self._interval)

    def _release(self):
        self._timer.stop()
        steps = self._steps
        self._steps = None
        self._grid = None
        if hasattr(steps, "close"):
            steps.close()
