"""Main application controller connecting UI and domain logic."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from ..domain.errors import MissingEndpointError, PathNotFoundError
from ..domain.grid import GridModel
from ..domain.search import iter_search
from ..domain.types import PAINT_TOOLS, Algorithm, AlgoConfig, CellState, Coord, SearchResult, SearchStep
from .config import VisualizerConfig, clamp_speed
from .fsm import RunState, RunStateMachine
from .scheduler import VisualizationScheduler

logger = logging.getLogger(__name__)

NOTICE_MISSING_ENDPOINT = "missing_endpoint"
NOTICE_PATH_NOT_FOUND = "path_not_found"


class PathfinderController(QObject):
    """
    Controller that owns the session: grid, tool, algorithm, speed and run state.

    Every edit goes through here and is rejected while a run is in progress.

    Signals:
        state_changed: Emitted when the run state changes
        grid_updated: Emitted when the grid needs to be redrawn
        step_completed: Emitted after each revealed search step
        run_completed: Emitted with the SearchResult when a run finishes
        notice_raised: Emitted with (kind, message) for user-facing notices
        error_occurred: Emitted when an unexpected error occurs
    """

    state_changed = Signal(object)  # RunState
    grid_updated = Signal()
    step_completed = Signal(object)  # SearchStep
    run_completed = Signal(object)  # SearchResult
    notice_raised = Signal(str, str)  # kind, message
    error_occurred = Signal(str)

    def __init__(self, config: Optional[VisualizerConfig] = None):
        super().__init__()

        self._config = config or VisualizerConfig()
        self._grid = GridModel(self._config.grid_size)
        self._state_machine = RunStateMachine()
        self._scheduler = VisualizationScheduler(self)

        self._tool = CellState.WALL
        self._algorithm = self._config.algorithm
        self._speed = self._config.speed
        self._last_result: Optional[SearchResult] = None
        self._steps_revealed = 0

        self._scheduler.step_applied.connect(self._on_step_applied)
        self._scheduler.finished.connect(self._on_reveal_finished)
        self._scheduler.cancelled.connect(self._on_reveal_cancelled)
        self._scheduler.failed.connect(self._on_reveal_failed)

        self._setup_state_callbacks()

    def _setup_state_callbacks(self):
        """Setup callbacks for state machine transitions."""
        self._state_machine.on_state_enter(RunState.RUNNING, self._on_running_entered)
        self._state_machine.on_state_enter(RunState.IDLE, self._on_idle_entered)

    # Properties

    @property
    def grid(self) -> GridModel:
        """Get the grid model."""
        return self._grid

    @property
    def tool(self) -> CellState:
        """Get the selected paint tool."""
        return self._tool

    @property
    def algorithm(self) -> Algorithm:
        """Get the selected algorithm."""
        return self._algorithm

    @property
    def algo_config(self) -> AlgoConfig:
        return self._config.algo

    @property
    def speed(self) -> int:
        """Get the reveal interval in ms."""
        return self._speed

    @property
    def current_state(self) -> RunState:
        """Get the current run state."""
        return self._state_machine.current_state

    @property
    def is_running(self) -> bool:
        return self._state_machine.is_running()

    @property
    def last_result(self) -> Optional[SearchResult]:
        """Result of the most recent completed run."""
        return self._last_result

    # Parameter selection

    def select_tool(self, tool: CellState) -> bool:
        """Select the state painted by clicks."""
        if not self._state_machine.is_idle():
            return False
        if tool not in PAINT_TOOLS:
            raise ValueError(f"{tool} is not a paint tool")
        self._tool = tool
        return True

    def select_algorithm(self, algorithm: Algorithm) -> bool:
        """Select the search algorithm for the next run."""
        if not self._state_machine.is_idle():
            return False
        self._algorithm = algorithm
        return True

    def set_speed(self, interval_ms: int) -> bool:
        """Set the reveal interval, clamped to 10-200 ms."""
        if not self._state_machine.is_idle():
            return False
        self._speed = clamp_speed(interval_ms)
        return True

    # Grid editing

    def paint_cell(self, coord: Coord) -> bool:
        """Paint the selected tool at coord."""
        if not self._state_machine.is_idle():
            return False
        if not self._grid.paint(coord, self._tool):
            return False
        self.grid_updated.emit()
        return True

    def reset(self) -> bool:
        """Clear the whole grid, walls and endpoints included."""
        if not self._state_machine.is_idle():
            return False
        self._grid.reset()
        self._last_result = None
        self._steps_revealed = 0
        self.grid_updated.emit()
        return True

    # Run control

    def run(self) -> bool:
        """Start a search run with the selected algorithm."""
        if not self._state_machine.is_idle():
            return False

        try:
            start, end = self._grid.require_endpoints()
        except MissingEndpointError as e:
            self.notice_raised.emit(NOTICE_MISSING_ENDPOINT, str(e))
            return False

        self._grid.clear_transient()
        self._last_result = None
        self._steps_revealed = 0
        steps = iter_search(self._grid.snapshot(), start, end, self._algorithm, self._config.algo)

        logger.info("Running %s from %s to %s", self._algorithm.label, start, end)
        return self._state_machine.start({"steps": steps})

    def cancel_run(self) -> bool:
        """Cancel the in-flight run at the next suspension boundary."""
        if not self._state_machine.is_running():
            return False
        self._scheduler.stop()
        return True

    # State Machine Callbacks

    def _on_running_entered(self, context):
        """Called when entering RUNNING state."""
        self._grid.lock()
        self.state_changed.emit(RunState.RUNNING)
        self.grid_updated.emit()
        self._scheduler.start(context["steps"], self._grid, self._speed)

    def _on_idle_entered(self, context):
        """Called when entering IDLE state."""
        self._grid.unlock()
        self.state_changed.emit(RunState.IDLE)

    # Scheduler callbacks

    def _on_step_applied(self, step: SearchStep):
        self._steps_revealed += 1
        self.step_completed.emit(step)
        self.grid_updated.emit()

    def _on_reveal_finished(self, result: SearchResult):
        self._last_result = result
        self._state_machine.finish({"result": result})
        self.run_completed.emit(result)

        if result.success:
            logger.info(
                "Path found: cost %d, nodes explored %d", result.path_cost, result.nodes_explored
            )
        else:
            logger.info("No path found after exploring %d nodes", result.nodes_explored)
            self.notice_raised.emit(NOTICE_PATH_NOT_FOUND, str(PathNotFoundError()))

    def _on_reveal_cancelled(self):
        self._state_machine.finish()

    def _on_reveal_failed(self, message: str):
        self._state_machine.finish()
        self.error_occurred.emit(f"Algorithm error: {message}")

    # Utility methods

    def get_statistics(self) -> dict:
        """Get current run statistics."""
        result = self._last_result
        return {
            "algorithm": self._algorithm.label,
            "steps_revealed": self._steps_revealed,
            "nodes_explored": result.nodes_explored if result else 0,
            "visited_cells": self._grid.count(CellState.VISITED),
            "path_length": result.path_cost if result else 0,
            "wall_cells": self._grid.count(CellState.WALL),
            "current_state": self._state_machine.current_state.value,
            "state_description": self._state_machine.get_state_description(),
        }
