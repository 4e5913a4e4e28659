"""Grid model owning the cell states and their placement rules."""

import logging
from typing import Iterable, Optional, Tuple

from .errors import MissingEndpointError
from .types import CellSnapshot, CellState, Coord

logger = logging.getLogger(__name__)

DEFAULT_GRID_SIZE = 15


class GridModel:
    """
    Fixed-size square grid of cell states, addressed by (row, col).

    Only one cell may hold START and only one may hold END. While the grid is
    locked (a run is in progress) painting is rejected; the visualization
    writes through ``mark_visited`` and ``mark_path`` instead.
    """

    def __init__(self, size: int = DEFAULT_GRID_SIZE):
        if size < 2:
            raise ValueError(f"Grid size must be at least 2, got {size}")
        self._size = size
        self._cells = [[CellState.EMPTY] * size for _ in range(size)]
        self._locked = False

    @property
    def size(self) -> int:
        """Side length of the grid."""
        return self._size

    @property
    def locked(self) -> bool:
        """Whether painting is currently rejected."""
        return self._locked

    def lock(self):
        self._locked = True

    def unlock(self):
        self._locked = False

    def in_bounds(self, coord: Coord) -> bool:
        """Check if coordinate is within grid bounds."""
        row, col = coord
        return 0 <= row < self._size and 0 <= col < self._size

    def get(self, coord: Coord) -> CellState:
        """Get the state at coordinate."""
        if not self.in_bounds(coord):
            raise IndexError(f"Coordinate {coord} is out of bounds")
        row, col = coord
        return self._cells[row][col]

    def is_passable(self, coord: Coord) -> bool:
        """Check if a move onto coordinate is legal."""
        return self.in_bounds(coord) and self.get(coord) is not CellState.WALL

    def snapshot(self) -> CellSnapshot:
        """Return an immutable copy of the cells for a search run."""
        return tuple(tuple(row) for row in self._cells)

    def coords(self) -> Iterable[Coord]:
        """All coordinates in row-major order."""
        for row in range(self._size):
            for col in range(self._size):
                yield (row, col)

    def count(self, state: CellState) -> int:
        """Number of cells holding state."""
        return sum(row.count(state) for row in self._cells)

    # Editing

    def paint(self, coord: Coord, tool: CellState) -> bool:
        """
        Set the cell at coord to the tool's state.

        START and END are unique: painting one clears the previous holder.
        Returns False without touching the grid when locked or out of bounds.
        """
        if self._locked:
            logger.debug("Ignoring paint at %s while locked", coord)
            return False
        if not self.in_bounds(coord):
            return False
        if tool.is_transient:
            raise ValueError(f"{tool.name} cannot be painted")

        if tool in (CellState.START, CellState.END):
            for other in self.coords():
                if self._cells[other[0]][other[1]] is tool:
                    self._set(other, CellState.EMPTY)

        self._set(coord, tool)
        return True

    def clear_transient(self):
        """Reset every PATH and VISITED cell to EMPTY."""
        for coord in self.coords():
            if self.get(coord).is_transient:
                self._set(coord, CellState.EMPTY)

    def reset(self):
        """Set every cell to EMPTY."""
        self._cells = [[CellState.EMPTY] * self._size for _ in range(self._size)]

    def locate_endpoints(self) -> Tuple[Optional[Coord], Optional[Coord]]:
        """Return the START and END coordinates, None where absent."""
        start = end = None
        for coord in self.coords():
            state = self.get(coord)
            if state is CellState.START:
                start = coord
            elif state is CellState.END:
                end = coord
        return start, end

    def require_endpoints(self) -> Tuple[Coord, Coord]:
        """Return START and END, raising MissingEndpointError if either is absent."""
        start, end = self.locate_endpoints()
        if start is None or end is None:
            raise MissingEndpointError()
        return start, end

    # Visualization writes

    def mark_visited(self, coords: Iterable[Coord]):
        """Mark each EMPTY cell in coords as VISITED."""
        for coord in coords:
            if self.get(coord) is CellState.EMPTY:
                self._set(coord, CellState.VISITED)

    def mark_path(self, coords: Iterable[Coord]):
        """Mark each cell in coords as PATH, leaving START and END alone."""
        for coord in coords:
            if self.get(coord) not in (CellState.START, CellState.END):
                self._set(coord, CellState.PATH)

    def _set(self, coord: Coord, state: CellState):
        row, col = coord
        self._cells[row][col] = state

    def __repr__(self) -> str:
        return f"GridModel(size={self._size}, locked={self._locked})"
