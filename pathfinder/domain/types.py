"""Core type definitions for the grid pathfinding demonstrator."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# Coordinate type for grid positions: (row, col)
Coord = Tuple[int, int]

# Read-only view of the grid handed to the search engines
CellSnapshot = Tuple[Tuple["CellState", ...], ...]


class CellState(Enum):
    """States a grid cell can hold."""
    EMPTY = "empty"
    WALL = "wall"
    START = "start"
    END = "end"
    PATH = "path"
    VISITED = "visited"

    @property
    def is_transient(self) -> bool:
        """Whether the state is written by a run and cleared before the next one."""
        return self in (CellState.PATH, CellState.VISITED)


# States the user can paint with
PAINT_TOOLS = (CellState.WALL, CellState.START, CellState.END, CellState.EMPTY)


class Algorithm(Enum):
    """Selectable search algorithms, valued by their display label."""
    ASTAR = "A* Search"
    DIJKSTRA = "Dijkstra's Algorithm"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Algorithm":
        """Look up an algorithm by enum name ("astar") or display label."""
        for algorithm in cls:
            if name.lower() in (algorithm.name.lower(), algorithm.value.lower()):
                return algorithm
        raise ValueError(f"Unknown algorithm: {name!r}")


@dataclass
class SearchNode:
    """
    A single entry in an engine's node arena.

    ``parent`` is the arena index of the predecessor node, or None for the
    start node.
    """
    coord: Coord
    g: float = 0.0  # Cost from start
    h: float = 0.0  # Heuristic estimate to goal
    f: float = 0.0  # Total cost (g + h)
    parent: Optional[int] = None


@dataclass(frozen=True)
class SearchStep:
    """One incremental snapshot of a running search."""
    visited: Tuple[Coord, ...]
    path: Optional[Tuple[Coord, ...]] = None


@dataclass
class SearchResult:
    """Result of a completed search."""
    algorithm: Algorithm
    trace: Tuple[Coord, ...] = ()
    path: Optional[list[Coord]] = None
    found: bool = False
    nodes_explored: int = 0

    @property
    def success(self) -> bool:
        """Whether a path was found."""
        return self.found and self.path is not None and len(self.path) > 0

    @property
    def path_cost(self) -> int:
        """Number of unit moves along the path, 0 when there is none."""
        return len(self.path) - 1 if self.success else 0


@dataclass
class AlgoConfig:
    """Configuration shared by the search engines."""
    # When False, a cheaper route to a coordinate that already sits in the A*
    # open list is added as a second entry and the worse one stays queued.
    update_open_on_improvement: bool = False
