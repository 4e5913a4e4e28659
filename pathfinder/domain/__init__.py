"""Framework-agnostic grid model and search engines."""

from .errors import MissingEndpointError, PathfinderError, PathNotFoundError
from .grid import DEFAULT_GRID_SIZE, GridModel
from .search import create_engine, find_path, iter_search, search
from .types import (
    PAINT_TOOLS, Algorithm, AlgoConfig, CellState, Coord, SearchNode,
    SearchResult, SearchStep,
)

__all__ = [
    "PAINT_TOOLS",
    "DEFAULT_GRID_SIZE",
    "Algorithm",
    "AlgoConfig",
    "CellState",
    "Coord",
    "GridModel",
    "MissingEndpointError",
    "PathNotFoundError",
    "PathfinderError",
    "SearchNode",
    "SearchResult",
    "SearchStep",
    "create_engine",
    "find_path",
    "iter_search",
    "search",
]
