"""Dijkstra's algorithm over a cell snapshot."""

import math
from typing import Dict, Optional, Tuple

from .neighbors import get_neighbors, in_bounds
from .path import reconstruct_from_predecessors
from .types import Algorithm, AlgoConfig, CellSnapshot, Coord, SearchResult


class DijkstraSearch:
    """
    Uniform-cost search with an unvisited set scanned linearly each step.

    Every grid coordinate, walls included, seeds the unvisited set in
    row-major order. Walls keep an infinite distance and are never selected.
    """

    algorithm = Algorithm.DIJKSTRA

    def __init__(self, config: Optional[AlgoConfig] = None):
        self.config = config or AlgoConfig()
        self.reset()

    def reset(self):
        """Reset the search state."""
        self.distances: Dict[Coord, float] = {}
        self.previous: Dict[Coord, Coord] = {}
        self.unvisited: Dict[Coord, None] = {}
        self.visited_set: Dict[Coord, None] = {}
        self.cells: Optional[CellSnapshot] = None
        self.start_coord: Optional[Coord] = None
        self.target_coord: Optional[Coord] = None
        self.nodes_explored = 0
        self.result: Optional[SearchResult] = None

    def initialize(self, start: Coord, target: Coord, cells: CellSnapshot):
        """Initialize the search with start and target positions."""
        if not in_bounds(start, cells):
            raise ValueError(f"Start coordinate {start} is out of bounds")
        if not in_bounds(target, cells):
            raise ValueError(f"Target coordinate {target} is out of bounds")

        self.reset()
        self.cells = cells
        self.start_coord = start
        self.target_coord = target

        for row in range(len(cells)):
            for col in range(len(cells[row])):
                self.distances[(row, col)] = math.inf
                self.unvisited[(row, col)] = None
        self.distances[start] = 0

    @property
    def visited(self) -> Tuple[Coord, ...]:
        """Coordinates finalized so far, in the order they were visited."""
        return tuple(self.visited_set)

    def step(self) -> Optional[SearchResult]:
        """
        Execute one step of the search.
        Returns a SearchResult once the search is complete, None otherwise.
        """
        if self.result is not None:
            return self.result
        if self.start_coord is None or self.target_coord is None:
            raise ValueError("Search not initialized")

        current = self._select_closest()
        if current is None:
            return self._finish(found=False)

        self.nodes_explored += 1

        if current == self.target_coord:
            path = reconstruct_from_predecessors(self.previous, current)
            return self._finish(found=True, path=path)

        del self.unvisited[current]
        self.visited_set[current] = None

        for neighbor in get_neighbors(current, self.cells):
            if neighbor not in self.unvisited:
                continue
            tentative = self.distances[current] + 1
            if tentative < self.distances[neighbor]:
                self.distances[neighbor] = tentative
                self.previous[neighbor] = current

        return None

    def run_complete(self) -> SearchResult:
        """Run the search until completion and return the final result."""
        result = None
        while result is None:
            result = self.step()
        return result

    def _select_closest(self) -> Optional[Coord]:
        """First unvisited coordinate with the smallest finite distance."""
        best = None
        best_distance = math.inf
        for coord in self.unvisited:
            if self.distances[coord] < best_distance:
                best, best_distance = coord, self.distances[coord]
        return best

    def _finish(self, found: bool, path: Optional[list[Coord]] = None) -> SearchResult:
        self.result = SearchResult(
            algorithm=self.algorithm,
            trace=self.visited,
            path=path,
            found=found,
            nodes_explored=self.nodes_explored,
        )
        return self.result
