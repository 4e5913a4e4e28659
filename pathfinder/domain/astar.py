"""A* search over a cell snapshot."""

from typing import Dict, List, Optional, Tuple

from .heuristics import manhattan_distance
from .neighbors import get_neighbors, in_bounds
from .path import reconstruct_from_arena
from .types import Algorithm, AlgoConfig, CellSnapshot, Coord, SearchNode, SearchResult


class AStarSearch:
    """
    A* pathfinding over a 4-connected unit-cost grid.

    The open set is a plain list of arena handles scanned linearly for the
    lowest f; on ties the entry queued first wins. The closed set is an
    insertion-ordered dict so its keys are the exploration trace.
    """

    algorithm = Algorithm.ASTAR

    def __init__(self, config: Optional[AlgoConfig] = None):
        self.config = config or AlgoConfig()
        self.reset()

    def reset(self):
        """Reset the search state."""
        self.arena: List[SearchNode] = []
        self.open_set: List[int] = []
        self.closed_set: Dict[Coord, None] = {}
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

        # The start node carries zero costs; it is alone in the open set
        self.arena.append(SearchNode(coord=start))
        self.open_set.append(0)

    @property
    def visited(self) -> Tuple[Coord, ...]:
        """Coordinates finalized so far, in the order they were closed."""
        return tuple(self.closed_set)

    def step(self) -> Optional[SearchResult]:
        """
        Execute one step of the search.
        Returns a SearchResult once the search is complete, None otherwise.
        """
        if self.result is not None:
            return self.result
        if self.start_coord is None or self.target_coord is None:
            raise ValueError("Search not initialized")

        if not self.open_set:
            return self._finish(found=False)

        index = self._select_lowest_f()
        current_handle = self.open_set.pop(index)
        current = self.arena[current_handle]
        self.nodes_explored += 1
        self.closed_set.setdefault(current.coord, None)

        if current.coord == self.target_coord:
            return self._finish(found=True, path=reconstruct_from_arena(self.arena, current_handle))

        for neighbor_coord in get_neighbors(current.coord, self.cells):
            if neighbor_coord in self.closed_set:
                continue

            g_cost = current.g + 1
            h_cost = manhattan_distance(neighbor_coord, self.target_coord)

            queued = self._find_open(neighbor_coord)
            if queued is not None:
                if self.arena[queued].g <= g_cost:
                    continue
                if self.config.update_open_on_improvement:
                    self.open_set.remove(queued)

            self.arena.append(SearchNode(
                coord=neighbor_coord,
                g=g_cost,
                h=h_cost,
                f=g_cost + h_cost,
                parent=current_handle,
            ))
            self.open_set.append(len(self.arena) - 1)

        return None

    def run_complete(self) -> SearchResult:
        """Run the search until completion and return the final result."""
        result = None
        while result is None:
            result = self.step()
        return result

    def _select_lowest_f(self) -> int:
        """Index into the open set of the first entry with minimal f."""
        best_index = 0
        best_f = self.arena[self.open_set[0]].f
        for index in range(1, len(self.open_set)):
            f_cost = self.arena[self.open_set[index]].f
            if f_cost < best_f:
                best_index, best_f = index, f_cost
        return best_index

    def _find_open(self, coord: Coord) -> Optional[int]:
        """Handle of the first open entry for coord, if any."""
        for handle in self.open_set:
            if self.arena[handle].coord == coord:
                return handle
        return None

    def _finish(self, found: bool, path: Optional[list[Coord]] = None) -> SearchResult:
        self.result = SearchResult(
            algorithm=self.algorithm,
            trace=self.visited,
            path=path,
            found=found,
            nodes_explored=self.nodes_explored,
        )
        return self.result
