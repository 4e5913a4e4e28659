"""Search engine entry points shared by both algorithms."""

import logging
from typing import Dict, Generator, List, Optional, Type, Union

from .astar import AStarSearch
from .dijkstra import DijkstraSearch
from .errors import PathNotFoundError
from .grid import GridModel
from .types import Algorithm, AlgoConfig, CellSnapshot, Coord, SearchResult, SearchStep

logger = logging.getLogger(__name__)

SearchEngine = Union[AStarSearch, DijkstraSearch]

ENGINES: Dict[Algorithm, Type[SearchEngine]] = {
    Algorithm.ASTAR: AStarSearch,
    Algorithm.DIJKSTRA: DijkstraSearch,
}


def create_engine(algorithm: Algorithm, config: Optional[AlgoConfig] = None) -> SearchEngine:
    """Instantiate the engine registered for algorithm."""
    try:
        engine_cls = ENGINES[algorithm]
    except KeyError:
        raise ValueError(f"No search engine registered for {algorithm!r}") from None
    return engine_cls(config)


def _as_cells(grid: Union[GridModel, CellSnapshot]) -> CellSnapshot:
    if isinstance(grid, GridModel):
        return grid.snapshot()
    return grid


def iter_search(grid: Union[GridModel, CellSnapshot], start: Coord, end: Coord,
                algorithm: Algorithm,
                config: Optional[AlgoConfig] = None) -> Generator[SearchStep, None, SearchResult]:
    """
    Run a search lazily, one visualization step per frontier pop.

    Each yielded SearchStep carries the full visited sequence so far. On
    success the last step also carries the path. The generator returns the
    final SearchResult.
    """
    engine = create_engine(algorithm, config)
    engine.initialize(start, end, _as_cells(grid))
    logger.debug("Starting %s from %s to %s", algorithm.label, start, end)

    while True:
        result = engine.step()
        if result is None:
            yield SearchStep(visited=engine.visited)
            continue

        if result.success:
            yield SearchStep(visited=result.trace, path=tuple(result.path))
        logger.debug(
            "%s finished: found=%s, nodes explored=%d",
            algorithm.label, result.found, result.nodes_explored,
        )
        return result


def search(grid: Union[GridModel, CellSnapshot], start: Coord, end: Coord,
           algorithm: Algorithm, config: Optional[AlgoConfig] = None) -> SearchResult:
    """
    Run a search to completion.

    Returns:
        SearchResult whose ``trace`` is the exploration order and whose
        ``path`` is the start-to-end path, or None when unreachable.
    """
    engine = create_engine(algorithm, config)
    engine.initialize(start, end, _as_cells(grid))
    return engine.run_complete()


def find_path(grid: Union[GridModel, CellSnapshot], start: Coord, end: Coord,
              algorithm: Algorithm = Algorithm.ASTAR,
              config: Optional[AlgoConfig] = None) -> List[Coord]:
    """
    Convenience function returning only the path.

    Raises:
        PathNotFoundError: If the goal cannot be reached
    """
    result = search(grid, start, end, algorithm, config)
    if not result.success:
        raise PathNotFoundError()
    return result.path
