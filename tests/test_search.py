import pytest

from pathfinder.domain.errors import PathNotFoundError
from pathfinder.domain.path import validate_path
from pathfinder.domain.search import create_engine, find_path, iter_search, search
from pathfinder.domain.types import Algorithm, AlgoConfig, CellState

from tests.helpers import enclose, make_grid

ALGORITHMS = [Algorithm.ASTAR, Algorithm.DIJKSTRA]


def _collect(generator):
    """Drain a step generator, returning (steps, result)."""
    steps = []
    while True:
        try:
            steps.append(next(generator))
        except StopIteration as stop:
            return steps, stop.value


@pytest.mark.parametrize("algorithm", ALGORITHMS)
@pytest.mark.parametrize("start,end", [
    ((0, 0), (14, 14)),
    ((7, 7), (0, 0)),
    ((14, 0), (0, 14)),
    ((3, 9), (3, 10)),
])
def test_open_grid_path_connects_start_to_end(algorithm, start, end):
    grid = make_grid(15, start=start, end=end)
    result = search(grid, start, end, algorithm)

    assert result.success
    assert result.path[0] == start
    assert result.path[-1] == end
    assert validate_path(result.path, grid.snapshot())
    assert result.path_cost == abs(start[0] - end[0]) + abs(start[1] - end[1])


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_gap_scenario_path_costs_eight(algorithm, gap_grid):
    result = search(gap_grid, (0, 0), (0, 4), algorithm)

    assert result.success
    assert result.path_cost == 8
    assert (2, 2) in result.path
    assert validate_path(result.path, gap_grid.snapshot())


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_enclosed_start_has_no_path(algorithm):
    start = (7, 7)
    grid = make_grid(15, start=start, end=(0, 0), walls=enclose(start, 15))

    result = search(grid, start, (0, 0), algorithm)

    assert not result.found
    assert result.path is None
    assert result.trace == (start,)
    with pytest.raises(PathNotFoundError):
        find_path(grid, start, (0, 0), algorithm)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_enclosed_start_in_corner_has_no_path(algorithm):
    grid = make_grid(5, start=(0, 0), end=(4, 4), walls=[(0, 1), (1, 0)])
    assert not search(grid, (0, 0), (4, 4), algorithm).success


def test_astar_pops_no_more_nodes_than_dijkstra_on_open_grid():
    """The exploration bound is measured in frontier pops (``nodes_explored``).

    Traces are not comparable one-to-one: the A* trace ends with the goal,
    while Dijkstra returns before adding the goal to its trace.
    """
    grid = make_grid(15, start=(0, 0), end=(14, 14))

    dijkstra = search(grid, (0, 0), (14, 14), Algorithm.DIJKSTRA)
    astar = search(grid, (0, 0), (14, 14), Algorithm.ASTAR)

    # Every other cell is closer than the goal, so Dijkstra finalizes all of them
    assert dijkstra.nodes_explored == 225
    assert len(dijkstra.trace) == 224
    assert astar.nodes_explored <= dijkstra.nodes_explored
    assert len(astar.trace) <= astar.nodes_explored


def test_astar_heads_straight_for_goal_on_open_row():
    grid = make_grid(15, start=(0, 0), end=(0, 14))

    astar = search(grid, (0, 0), (0, 14), Algorithm.ASTAR)
    dijkstra = search(grid, (0, 0), (0, 14), Algorithm.DIJKSTRA)

    assert list(astar.trace) == [(0, col) for col in range(15)]
    assert astar.nodes_explored == 15
    assert dijkstra.nodes_explored > astar.nodes_explored


def test_astar_trace_includes_goal_and_dijkstra_trace_excludes_it(gap_grid):
    astar = search(gap_grid, (0, 0), (0, 4), Algorithm.ASTAR)
    dijkstra = search(gap_grid, (0, 0), (0, 4), Algorithm.DIJKSTRA)

    assert astar.trace[-1] == (0, 4)
    assert (0, 4) not in dijkstra.trace


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_trace_starts_at_start_without_repeats(algorithm, gap_grid):
    result = search(gap_grid, (0, 0), (0, 4), algorithm)

    assert result.trace[0] == (0, 0)
    assert len(set(result.trace)) == len(result.trace)
    assert all(gap_grid.get(coord) is not CellState.WALL for coord in result.trace)


def test_dijkstra_visits_in_order_of_distance():
    grid = make_grid(9, start=(4, 4), end=(0, 0))
    result = search(grid, (4, 4), (0, 0), Algorithm.DIJKSTRA)

    distances = [abs(r - 4) + abs(c - 4) for r, c in result.trace]
    assert distances == sorted(distances)


def test_dijkstra_breaks_ties_in_row_major_order():
    grid = make_grid(3, start=(1, 1), end=(2, 2))
    result = search(grid, (1, 1), (2, 2), Algorithm.DIJKSTRA)

    assert list(result.trace[:5]) == [(1, 1), (0, 1), (1, 0), (1, 2), (2, 1)]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_search_is_deterministic(algorithm):
    walls = [(r, 5) for r in range(1, 15)] + [(8, c) for c in range(6, 13)]
    grid = make_grid(15, start=(14, 0), end=(10, 14), walls=walls)

    first = search(grid, (14, 0), (10, 14), algorithm)
    second = search(grid, (14, 0), (10, 14), algorithm)

    assert first.trace == second.trace
    assert first.path == second.path


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_iter_search_steps_are_cumulative_prefixes(algorithm, gap_grid):
    steps, result = _collect(iter_search(gap_grid, (0, 0), (0, 4), algorithm))

    assert len(steps) == result.nodes_explored
    for previous, current in zip(steps, steps[1:]):
        assert current.visited[:len(previous.visited)] == previous.visited

    assert all(step.path is None for step in steps[:-1])
    assert list(steps[-1].path) == result.path
    assert steps[-1].visited == result.trace
    assert result == search(gap_grid, (0, 0), (0, 4), algorithm)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_iter_search_failure_yields_no_path_step(algorithm):
    grid = make_grid(5, start=(0, 0), end=(4, 4), walls=[(0, 1), (1, 0)])
    steps, result = _collect(iter_search(grid, (0, 0), (4, 4), algorithm))

    assert not result.found
    assert steps
    assert all(step.path is None for step in steps)


def test_search_accepts_grid_or_snapshot(gap_grid):
    from_model = search(gap_grid, (0, 0), (0, 4), Algorithm.ASTAR)
    from_snapshot = search(gap_grid.snapshot(), (0, 0), (0, 4), Algorithm.ASTAR)
    assert from_model == from_snapshot


@pytest.mark.parametrize("update", [False, True])
def test_astar_open_update_modes_find_shortest_path(update):
    walls = [(1, c) for c in range(0, 8)] + [(3, c) for c in range(2, 10)] + [(5, c) for c in range(0, 8)]
    grid = make_grid(10, start=(0, 0), end=(9, 0), walls=walls)
    config = AlgoConfig(update_open_on_improvement=update)

    astar = search(grid, (0, 0), (9, 0), Algorithm.ASTAR, config)
    dijkstra = search(grid, (0, 0), (9, 0), Algorithm.DIJKSTRA)

    assert astar.success
    assert astar.path_cost == dijkstra.path_cost


SCATTERED_WALLS = [
    (0, 2), (0, 5), (0, 6), (1, 1), (1, 7), (2, 4), (4, 0), (4, 5),
    (4, 6), (4, 7), (5, 2), (6, 2), (6, 4), (6, 6), (6, 7), (7, 5),
]


def test_astar_improved_route_to_queued_cell_follows_update_mode():
    grid = make_grid(8, start=(0, 0), end=(7, 7), walls=SCATTERED_WALLS)

    kept = search(grid, (0, 0), (7, 7), Algorithm.ASTAR)
    replaced = search(grid, (0, 0), (7, 7), Algorithm.ASTAR,
                      AlgoConfig(update_open_on_improvement=True))
    dijkstra = search(grid, (0, 0), (7, 7), Algorithm.DIJKSTRA)

    # Worse entries left queued are popped again later and counted
    assert kept.nodes_explored == 47
    assert replaced.nodes_explored == 45
    assert kept.nodes_explored > replaced.nodes_explored

    for result in (kept, replaced):
        assert len(set(result.trace)) == len(result.trace)
        assert validate_path(result.path, grid.snapshot())
        assert result.path_cost == dijkstra.path_cost


def test_find_path_returns_path(gap_grid):
    path = find_path(gap_grid, (0, 0), (0, 4), Algorithm.DIJKSTRA)
    assert path[0] == (0, 0)
    assert path[-1] == (0, 4)


def test_engine_rejects_out_of_bounds_endpoints():
    engine = create_engine(Algorithm.ASTAR)
    with pytest.raises(ValueError):
        engine.initialize((0, 0), (5, 5), make_grid(5).snapshot())


def test_engine_step_before_initialize_raises():
    with pytest.raises(ValueError):
        create_engine(Algorithm.DIJKSTRA).step()


def test_create_engine_rejects_unknown_algorithm():
    with pytest.raises(ValueError):
        create_engine("bfs")


def test_algorithm_from_name():
    assert Algorithm.from_name("astar") is Algorithm.ASTAR
    assert Algorithm.from_name("Dijkstra's Algorithm") is Algorithm.DIJKSTRA
    with pytest.raises(ValueError):
        Algorithm.from_name("bfs")
