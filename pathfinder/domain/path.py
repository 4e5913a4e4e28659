"""Path reconstruction and validation utilities."""

from typing import Dict, List, Optional, Sequence

from .neighbors import in_bounds, is_adjacent
from .types import CellSnapshot, CellState, Coord, SearchNode


def reconstruct_from_arena(arena: Sequence[SearchNode], goal_handle: int) -> List[Coord]:
    """
    Reconstruct the path by following parent handles through the node arena.
    Returns the path from start to goal (reversed from the parent chain).
    """
    path = []
    handle: Optional[int] = goal_handle

    while handle is not None:
        node = arena[handle]
        path.append(node.coord)
        handle = node.parent

    path.reverse()
    return path


def reconstruct_from_predecessors(previous: Dict[Coord, Coord], goal: Coord) -> List[Coord]:
    """Reconstruct the path by following a predecessor mapping back from goal."""
    path = []
    current: Optional[Coord] = goal

    while current is not None:
        path.append(current)
        current = previous.get(current)

    path.reverse()
    return path


def validate_path(path: Sequence[Coord], cells: CellSnapshot) -> bool:
    """
    Validate that a path is walkable and connected.
    Every coordinate must be in bounds and not a wall, and consecutive
    coordinates must be 4-adjacent.
    """
    if not path:
        return False

    for coord in path:
        if not in_bounds(coord, cells):
            return False
        if cells[coord[0]][coord[1]] is CellState.WALL:
            return False

    return all(is_adjacent(path[i - 1], path[i]) for i in range(1, len(path)))
