"""Neighbor generation for 4-directional grid movement."""

from typing import List, Tuple

from .types import CellSnapshot, CellState, Coord

# Up, down, left, right. The order fixes exploration tie-breaks.
DIRECTIONS: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def in_bounds(coord: Coord, cells: CellSnapshot) -> bool:
    """Check if coordinate lies within the snapshot."""
    row, col = coord
    return 0 <= row < len(cells) and 0 <= col < len(cells[row])


def get_neighbors(coord: Coord, cells: CellSnapshot) -> List[Coord]:
    """
    Get the legal moves from a coordinate.
    A move is legal when the target is inside the grid and not a wall.
    """
    row, col = coord
    neighbors = []

    for d_row, d_col in DIRECTIONS:
        new_coord = (row + d_row, col + d_col)
        if not in_bounds(new_coord, cells):
            continue
        if cells[new_coord[0]][new_coord[1]] is CellState.WALL:
            continue
        neighbors.append(new_coord)

    return neighbors


def is_adjacent(a: Coord, b: Coord) -> bool:
    """Whether two coordinates differ by one unit step along exactly one axis."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1
