"""Double-step neighbor generation for the backtracking carver."""

from typing import Container, List, Tuple
from .types import Coord, GridShape

# Real cells sit two grid units apart; order is right, bottom, left, top
STEP_DIRECTIONS: List[Tuple[int, int]] = [(0, 2), (2, 0), (0, -2), (-2, 0)]


def get_step_neighbors(coord: Coord, shape: GridShape) -> List[Coord]:
    """
    Get the real cells two units away that stay inside the grid.
    Returned in right, bottom, left, top order.
    """
    row, col = coord
    row_limit = shape.rows - 2
    col_limit = shape.cols - 2
    neighbors = []

    # right
    if col < col_limit:
        neighbors.append((row, col + 2))
    # bottom
    if row < row_limit:
        neighbors.append((row + 2, col))
    # left
    if col > 1:
        neighbors.append((row, col - 2))
    # top
    if row > 1:
        neighbors.append((row - 2, col))

    return neighbors


def get_unvisited_neighbors(coord: Coord, shape: GridShape,
                            visited: Container[Coord]) -> List[Coord]:
    """Filter the step neighbors of a coordinate down to those not yet visited."""
    return [n for n in get_step_neighbors(coord, shape) if n not in visited]


def get_in_between(current: Coord, neighbor: Coord) -> Coord:
    """
    Get the cell midway between two real cells two units apart.
    Carving it opens the passage between them.
    """
    d_row = neighbor[0] - current[0]
    d_col = neighbor[1] - current[1]
    if abs(d_row) + abs(d_col) != 2 or (d_row and d_col):
        raise ValueError(f"{neighbor} is not a step neighbor of {current}")
    return (current[0] + d_row // 2, current[1] + d_col // 2)
