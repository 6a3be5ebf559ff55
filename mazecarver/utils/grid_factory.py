"""Grid factory for creating all-walls grids and carving generated mazes into them."""

from typing import Iterable, List, Optional, Tuple

import numpy as np

from ..domain.types import Coord, GridShape, GeneratorConfig, TrimMode
from ..domain.backtracking import MazeGenerator
from .rng import SeededRNG


def create_wall_grid(rows: int, cols: int) -> np.ndarray:
    """
    Create a new grid filled entirely with walls.

    Args:
        rows: Grid height (must be > 0)
        cols: Grid width (must be > 0)

    Returns:
        Boolean array indexed [row, col], True where a wall stands

    Raises:
        ValueError: If rows or cols <= 0
    """
    if rows <= 0 or cols <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
    return np.ones((rows, cols), dtype=bool)


def default_endpoints(shape: GridShape) -> Tuple[Coord, Coord]:
    """Top-left and bottom-right corners; both even on an odd-sized grid."""
    return (0, 0), (shape.rows - 1, shape.cols - 1)


def apply_maze_list(walls: np.ndarray, maze_list: Iterable[Coord],
                    start: Coord, end: Coord) -> np.ndarray:
    """
    Carve a generated maze list into a wall grid in place.
    Start and end are always opened.

    Returns:
        The same array, for chaining
    """
    for row, col in maze_list:
        walls[row, col] = False
    walls[start] = False
    walls[end] = False
    return walls


def generate_maze_grid(rows: int, cols: int, start: Optional[Coord] = None,
                       end: Optional[Coord] = None, seed: Optional[int] = None,
                       trim: TrimMode = "legacy") -> Tuple[np.ndarray, Coord, Coord, List[Coord]]:
    """
    Generate a perfect maze and carve it into a fresh wall grid.

    Args:
        rows: Grid height (odd, at least 3)
        cols: Grid width (odd, at least 3)
        start: Start coordinate (defaults to the top-left corner)
        end: End coordinate (defaults to the bottom-right corner)
        seed: Random seed for reproducibility
        trim: Trimming mode passed to the generator

    Returns:
        Tuple of (walls, start, end, maze_list)
    """
    shape = GridShape(rows, cols)
    default_start, default_end = default_endpoints(shape)
    start = start if start is not None else default_start
    end = end if end is not None else default_end

    generator = MazeGenerator(GeneratorConfig(trim=trim), SeededRNG(seed))
    maze_list = generator.generate(shape, start, end)

    walls = create_wall_grid(rows, cols)
    apply_maze_list(walls, maze_list, start, end)
    return walls, start, end, maze_list
