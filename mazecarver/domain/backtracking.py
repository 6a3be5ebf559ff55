"""Randomized depth-first backtracking maze generator."""

from typing import List, Optional
from .types import (
    Coord, GridShape, GeneratorConfig, GenerationResult, GenerationState,
    MazePreconditionError
)
from .neighbors import get_unvisited_neighbors, get_in_between
from ..utils.rng import SeededRNG, default_rng


class MazeGenerator:
    """
    Perfect maze generator using depth-first search with backtracking.

    The grid looks like a chessboard: real cells sit two units apart and the
    cell between two of them is carved to connect them. A frontier stack keeps
    the current path so the traversal can back out of dead ends.
    Framework-agnostic; all traversal state lives inside a single call.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None,
                 rng: Optional[SeededRNG] = None):
        self.config = config or GeneratorConfig()
        self.rng = rng or default_rng

    def generate(self, grid, start: Coord, end: Coord) -> List[Coord]:
        """
        Generate a maze and return the coordinates to toggle on the grid.

        Args:
            grid: GridShape, numpy array or row-major node matrix
            start: Start coordinate (even row and column)
            end: End coordinate (even row and column, distinct from start)

        Returns:
            Carving-ordered coordinates with start/end trimmed per config

        Raises:
            MazePreconditionError: If validation is enabled and input is malformed
        """
        return self.run(grid, start, end).maze_list

    def run(self, grid, start: Coord, end: Coord) -> GenerationResult:
        """Run the traversal and return the trimmed list with run statistics."""
        shape = GridShape.coerce(grid)
        start = (int(start[0]), int(start[1]))
        end = (int(end[0]), int(end[1]))
        if self.config.validate:
            validate_inputs(shape, start, end)

        seed = self.rng.seed if self.rng.fresh else None
        result = GenerationResult(state=GenerationState.RUNNING, seed=seed)
        visited = set()
        recorded: List[Coord] = []
        stack: List[Coord] = [start]

        while stack:
            current = stack[-1]
            if current not in visited:
                visited.add(current)
                recorded.append(current)
                result.cells_visited += 1

            unvisited = get_unvisited_neighbors(current, shape, visited)
            # Dead end -> backtrack
            if not unvisited:
                stack.pop()
                continue

            neighbor = self.rng.shuffled(unvisited).pop()
            in_between = get_in_between(current, neighbor)
            visited.add(in_between)
            recorded.append(in_between)
            result.passages_carved += 1
            stack.append(neighbor)

        result.recorded = recorded
        result.maze_list = self._trim(recorded, start, end)
        result.state = GenerationState.COMPLETE
        return result

    def _trim(self, recorded: List[Coord], start: Coord, end: Coord) -> List[Coord]:
        """Drop the bookkeeping entries from the recorded traversal."""
        if self.config.trim == "endpoints":
            return [coord for coord in recorded if coord != start and coord != end]
        # First entry is start, last is the final dead end before unwinding
        return recorded[1:-1]


def validate_inputs(shape: GridShape, start: Coord, end: Coord) -> None:
    """
    Check the generator preconditions.

    Raises:
        MazePreconditionError: On even or too-small dimensions, or start/end
            coordinates that are out of bounds, odd-indexed or equal
    """
    if shape.rows < 3 or shape.cols < 3:
        raise MazePreconditionError(
            f"Grid must be at least 3x3, got {shape.rows}x{shape.cols}")
    if shape.rows % 2 == 0 or shape.cols % 2 == 0:
        raise MazePreconditionError(
            f"Grid dimensions must be odd, got {shape.rows}x{shape.cols}")

    for name, coord in (("Start", start), ("End", end)):
        if not shape.contains(coord):
            raise MazePreconditionError(f"{name} coordinate {coord} is out of bounds")
        if coord[0] % 2 or coord[1] % 2:
            raise MazePreconditionError(
                f"{name} coordinate {coord} must have even row and column")

    if start == end:
        raise MazePreconditionError("Start and end positions are the same")
