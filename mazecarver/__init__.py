"""Maze Carver - perfect maze generation by randomized depth-first backtracking.

Produces the ordered list of grid coordinates a visualizer toggles against an
all-walls grid to reveal a perfect maze between a start and an end cell.
"""

from .domain.backtracking import MazeGenerator
from .domain.types import GeneratorConfig, GridShape, MazePreconditionError

__version__ = "1.0.0"

__all__ = ["MazeGenerator", "GeneratorConfig", "GridShape", "MazePreconditionError"]
