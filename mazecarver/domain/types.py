"""Core type definitions for the maze generator."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Literal, Optional, Tuple

# Coordinate type for grid positions: (row, column)
Coord = Tuple[int, int]

# How the recorded traversal is trimmed before it is returned
TrimMode = Literal["legacy", "endpoints"]


class MazePreconditionError(ValueError):
    """Raised when the grid or start/end coordinates are malformed."""


class GenerationState(Enum):
    """States of a single generation run."""
    IDLE = "idle"
    RUNNING = "running"
    COMPLETE = "complete"


@dataclass(frozen=True)
class GridShape:
    """Dimensions of the rectangular grid the maze is carved into."""
    rows: int
    cols: int

    @classmethod
    def from_array(cls, array) -> "GridShape":
        """Build a shape from any 2-D array-like exposing ``shape``."""
        rows, cols = array.shape[:2]
        return cls(rows=int(rows), cols=int(cols))

    @classmethod
    def coerce(cls, grid) -> "GridShape":
        """Accept a GridShape, an object with rows/cols, or an array."""
        if isinstance(grid, cls):
            return grid
        if hasattr(grid, "rows") and hasattr(grid, "cols"):
            return cls(rows=grid.rows, cols=grid.cols)
        if hasattr(grid, "shape"):
            return cls.from_array(grid)
        # Nested sequence, row-major like the frontend's node matrix
        return cls(rows=len(grid), cols=len(grid[0]))

    def contains(self, coord: Coord) -> bool:
        """Check if coordinate is within grid bounds."""
        row, col = coord
        return 0 <= row < self.rows and 0 <= col < self.cols


@dataclass
class GeneratorConfig:
    """Configuration for the maze generator."""
    trim: TrimMode = "legacy"
    validate: bool = True

    def __post_init__(self):
        if self.trim not in ("legacy", "endpoints"):
            raise ValueError(f"Unknown trim mode: {self.trim}")


@dataclass
class GenerationResult:
    """Result of a generation run."""
    maze_list: List[Coord] = field(default_factory=list)
    recorded: List[Coord] = field(default_factory=list)
    cells_visited: int = 0
    passages_carved: int = 0
    state: GenerationState = GenerationState.IDLE
    # Set only when the run started from a freshly seeded RNG
    seed: Optional[int] = None
