"""
Maze serialization utilities for saving and loading generated mazes.
Stores the carving list together with the inputs needed to replay it.
"""

import json
import os
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from .grid_factory import create_wall_grid, apply_maze_list

FORMAT_VERSION = "1.0"


class MazeData:
    """Container for maze data with metadata."""

    def __init__(self, rows: int, cols: int, maze_list: List[Tuple[int, int]],
                 start: Tuple[int, int], end: Tuple[int, int],
                 seed: Optional[int] = None, trim: str = "legacy", name: str = ""):
        self.rows = rows
        self.cols = cols
        self.maze_list = [tuple(coord) for coord in maze_list]
        self.start = tuple(start)
        self.end = tuple(end)
        self.seed = seed
        self.trim = trim
        self.name = name
        self.created_at = datetime.now().isoformat()

    def to_dict(self) -> Dict[str, Any]:
        """Convert maze data to dictionary for serialization."""
        return {
            'rows': self.rows,
            'cols': self.cols,
            'maze_list': [list(coord) for coord in self.maze_list],
            'start': list(self.start),
            'end': list(self.end),
            'seed': self.seed,
            'trim': self.trim,
            'name': self.name,
            'created_at': self.created_at,
            'version': FORMAT_VERSION
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MazeData':
        """Create maze data from dictionary."""
        maze = cls(
            rows=data['rows'],
            cols=data['cols'],
            maze_list=data['maze_list'],
            start=data['start'],
            end=data['end'],
            seed=data.get('seed'),
            trim=data.get('trim', 'legacy'),
            name=data.get('name', '')
        )
        maze.created_at = data.get('created_at', datetime.now().isoformat())
        return maze

    def to_grid(self) -> np.ndarray:
        """Rebuild the wall grid this maze describes."""
        walls = create_wall_grid(self.rows, self.cols)
        return apply_maze_list(walls, self.maze_list, self.start, self.end)


def save_maze(maze_data: MazeData, filepath: str) -> bool:
    """Save maze data to a JSON file."""
    try:
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(filepath, 'w') as f:
            json.dump(maze_data.to_dict(), f, indent=2)
        return True
    except OSError as e:
        print(f"Error saving maze: {e}")
        return False


def load_maze(filepath: str) -> Optional[MazeData]:
    """Load maze data from a JSON file."""
    try:
        with open(filepath, 'r') as f:
            data = json.load(f)
        return MazeData.from_dict(data)
    except (OSError, ValueError, KeyError, TypeError) as e:
        print(f"Error loading maze: {e}")
        return None
