"""
Analyze a carved maze: perfectness, reachability and visualization.
Works on boolean wall grids as produced by the grid factory.
"""
from collections import deque
from typing import List, Optional, Set, Tuple

import numpy as np
from matplotlib.figure import Figure

from ..domain.types import Coord

# Directions: up, down, left, right
DIRECTIONS = [(-1, 0), (1, 0), (0, -1), (0, 1)]


def real_cells(walls: np.ndarray, origin: Coord) -> Set[Coord]:
    """Open cells sharing the parity of the traversal origin."""
    rows, cols = walls.shape
    return {
        (r, c)
        for r in range(origin[0] % 2, rows, 2)
        for c in range(origin[1] % 2, cols, 2)
        if not walls[r, c]
    }


def carved_edges(walls: np.ndarray, origin: Coord) -> List[Tuple[Coord, Coord]]:
    """
    Passages between open real cells.
    An edge exists when both cells and the cell midway between them are open.
    """
    cells = real_cells(walls, origin)
    edges = []
    for r, c in sorted(cells):
        for dr, dc in ((0, 2), (2, 0)):
            other = (r + dr, c + dc)
            if other in cells and not walls[r + dr // 2, c + dc // 2]:
                edges.append(((r, c), other))
    return edges


def analyze_connectivity(walls: np.ndarray, start: Coord) -> Set[Coord]:
    """Find all open positions reachable from start."""
    rows, cols = walls.shape
    queue = deque([tuple(start)])
    reachable = {tuple(start)}

    while queue:
        r, c = queue.popleft()
        for dr, dc in DIRECTIONS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols:
                neighbor = (nr, nc)
                if not walls[nr, nc] and neighbor not in reachable:
                    reachable.add(neighbor)
                    queue.append(neighbor)

    return reachable


def is_perfect(walls: np.ndarray, origin: Coord) -> bool:
    """
    Check that the open real cells form a spanning tree:
    connected, with exactly V - 1 passages.
    """
    cells = real_cells(walls, origin)
    edges = carved_edges(walls, origin)
    if not cells:
        return False
    if len(edges) != len(cells) - 1:
        return False

    adjacency = {cell: [] for cell in cells}
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)

    first = next(iter(cells))
    seen = {first}
    stack = [first]
    while stack:
        for other in adjacency[stack.pop()]:
            if other not in seen:
                seen.add(other)
                stack.append(other)
    return len(seen) == len(cells)


def find_path_bfs(walls: np.ndarray, start: Coord, target: Coord) -> Tuple[bool, List[Coord]]:
    """Use BFS to find if a path exists from start to target."""
    rows, cols = walls.shape
    start, target = tuple(start), tuple(target)
    queue = deque([start])
    parent = {start: None}

    while queue:
        current = queue.popleft()
        if current == target:
            path = []
            node = current
            while node is not None:
                path.append(node)
                node = parent[node]
            path.reverse()
            return True, path

        r, c = current
        for dr, dc in DIRECTIONS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols:
                neighbor = (nr, nc)
                if not walls[nr, nc] and neighbor not in parent:
                    parent[neighbor] = current
                    queue.append(neighbor)

    return False, []


def render_ascii(walls: np.ndarray, start: Coord, target: Coord,
                 path: Optional[List[Coord]] = None) -> str:
    """Create a text representation of the maze."""
    grid = [['█' if wall else ' ' for wall in row] for row in walls]
    for r, c in path or []:
        grid[r][c] = '·'
    grid[start[0]][start[1]] = 'S'
    grid[target[0]][target[1]] = 'E'
    return "\n".join(''.join(row) for row in grid)


def plot_maze(walls: np.ndarray, start: Coord, target: Coord,
              path: Optional[List[Coord]] = None, output: Optional[str] = None):
    """
    Draw the maze with matplotlib.

    Args:
        walls: Boolean wall grid
        start: Start coordinate
        target: End coordinate
        path: Optional path to overlay
        output: If given, the figure is saved there

    Returns:
        The matplotlib figure
    """
    rows, cols = walls.shape
    # Standalone figure; pyplot and its global backend stay untouched
    fig = Figure(figsize=(max(cols / 4, 3), max(rows / 4, 3)))
    ax = fig.subplots()
    ax.imshow(walls, cmap="binary", interpolation="nearest")

    if path:
        path_rows, path_cols = zip(*path)
        ax.plot(path_cols, path_rows, color="tab:orange", linewidth=2)
    ax.scatter([start[1]], [start[0]], color="tab:green", s=40, label="start")
    ax.scatter([target[1]], [target[0]], color="tab:red", s=40, label="end")
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(f"Maze {rows}x{cols}")

    if output is not None:
        fig.savefig(output, bbox_inches="tight")
    return fig
